"""
Decorators and error handlers for the Flask application.

This module contains the rate limiting decorator and the JSON error
handlers registered with the application.
"""

import time
from functools import wraps
from typing import Callable
from flask import jsonify, request, current_app

from factcheck.errors import AnalysisCancelledError, FactCheckError

# In-memory store for rate limiting (in production, use Redis)
rate_limit_store = {}


def _evict_idle_clients(endpoint: str, now: float, window_seconds: int) -> None:
    """Drop the endpoint's client keys with no request inside its window."""
    suffix = f":{endpoint}"
    for key in [k for k, stamps in rate_limit_store.items()
                if k.endswith(suffix) and (not stamps or now - stamps[-1] >= window_seconds)]:
        del rate_limit_store[key]


def rate_limit(max_requests: int = 10, window_seconds: int = 60) -> Callable:
    """Rate limiting decorator for API endpoints."""
    def decorator(f):
        @wraps(f)
        def wrapped_function(*args, **kwargs):
            # Get client identifier (IP address)
            client_id = request.remote_addr

            # Create key for this endpoint and client
            key = f"{client_id}:{request.endpoint}"

            now = time.time()
            _evict_idle_clients(request.endpoint, now, window_seconds)

            if key not in rate_limit_store:
                rate_limit_store[key] = []

            # Remove entries older than window
            rate_limit_store[key] = [t for t in rate_limit_store[key] if now - t < window_seconds]

            if len(rate_limit_store[key]) >= max_requests:
                current_app.logger.warning(f"Rate limit exceeded for {client_id} on {request.endpoint}")
                return jsonify({
                    'error': 'Too many requests',
                    'retry_after_seconds': window_seconds,
                }), 429

            rate_limit_store[key].append(now)

            return f(*args, **kwargs)
        return wrapped_function
    return decorator


# Error handler functions (to be registered with the Flask app)

def handle_factcheck_error(error: FactCheckError):
    """Handle categorized pipeline errors that escaped a route."""
    current_app.logger.error(f"Fact-check error: {error}")
    status = 409 if isinstance(error, AnalysisCancelledError) else 400
    return jsonify(error.to_dict()), status


def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


def handle_method_not_allowed(error):
    return jsonify({'error': 'Method not allowed'}), 405


def handle_payload_too_large(error):
    return jsonify({'error': 'Request body too large'}), 413


def handle_internal_error(error):
    """Handle unexpected server errors."""
    current_app.logger.error(f"Internal server error: {error}")
    return jsonify({'error': 'Internal server error'}), 500


def register_error_handlers(app) -> None:
    """Register all error handlers with the Flask application."""
    app.errorhandler(FactCheckError)(handle_factcheck_error)
    app.errorhandler(404)(handle_not_found)
    app.errorhandler(405)(handle_method_not_allowed)
    app.errorhandler(413)(handle_payload_too_large)
    app.errorhandler(500)(handle_internal_error)
