"""
Configuration settings for the fact-check Flask application.
All web-layer configuration values should be defined here for easy management.
"""
import os
from pathlib import Path

# Import environment config
from utils.config import config

# Base directory
BASE_DIR = Path(__file__).parent

# =============================================================================
# SECURITY SETTINGS
# =============================================================================

# Flask secret key
SECRET_KEY = os.environ.get('FLASK_SECRET_KEY', os.urandom(32).hex())

# =============================================================================
# RATE LIMITING SETTINGS
# =============================================================================

# Rate limits for different endpoints (requests per window)
if config.is_testing():
    RATE_LIMITS = {
        'api_analyze': {'max_requests': 1000, 'window_seconds': 60},
        'api_health': {'max_requests': 1000, 'window_seconds': 60},
    }
else:
    RATE_LIMITS = {
        'api_analyze': {'max_requests': 10, 'window_seconds': 60},  # 10 analyses per minute
        'api_health': {'max_requests': 30, 'window_seconds': 60},  # 30 requests per minute
    }

# =============================================================================
# REQUEST SETTINGS
# =============================================================================

# Largest accepted request body (bytes)
MAX_CONTENT_LENGTH = int(os.environ.get('FACTCHECK_MAX_CONTENT_LENGTH', str(1024 * 1024)))

# =============================================================================
# LOGGING SETTINGS
# =============================================================================

LOG_LEVEL = os.environ.get('FACTCHECK_LOG_LEVEL', 'INFO')

# =============================================================================
# FLASK SETTINGS
# =============================================================================

DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
PORT = int(os.environ.get('FLASK_PORT', '5000'))

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_rate_limit(endpoint_type: str) -> dict:
    """Get rate limit configuration for an endpoint type."""
    return RATE_LIMITS.get(endpoint_type, {'max_requests': 10, 'window_seconds': 60})
