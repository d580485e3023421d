"""
Web Layer Testing Configuration
Fixtures for exercising the Flask API routes.
"""

import pytest
from pathlib import Path

import sys
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from web.app import create_app
from web.routes import api as api_routes
from web.utils import decorators


@pytest.fixture
def app():
    """Create and configure a test app instance."""
    flask_app = create_app('testing')
    flask_app.config.update({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
    })

    # Fresh pipeline and rate limit state for every test
    api_routes._factcheck_api = None
    decorators.rate_limit_store.clear()

    yield flask_app

    api_routes._factcheck_api = None
    decorators.rate_limit_store.clear()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()
