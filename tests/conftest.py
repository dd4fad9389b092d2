import os
import sys
import pytest

# Add the project root to the path for proper imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ajax_api import create_app
from ajax_api.component import AjaxComponent

AJAX_HEADERS = {'X-Requested-With': 'XMLHttpRequest'}


@pytest.fixture
def test_config():
    return {
        "logging": {"level": "DEBUG", "file": None, "colors": False},
        "cors": {"enabled": False},
    }


@pytest.fixture
def app(test_config):
    app = create_app(test_config)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ajax_headers():
    return dict(AJAX_HEADERS)


@pytest.fixture
def ajax(app):
    return app.extensions['ajax']


@pytest.fixture
def component():
    return AjaxComponent()
