import os

import pytest
import requests

from blog_app import create_app
from blog_app.client import BlogClient
from blog_app.client.storage import LocalStorage

from tests.utils import API_URL, FlaskAppAdapter, basic_auth_header


# --------
# Fixtures
# --------

@pytest.fixture(scope='function')
def flask_app(monkeypatch):
    monkeypatch.setenv('CONFIG_TYPE', 'config.TestingConfig')
    return create_app()


@pytest.fixture(scope='function')
def open_flask_app(monkeypatch):
    monkeypatch.setenv('CONFIG_TYPE', 'config.TestingConfig')
    flask_app = create_app()
    flask_app.config['OWNERSHIP_ENFORCED'] = False
    return flask_app


@pytest.fixture(scope='function')
def test_client(flask_app):
    # Create a test client using the Flask application configured for testing
    with flask_app.test_client() as testing_client:
        # Establish an application context
        with flask_app.app_context():
            yield testing_client  # this is where the testing happens!


@pytest.fixture(scope='function')
def open_test_client(open_flask_app):
    with open_flask_app.test_client() as testing_client:
        with open_flask_app.app_context():
            yield testing_client


@pytest.fixture(scope='function')
def admin_token(test_client):
    response = test_client.post('/users/auth-token',
                                headers=basic_auth_header('admin@example.com', 'password123'))
    return response.get_json()['token']


@pytest.fixture(scope='function')
def second_user_token(test_client):
    test_client.post('/users', json={'name': 'Patrick', 'email': 'patrick@example.com', 'password': 'FlaskIsAwesome123'})
    response = test_client.post('/users/auth-token',
                                headers=basic_auth_header('patrick@example.com', 'FlaskIsAwesome123'))
    return response.get_json()['token']


@pytest.fixture(scope='function')
def http_session(test_client):
    session = requests.Session()
    session.mount(API_URL, FlaskAppAdapter(test_client))
    return session


@pytest.fixture(scope='function')
def blog_client(http_session, tmp_path):
    return BlogClient(API_URL, storage=LocalStorage(os.path.join(tmp_path, 'storage.json')), http=http_session)


@pytest.fixture(scope='function')
def logged_in_client(blog_client):
    blog_client.accounts.login('admin@example.com', 'password123')
    return blog_client
