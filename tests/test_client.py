"""
This file (test_client.py) contains the functional tests for the client package,
running the client against the Flask application configured for testing.
"""
import datetime

import pytest
import requests

from blog_app.client import BlogClient
from blog_app.client.session import SessionUser
from blog_app.client.storage import LocalStorage
from blog_app.exceptions import (AuthFailed, NetworkFailure, NotFound,
                                 NotOwner, ValidationFailed)
from tests.utils import (API_URL, CannedResponseAdapter, FlaskAppAdapter,
                         UnreachableAdapter)


BLOG_FORM = {'title': 'My first post', 'content': 'There is a lot to say today.', 'author': 'Admin'}


# -----
# Login
# -----

def test_login(blog_client):
    """
    GIVEN a client with an anonymous session
    WHEN the user logs in with valid credentials
    THEN check that the session holds a token and the user
    """
    user = blog_client.accounts.login('admin@example.com', 'password123')
    assert user.id == 1
    assert user.email == 'admin@example.com'
    assert blog_client.guard.is_authenticated
    assert blog_client.guard.token.startswith('token-1-')
    assert blog_client.api.get_account()['email'] == 'admin@example.com'


def test_login_wrong_password(blog_client):
    """
    GIVEN a client with an anonymous session
    WHEN the user logs in with the wrong password
    THEN check that AuthFailed is raised and no token is stored
    """
    with pytest.raises(AuthFailed):
        blog_client.accounts.login('admin@example.com', 'password124')
    assert not blog_client.guard.is_authenticated
    assert blog_client.guard.token is None


def test_login_invalid_form_sends_nothing(blog_client, http_session):
    http_session.mount(API_URL, UnreachableAdapter())
    with pytest.raises(ValidationFailed):
        blog_client.accounts.login('admin', 'password123')


def test_signup(blog_client):
    user = blog_client.accounts.signup('Patrick', 'patrick@example.com', 'FlaskIsAwesome123')
    assert user.name == 'Patrick'
    assert blog_client.guard.is_authenticated
    assert [account['email'] for account in blog_client.api.list_users('patrick@example.com')] == ['patrick@example.com']


def test_signup_existing_email(blog_client):
    with pytest.raises(ValidationFailed) as excinfo:
        blog_client.accounts.signup('Admin Again', 'admin@example.com', 'password123')
    assert excinfo.value.messages == {'email': ['Email already exists']}
    assert len(blog_client.api.list_users()) == 1
    assert not blog_client.guard.is_authenticated


def test_logout_revokes_token(logged_in_client):
    token = logged_in_client.guard.token
    logged_in_client.accounts.logout()
    assert not logged_in_client.guard.is_authenticated

    logged_in_client.guard.login(SessionUser(1, 'Admin User', 'admin@example.com'), token=token)
    with pytest.raises(AuthFailed):
        logged_in_client.api.get_account()


def test_logout_when_api_unreachable(logged_in_client, http_session):
    http_session.mount(API_URL, UnreachableAdapter())
    logged_in_client.accounts.logout()
    assert not logged_in_client.guard.is_authenticated


# -----------------
# Blog record sync
# -----------------

def test_create_blog(logged_in_client):
    """
    GIVEN a logged in client
    WHEN a blog record is created
    THEN check that the record is owned by the user and appended to the cache
    """
    record = logged_in_client.blogs.create_blog(BLOG_FORM)
    assert record.id is not None
    assert record.title == 'My first post'
    assert record.owner_id == 1
    assert record.owner_email == 'admin@example.com'
    assert record.date == datetime.date.today()
    assert logged_in_client.cache.blogs == [record]
    assert logged_in_client.guard.is_owner(record)


def test_create_blog_invalid_form(logged_in_client):
    with pytest.raises(ValidationFailed):
        logged_in_client.blogs.create_blog({'title': 'Hi', 'content': 'short', 'author': 'A'})
    assert logged_in_client.api.list_blogs() == []


def test_create_blog_anonymous(blog_client):
    with pytest.raises(AuthFailed):
        blog_client.blogs.create_blog(BLOG_FORM)
    assert blog_client.cache.blogs == []


def test_fetch_blogs(logged_in_client):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    other = BlogClient(API_URL, http=logged_in_client.api.http)
    assert other.blogs.fetch_blogs() is True
    assert other.cache.blogs == [created]


def test_fetch_blogs_unreachable(logged_in_client, http_session):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    http_session.mount(API_URL, UnreachableAdapter())
    assert logged_in_client.blogs.fetch_blogs() is False
    assert logged_in_client.cache.blogs == [created]
    assert 'Could not reach the blog API' in logged_in_client.cache.error


def test_load_blog(logged_in_client):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    assert logged_in_client.blogs.load_blog(str(created.id)) == created
    with pytest.raises(NotFound):
        logged_in_client.blogs.load_blog(12345)
    with pytest.raises(NotFound):
        logged_in_client.blogs.load_blog('abc')


def test_update_blog(logged_in_client):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    form = dict(BLOG_FORM, title='My first post, edited', featured=True)
    updated = logged_in_client.blogs.update_blog(created.id, form)
    assert updated.id == created.id
    assert updated.title == 'My first post, edited'
    assert updated.featured is True
    assert updated.owner_id == 1
    assert logged_in_client.cache.blogs == [updated]


def test_update_blog_missing(logged_in_client):
    with pytest.raises(NotFound):
        logged_in_client.blogs.update_blog(12345, BLOG_FORM)


def test_update_blog_not_cached_refreshes(logged_in_client):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    logged_in_client.cache.apply_deleted(created.id)

    updated = logged_in_client.blogs.update_blog(created.id, dict(BLOG_FORM, author='Someone else'))
    assert logged_in_client.cache.blogs == [updated]


def test_delete_blog(logged_in_client):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    assert logged_in_client.blogs.delete_blog(created.id) == created.id
    assert logged_in_client.cache.blogs == []
    with pytest.raises(NotFound):
        logged_in_client.api.get_blog(created.id)
    with pytest.raises(NotFound):
        logged_in_client.blogs.delete_blog(created.id)


def test_other_user_cannot_modify(logged_in_client, http_session):
    """
    GIVEN a blog record created by the admin user
    WHEN another logged in user tries to edit or delete it
    THEN check that NotOwner is raised, both by the client and by the API
    """
    created = logged_in_client.blogs.create_blog(BLOG_FORM)

    other = BlogClient(API_URL, storage=LocalStorage(), http=http_session)
    other.accounts.signup('Patrick', 'patrick@example.com', 'FlaskIsAwesome123')
    other.blogs.fetch_blogs()
    assert not other.blogs.can_modify(other.cache.find(created.id))

    with pytest.raises(NotOwner):
        other.blogs.update_blog(created.id, BLOG_FORM)
    with pytest.raises(NotOwner):
        other.blogs.delete_blog(created.id)

    # Without the cached copy the client cannot tell; the API still refuses
    with pytest.raises(NotOwner):
        other.api.update_blog(created.id, {'title': 'Hijacked'})
    with pytest.raises(NotOwner):
        other.api.delete_blog(created.id)
    assert logged_in_client.api.get_blog(created.id) == created


def test_network_failure_is_reported(blog_client, http_session):
    http_session.mount(API_URL, UnreachableAdapter())
    with pytest.raises(NetworkFailure):
        blog_client.api.list_blogs()


def test_unexpected_status_is_network_failure(blog_client, http_session):
    http_session.mount(API_URL, CannedResponseAdapter(500))
    with pytest.raises(NetworkFailure):
        blog_client.api.list_blogs()


# ------------------------------
# Ownership not enforced (open)
# ------------------------------

def test_open_api_create_without_login(open_test_client):
    session = requests.Session()
    session.mount(API_URL, FlaskAppAdapter(open_test_client))
    client = BlogClient(API_URL, http=session)

    record = client.blogs.create_blog(BLOG_FORM)
    assert record.owner_id is None
    assert record.owner_email == 'anonymous'
    assert not client.guard.is_owner(record)


def test_delete_uncached_blog_of_other_user(open_test_client):
    """
    GIVEN an API that does not enforce ownership and a blog record owned by another user
    WHEN a logged in client with an empty cache edits or deletes that record
    THEN check that NotOwner is raised and the record is left alone
    """
    session = requests.Session()
    session.mount(API_URL, FlaskAppAdapter(open_test_client))
    client = BlogClient(API_URL, http=session)
    created = client.api.create_blog(dict(BLOG_FORM, owner_id=99, owner_email='someone@example.com'))
    assert created.owner_id == 99

    client.guard.login(SessionUser(1, 'Admin User', 'admin@example.com'))
    assert client.cache.blogs == []
    with pytest.raises(NotOwner):
        client.blogs.update_blog(created.id, dict(BLOG_FORM, title='Taken over'))
    with pytest.raises(NotOwner):
        client.blogs.delete_blog(created.id)
    assert client.api.get_blog(created.id) == created


# ----------------------
# Unreadable API answers
# ----------------------

def test_refresh_with_html_body_keeps_cached_blogs(logged_in_client, http_session):
    """
    GIVEN a client with a cached blog record
    WHEN the API answers with an HTML page instead of JSON
    THEN check that the refresh fails softly and keeps the cached records
    """
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    http_session.mount(API_URL, CannedResponseAdapter(200, b'<html>proxy page</html>'))

    assert logged_in_client.blogs.fetch_blogs() is False
    assert logged_in_client.cache.blogs == [created]
    assert 'Unexpected response from the blog API' in logged_in_client.cache.error
    assert logged_in_client.cache.loading is False
    with pytest.raises(NetworkFailure):
        logged_in_client.api.get_blog(created.id)


def test_refresh_with_unexpected_json_keeps_cached_blogs(logged_in_client, http_session):
    created = logged_in_client.blogs.create_blog(BLOG_FORM)
    http_session.mount(API_URL, CannedResponseAdapter(200, b'{"blogs": []}'))

    assert logged_in_client.blogs.fetch_blogs() is False
    assert logged_in_client.cache.blogs == [created]
    assert logged_in_client.cache.error is not None


def test_login_with_token_but_no_user(blog_client, http_session):
    http_session.mount(API_URL, CannedResponseAdapter(200, b'{"token": "token-1-1"}'))
    with pytest.raises(NetworkFailure):
        blog_client.accounts.login('admin@example.com', 'password123')
    assert not blog_client.guard.is_authenticated
