"""
HTTP client for the Flask Blog API.

Every failure is reported with one of the `blog_app.exceptions` errors:

    * 400 -> ValidationFailed
    * 401 -> AuthFailed
    * 403 -> NotOwner
    * 404 -> NotFound
    * connection problems, any other error status and unreadable bodies -> NetworkFailure
"""
import logging

import requests
from marshmallow import ValidationError

from blog_app.exceptions import (AuthFailed, NetworkFailure, NotFound,
                                 NotOwner, ValidationFailed)
from blog_app.models import coerce_id
from blog_app.schemas import (BlogSchema, NewBlogSchema, TokenSchema,
                              UpdateBlogSchema, UserSchema)


logger = logging.getLogger(__name__)

blog_schema = BlogSchema()
blogs_schema = BlogSchema(many=True)
new_blog_schema = NewBlogSchema()
update_blog_schema = UpdateBlogSchema()
users_schema = UserSchema(many=True)
user_schema = UserSchema()
token_schema = TokenSchema()


class BlogApiClient:
    def __init__(self, base_url, guard=None, http=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.guard = guard
        self.http = http or requests.Session()
        self.timeout = timeout

    # ----------------
    # Helper Functions
    # ----------------

    def _headers(self):
        if self.guard is not None and self.guard.is_authenticated:
            return {'Authorization': f'Bearer {self.guard.token}'}
        return {}

    def _request(self, method, path, **kwargs):
        headers = self._headers()
        headers.update(kwargs.pop('headers', {}))
        url = f'{self.base_url}{path}'
        try:
            response = self.http.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning('%s %s failed: %s', method, url, e)
            raise NetworkFailure(f'Could not reach the blog API: {e}') from e

        if response.status_code >= 400:
            self._raise_for_status(method, url, response)
        return response

    @staticmethod
    def _raise_for_status(method, url, response):
        description = _error_description(response)
        logger.info('%s %s returned %s: %s', method, url, response.status_code, description)
        if response.status_code == 400:
            raise ValidationFailed(_error_messages(response) or description)
        if response.status_code == 401:
            raise AuthFailed(description or 'Invalid email or password')
        if response.status_code == 403:
            raise NotOwner(description or 'Blog record owned by another user')
        if response.status_code == 404:
            raise NotFound(description or 'Not found')
        raise NetworkFailure(f'{method} {url} failed with status {response.status_code}')

    @staticmethod
    def _load(schema, response):
        try:
            return schema.load(response.json())
        except ValueError as e:
            logger.warning('%s %s returned a body that is not JSON: %s', response.request.method, response.url, e)
            raise NetworkFailure(f'Unexpected response from the blog API: {e}') from e
        except ValidationError as e:
            logger.warning('%s %s returned an unexpected body: %s', response.request.method, response.url, e.messages)
            raise NetworkFailure(f'Unexpected response from the blog API: {e.messages}') from e

    @staticmethod
    def _blog_path(blog_id):
        key = coerce_id(blog_id)
        if key is None:
            raise NotFound(f'Blog record {blog_id} not found')
        return f'/blogs/{key}'

    # ----------
    # Blog calls
    # ----------

    def list_blogs(self):
        return self._load(blogs_schema, self._request('GET', '/blogs'))

    def get_blog(self, blog_id):
        return self._load(blog_schema, self._request('GET', self._blog_path(blog_id)))

    def create_blog(self, fields):
        response = self._request('POST', '/blogs', json=new_blog_schema.dump(fields))
        return self._load(blog_schema, response)

    def update_blog(self, blog_id, fields):
        response = self._request('PUT', self._blog_path(blog_id), json=update_blog_schema.dump(fields))
        return self._load(blog_schema, response)

    def delete_blog(self, blog_id):
        self._request('DELETE', self._blog_path(blog_id))
        return coerce_id(blog_id)

    # ----------
    # User calls
    # ----------

    def list_users(self, email=None):
        params = {'email': email} if email else None
        return self._load(users_schema, self._request('GET', '/users', params=params))

    def create_user(self, name, email, password):
        response = self._request('POST', '/users', json={'name': name, 'email': email, 'password': password})
        return self._load(user_schema, response)

    def get_auth_token(self, email, password):
        """Exchange credentials for a token; returns the token and the user."""
        response = self._request('POST', '/users/auth-token', auth=(email, password))
        return self._load(token_schema, response)

    def revoke_auth_token(self):
        self._request('DELETE', '/users/auth-token')

    def get_account(self):
        return self._load(user_schema, self._request('GET', '/users/account'))


def _error_body(response):
    try:
        return response.json()
    except ValueError:
        return None


def _error_description(response):
    body = _error_body(response)
    if isinstance(body, dict):
        return body.get('description') or body.get('name')
    return response.reason


def _error_messages(response):
    body = _error_body(response)
    if isinstance(body, dict):
        return body.get('messages')
    return None
