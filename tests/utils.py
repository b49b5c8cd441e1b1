"""Shared helpers for tests (auth headers, requests-to-Flask adapter)."""
import base64
from urllib.parse import urlsplit

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict


API_URL = 'http://blog-api.test'


class FlaskAppAdapter(BaseAdapter):
    """Transport adapter that sends `requests` traffic to a Flask test client."""

    def __init__(self, flask_client):
        super().__init__()
        self.flask_client = flask_client

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        url = urlsplit(request.url)
        headers = {key: value for key, value in request.headers.items()
                   if key.lower() not in ('content-length', 'host')}
        flask_response = self.flask_client.open(url.path,
                                                method=request.method,
                                                query_string=url.query,
                                                data=request.body,
                                                headers=headers)

        response = requests.Response()
        response.status_code = flask_response.status_code
        response.reason = flask_response.status.partition(' ')[2]
        response.headers = CaseInsensitiveDict(flask_response.headers)
        response._content = flask_response.get_data()
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class UnreachableAdapter(BaseAdapter):
    """Transport adapter for an API that cannot be reached."""

    def send(self, request, **kwargs):
        raise requests.exceptions.ConnectionError(f'Connection refused: {request.url}', request=request)

    def close(self):
        pass


class CannedResponseAdapter(BaseAdapter):
    """Transport adapter that answers every request with the same status and body."""

    def __init__(self, status_code, body=b''):
        super().__init__()
        self.status_code = status_code
        self.body = body

    def send(self, request, **kwargs):
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


def basic_auth_header(email, password):
    credentials = base64.b64encode(f'{email}:{password}'.encode('utf-8')).decode('utf-8')
    return {'Authorization': f'Basic {credentials}'}


def bearer_header(token):
    return {'Authorization': f'Bearer {token}'}
