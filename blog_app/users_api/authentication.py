from flask import request
from werkzeug.exceptions import Forbidden, Unauthorized

from blog_app import basic_auth, token_auth, user_directory


@basic_auth.verify_password
def verify_password(email, password):
    user = user_directory.find_by_email(email)
    if user and user.is_password_correct(password):
        return user


@basic_auth.error_handler
def basic_auth_error(status=401):
    error = (Forbidden if status == 403 else Unauthorized)()
    return {
        'code': error.code,
        'name': error.name,
        'description': error.description,
    }, error.code, {'WWW-Authenticate': 'Form'}


@token_auth.verify_token
def verify_token(token):
    if token:
        return user_directory.verify_token(token)


@token_auth.error_handler
def token_auth_error(status=401):
    error = (Forbidden if status == 403 else Unauthorized)()
    return {
        'code': error.code,
        'name': error.name,
        'description': error.description,
    }, error.code


def current_token():
    """Return the bearer token sent with the current request."""
    scheme, _, token = request.headers.get('Authorization', '').partition(' ')
    return token.strip() if scheme.lower() == 'bearer' else None
