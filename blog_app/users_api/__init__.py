"""
The 'users_api' blueprint handles the API for managing users.
Specifically, this Blueprint allows for new users to register, for users
to be looked up by email address, and for users to request (and revoke)
an authentication token to modify the blog records they own.
"""
from flask import Blueprint


users_api_blueprint = Blueprint('users_api', __name__)

from . import authentication, routes
