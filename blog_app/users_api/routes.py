from apifairy import arguments, authenticate, body, other_responses, response
from flask import current_app

from blog_app import basic_auth, token_auth, user_directory
from blog_app.schemas import (NewUserSchema, TokenSchema, UserQuerySchema,
                              UserSchema)

from . import users_api_blueprint
from .authentication import current_token


# -------
# Schemas
# -------

new_user_schema = NewUserSchema()
user_schema = UserSchema()
users_schema = UserSchema(many=True)
user_query_schema = UserQuerySchema()
token_schema = TokenSchema()


# ------
# Routes
# ------

@users_api_blueprint.route('/', methods=['GET'], strict_slashes=False)
@arguments(user_query_schema)
@response(users_schema)
def list_users(args):
    """Return all users, or the users with a specific email address"""
    return user_directory.list_by_email(args.get('email'))


@users_api_blueprint.route('/', methods=['POST'], strict_slashes=False)
@body(new_user_schema)
@response(user_schema, 201)
@other_responses({400: 'Bad Request'})
def register(kwargs):
    """Create a new user"""
    new_user = user_directory.create(**kwargs)
    current_app.logger.info(f'Registered new user: {new_user.email}')
    return new_user


@users_api_blueprint.route('/auth-token', methods=['POST'])
@authenticate(basic_auth)
@response(token_schema)
@other_responses({401: 'Invalid username or password'})
def get_auth_token():
    """Get authentication token"""
    user = basic_auth.current_user()
    token = user_directory.issue_token(user)
    current_app.logger.info(f'Issued authentication token for user: {user.email}')
    return dict(token=token, user=user)


@users_api_blueprint.route('/auth-token', methods=['DELETE'])
@authenticate(token_auth)
def revoke_auth_token():
    """Revoke authentication token"""
    user_directory.revoke_token(current_token())
    current_app.logger.info(f'Revoked authentication token for user: {token_auth.current_user().email}')
    return '', 200


@users_api_blueprint.route('/account', methods=['GET'])
@authenticate(token_auth)
@response(user_schema)
def user_profile():
    """Retrieve the user profile"""
    return token_auth.current_user()
