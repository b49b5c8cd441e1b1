import logging

from blog_app.client.forms import login_form, signup_form, validate_form
from blog_app.client.session import SessionUser
from blog_app.exceptions import AuthFailed, NetworkFailure, ValidationFailed


logger = logging.getLogger(__name__)


class Accounts:
    """Login, signup and logout flows of the client."""

    def __init__(self, api, guard):
        self.api = api
        self.guard = guard

    def login(self, email, password):
        credentials = validate_form(login_form, {'email': email, 'password': password})
        try:
            result = self.api.get_auth_token(credentials['email'], credentials['password'])
        except AuthFailed:
            logger.info('Login failed for: %s', credentials['email'])
            raise AuthFailed('Invalid email or password') from None

        self.guard.login(SessionUser(**result['user']), token=result['token'])
        return self.guard.current_user

    def signup(self, name, email, password):
        data = validate_form(signup_form, {'name': name, 'email': email, 'password': password})

        # The API does not reject duplicate email addresses, so check first
        if self.api.list_users(data['email']):
            raise ValidationFailed({'email': ['Email already exists']})

        self.api.create_user(data['name'], data['email'], data['password'])
        return self.login(data['email'], data['password'])

    def logout(self):
        if self.guard.is_authenticated:
            try:
                self.api.revoke_auth_token()
            except (AuthFailed, NetworkFailure) as e:
                logger.warning('Could not revoke the authentication token: %s', e)
        self.guard.logout()
