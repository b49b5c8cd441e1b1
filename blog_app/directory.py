"""
User directory holding the accounts of the application.

Accounts live in process memory and are seeded from the `SEED_USERS`
configuration whenever an application is created.  The directory also
remembers the authentication tokens it has issued.
"""
import time
from threading import Lock

from blog_app.models import UserAccount, coerce_id
from blog_app.store import IdSequence


class UserDirectory:
    def __init__(self, id_sequence=None):
        self._users = []
        self._tokens = {}
        self._lock = Lock()
        self._ids = id_sequence or IdSequence()

    def init_app(self, app):
        self.clear()
        for seed in app.config.get('SEED_USERS', []):
            self.add(UserAccount(seed['id'], seed['name'], seed['email'], seed['password']))
        app.extensions['user_directory'] = self

    def clear(self):
        with self._lock:
            self._users.clear()
            self._tokens.clear()

    def add(self, user: UserAccount) -> UserAccount:
        with self._lock:
            self._users.append(user)
        self._ids.reserve(user.id)
        return user

    def create(self, name: str, email: str, password: str) -> UserAccount:
        """Register a new account.

        Email addresses are not checked for uniqueness here; callers are
        expected to look the address up with `list_by_email` first.
        """
        return self.add(UserAccount(self._ids.next_id(), name, email, password))

    def list_by_email(self, email: str = None):
        with self._lock:
            if email:
                return [user for user in self._users if user.email == email]
            return list(self._users)

    def find_by_email(self, email: str):
        matches = self.list_by_email(email) if email else []
        return matches[0] if matches else None

    def get(self, user_id):
        key = coerce_id(user_id)
        with self._lock:
            for user in self._users:
                if user.id == key:
                    return user
        return None

    # ------
    # Tokens
    # ------

    def issue_token(self, user: UserAccount) -> str:
        token = f'token-{user.id}-{int(time.time() * 1000)}'
        with self._lock:
            self._tokens[token] = user.id
        return token

    def verify_token(self, token: str):
        with self._lock:
            user_id = self._tokens.get(token)
        if user_id is None:
            return None
        return self.get(user_id)

    def revoke_token(self, token: str):
        with self._lock:
            self._tokens.pop(token, None)
