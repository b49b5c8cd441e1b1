"""
Session guard for the client.

Whether a user is logged in is derived from the presence of the token
item in local storage; the user that logged in is kept next to it as a
serialized object.  Ownership checks only gate what the client offers
to do; the API makes its own decision when it enforces ownership.
"""
import json
import logging
import time
from dataclasses import dataclass
from typing import Optional

from marshmallow import ValidationError

from blog_app.models import ids_match
from blog_app.schemas import SessionUserSchema


logger = logging.getLogger(__name__)

TOKEN_KEY = 'token'
USER_KEY = 'user'

session_user_schema = SessionUserSchema()


@dataclass(frozen=True)
class SessionUser:
    id: int
    name: Optional[str] = None
    email: Optional[str] = None


class SessionGuard:
    def __init__(self, storage):
        self.storage = storage

    @property
    def is_authenticated(self) -> bool:
        return self.storage.get_item(TOKEN_KEY) is not None

    @property
    def token(self) -> Optional[str]:
        return self.storage.get_item(TOKEN_KEY)

    @property
    def current_user(self) -> Optional[SessionUser]:
        raw_user = self.storage.get_item(USER_KEY)
        if raw_user is None:
            return None
        try:
            return SessionUser(**session_user_schema.loads(raw_user))
        except (ValidationError, json.JSONDecodeError):
            logger.warning('Stored session user is unreadable; treating the session as anonymous')
            return None

    def login(self, user, token=None) -> str:
        """Persist the session for `user` and return its token."""
        if token is None:
            token = f'token-{user.id}-{int(time.time() * 1000)}'
        self.storage.set_item(TOKEN_KEY, token)
        self.storage.set_item(USER_KEY, session_user_schema.dumps(user))
        logger.info('Logged in user: %s', user.email)
        return token

    def logout(self):
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)
        logger.info('Logged out')

    def is_owner(self, record) -> bool:
        if not self.is_authenticated:
            return False
        user = self.current_user
        return user is not None and ids_match(record.owner_id, user.id)
