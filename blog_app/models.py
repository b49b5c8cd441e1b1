import datetime
from dataclasses import dataclass, fields
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash


def coerce_id(value) -> Optional[int]:
    """Return `value` as an integer id, or None if it cannot be one.

    Ids arrive as integers from JSON and as strings from URL paths, so
    5, 5.0, "5", "5.0" and " 05" all name the same record.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return coerce_id(float(text))
    except ValueError:
        return None


def ids_match(left, right) -> bool:
    """Loose equality between two ids; a missing id never matches."""
    left_id = coerce_id(left)
    return left_id is not None and left_id == coerce_id(right)


@dataclass(frozen=True)
class BlogRecord:
    """
    Class that represents a blog record.

    The following attributes of a blog record are stored:
        * id - unique identifier assigned by the record store
        * title - title of the blog post
        * content - text of the blog post
        * author - name of the author shown with the post
        * date - date (day precision) when the post was created or last edited
        * featured - flag indicating if the post is featured
        * owner_id - ID of the user that created the post
        * owner_email - email address of the user that created the post

    Records are immutable; an update produces a new record.
    """
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    date: Optional[datetime.date] = None
    featured: bool = False
    owner_id: Optional[int] = None
    owner_email: Optional[str] = None

    @classmethod
    def field_names(cls):
        return {field.name for field in fields(cls)}

    def __repr__(self):
        return f'<BlogRecord {self.id}: {self.title}>'


class UserAccount:
    """
    Class that represents a user of the application.

    The following attributes of a user are stored:
        * id - unique identifier of the user
        * name - display name of the user
        * email - email address of the user (used to look the user up)
        * hashed password - hashed password (using werkzeug.security)
        * joined - date when the user registered
    """

    def __init__(self, id: int, name: str, email: str, password_plaintext: str, joined: datetime.date = None):
        self.id = id
        self.name = name
        self.email = email
        self.password_hashed = generate_password_hash(password_plaintext)
        self.joined = joined or datetime.date.today()

    def is_password_correct(self, password_plaintext: str):
        return check_password_hash(self.password_hashed, password_plaintext)

    def __repr__(self):
        return f'<UserAccount: {self.email}>'
