"""
Record store holding the blog records.

`BlogRepository` is the interface the API routes talk to;
`InMemoryBlogRepository` keeps the records in process memory, so they
are discarded whenever the process restarts.
"""
import datetime
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import replace
from threading import Lock

from blog_app.exceptions import NotFound
from blog_app.models import BlogRecord, coerce_id


logger = logging.getLogger(__name__)

# Fields that are fixed once a record has been created
IMMUTABLE_FIELDS = frozenset(['id', 'owner_id', 'owner_email'])


def _now_ms():
    return int(time.time() * 1000)


class IdSequence:
    """Hands out millisecond-timestamp ids that never repeat within a process."""

    def __init__(self, clock=_now_ms):
        self._clock = clock
        self._last = 0
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            self._last = max(self._clock(), self._last + 1)
            return self._last

    def reserve(self, value: int):
        """Make sure `value` is never handed out."""
        with self._lock:
            self._last = max(self._last, value)


def _known_fields(fields: dict, exclude=frozenset()) -> dict:
    known = BlogRecord.field_names() - exclude
    dropped = set(fields) - known
    if dropped:
        logger.debug('Ignoring blog record fields: %s', ', '.join(sorted(dropped)))
    return {key: value for key, value in fields.items() if key in known}


class BlogRepository(ABC):
    """Create, read, update and delete blog records by id."""

    @abstractmethod
    def list(self):
        """Return all records in storage order."""

    @abstractmethod
    def get(self, blog_id) -> BlogRecord:
        """Return the record with `blog_id`; raise NotFound if there is none."""

    @abstractmethod
    def create(self, fields: dict) -> BlogRecord:
        """Store a new record built from `fields` with a fresh id."""

    @abstractmethod
    def update(self, blog_id, fields: dict) -> BlogRecord:
        """Merge `fields` over the stored record and return the result."""

    @abstractmethod
    def delete(self, blog_id):
        """Remove the record with `blog_id`; raise NotFound if there is none."""


class InMemoryBlogRepository(BlogRepository):
    def __init__(self, id_sequence=None):
        self._records = {}
        self._lock = Lock()
        self._ids = id_sequence or IdSequence()

    def init_app(self, app):
        self.clear()
        app.extensions['blog_store'] = self

    def clear(self):
        with self._lock:
            self._records.clear()

    def list(self):
        with self._lock:
            return list(self._records.values())

    def get(self, blog_id):
        key = coerce_id(blog_id)
        with self._lock:
            try:
                return self._records[key]
            except KeyError:
                raise NotFound(f'Blog record {blog_id} not found') from None

    def create(self, fields):
        values = _known_fields(fields, exclude=frozenset(['id']))
        if values.get('date') is None:
            values['date'] = datetime.date.today()
        if values.get('featured') is None:
            values['featured'] = False

        record = BlogRecord(id=self._ids.next_id(), **values)
        with self._lock:
            self._records[record.id] = record
        logger.debug('Created blog record %s', record.id)
        return record

    def update(self, blog_id, fields):
        key = coerce_id(blog_id)
        changes = _known_fields(fields, exclude=IMMUTABLE_FIELDS)
        with self._lock:
            if key not in self._records:
                raise NotFound(f'Blog record {blog_id} not found')
            record = replace(self._records[key], **changes)
            self._records[key] = record
        return record

    def delete(self, blog_id):
        key = coerce_id(blog_id)
        with self._lock:
            if key not in self._records:
                raise NotFound(f'Blog record {blog_id} not found')
            del self._records[key]
        logger.debug('Deleted blog record %s', key)

    def __len__(self):
        with self._lock:
            return len(self._records)
