"""
Operations that change blog records through the API and keep the local
cache in step with the result.
"""
import datetime
import logging

from blog_app.client.forms import blog_form, validate_form
from blog_app.exceptions import NotOwner


logger = logging.getLogger(__name__)


class BlogSync:
    def __init__(self, api, cache, guard):
        self.api = api
        self.cache = cache
        self.guard = guard

    def fetch_blogs(self):
        return self.cache.refresh()

    def load_blog(self, blog_id):
        """Fetch a single record for display; NotFound propagates to the caller."""
        return self.api.get_blog(blog_id)

    def can_modify(self, record):
        return self.guard.is_owner(record)

    def _check_owner(self, blog_id):
        record = self.cache.find(blog_id)
        if record is None:
            # Not cached, ask the API; NotFound propagates
            record = self.api.get_blog(blog_id)
        if not self.guard.is_owner(record):
            raise NotOwner(f'Blog record {blog_id} is owned by another user')

    def create_blog(self, form_data):
        fields = validate_form(blog_form, form_data)
        fields['date'] = datetime.date.today()

        user = self.guard.current_user if self.guard.is_authenticated else None
        fields['owner_id'] = user.id if user else None
        fields['owner_email'] = user.email if user else 'anonymous'

        record = self.api.create_blog(fields)
        self.cache.apply_created(record)
        logger.info('Created blog record %s', record.id)
        return record

    def update_blog(self, blog_id, form_data):
        fields = validate_form(blog_form, form_data)
        self._check_owner(blog_id)
        fields['date'] = datetime.date.today()

        record = self.api.update_blog(blog_id, fields)
        self.cache.apply_updated(record)
        logger.info('Updated blog record %s', record.id)
        return record

    def delete_blog(self, blog_id):
        self._check_owner(blog_id)
        deleted_id = self.api.delete_blog(blog_id)
        self.cache.apply_deleted(deleted_id)
        logger.info('Deleted blog record %s', deleted_id)
        return deleted_id
