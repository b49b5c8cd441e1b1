import logging

from blog_app.exceptions import BlogAppError
from blog_app.models import ids_match


logger = logging.getLogger(__name__)


class BlogCache:
    """
    Local mirror of the blog records held by the API.

    The cache keeps the following state:
        * blogs - the blog records, in the order the API returned them
        * loading - flag indicating that a refresh is in progress
        * error - message of the last failed refresh (None after a success)

    A refresh always replaces the whole list; the `apply_*` methods patch
    it with the result of a single create, update, or delete.  Whichever
    operation completes last decides what the cache holds.
    """

    def __init__(self, api):
        self.api = api
        self._blogs = []
        self.loading = False
        self.error = None

    @property
    def blogs(self):
        return list(self._blogs)

    def find(self, blog_id):
        for record in self._blogs:
            if ids_match(record.id, blog_id):
                return record
        return None

    def refresh(self):
        """Replace the cached records with the records held by the API.

        On failure the previous records are kept and the error message is
        recorded; the error is not raised.
        """
        self.loading = True
        try:
            blogs = self.api.list_blogs()
        except BlogAppError as e:
            logger.warning('Refreshing the blog records failed: %s', e)
            self.error = str(e)
            return False
        finally:
            self.loading = False

        self._blogs = list(blogs)
        self.error = None
        return True

    def apply_created(self, record):
        self._blogs.append(record)

    def apply_updated(self, record):
        for index, cached in enumerate(self._blogs):
            if ids_match(cached.id, record.id):
                self._blogs[index] = record
                return

        logger.warning('Updated blog record %s is not cached; refreshing all blog records', record.id)
        self.refresh()

    def apply_deleted(self, blog_id):
        self._blogs = [record for record in self._blogs if not ids_match(record.id, blog_id)]

    def __len__(self):
        return len(self._blogs)
