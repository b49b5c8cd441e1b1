"""Search, sort and paginate the cached blog records for display."""
import datetime
import math
from collections import namedtuple


BLOGS_PER_PAGE = 9
SORT_ORDERS = ('newest', 'oldest', 'featured')

Page = namedtuple('Page', ['items', 'page', 'total_pages', 'total'])


def _date_of(record):
    return record.date or datetime.date.min


def search_blogs(blogs, term):
    """Keep the records whose title, content or author contains `term`."""
    term = (term or '').strip().lower()
    if not term:
        return list(blogs)
    return [record for record in blogs
            if any(term in (value or '').lower() for value in (record.title, record.content, record.author))]


def sort_blogs(blogs, order='newest'):
    if order == 'newest':
        return sorted(blogs, key=_date_of, reverse=True)
    if order == 'oldest':
        return sorted(blogs, key=_date_of)
    if order == 'featured':
        newest_first = sorted(blogs, key=_date_of, reverse=True)
        return sorted(newest_first, key=lambda record: not record.featured)
    raise ValueError(f'Unknown sort order: {order} (expected one of {", ".join(SORT_ORDERS)})')


def paginate(blogs, page=1, per_page=BLOGS_PER_PAGE):
    """Return the records on `page` (1-based) along with the page counts."""
    blogs = list(blogs)
    total_pages = math.ceil(len(blogs) / per_page)
    start = (page - 1) * per_page
    items = blogs[start:start + per_page] if page >= 1 else []
    return Page(items, page, total_pages, len(blogs))


def featured_blogs(blogs, limit=3):
    return [record for record in blogs if record.featured][:limit]
