"""
Client for the Flask Blog API.

The client keeps a local cache of the blog records, tracks the logged in
user in local storage, and validates forms before sending them.
`BlogClient` wires the pieces together for a given API address.
"""
from blog_app.client.accounts import Accounts
from blog_app.client.api import BlogApiClient
from blog_app.client.cache import BlogCache
from blog_app.client.session import SessionGuard
from blog_app.client.storage import LocalStorage
from blog_app.client.sync import BlogSync


class BlogClient:
    def __init__(self, base_url, storage=None, http=None, timeout=None):
        self.storage = storage if storage is not None else LocalStorage()
        self.guard = SessionGuard(self.storage)
        self.api = BlogApiClient(base_url, guard=self.guard, http=http, timeout=timeout)
        self.cache = BlogCache(self.api)
        self.blogs = BlogSync(self.api, self.cache, self.guard)
        self.accounts = Accounts(self.api, self.guard)
