"""
The 'blogs_api' blueprint handles the API for managing blog records.
Specifically, this blueprint allows for blog records to be listed, viewed,
added, edited, and deleted.  Edits and deletions are limited to the owner
of a blog record when the `OWNERSHIP_ENFORCED` configuration is set.
"""
from flask import Blueprint


blogs_api_blueprint = Blueprint('blogs_api', __name__)

from . import routes
