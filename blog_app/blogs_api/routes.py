from apifairy import authenticate, body, other_responses, response
from flask import abort, current_app

from blog_app import blog_store, token_auth
from blog_app.exceptions import NotFound
from blog_app.schemas import BlogSchema, NewBlogSchema, UpdateBlogSchema

from . import blogs_api_blueprint


# -------
# Schemas
# -------

new_blog_schema = NewBlogSchema()
update_blog_schema = UpdateBlogSchema()
blog_schema = BlogSchema()
blogs_schema = BlogSchema(many=True)


# ----------------
# Helper Functions
# ----------------

def get_blog_or_404(blog_id):
    try:
        return blog_store.get(blog_id)
    except NotFound:
        current_app.logger.info(f'Blog record not found: {blog_id}')
        abort(404)


def check_ownership(record):
    """Abort unless the authenticated user owns `record`."""
    if not current_app.config['OWNERSHIP_ENFORCED']:
        return

    user = token_auth.current_user()
    if user is None:
        abort(401)
    if record.owner_id != user.id:
        current_app.logger.info(f'User {user.email} attempted to modify blog record {record.id} '
                                f'owned by user {record.owner_id}')
        abort(403)


# ------
# Routes
# ------

@blogs_api_blueprint.route('/', methods=['GET'], strict_slashes=False)
@response(blogs_schema)
def list_blogs():
    """Return all blog records"""
    return blog_store.list()


@blogs_api_blueprint.route('/', methods=['POST'], strict_slashes=False)
@authenticate(token_auth, optional=True)
@body(new_blog_schema)
@response(blog_schema, 201)
@other_responses({401: 'Authentication required'})
def add_blog(kwargs):
    """Add a new blog record"""
    user = token_auth.current_user()
    if user is not None:
        kwargs['owner_id'] = user.id
        kwargs['owner_email'] = user.email
    elif current_app.config['OWNERSHIP_ENFORCED']:
        abort(401)

    record = blog_store.create(kwargs)
    current_app.logger.info(f'Added blog record {record.id} (owner: {record.owner_id})')
    return record


@blogs_api_blueprint.route('/<blog_id>', methods=['GET'])
@response(blog_schema)
@other_responses({404: 'Blog record not found'})
def get_blog(blog_id):
    """Retrieve a blog record"""
    return get_blog_or_404(blog_id)


@blogs_api_blueprint.route('/<blog_id>', methods=['PUT'])
@authenticate(token_auth, optional=True)
@body(update_blog_schema)
@response(blog_schema)
@other_responses({401: 'Authentication required',
                  403: 'Blog record owned by another user',
                  404: 'Blog record not found'})
def update_blog(kwargs, blog_id):
    """Update a blog record"""
    check_ownership(get_blog_or_404(blog_id))
    try:
        record = blog_store.update(blog_id, kwargs)
    except NotFound:
        abort(404)

    current_app.logger.info(f'Updated blog record {record.id}')
    return record


@blogs_api_blueprint.route('/<blog_id>', methods=['DELETE'])
@authenticate(token_auth, optional=True)
@other_responses({401: 'Authentication required',
                  403: 'Blog record owned by another user',
                  404: 'Blog record not found'})
def delete_blog(blog_id):
    """Delete a blog record"""
    check_ownership(get_blog_or_404(blog_id))
    try:
        blog_store.delete(blog_id)
    except NotFound:
        abort(404)

    current_app.logger.info(f'Deleted blog record {blog_id}')
    return '', 200
