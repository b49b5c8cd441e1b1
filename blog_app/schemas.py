from marshmallow import EXCLUDE, post_load, validate

from blog_app import ma
from blog_app.models import BlogRecord


# -------
# Schemas
# -------

class NewBlogSchema(ma.Schema):
    """Schema defining the attributes when creating a new blog record."""
    class Meta:
        unknown = EXCLUDE

    title = ma.String(allow_none=True)
    content = ma.String(allow_none=True)
    author = ma.String(allow_none=True)
    date = ma.Date(allow_none=True)
    featured = ma.Boolean(allow_none=True)
    owner_id = ma.Integer(data_key='ownerId', allow_none=True)
    owner_email = ma.String(data_key='ownerEmail', allow_none=True)


class UpdateBlogSchema(ma.Schema):
    """Schema defining the attributes that can be changed in a blog record."""
    class Meta:
        unknown = EXCLUDE

    title = ma.String(allow_none=True)
    content = ma.String(allow_none=True)
    author = ma.String(allow_none=True)
    date = ma.Date(allow_none=True)
    featured = ma.Boolean()


class BlogSchema(ma.Schema):
    """Schema defining the attributes in a blog record."""
    class Meta:
        unknown = EXCLUDE

    id = ma.Integer(required=True)
    title = ma.String(allow_none=True)
    content = ma.String(allow_none=True)
    author = ma.String(allow_none=True)
    date = ma.Date(allow_none=True)
    featured = ma.Boolean(load_default=False)
    owner_id = ma.Integer(data_key='ownerId', allow_none=True)
    owner_email = ma.String(data_key='ownerEmail', allow_none=True)

    @post_load
    def make_record(self, data, **kwargs):
        return BlogRecord(**data)


class NewUserSchema(ma.Schema):
    """Schema defining the attributes when creating a new user."""
    class Meta:
        unknown = EXCLUDE

    name = ma.String(required=True, validate=validate.Length(min=2))
    email = ma.Email(required=True)
    password = ma.String(required=True, load_only=True, validate=validate.Length(min=6))


class UserSchema(ma.Schema):
    """Schema defining the attributes of a user."""
    class Meta:
        unknown = EXCLUDE

    id = ma.Integer()
    name = ma.String()
    email = ma.String()
    joined = ma.Date()


class UserQuerySchema(ma.Schema):
    """Schema defining the query arguments for looking up users."""
    class Meta:
        unknown = EXCLUDE

    email = ma.String()


class SessionUserSchema(ma.Schema):
    """Schema defining the attributes of a user kept in a client session."""
    class Meta:
        unknown = EXCLUDE

    id = ma.Integer(required=True)
    name = ma.String(allow_none=True)
    email = ma.String(allow_none=True)


class TokenSchema(ma.Schema):
    """Schema defining the attributes of a token."""
    class Meta:
        unknown = EXCLUDE

    token = ma.String(required=True)
    user = ma.Nested(SessionUserSchema, required=True)
