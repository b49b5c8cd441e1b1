"""
Form validation done by the client before any request is sent.

Each form is a marshmallow schema; `validate_form` loads the submitted
data and raises `ValidationFailed` with the messages of every field that
does not satisfy its constraints.
"""
from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate

from blog_app.exceptions import ValidationFailed


class LoginForm(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True,
                         error_messages={'required': 'Email is required', 'invalid': 'Invalid email'})
    password = fields.String(required=True,
                             validate=validate.Length(min=6, error='Password must be at least 6 characters'),
                             error_messages={'required': 'Password is required'})


class SignupForm(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True,
                         validate=validate.Length(min=2, error='Name must be at least 2 characters'),
                         error_messages={'required': 'Name is required'})
    email = fields.Email(required=True,
                         error_messages={'required': 'Email is required', 'invalid': 'Please enter a valid email'})
    password = fields.String(required=True,
                             validate=validate.Length(min=6, error='Password must be at least 6 characters'),
                             error_messages={'required': 'Password is required'})


class BlogForm(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True,
                          validate=validate.Length(min=5, error='Title must be at least 5 characters'),
                          error_messages={'required': 'Title is required'})
    content = fields.String(required=True,
                            validate=validate.Length(min=20, error='Content must be at least 20 characters'),
                            error_messages={'required': 'Content is required'})
    author = fields.String(required=True,
                           validate=validate.Length(min=2, error='Author name required'),
                           error_messages={'required': 'Author is required'})
    featured = fields.Boolean(load_default=False)


login_form = LoginForm()
signup_form = SignupForm()
blog_form = BlogForm()


def validate_form(form, data):
    """Return the cleaned form data, or raise ValidationFailed."""
    try:
        return form.load(data)
    except ValidationError as e:
        raise ValidationFailed(e.messages) from e
