"""
Welcome to the documentation for the Flask Blog API!

## Introduction

The Flask Blog API is an API (Application Programming Interface) for
publishing **blog posts**. Blog records and user accounts are held in
memory, so every restart of the application begins with a clean store.

## Key Functionality

The Flask Blog API has the following functionality:

1. Work with blog records:
  * Create a new blog record
  * Update a blog record (only its owner, when ownership is enforced)
  * Delete a blog record (only its owner, when ownership is enforced)
  * View all blog records or a single blog record
2. User management:
  * Register new users
  * Look up users by email address
  * Retrieve and revoke an authentication token

The `blog_app.client` package is the counterpart of the API: it keeps a
local cache of the blog records in sync with the API and tracks the
session of the logged in user.

## Key Modules

* **Flask**: micro-framework for web application development
* **APIFairy**: API framework for Flask which includes the following dependencies:
  * **Flask-Marshmallow** - Flask extension for using Marshmallow (object serialization/deserialization library)
  * **Flask-HTTPAuth** - Flask extension for HTTP authentication
  * **apispec** - API specification generator that supports the OpenAPI specification
* **requests**: HTTP library used by the client package
* **pytest**: framework for testing Python projects
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from apifairy import APIFairy
from flask import Flask, json
from flask.logging import default_handler
from flask_httpauth import HTTPBasicAuth, HTTPTokenAuth
from flask_marshmallow import Marshmallow
from werkzeug.exceptions import HTTPException

from blog_app.directory import UserDirectory
from blog_app.store import InMemoryBlogRepository


# -------------
# Configuration
# -------------

# Create the instances of the Flask extensions in the global scope,
# but without any arguments passed in. These instances are not
# attached to the Flask application at this point.
apifairy = APIFairy()
ma = Marshmallow()
basic_auth = HTTPBasicAuth()
token_auth = HTTPTokenAuth()

# Process-wide stores; their contents only live as long as the process
blog_store = InMemoryBlogRepository()
user_directory = UserDirectory()


# ----------------------------
# Application Factory Function
# ----------------------------

def create_app():
    # Create the Flask application
    app = Flask(__name__)

    # Configure the Flask application
    config_type = os.getenv('CONFIG_TYPE', default='config.DevelopmentConfig')
    app.config.from_object(config_type)

    initialize_extensions(app)
    register_blueprints(app)
    configure_logging(app)
    register_error_handlers(app)
    return app


# ----------------
# Helper Functions
# ----------------

def initialize_extensions(app):
    # Since the application instance is now created, pass it to each Flask
    # extension instance to bind it to the Flask application instance (app)
    apifairy.init_app(app)
    ma.init_app(app)
    blog_store.init_app(app)
    user_directory.init_app(app)


def register_blueprints(app):
    # Import the blueprints
    from blog_app.blogs_api import blogs_api_blueprint
    from blog_app.users_api import users_api_blueprint

    # Since the application instance is now created, register each Blueprint
    # with the Flask application instance (app)
    app.register_blueprint(blogs_api_blueprint, url_prefix='/blogs')
    app.register_blueprint(users_api_blueprint, url_prefix='/users')


def configure_logging(app):
    if app.config['LOG_TO_STDOUT']:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.INFO)
        app.logger.addHandler(stream_handler)
    else:
        os.makedirs(app.instance_path, exist_ok=True)
        file_handler = RotatingFileHandler(os.path.join(app.instance_path, 'flask-blog-api.log'),
                                           maxBytes=16384,
                                           backupCount=20)
        file_formatter = logging.Formatter('%(asctime)s %(levelname)s %(threadName)s-%(thread)d: %(message)s [in %(filename)s:%(lineno)d]')
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

    # Remove the default logger configured by Flask
    app.logger.removeHandler(default_handler)
    app.logger.setLevel(logging.INFO)
    app.logger.info('Starting the Flask Blog API...')


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Return JSON instead of HTML for HTTP errors."""
        # Start with the correct headers and status code from the error
        response = e.get_response()
        # Replace the body with JSON
        response.data = json.dumps({
            'code': e.code,
            'name': e.name,
            'description': e.description,
        })
        response.content_type = 'application/json'
        return response
