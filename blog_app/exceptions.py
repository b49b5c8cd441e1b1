"""Errors shared by the API stores and the client package."""


class BlogAppError(Exception):
    """Base class for all errors raised by blog_app."""


class NotFound(BlogAppError):
    """The requested blog record (or account) does not exist."""


class ValidationFailed(BlogAppError):
    """Input was rejected before (or by) the API.

    `messages` maps a field name to the list of problems found with it.
    """

    def __init__(self, messages):
        self.messages = messages
        if isinstance(messages, dict):
            summary = '; '.join(f'{field}: {problems}' for field, problems in messages.items())
        else:
            summary = str(messages)
        super().__init__(summary)


class AuthFailed(BlogAppError):
    """The supplied credentials (or token) were not accepted."""


class NotOwner(BlogAppError):
    """The current user does not own the blog record."""


class NetworkFailure(BlogAppError):
    """The request to the API could not be completed."""
