"""
Errors Module - Application error taxonomy
"""


class PortfolioError(Exception):
    """Base class for errors surfaced to visitors and admins"""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(PortfolioError):
    """A submitted field is missing or malformed"""

    status_code = 400

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class AuthorizationError(PortfolioError):
    """The current user lacks the admin capability"""

    status_code = 403


class RemoteError(PortfolioError):
    """The database or the email API call failed"""

    status_code = 502


class NotFoundError(PortfolioError):
    """No published record matches the requested slug"""

    status_code = 404


__all__ = [
    'PortfolioError',
    'ValidationError',
    'AuthorizationError',
    'RemoteError',
    'NotFoundError'
]
