from typing import Optional


class BadgeError(Exception):
    """
    Base class for every error that ends up rendered as an error badge.

    Args:
        pretty_message (str): Short message shown in place of the badge value.
        underlying_error (Exception, optional): The error that caused this one.
    """

    default_pretty_message = "error"
    status_code = 500

    def __init__(
        self,
        pretty_message: Optional[str] = None,
        underlying_error: Optional[Exception] = None,
    ):
        self.pretty_message = pretty_message or self.default_pretty_message
        self.underlying_error = underlying_error
        message = self.pretty_message
        if underlying_error is not None:
            message = f"{message}: {underlying_error}"
        super().__init__(message)


class NotFound(BadgeError):
    default_pretty_message = "not found"
    status_code = 404


class InvalidResponse(BadgeError):
    default_pretty_message = "invalid"
    status_code = 502


class Inaccessible(BadgeError):
    default_pretty_message = "inaccessible"
    status_code = 503


class AuthFailed(BadgeError):
    default_pretty_message = "auth failed"
    status_code = 403
