"""
Error types raised by views and helpers.

Each carries the HTTP status it maps to; the handler registered in app.py
turns any of them into ``{"message": ...}`` JSON.
"""


class PortalError(Exception):
    status_code = 500

    def __init__(self, message, errors=None):
        self.message = message
        self.errors = errors
        super().__init__(message)

    def to_dict(self):
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(PortalError):
    status_code = 400


class AuthenticationError(PortalError):
    status_code = 401

    def __init__(self, message="Access denied. No token provided."):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message="Invalid token."):
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    def __init__(self):
        super().__init__("Token expired.")


class AuthorizationError(PortalError):
    status_code = 403


class ApprovalRequiredError(AuthorizationError):
    def __init__(self):
        super().__init__("Your account is pending approval.")


class NotFoundError(PortalError):
    status_code = 404


class ConflictError(PortalError):
    status_code = 409
