"""
Domain errors raised by GameHub services and dependencies.

Every error carries the HTTP status and the caller-safe message it maps to.
The exception handler registered in ``main.create_app`` renders them as
``{"message": ...}``; operator-facing detail only ever goes to the logs.
"""

from fastapi import status


class GameHubError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateUserError(GameHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentialsError(GameHubError):
    # Same message for unknown user and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class UnauthorizedError(GameHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access token required"


class InvalidTokenError(GameHubError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    message = "Token has expired"


class NotFoundError(GameHubError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class StorageError(GameHubError):
    message = "Server error"
