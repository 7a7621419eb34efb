"""Domain errors raised by services and the auth gate, rendered as {"message": ...}."""

from fastapi import status


class OffiSwapError(Exception):
    """Base error carrying a human-readable message and the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(OffiSwapError):
    """Missing, malformed or out-of-enumeration field, or malformed id."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class Unauthenticated(OffiSwapError):
    """No token on a protected route."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token, authorization denied."


class InvalidToken(OffiSwapError):
    """Malformed, tampered or expired token. The reason is deliberately not exposed."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is not valid."


class Unauthorized(OffiSwapError):
    """Bad credentials at login (same shape for unknown email and wrong password)."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials."


class Forbidden(OffiSwapError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "User not authorized to perform this action."


class NotFound(OffiSwapError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(OffiSwapError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


class Internal(OffiSwapError):
    """Unexpected store failure; details are logged, never returned."""
