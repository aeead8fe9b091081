from __future__ import annotations


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input."


class InvalidRequest(AppError):
    status_code = 400
    default_message = "Invalid request."


class Conflict(AppError):
    status_code = 400
    default_message = "Resource already exists."


class InvalidCredentials(AppError):
    status_code = 400
    default_message = "Invalid Credentials."


class AuthError(AppError):
    status_code = 401
    default_message = "Token is not valid."


class NotFound(AppError):
    """Entity is absent or owned by someone else; the two cases are indistinguishable."""

    status_code = 404
    default_message = "Not found."
