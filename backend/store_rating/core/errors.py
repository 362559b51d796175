from __future__ import annotations


class AppError(Exception):
    """Base for errors that map onto a JSON ``{"msg": ...}`` response."""

    status_code: int = 500
    default_msg: str = "Server Error"

    def __init__(self, msg: str | None = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class InvalidInputError(AppError):
    status_code = 400
    default_msg = "Invalid input."


class ConflictError(AppError):
    status_code = 400
    default_msg = "Resource already exists."


class InvalidCredentialsError(AppError):
    status_code = 400
    default_msg = "Invalid credentials."


class UnauthorizedError(AppError):
    status_code = 401
    default_msg = "No token, authorization denied."


class ForbiddenError(AppError):
    status_code = 403
    default_msg = "Access denied."


class NotFoundError(AppError):
    status_code = 404
    default_msg = "Not found."
