class ApiError(Exception):
    """Base exception for errors reported to the client as ``{"error": message}``."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthError(ApiError):
    """Missing or invalid bearer credential."""

    status_code = 401


class ValidationError(ApiError):
    """Missing file or bad request parameters."""

    status_code = 400


class NotFoundError(ApiError):
    """Record is absent, malformed, or owned by another user."""

    status_code = 404
