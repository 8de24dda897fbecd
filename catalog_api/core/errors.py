"""
Domain errors - typed failures raised by services, mapped to HTTP by global handlers.
Challenge: Keep services free of HTTP concerns while returning consistent status codes.
"""


class AppError(Exception):
    """Base exception for deliberate, request-local failures."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class NotFoundError(AppError):
    """Requested entity is absent or filtered out (inactive)."""

    def __init__(self, message: str):
        super().__init__(message, "NOT_FOUND", 404)


class ConflictError(AppError):
    """Unique key already taken (pre-check or storage constraint)."""

    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", 409)
