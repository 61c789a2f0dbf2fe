"""Error hierarchy shared by services and HTTP handlers.

Services raise these; `main.py` turns them into JSON responses with the
matching status code. Anything else propagates as a 500.
"""


class TrackerError(Exception):
    """Base exception for all expected request failures."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class NotFoundError(TrackerError):
    """No record with the requested id."""
    def __init__(self, label: str, item_id: int):
        super().__init__(f"{label} {item_id} not found", "NOT_FOUND", 404)
        self.item_id = item_id


class BadRequestError(TrackerError):
    """Malformed input, such as a path/body id mismatch."""
    def __init__(self, message: str):
        super().__init__(message, "BAD_REQUEST", 400)


class ConflictError(TrackerError):
    """Write rejected because the stored state changed underneath it.

    Raised for optimistic-concurrency violations and for seeding a table
    that only accepts seed data while empty. Callers may retry.
    """
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", 409)
