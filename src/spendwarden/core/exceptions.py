"""Custom exception classes for the budgeting core.

Each exception maps to an error code defined in errors.py.
"""

from typing import Any


class SpendWardenError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "LIM_001")
        details: Additional structured context
        http_status: HTTP status code to return (default: 500)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class ValidationError(SpendWardenError):
    """Raised when a transaction or limit request is missing fields or malformed.

    Nothing is written when this is raised.
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("VAL_002", details=details, http_status=400)


class LimitExceededError(SpendWardenError):
    """Raised when a transaction would exceed its category cap without bypass.

    Recoverable: resubmitting the same request with ``bypass=true`` admits it.
    ``details`` always carries ``remaining`` and ``exceed_amount``.
    """

    def __init__(self, details: dict[str, Any], message: str | None = None):
        super().__init__("LIM_001", details=details, http_status=409)
        self.message = message

    @property
    def remaining(self) -> int:
        return self.details["remaining"]

    @property
    def exceed_amount(self) -> int:
        return self.details["exceed_amount"]


class StoreUnavailableError(SpendWardenError):
    """Raised when the ledger store cannot be reached or times out.

    Never retried inside the core; details are for logs only.
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("DB_003", details=details, http_status=503)
