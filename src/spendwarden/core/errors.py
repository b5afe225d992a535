"""Error codes and user-friendly messages.

Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request body or query failed schema validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Transaction or limit input failed validation",
        "user_message": "Some required details are missing or invalid.",
        "suggestion": "Provide a category, payee, redirect target and a positive amount.",
        "retry_allowed": True,
    },
    "LIM_001": {
        "code": "LIM_001",
        "message": "Transaction would exceed the monthly category limit",
        "user_message": "This payment goes over your monthly limit for this category.",
        "suggestion": "Resubmit with bypass=true to record it anyway, or lower the amount.",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists",
        "suggestion": "Please check if the record was already created",
        "retry_allowed": False,
    },
    "DB_003": {
        "code": "DB_003",
        "message": "Ledger store unavailable or timed out",
        "user_message": "We couldn't reach your ledger right now.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details; a generic definition for unknown codes
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def error_body(error_code: str, message: str | None = None) -> dict:
    """Build the JSON body shared by every error response."""
    info = get_error(error_code)
    return {
        "error_code": error_code,
        "message": message or info["message"],
        "user_message": info["user_message"],
        "suggestion": info["suggestion"],
        "retry_allowed": info["retry_allowed"],
    }
