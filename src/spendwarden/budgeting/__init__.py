"""Budget enforcement logic.

Pure functions only: month windows, the admission decision and the canned
messages shown to users. Database access lives in ``spendwarden.services``.
"""

from .admission import AdmissionDecision, AdmissionOutcome, decide_admission
from .periods import MonthWindow, calendar_month, month_to_date, resolve_month

__all__ = [
    "AdmissionDecision",
    "AdmissionOutcome",
    "MonthWindow",
    "calendar_month",
    "decide_admission",
    "month_to_date",
    "resolve_month",
]
