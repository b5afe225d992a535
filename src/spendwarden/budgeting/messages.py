"""User-facing messages for admission outcomes."""

import random

from spendwarden.budgeting.admission import AdmissionDecision, AdmissionOutcome

DEFAULT_GUILT_KEY = "default"

# Shown when a user pushes a transaction through over their cap. Categories
# without their own entry fall back to ``default``.
GUILT_MESSAGES: dict[str, tuple[str, ...]] = {
    "Food": (
        "Another takeaway? Your savings are going hungry.",
        "That meal cost more than your budget could stomach.",
    ),
    "Shopping": (
        "The cart is full and the wallet is empty. Was it worth it?",
        "New things feel great until the statement arrives.",
    ),
    "Entertainment": (
        "Fun tonight, a tighter month tomorrow.",
        "The show goes on. Your budget, not so much.",
    ),
    DEFAULT_GUILT_KEY: (
        "You've crossed your monthly cap. Future you just sighed.",
        "Budget alert: this one puts you in the red.",
    ),
}


def guilt_message(category: str | None = None, rng: random.Random | None = None) -> str:
    """Random guilt message for ``category``, or a generic one for unlisted categories."""
    choices = GUILT_MESSAGES.get(category or DEFAULT_GUILT_KEY, GUILT_MESSAGES[DEFAULT_GUILT_KEY])
    return (rng or random).choice(choices)


def format_amount(amount: int, minor_unit: int = 2, currency: str = "INR") -> str:
    """Render minor units as a display string, e.g. 30000 -> 'INR 300.00'."""
    value = amount / (10**minor_unit) if minor_unit else amount
    return f"{currency} {value:,.{minor_unit}f}"


def admission_message(
    decision: AdmissionDecision,
    category: str,
    *,
    minor_unit: int = 2,
    currency: str = "INR",
    rng: random.Random | None = None,
) -> str:
    """Message shown to the user for an admission decision."""
    if decision.outcome is AdmissionOutcome.admit:
        return "Transaction successful"

    if decision.outcome is AdmissionOutcome.reject_over_limit:
        remaining = max(decision.remaining or 0, 0)
        return (
            f"Limit exceeded! You have {format_amount(remaining, minor_unit, currency)} "
            f"left for {category} this month."
        )

    exceed = format_amount(decision.exceed_amount or 0, minor_unit, currency)
    return f"{guilt_message(category, rng)} {exceed} over your {category} limit."
