"""Transaction admission decision.

Given month-to-date spend, the category cap and a new amount, decide whether
the transaction is admitted, rejected, or admitted over the limit because the
user explicitly confirmed the bypass. The decision is deterministic and has
no side effects; persisting the result is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AdmissionOutcome(str, Enum):
    admit = "admit"
    reject_over_limit = "reject_over_limit"
    admit_override = "admit_override"


@dataclass(frozen=True)
class AdmissionDecision:
    outcome: AdmissionOutcome
    prior_spend: int
    amount: int
    cap: int | None = None
    # Only set when the cap is exceeded. ``remaining`` may be negative.
    remaining: int | None = None
    exceed_amount: int | None = None

    @property
    def admitted(self) -> bool:
        return self.outcome is not AdmissionOutcome.reject_over_limit

    @property
    def exceeded_limit(self) -> bool:
        return self.outcome is AdmissionOutcome.admit_override

    @property
    def remaining_after(self) -> int | None:
        """Cap left once this transaction is counted; None when unbounded."""
        if self.cap is None:
            return None
        return self.cap - self.prior_spend - self.amount

    def as_details(self) -> dict[str, int | None]:
        return {
            "cap": self.cap,
            "prior_spend": self.prior_spend,
            "amount": self.amount,
            "remaining": self.remaining,
            "exceed_amount": self.exceed_amount,
            "remaining_after": self.remaining_after,
        }


def decide_admission(
    prior_spend: int, cap: int | None, amount: int, bypass: bool = False
) -> AdmissionDecision:
    """Decide the outcome of recording ``amount`` against ``cap``.

    Args:
        prior_spend: Month-to-date spend in the category, before this amount
        cap: Monthly cap, or None when the category is unbounded
        amount: Amount of the new transaction (minor units, > 0)
        bypass: The user confirmed recording it even if over the cap

    Returns:
        The decision; reaching the cap exactly is still admitted.
    """
    if cap is None or prior_spend + amount <= cap:
        return AdmissionDecision(
            outcome=AdmissionOutcome.admit,
            prior_spend=prior_spend,
            amount=amount,
            cap=cap,
        )

    remaining = cap - prior_spend
    exceed_amount = amount - remaining
    outcome = AdmissionOutcome.admit_override if bypass else AdmissionOutcome.reject_over_limit
    return AdmissionDecision(
        outcome=outcome,
        prior_spend=prior_spend,
        amount=amount,
        cap=cap,
        remaining=remaining,
        exceed_amount=exceed_amount,
    )
