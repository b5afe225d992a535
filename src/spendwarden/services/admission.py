"""Transaction admission: the budget check wrapped around recording a transaction.

Reads month-to-date spend and the category cap, decides, and persists at most
one transaction. A rejected transaction writes nothing.

Concurrent admissions for the same (user, category) can both read the same
prior spend. With ``lock_limit_row`` the cap row is read ``FOR UPDATE`` so
engines with row locks serialise them until the insert commits; without row
locks (SQLite) the check stays optimistic.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.budgeting.admission import AdmissionDecision, AdmissionOutcome, decide_admission
from spendwarden.budgeting.messages import admission_message
from spendwarden.budgeting.periods import month_to_date
from spendwarden.config import settings
from spendwarden.core.exceptions import ValidationError
from spendwarden.models.transaction import Transaction
from spendwarden.repositories.base import translate_store_errors
from spendwarden.repositories.transaction import TransactionRepository
from spendwarden.services.limits import LimitService
from spendwarden.services.spending import SpendingService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdmissionResult:
    decision: AdmissionDecision
    message: str
    redirect_url: str
    transaction: Transaction | None = None

    @property
    def outcome(self) -> AdmissionOutcome:
        return self.decision.outcome


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_admission_request(
    category: Any, amount: Any, payee: Any, redirect_url: Any
) -> None:
    """Raise ValidationError unless every field is present and amount is positive."""
    missing = [
        name
        for name, value in (
            ("category", category),
            ("amount", amount),
            ("payee", payee),
            ("redirect_url", redirect_url),
        )
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(details={"missing": missing})

    invalid = [
        name
        for name, value in (("category", category), ("payee", payee), ("redirect_url", redirect_url))
        if not _is_text(value)
    ]
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        invalid.append("amount")
    if invalid:
        raise ValidationError(details={"invalid": invalid})


class TransactionAdmissionService:
    """Record spending transactions subject to monthly category caps."""

    def __init__(
        self,
        db: AsyncSession,
        lock_limit_row: bool | None = None,
        tz_name: str | None = None,
        rng: random.Random | None = None,
    ):
        self.db = db
        self.lock_limit_row = (
            settings.admission_lock_limit_row if lock_limit_row is None else lock_limit_row
        )
        self.tz_name = tz_name or settings.timezone
        self.rng = rng
        self.txn_repo = TransactionRepository(db)
        self.limits = LimitService(db)
        self.spending = SpendingService(db, tz_name=self.tz_name)

    async def admit(
        self,
        user_id: UUID,
        category: str,
        amount: int,
        payee: str,
        redirect_url: str,
        bypass: bool = False,
        now: datetime | None = None,
    ) -> AdmissionResult:
        """
        Decide and, when admitted, record a transaction.

        Args:
            user_id: Authenticated owner
            category: Spending category
            amount: Amount in minor units (> 0)
            payee: Who was paid
            redirect_url: Where the client continues afterwards
            bypass: Record even when the cap would be exceeded
            now: Evaluation time; defaults to the current time

        Returns:
            AdmissionResult; ``transaction`` is None on reject_over_limit

        Raises:
            ValidationError: If inputs are missing or malformed (nothing written)
            StoreUnavailableError: If the ledger store fails (not retried)
        """
        validate_admission_request(category, amount, payee, redirect_url)
        category = category.strip()
        payee = payee.strip()

        window = month_to_date(now, self.tz_name)
        # Lock the cap first so the spend read below sees every committed
        # admission that held the lock before us.
        cap = await self.limits.resolve_limit(user_id, category, for_update=self.lock_limit_row)
        prior_spend = await self.spending.spend_so_far(user_id, category, window.start, window.end)

        decision = decide_admission(prior_spend, cap, amount, bypass=bypass)
        message = admission_message(
            decision,
            category,
            minor_unit=settings.currency_minor_unit,
            currency=settings.currency,
            rng=self.rng,
        )

        log_extra = {
            "user_id": str(user_id),
            "category": category,
            "outcome": decision.outcome.value,
            **decision.as_details(),
        }

        if not decision.admitted:
            logger.warning("Transaction rejected over limit", extra=log_extra)
            return AdmissionResult(decision=decision, message=message, redirect_url=redirect_url)

        transaction = Transaction(
            user_id=user_id,
            category=category,
            amount=amount,
            payee=payee,
            occurred_at=window.end,
            exceeded_limit=decision.exceeded_limit,
        )
        with translate_store_errors("record_transaction"):
            transaction = await self.txn_repo.create(transaction)

        if decision.exceeded_limit:
            logger.warning("Transaction admitted over limit by bypass", extra=log_extra)
        else:
            logger.info("Transaction admitted", extra=log_extra)

        return AdmissionResult(
            decision=decision,
            message=message,
            redirect_url=redirect_url,
            transaction=transaction,
        )
