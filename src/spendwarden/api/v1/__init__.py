"""API version 1 routes."""

from fastapi import APIRouter

from spendwarden.api.v1 import analytics, auth, categories, limits, messages, transactions

router = APIRouter(prefix="/api/v1")

router.include_router(auth.router)
router.include_router(transactions.router)
router.include_router(limits.router)
router.include_router(categories.router)
router.include_router(analytics.router)
router.include_router(messages.router)
