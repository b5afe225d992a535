"""Database models."""
from spendwarden.models.user import User
from spendwarden.models.transaction import Transaction
from spendwarden.models.category_limit import CategoryLimit
from spendwarden.models.refresh_token import RefreshToken

__all__ = ["User", "Transaction", "CategoryLimit", "RefreshToken"]
