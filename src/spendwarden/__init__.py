"""SpendWarden: monthly category budgets with admission checks."""

__version__ = "0.1.0"
