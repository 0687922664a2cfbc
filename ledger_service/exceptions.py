"""
Ledger Error Hierarchy

All ledger failures inherit from LedgerError. Each class knows the HTTP
status it maps to and the message shown to API clients.
"""

from decimal import Decimal
from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base exception for all ledger errors"""

    status_code = 400
    default_message = "Invalid request"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class CustomerNotFound(LedgerError):
    """Raised when no customer matches the given cpf or id"""

    status_code = 404
    default_message = "Customer not found!"


class DuplicateCustomer(LedgerError):
    """Raised when a cpf is already registered"""

    default_message = "Customer already exists!"


class EmptyStore(LedgerError):
    """Raised when listing customers and none are registered"""

    status_code = 404
    default_message = "There are no customers yet"


class InsufficientFunds(LedgerError):
    """Raised when a debit exceeds the current balance"""

    default_message = "Insuficient funds!"

    def __init__(self, balance: Decimal, amount: Decimal):
        super().__init__(details={"balance": str(balance), "amount": str(amount)})
        self.balance = balance
        self.amount = amount


class InvalidDate(LedgerError):
    """Raised when a statement query date cannot be parsed"""

    default_message = "Invalid date format!"


class MissingDate(InvalidDate):
    """Raised when a statement query date is absent"""

    default_message = "Date is required in query params!"


class InvalidAmount(LedgerError):
    """Raised when an operation amount is negative or not a number"""

    default_message = "Amount must be a non-negative number!"
