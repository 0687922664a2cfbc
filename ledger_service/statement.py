"""
Statement Queries

Pure functions over a customer's statement: the balance fold and the
calendar-day filter used by the date query.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from .customers import Operation, OperationType
from .exceptions import InvalidDate, MissingDate


# strptime takes one- or two-digit month and day for %m and %d
UNPADDED_DATE_FORMAT = "%Y-%m-%d"


def compute_balance(statement: Iterable[Operation]) -> Decimal:
    """Fold the statement: credits add, debits subtract. Empty yields 0."""
    balance = Decimal('0')
    for operation in statement:
        if operation.type == OperationType.CREDIT:
            balance += operation.amount
        else:
            balance -= operation.amount
    return balance


def parse_statement_date(value: Optional[str]) -> date:
    """
    Parse the day a statement query asks for.

    Accepts an ISO calendar date (``2024-03-15``), the same without zero
    padding (``2024-3-5``), or an ISO datetime, in which case only the day
    part is used.

    Raises:
        MissingDate: value is None or blank
        InvalidDate: value is not a recognizable date
    """
    if value is None or not value.strip():
        raise MissingDate()

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.strptime(text, UNPADDED_DATE_FORMAT).date()
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDate(details={"date": value})


def operation_day(operation: Operation) -> date:
    """Calendar day of an operation in the server's local time zone"""
    return operation.created_at.astimezone().date()


def filter_by_date(statement: Iterable[Operation], day: date) -> List[Operation]:
    """Operations created on ``day`` (local time), in statement order"""
    return [operation for operation in statement if operation_day(operation) == day]
