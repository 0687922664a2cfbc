"""
Customer and Statement Models

A customer owns an ordered statement of credit/debit operations. Operations
are immutable once recorded; the balance is derived from them.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from datetime import datetime
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum

from .exceptions import InvalidAmount
from .storage import StorageRecord


class OperationType(Enum):
    """Direction of a statement operation"""
    CREDIT = "credit"  # Increases balance
    DEBIT = "debit"    # Decreases balance


def normalize_amount(value: Any, precision: int = 2) -> Decimal:
    """
    Convert an amount to a non-negative Decimal rounded to ``precision`` places.

    Floats go through ``str`` first so 0.1 stays 0.1.

    Raises:
        InvalidAmount: value is not a finite number, is negative, or has
            more digits than the decimal context can hold once rounded
    """
    if isinstance(value, bool):
        raise InvalidAmount(details={"amount": value})
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmount(details={"amount": value})

    if not amount.is_finite() or amount < 0:
        raise InvalidAmount(details={"amount": value})

    try:
        return amount.quantize(Decimal('0.1') ** precision, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmount("Amount is too large!", details={"amount": value})


@dataclass(frozen=True)
class Operation:
    """A single credit or debit on a customer's statement"""
    type: OperationType
    amount: Decimal
    created_at: datetime
    description: Optional[str] = None

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance"""
        if self.type == OperationType.CREDIT:
            return self.amount
        return -self.amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'amount': str(self.amount),
            'created_at': self.created_at.isoformat(),
            'description': self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Operation':
        return cls(
            type=OperationType(data['type']),
            amount=Decimal(data['amount']),
            created_at=datetime.fromisoformat(data['created_at']),
            description=data.get('description'),
        )


@dataclass
class Customer(StorageRecord):
    """
    Registered customer, keyed by cpf, with its statement and running balance
    """
    cpf: str
    name: str
    balance: Decimal = Decimal('0')
    statement: List[Operation] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.cpf, str) or not self.cpf:
            raise ValueError("Customer cpf is required")

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            'cpf': self.cpf,
            'name': self.name,
            'balance': str(self.balance),
            'statement': [operation.to_dict() for operation in self.statement],
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Customer':
        data = cls._parse_timestamps(data)
        return cls(
            id=data['id'],
            created_at=data['created_at'],
            updated_at=data['updated_at'],
            cpf=data['cpf'],
            name=data['name'],
            balance=Decimal(data['balance']),
            statement=[Operation.from_dict(op) for op in data.get('statement', [])],
        )
