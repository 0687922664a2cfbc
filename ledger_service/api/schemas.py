"""
Pydantic schemas for API requests and responses
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from ..customers import Customer, Operation


# Account schemas
class CreateAccountRequest(BaseModel):
    cpf: str = Field(..., min_length=1, description="Unique customer key")
    name: str


class RenameAccountRequest(BaseModel):
    name: str


class UpdateAccountRequest(BaseModel):
    name: Optional[str] = None
    cpf: Optional[str] = Field(None, min_length=1)


# Statement operation schemas
class DepositRequest(BaseModel):
    description: Optional[str] = None
    amount: Decimal = Field(..., ge=0, description="Non-negative amount")


class WithdrawRequest(BaseModel):
    amount: Decimal = Field(..., ge=0, description="Non-negative amount")
    description: Optional[str] = None


# Responses
class OperationModel(BaseModel):
    description: Optional[str] = None
    amount: str = Field(..., description="Decimal amount as string")
    created_at: str = Field(..., description="ISO 8601 timestamp")
    type: str = Field(..., description="credit or debit")

    @classmethod
    def from_operation(cls, operation: Operation) -> 'OperationModel':
        return cls(
            description=operation.description,
            amount=str(operation.amount),
            created_at=operation.created_at.isoformat(),
            type=operation.type.value
        )


class CustomerModel(BaseModel):
    id: str
    cpf: str
    name: str
    balance: str = Field(..., description="Decimal balance as string")
    statement: List[OperationModel]

    @classmethod
    def from_customer(cls, customer: Customer) -> 'CustomerModel':
        return cls(
            id=customer.id,
            cpf=customer.cpf,
            name=customer.name,
            balance=str(customer.balance),
            statement=[OperationModel.from_operation(op) for op in customer.statement]
        )


def customers_payload(customers: List[Customer]) -> List[dict]:
    return [CustomerModel.from_customer(customer).model_dump() for customer in customers]


def statement_payload(operations: List[Operation]) -> List[dict]:
    return [OperationModel.from_operation(operation).model_dump() for operation in operations]
