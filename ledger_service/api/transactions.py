"""
Deposit, withdrawal and balance endpoints
"""

from fastapi import APIRouter, Depends, Response, status

from .dependencies import get_current_customer, get_store
from .schemas import DepositRequest, WithdrawRequest
from ..customers import Customer
from ..ledger import LedgerStore


router = APIRouter()


@router.post("/deposit", status_code=status.HTTP_201_CREATED)
async def deposit(
    request: DepositRequest,
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Credit the customer's statement"""
    store.deposit(customer, request.amount, description=request.description)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/withdraw", status_code=status.HTTP_201_CREATED)
async def withdraw(
    request: WithdrawRequest,
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Debit the customer's statement; 400 when funds are insufficient"""
    store.withdraw(customer, request.amount, description=request.description)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/balance")
async def get_balance(
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Current balance of the customer named by the cpf header"""
    return {"cpf": customer.cpf, "balance": str(store.get_balance(customer))}
