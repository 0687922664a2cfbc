"""
Statement endpoints
"""

from typing import Optional
from fastapi import APIRouter, Depends

from .dependencies import get_current_customer, get_store
from .schemas import statement_payload
from ..customers import Customer
from ..ledger import LedgerStore


router = APIRouter()


@router.get("")
async def get_statement(
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Full statement of the customer named by the cpf header"""
    return statement_payload(store.get_statement(customer))


@router.get("/date")
async def get_statement_by_date(
    date: Optional[str] = None,
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Operations recorded on the calendar day given by the ``date`` query param"""
    return statement_payload(store.get_statement_by_date(customer, date))
