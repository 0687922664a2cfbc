"""
Customer listing endpoint
"""

from fastapi import APIRouter, Depends

from .dependencies import get_store
from .schemas import customers_payload
from ..ledger import LedgerStore


router = APIRouter()


@router.get("")
async def list_customers(store: LedgerStore = Depends(get_store)):
    """List every registered customer; 404 when there are none"""
    return customers_payload(store.list_customers())
