"""
Request dependencies: the ledger store and the current customer
"""

from typing import Optional
from fastapi import Depends, Header, Request

from ..customers import Customer
from ..ledger import LedgerStore


def get_store(request: Request) -> LedgerStore:
    """The store this application instance was created with"""
    return request.app.state.store


def get_current_customer(
    cpf: Optional[str] = Header(None),
    store: LedgerStore = Depends(get_store)
) -> Customer:
    """Resolve the customer named by the ``cpf`` header; 404 when unknown or absent"""
    return store.get_by_cpf(cpf)
