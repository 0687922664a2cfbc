"""
Account management endpoints

The header-keyed routes (``cpf`` header) and the id-keyed routes
(``/account/{customer_id}``) act on the same customers.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Response, status

from .dependencies import get_current_customer, get_store
from .schemas import (
    CreateAccountRequest,
    RenameAccountRequest,
    UpdateAccountRequest,
    CustomerModel,
    customers_payload
)
from ..customers import Customer
from ..ledger import LedgerStore


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_account(
    request: CreateAccountRequest,
    store: LedgerStore = Depends(get_store)
):
    """Register a new customer; 400 when the cpf is taken"""
    store.create_customer(cpf=request.cpf, name=request.name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("")
async def get_account(
    cpf: Optional[str] = None,
    store: LedgerStore = Depends(get_store)
):
    """One customer when ``cpf`` is given, otherwise every customer"""
    if cpf is None:
        return customers_payload(store.list_customers())
    return CustomerModel.from_customer(store.get_by_cpf(cpf)).model_dump()


@router.put("", status_code=status.HTTP_201_CREATED)
async def rename_account(
    request: RenameAccountRequest,
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Rename the customer named by the cpf header"""
    store.rename(customer, request.name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("")
async def delete_account(
    customer: Customer = Depends(get_current_customer),
    store: LedgerStore = Depends(get_store)
):
    """Delete the customer named by the cpf header and list who is left"""
    return customers_payload(store.remove(customer))


@router.put("/{customer_id}", status_code=status.HTTP_201_CREATED)
async def update_account(
    customer_id: str,
    request: UpdateAccountRequest,
    store: LedgerStore = Depends(get_store)
):
    """Update a customer's name and/or cpf by id"""
    customer = store.get_by_id(customer_id)
    store.update_customer(customer, name=request.name, cpf=request.cpf)
    return {"message": "Customer updated successfully"}


@router.delete("/{customer_id}", status_code=status.HTTP_201_CREATED)
async def delete_account_by_id(
    customer_id: str,
    store: LedgerStore = Depends(get_store)
):
    """Delete a customer by id"""
    store.remove(store.get_by_id(customer_id))
    return {"message": "Customer deleted successfully"}
