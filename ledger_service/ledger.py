"""
Ledger Store Module

Registry of customers and their statements. The store owns its storage
backend and is handed to request handlers explicitly; every mutation goes
through here so cpf uniqueness and the balance/statement invariant hold.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Callable, List, Optional, Union
import uuid

from .customers import Customer, Operation, OperationType, normalize_amount
from .exceptions import CustomerNotFound, DuplicateCustomer, EmptyStore, InsufficientFunds
from .logging_config import get_logger, log_action
from .statement import compute_balance, filter_by_date, parse_statement_date
from .storage import InMemoryStorage, StorageInterface


logger = get_logger("ledger.store")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LedgerStore:
    """
    In-memory customer ledger.

    Customers are kept in registration order. Lookups return copies loaded
    from storage; mutating methods save the customer back and return the
    updated copy.
    """

    def __init__(
        self,
        storage: Optional[StorageInterface] = None,
        clock: Callable[[], datetime] = _utc_now,
        amount_precision: int = 2
    ):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.clock = clock
        self.amount_precision = amount_precision
        self.table_name = "customers"

    # Lookups

    def find_by_cpf(self, cpf: Optional[str]) -> Optional[Customer]:
        """Get customer by cpf, or None"""
        if cpf is None:
            return None
        records = self.storage.find(self.table_name, {"cpf": cpf})
        if records:
            return Customer.from_dict(records[0])
        return None

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID, or None"""
        record = self.storage.load(self.table_name, customer_id)
        if record:
            return Customer.from_dict(record)
        return None

    def get_by_cpf(self, cpf: Optional[str]) -> Customer:
        customer = self.find_by_cpf(cpf)
        if customer is None:
            raise CustomerNotFound(details={"cpf": cpf})
        return customer

    def get_by_id(self, customer_id: str) -> Customer:
        customer = self.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(details={"id": customer_id})
        return customer

    def list_customers(self) -> List[Customer]:
        """
        All customers in registration order.

        Raises:
            EmptyStore: no customer has been registered
        """
        customers = self._all_customers()
        if not customers:
            raise EmptyStore()
        return customers

    def count(self) -> int:
        return self.storage.count(self.table_name)

    # Registration

    def create_customer(self, cpf: str, name: str) -> Customer:
        """
        Register a new customer with an empty statement and zero balance

        Args:
            cpf: Unique customer key
            name: Customer's name

        Returns:
            Created Customer object

        Raises:
            DuplicateCustomer: cpf is already registered
        """
        if self.find_by_cpf(cpf) is not None:
            raise DuplicateCustomer(details={"cpf": cpf})

        now = self.clock()
        customer = Customer(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            cpf=cpf,
            name=name
        )
        self._save_customer(customer)

        log_action(logger, "info", "Customer created",
                   action="customer_created", resource=cpf, customer_id=customer.id)
        return customer

    def rename(self, customer: Customer, name: str) -> Customer:
        return self.update_customer(customer, name=name)

    def update_customer(
        self,
        customer: Customer,
        name: Optional[str] = None,
        cpf: Optional[str] = None
    ) -> Customer:
        """
        Update a customer's name and/or cpf.

        Raises:
            CustomerNotFound: customer is no longer registered
            DuplicateCustomer: cpf belongs to another customer
        """
        current = self.get_by_id(customer.id)

        if cpf is not None and cpf != current.cpf:
            owner = self.find_by_cpf(cpf)
            if owner is not None and owner.id != current.id:
                raise DuplicateCustomer(details={"cpf": cpf})

        old_data = {"name": current.name, "cpf": current.cpf}
        if name is not None:
            current.name = name
        if cpf is not None:
            current.cpf = cpf
        current.updated_at = self.clock()
        self._save_customer(current)

        action = "customer_renamed" if cpf is None else "customer_updated"
        log_action(logger, "info", "Customer updated", action=action,
                   resource=current.cpf, customer_id=current.id,
                   extra={"old_data": old_data,
                          "new_data": {"name": current.name, "cpf": current.cpf}})
        return current

    def remove(self, customer: Customer) -> List[Customer]:
        """
        Remove exactly this customer.

        Returns:
            The remaining customers, possibly empty

        Raises:
            CustomerNotFound: customer is not registered
        """
        if not self.storage.delete(self.table_name, customer.id):
            raise CustomerNotFound(details={"id": customer.id})

        log_action(logger, "info", "Customer removed", action="customer_removed",
                   resource=customer.cpf, customer_id=customer.id)
        return self._all_customers()

    # Statement

    def append_operation(self, customer: Customer, operation: Operation) -> Customer:
        """
        Append an operation to the end of the customer's statement.

        A debit is rejected before anything changes when it exceeds the
        current balance.

        Raises:
            CustomerNotFound: customer is not registered
            InsufficientFunds: debit amount is greater than the balance
        """
        current = self.get_by_id(customer.id)
        balance = compute_balance(current.statement)

        if operation.type == OperationType.DEBIT and balance < operation.amount:
            log_action(logger, "warning", "Debit rejected: insufficient funds",
                       action="operation_rejected", resource=current.cpf,
                       customer_id=current.id,
                       extra={"balance": str(balance), "amount": str(operation.amount)})
            raise InsufficientFunds(balance=balance, amount=operation.amount)

        current.statement.append(operation)
        current.balance = balance + operation.signed_amount
        current.updated_at = operation.created_at
        self._save_customer(current)

        log_action(logger, "info", "Operation appended", action="operation_appended",
                   resource=current.cpf, customer_id=current.id,
                   extra={"type": operation.type.value, "amount": str(operation.amount),
                          "balance": str(current.balance)})
        return current

    def deposit(self, customer: Customer, amount: Union[Decimal, int, float, str],
                description: Optional[str] = None) -> Customer:
        """Record a credit on the customer's statement"""
        return self.append_operation(
            customer, self._new_operation(OperationType.CREDIT, amount, description)
        )

    def withdraw(self, customer: Customer, amount: Union[Decimal, int, float, str],
                 description: Optional[str] = None) -> Customer:
        """Record a debit on the customer's statement"""
        return self.append_operation(
            customer, self._new_operation(OperationType.DEBIT, amount, description)
        )

    def get_statement(self, customer: Customer) -> List[Operation]:
        return list(customer.statement)

    def get_statement_by_date(self, customer: Customer, date_value: Union[str, date, None]) -> List[Operation]:
        """
        Operations recorded on the given calendar day.

        Raises:
            MissingDate: no date given
            InvalidDate: date string does not parse
        """
        if isinstance(date_value, datetime):
            day = date_value.date()
        elif isinstance(date_value, date):
            day = date_value
        else:
            day = parse_statement_date(date_value)
        return filter_by_date(customer.statement, day)

    def get_balance(self, customer: Customer) -> Decimal:
        return compute_balance(customer.statement)

    # Internals

    def _new_operation(self, operation_type: OperationType, amount: Any,
                       description: Optional[str]) -> Operation:
        return Operation(
            type=operation_type,
            amount=normalize_amount(amount, self.amount_precision),
            created_at=self.clock(),
            description=description
        )

    def _all_customers(self) -> List[Customer]:
        return [Customer.from_dict(record) for record in self.storage.load_all(self.table_name)]

    def _save_customer(self, customer: Customer) -> None:
        self.storage.save(self.table_name, customer.id, customer.to_dict())
