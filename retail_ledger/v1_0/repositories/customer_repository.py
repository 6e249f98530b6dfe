from typing import Collection, List, Optional, Set

from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.helper.ids import IdGenerator
from retail_ledger.v1_0.models import Customer, CustomerId
from .base_repository import BaseRepository

class CustomerRepository(BaseRepository[Customer]):
    def __init__(self, store: LedgerStore, id_generator: IdGenerator):
        super().__init__(store, "customers", key="id")
        self.id_generator = id_generator

    def referenced_ids(self) -> Set[str]:
        """Customer ids still named by invoices, including removed and walk-in customers."""
        return {inv.customer_id for inv in self.store.invoices}

    def generate_id(self, reserved: Collection[str] = ()) -> CustomerId:
        """Fresh id not used by any live customer, any invoice, nor ``reserved``."""
        taken = self.ids() | self.referenced_ids() | set(reserved)
        return CustomerId(self.id_generator.generate(taken))

    def create_customer(
        self,
        phone: str,
        name: str,
        email: str = "",
        *,
        points: int = 0,
        register: bool = True,
    ) -> Customer:
        """
        Build a customer with a generated id. With ``register=False`` the
        customer is not added to the collection (walk-in invoices).
        """
        c = Customer(id=self.generate_id(), phone=phone, name=name, email=email, points=max(0, points))
        if register:
            self.add(c)
        return c

    def get_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.get_by_id(customer_id)

    def get_by_phone(self, phone: str, *, exclude: Optional[Customer] = None) -> Optional[Customer]:
        target = (phone or "").casefold()
        for c in self.items:
            if c is not exclude and c.phone.casefold() == target:
                return c
        return None

    def get_by_name(self, name: str) -> Optional[Customer]:
        target = (name or "").strip().casefold()
        for c in self.items:
            if c.name.strip().casefold() == target:
                return c
        return None

    def resolve_reference(self, token: str) -> Optional[CustomerId]:
        """Id of the customer a stored reference points at: exact id first, then phone."""
        by_id = self.get_by_id(token)
        if by_id is not None:
            return by_id.id
        by_phone = self.get_by_phone(token)
        return by_phone.id if by_phone is not None else None

    def update_customer(self, customer: Customer, data: dict) -> Customer:
        allowed_fields = {"name", "phone", "email", "points"}
        return self.update_fields(customer, data, allow=allowed_fields)

    def adjust_points(self, customer: Customer, delta: int) -> int:
        """Add ``delta`` (may be negative) and return the new balance, floored at 0."""
        customer.points = max(customer.points + int(delta), 0)
        return customer.points

    def set_points(self, customer: Customer, total: int) -> int:
        customer.points = max(int(total), 0)
        return customer.points

    def delete_customer(self, customer: Customer) -> bool:
        return self.delete(customer)

    def list_customers(self) -> List[Customer]:
        return self.list_all()
