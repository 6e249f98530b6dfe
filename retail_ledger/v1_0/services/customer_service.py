from typing import List, Optional

from retail_ledger.core.errors import CustomerNotFoundError, DuplicatePhoneError, ValidationError
from retail_ledger.core.logger import logger
from retail_ledger.v1_0.entities import CustomerDTO, PointsChangeDTO
from retail_ledger.v1_0.models import Customer
from retail_ledger.v1_0.repositories import CustomerRepository, InvoiceRepository
from retail_ledger.v1_0.schemas import CustomerCreate, CustomerUpdate, PointsAdjust

class CustomerService:
    def __init__(
            self,
            customer_repository: CustomerRepository,
            invoice_repository: InvoiceRepository) -> None:
        self.customer_repository = customer_repository
        self.invoice_repository = invoice_repository

    def _require(self, customer_id: str) -> Customer:
        """
        Ensure a customer exists or raise.

        Args:
            customer_id: Identifier of the customer to fetch.

        Returns:
            The live customer record.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
        """
        c = self.customer_repository.get_customer_by_id(customer_id)
        if not c:
            raise CustomerNotFoundError(customer_id)
        return c

    @staticmethod
    def to_dto(c: Customer) -> CustomerDTO:
        return CustomerDTO(
            id=c.id,
            phone=c.phone,
            name=c.name,
            email=c.email,
            points=c.points,
        )

    def create(self, payload: CustomerCreate) -> CustomerDTO:
        """
        Register a new customer with a generated id and zero points.

        Args:
            payload: CustomerCreate with phone, name and email.

        Returns:
            CustomerDTO representing the created customer.

        Raises:
            DuplicatePhoneError: If another customer already uses the phone
                (compared case-insensitively).
        """
        logger.info("[CustomerService] Creating customer: %s", payload.model_dump())
        if self.customer_repository.get_by_phone(payload.phone):
            raise DuplicatePhoneError(payload.phone)

        c = self.customer_repository.create_customer(payload.phone, payload.name, payload.email)
        logger.info("[CustomerService] Customer created ID=%s", c.id)
        return self.to_dto(c)

    def get(self, customer_id: str) -> CustomerDTO:
        logger.debug(f"[CustomerService] Get customer ID={customer_id}")
        return self.to_dto(self._require(customer_id))

    def find_by_phone(self, phone: str) -> Optional[CustomerDTO]:
        c = self.customer_repository.get_by_phone(phone)
        return self.to_dto(c) if c else None

    def find_by_name(self, name: str) -> Optional[CustomerDTO]:
        c = self.customer_repository.get_by_name(name)
        return self.to_dto(c) if c else None

    def list_all(self) -> List[CustomerDTO]:
        return [self.to_dto(c) for c in self.customer_repository.list_customers()]

    def edit(self, customer_id: str, payload: CustomerUpdate) -> CustomerDTO:
        """
        Update name, phone, email and/or the absolute points balance.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
            DuplicatePhoneError: If the new phone belongs to another customer.
        """
        c = self._require(customer_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)
        logger.info("[CustomerService] Editing customer ID=%s: %s", customer_id, data)

        new_phone = data.get("phone")
        if new_phone is not None:
            if not new_phone:
                raise ValidationError("Phone cannot be empty.")
            if self.customer_repository.get_by_phone(new_phone, exclude=c):
                raise DuplicatePhoneError(new_phone)

        self.customer_repository.update_customer(c, data)
        return self.to_dto(c)

    def remove(self, customer_id: str) -> None:
        """
        Delete a customer. Invoices are kept and their reference dangles.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
        """
        c = self._require(customer_id)
        orphaned = len(self.invoice_repository.list_by_customer(c.id))
        self.customer_repository.delete_customer(c)
        logger.info(
            "[CustomerService] Customer removed ID=%s (%s invoices now unlinked)",
            customer_id, orphaned,
        )

    def adjust_points(self, customer_id: str, delta: int) -> PointsChangeDTO:
        """Add or subtract points; the balance never drops below zero."""
        c = self._require(customer_id)
        previous = c.points
        current = self.customer_repository.adjust_points(c, delta)
        logger.info("[CustomerService] Points ID=%s %s -> %s", c.id, previous, current)
        return PointsChangeDTO(customer_id=c.id, previous=previous, current=current)

    def set_points(self, customer_id: str, total: int) -> PointsChangeDTO:
        c = self._require(customer_id)
        previous = c.points
        current = self.customer_repository.set_points(c, total)
        logger.info("[CustomerService] Points ID=%s set %s -> %s", c.id, previous, current)
        return PointsChangeDTO(customer_id=c.id, previous=previous, current=current)

    def change_points(self, customer_id: str, payload: PointsAdjust) -> PointsChangeDTO:
        if payload.mode == "set":
            return self.set_points(customer_id, payload.amount)
        return self.adjust_points(customer_id, payload.delta)
