from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from retail_ledger.core.errors import (
    CustomerNotFoundError,
    DuplicatePhoneError,
    InsufficientStockError,
    InvalidQuantityError,
    InvalidTaxRateError,
    InventoryItemNotFoundError,
)
from retail_ledger.core.logger import logger
from retail_ledger.core.settings import settings
from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.entities import (
    InvoiceDTO,
    InvoiceLineDTO,
    InvoiceReceiptDTO,
    InvoiceViewDTO,
    LoyaltyRedemptionDTO,
    QuoteDTO,
)
from retail_ledger.v1_0.helper import pricing
from retail_ledger.v1_0.helper.io.validators import validate_date_mdy
from retail_ledger.v1_0.models import Customer, Invoice
from retail_ledger.v1_0.repositories import (
    CustomerRepository,
    InventoryRepository,
    InvoiceRepository,
)
from retail_ledger.v1_0.schemas import InvoiceCreate, InvoiceItemInput

UNKNOWN_CUSTOMER = "(unknown)"
UNLINKED_PHONE = "(unlinked)"
WALK_IN_PLACEHOLDER = "N/A"

class InvoiceService:
    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        customer_repository: CustomerRepository,
        inventory_repository: InventoryRepository,
        store: LedgerStore,
        point_value: Decimal = settings.POINT_VALUE,
        accrual_divisor: Decimal = settings.ACCRUAL_DIVISOR,
    ) -> None:
        self.invoice_repository = invoice_repository
        self.customer_repository = customer_repository
        self.inventory_repository = inventory_repository
        self.store = store
        self.point_value = point_value
        self.accrual_divisor = accrual_divisor

    # ------------------------------------------------------------------ tax

    @property
    def tax_rate(self) -> Decimal:
        return self.store.tax_rate

    def set_tax_rate(self, percent: Decimal) -> Decimal:
        """
        Change the rate used by every invoice quoted from now on.

        Args:
            percent: New rate as a percentage, 0 to 100 (7.5 means 7.5%).

        Returns:
            The stored fractional rate.

        Raises:
            InvalidTaxRateError: If the percentage is out of range.
        """
        percent = Decimal(percent)
        if not percent.is_finite() or percent < 0 or percent > 100:
            raise InvalidTaxRateError("Tax rate must be between 0% and 100%.")
        previous = self.store.tax_rate
        self.store.tax_rate = percent / Decimal(100)
        logger.info("[InvoiceService] Tax rate %s -> %s", previous, self.store.tax_rate)
        return self.store.tax_rate

    # -------------------------------------------------------------- quoting

    def quote(
        self,
        lines: Sequence[Tuple[Decimal, int]],
        tax_rate: Optional[Decimal] = None,
    ) -> QuoteDTO:
        """Price ``(unit_price, quantity)`` lines at ``tax_rate`` (default: current rate)."""
        rate = self.tax_rate if tax_rate is None else Decimal(tax_rate)
        sub_total, tax, total = pricing.quote(lines, rate)
        return QuoteDTO(sub_total=sub_total, tax=tax, total=total, tax_rate=rate)

    def _price_lines(self, items: Sequence[InvoiceItemInput]) -> List[InvoiceLineDTO]:
        """
        Turn requested catalog lines into priced invoice lines.

        Raises:
            InvalidQuantityError: If a quantity is not positive.
            InventoryItemNotFoundError: If an item index is unknown.
        """
        lines: List[InvoiceLineDTO] = []
        for idx, raw in enumerate(items, start=1):
            if raw.quantity <= 0:
                raise InvalidQuantityError(f"Item #{idx}: quantity must be > 0")

            item = self.inventory_repository.get_by_index(raw.item_index)
            if not item:
                raise InventoryItemNotFoundError(raw.item_index)

            lines.append(
                InvoiceLineDTO(
                    item_index=raw.item_index,
                    name=item.name,
                    unit_price=item.sale_price,
                    quantity=raw.quantity,
                    total=item.sale_price * raw.quantity,
                )
            )
        return lines

    def _check_stock(self, lines: Sequence[InvoiceLineDTO]) -> None:
        """Quantities of repeated items are checked together against on-hand stock."""
        requested: Dict[int, int] = {}
        for ln in lines:
            item = self.inventory_repository.get_by_index(ln.item_index)
            requested[ln.item_index] = requested.get(ln.item_index, 0) + ln.quantity
            if requested[ln.item_index] > item.qty_on_hand:
                raise InsufficientStockError(item.name, item.qty_on_hand, requested[ln.item_index])

    def quote_items(self, items: Sequence[InvoiceItemInput]) -> QuoteDTO:
        """
        Validate catalog lines against stock and quote them at the current rate.

        Raises:
            InvalidQuantityError, InventoryItemNotFoundError, InsufficientStockError.
        """
        lines = self._price_lines(items)
        self._check_stock(lines)
        q = self.quote([(ln.unit_price, ln.quantity) for ln in lines])
        q.lines = lines
        return q

    # -------------------------------------------------------------- loyalty

    def max_redeemable_points(self, customer_id: str, total: Decimal) -> int:
        c = self.customer_repository.get_customer_by_id(customer_id)
        if not c:
            raise CustomerNotFoundError(customer_id)
        return pricing.max_redeemable_points(c.points, Decimal(total), self.point_value)

    def _redeem(self, customer: Customer, total: Decimal, requested: int) -> LoyaltyRedemptionDTO:
        discount, used, new_total = pricing.redeem(customer.points, total, requested, self.point_value)
        if used:
            self.customer_repository.adjust_points(customer, -used)
            logger.info(
                "[InvoiceService] Customer ID=%s redeemed %s points for %s",
                customer.id, used, discount,
            )
        return LoyaltyRedemptionDTO(discount=discount, points_used=used, new_total=new_total)

    def apply_loyalty_discount(
        self, customer_id: str, total: Decimal, requested_points: int
    ) -> LoyaltyRedemptionDTO:
        """
        Spend loyalty points against ``total``.

        The request is clamped to what the customer holds and to what the
        total can absorb. Points are deducted immediately; nothing in the
        ledger refunds them.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
        """
        c = self.customer_repository.get_customer_by_id(customer_id)
        if not c:
            raise CustomerNotFoundError(customer_id)
        return self._redeem(c, Decimal(total), requested_points)

    # ------------------------------------------------------------ customers

    def resolve_customer(self, payload: InvoiceCreate) -> Customer:
        """
        Customer an invoice is billed to.

        By id when given; otherwise by name. An unknown name becomes a new
        registered customer when a phone is supplied and registration is
        requested, or else a walk-in customer that is never stored.

        Raises:
            CustomerNotFoundError: If ``customer_id`` is given but unknown.
            DuplicatePhoneError: If registering would reuse a phone.
        """
        if payload.customer_id:
            c = self.customer_repository.get_customer_by_id(payload.customer_id)
            if not c:
                raise CustomerNotFoundError(payload.customer_id)
            return c

        name = payload.customer_name or ""
        c = self.customer_repository.get_by_name(name)
        if c:
            return c

        if payload.register_customer and payload.customer_phone:
            if self.customer_repository.get_by_phone(payload.customer_phone):
                raise DuplicatePhoneError(payload.customer_phone)
            c = self.customer_repository.create_customer(
                payload.customer_phone, name, payload.customer_email
            )
            logger.info("[InvoiceService] Registered customer '%s' ID=%s", name, c.id)
            return c

        logger.info("[InvoiceService] Walk-in customer '%s' (not registered)", name)
        return self.customer_repository.create_customer(
            WALK_IN_PLACEHOLDER, name, WALK_IN_PLACEHOLDER, register=False
        )

    # ------------------------------------------------------------- finalize

    @staticmethod
    def to_dto(inv: Invoice) -> InvoiceDTO:
        return InvoiceDTO(
            invoice_id=inv.invoice_id,
            customer_id=inv.customer_id,
            date=inv.date,
            sub_total=inv.sub_total,
            tax=inv.tax,
            total=inv.total,
        )

    def finalize(
        self,
        customer: Customer,
        items: Sequence[InvoiceItemInput],
        date: str,
        redeemed_points: int = 0,
        tax_rate: Optional[Decimal] = None,
    ) -> InvoiceReceiptDTO:
        """
        Close an open invoice: price it, redeem points, store it, accrue points.

        Operations:
        - Validate the date and price every line from the catalog.
        - Quote at ``tax_rate`` (default: the current ledger rate).
        - Redeem up to ``redeemed_points`` against the total.
        - Append the invoice under a fresh id.
        - Credit one point per accrual unit of the post-discount total.

        Stock is neither checked nor touched here; quantities are checked
        when quoting (``quote_items``) and removed by ``deduct_stock``.

        Returns:
            InvoiceReceiptDTO with the stored invoice and loyalty movements.

        Raises:
            InvalidDateError, InvalidQuantityError, InventoryItemNotFoundError.
        """
        date = validate_date_mdy(date)
        lines = self._price_lines(items)
        q = self.quote([(ln.unit_price, ln.quantity) for ln in lines], tax_rate)

        redemption = self._redeem(customer, q.total, redeemed_points)

        inv = Invoice(
            invoice_id=self.invoice_repository.generate_id(),
            customer_id=customer.id,
            date=date,
            sub_total=q.sub_total,
            tax=q.tax,
            total=redemption.new_total,
        )
        self.invoice_repository.add(inv)

        earned = pricing.accrued_points(inv.total, self.accrual_divisor)
        self.customer_repository.adjust_points(customer, earned)
        logger.info(
            "[InvoiceService] Invoice %s customer=%s total=%s earned=%s",
            inv.invoice_id, customer.id, inv.total, earned,
        )

        return InvoiceReceiptDTO(
            invoice=self.to_dto(inv),
            customer_name=customer.name,
            items_count=len(lines),
            points_used=redemption.points_used,
            discount=redemption.discount,
            points_earned=earned,
            points_balance=customer.points,
            stock_deducted=False,
        )

    def deduct_stock(self, items: Sequence[InvoiceItemInput]) -> None:
        """
        Take sold quantities off the catalog. Opt-in and separate from
        ``finalize``; no stock check is repeated here.
        """
        for it in items:
            if self.inventory_repository.decrease_quantity(it.item_index, it.quantity) is None:
                logger.warning("[InvoiceService] deduct_stock: unknown item #%s", it.item_index)

    def checkout(self, payload: InvoiceCreate) -> InvoiceReceiptDTO:
        """Quote against stock, resolve the customer, finalize, then deduct stock if asked."""
        self.quote_items(payload.items)
        customer = self.resolve_customer(payload)
        receipt = self.finalize(
            customer,
            payload.items,
            payload.date,
            redeemed_points=payload.redeem_points,
        )
        if payload.deduct_stock:
            self.deduct_stock(payload.items)
            receipt.stock_deducted = True
        return receipt

    # -------------------------------------------------------------- listing

    def list_all(self) -> List[InvoiceDTO]:
        return [self.to_dto(inv) for inv in self.invoice_repository.list_invoices()]

    def find_by_customer(self, customer_id: str) -> List[InvoiceDTO]:
        return [self.to_dto(inv) for inv in self.invoice_repository.list_by_customer(customer_id)]

    def list_views(self) -> List[InvoiceViewDTO]:
        """Invoices with customer name/phone; unmatched references show as unknown."""
        out: List[InvoiceViewDTO] = []
        for inv in self.invoice_repository.list_invoices():
            c = self.customer_repository.get_customer_by_id(inv.customer_id)
            out.append(
                InvoiceViewDTO(
                    invoice_id=inv.invoice_id,
                    customer_id=inv.customer_id,
                    customer_name=c.name if c else UNKNOWN_CUSTOMER,
                    customer_phone=c.phone if c else UNLINKED_PHONE,
                    date=inv.date,
                    sub_total=inv.sub_total,
                    tax=inv.tax,
                    total=inv.total,
                    linked=c is not None,
                )
            )
        return out
