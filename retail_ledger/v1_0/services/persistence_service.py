from pathlib import Path
from typing import List, Optional, Sequence, Set

from retail_ledger.core.logger import logger
from retail_ledger.core.settings import settings
from retail_ledger.v1_0.entities import LoadReportDTO, SaveReportDTO
from retail_ledger.v1_0.helper.io import (
    CustomerAdapter,
    InventoryAdapter,
    InvoiceAdapter,
    RecordSchema,
    read_data_lines,
    write_data_lines,
)
from retail_ledger.v1_0.repositories import (
    CustomerRepository,
    InventoryRepository,
    InvoiceRepository,
)

class PersistenceService:
    """
    Whole-collection load/save of customers, invoices and inventory.

    Nothing here raises for I/O trouble: a file that cannot be read loads as
    an empty collection, and a file that cannot be written is listed in the
    returned report.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        invoice_repository: InvoiceRepository,
        inventory_repository: InventoryRepository,
        customers_path: Path = settings.CUSTOMERS_PATH,
        invoices_path: Path = settings.INVOICES_PATH,
        inventory_path: Path = settings.INVENTORY_PATH,
        atomic: bool = settings.ATOMIC_WRITES,
        strict: Optional[bool] = None,
    ) -> None:
        self.customer_repository = customer_repository
        self.invoice_repository = invoice_repository
        self.inventory_repository = inventory_repository
        self.customers_path = Path(customers_path)
        self.invoices_path = Path(invoices_path)
        self.inventory_path = Path(inventory_path)
        self.atomic = atomic
        self.customer_adapter = CustomerAdapter(strict=strict)
        self.invoice_adapter = InvoiceAdapter(strict=strict)
        self.inventory_adapter = InventoryAdapter(strict=strict)

    # ---------------------------------------------------------------- load

    def _read(self, path: Path, schema: RecordSchema, report: LoadReportDTO) -> List[str]:
        try:
            return read_data_lines(path, header=schema.header)
        except FileNotFoundError:
            logger.info("[PersistenceService] %s not found, starting with no %s", path, schema.entity)
            return []
        except OSError as e:
            logger.error("[PersistenceService] Read %s failed: %s", path, e, exc_info=True)
            report.errors[schema.entity] = str(e)
            return []

    def _invoice_references(self) -> Set[str]:
        """Raw customer reference column of the invoices file; empty if unreadable."""
        try:
            lines = read_data_lines(self.invoices_path, header=self.invoice_adapter.schema.header)
        except OSError:
            return set()
        refs: Set[str] = set()
        for line in lines:
            values = self.invoice_adapter.fields_of(line)
            if values is not None:
                refs.add(values[1].strip())
        return refs

    def load_inventory(self, report: Optional[LoadReportDTO] = None) -> int:
        report = report or LoadReportDTO()
        lines = self._read(self.inventory_path, self.inventory_adapter.schema, report)
        items = []
        for row, line in enumerate(lines, start=1):
            it = self.inventory_adapter.decode(line, row=row)
            if it is None:
                report.dropped_lines += 1
                continue
            items.append(it)
        report.inventory = self.inventory_repository.replace_all(items)
        return report.inventory

    def load_customers(self, report: Optional[LoadReportDTO] = None) -> int:
        """
        Replace the registry with the customers file.

        Ids stored in the file, and customer references in the invoices
        file, are reserved up front so ids minted for legacy (id-less) lines
        never collide with a later stored id or re-link an orphaned invoice.
        A stored id seen twice keeps its first owner; the later line gets a
        fresh id.
        """
        report = report or LoadReportDTO()
        lines = self._read(self.customers_path, self.customer_adapter.schema, report)
        reserved: Set[str] = {
            sid for sid in (self.customer_adapter.stored_id(ln) for ln in lines) if sid is not None
        }
        reserved |= self._invoice_references()

        self.customer_repository.replace_all([])
        for row, line in enumerate(lines, start=1):
            c = self.customer_adapter.decode(
                line,
                generate_id=lambda: self.customer_repository.generate_id(reserved),
                row=row,
            )
            if c is None:
                report.dropped_lines += 1
                continue
            if self.customer_repository.get_by_id(c.id) is not None:
                duplicate = c.id
                c.id = self.customer_repository.generate_id(reserved)
                logger.warning(
                    "[PersistenceService] row %s duplicates customer ID=%s, re-assigned ID=%s",
                    row, duplicate, c.id,
                )
            self.customer_repository.add(c)

        report.customers = self.customer_repository.count()
        return report.customers

    def load_invoices(self, report: Optional[LoadReportDTO] = None) -> int:
        """Replace the ledger with the invoices file. Load customers first."""
        report = report or LoadReportDTO()
        lines = self._read(self.invoices_path, self.invoice_adapter.schema, report)
        invoices = []
        for row, line in enumerate(lines, start=1):
            inv = self.invoice_adapter.decode(
                line,
                resolve_customer=self.customer_repository.resolve_reference,
                row=row,
            )
            if inv is None:
                report.dropped_lines += 1
                continue
            invoices.append(inv)
        report.invoices = self.invoice_repository.replace_all(invoices)
        return report.invoices

    def load_all(self) -> LoadReportDTO:
        report = LoadReportDTO()
        self.load_inventory(report)
        self.load_customers(report)
        self.load_invoices(report)
        logger.info(
            "[PersistenceService] Loaded customers=%s invoices=%s inventory=%s dropped=%s",
            report.customers, report.invoices, report.inventory, report.dropped_lines,
        )
        return report

    # ---------------------------------------------------------------- save

    def _write(self, path: Path, header: str, lines: Sequence[str], entity: str, report: SaveReportDTO) -> None:
        try:
            write_data_lines(path, header, lines, atomic=self.atomic)
            report.written.append(entity)
        except OSError as e:
            logger.error("[PersistenceService] Write %s failed: %s", path, e, exc_info=True)
            report.errors[entity] = str(e)

    def save_inventory(self, report: Optional[SaveReportDTO] = None) -> SaveReportDTO:
        report = report or SaveReportDTO()
        a = self.inventory_adapter
        lines = [a.encode(it) for it in self.inventory_repository.list_all()]
        self._write(self.inventory_path, a.schema.header, lines, a.schema.entity, report)
        return report

    def save_customers(self, report: Optional[SaveReportDTO] = None) -> SaveReportDTO:
        report = report or SaveReportDTO()
        a = self.customer_adapter
        lines = [a.encode(c) for c in self.customer_repository.list_customers()]
        self._write(self.customers_path, a.schema.header, lines, a.schema.entity, report)
        return report

    def save_invoices(self, report: Optional[SaveReportDTO] = None) -> SaveReportDTO:
        report = report or SaveReportDTO()
        a = self.invoice_adapter
        lines = [a.encode(inv) for inv in self.invoice_repository.list_invoices()]
        self._write(self.invoices_path, a.schema.header, lines, a.schema.entity, report)
        return report

    def save_all(self) -> SaveReportDTO:
        report = SaveReportDTO()
        self.save_inventory(report)
        self.save_customers(report)
        self.save_invoices(report)
        if report.ok:
            logger.info("[PersistenceService] Saved %s", ", ".join(report.written))
        else:
            logger.error("[PersistenceService] Save incomplete: %s", report.errors)
        return report
