from fastapi import Response

from retail_ledger.v1_0.helper.io import (
    CUSTOMER_FIELDS,
    INVENTORY_FIELDS,
    INVOICE_FIELDS,
    FileFmt,
    rows_from_dtos,
    write_csv,
    write_xlsx,
)
from retail_ledger.v1_0.services.customer_service import CustomerService
from retail_ledger.v1_0.services.inventory_service import InventoryService
from retail_ledger.v1_0.services.invoice_service import InvoiceService


class ExportService:
    """Export customers, invoices and inventory to CSV or XLSX reports."""

    def __init__(
        self,
        customer_service: CustomerService,
        invoice_service: InvoiceService,
        inventory_service: InventoryService,
    ) -> None:
        self.cs = customer_service
        self.ivs = invoice_service
        self.inv = inventory_service

    @staticmethod
    def _render(rows, fields, fname: str, fmt: FileFmt) -> Response:
        return write_csv(rows, fields, fname) if fmt == "csv" else write_xlsx(rows, fields, fname)

    def export_customers(self, fmt: FileFmt) -> Response:
        """Export all customers.

        Args:
            fmt: Output format, "csv" or "xlsx".

        Returns:
            FastAPI Response with the generated file.
        """
        rows = rows_from_dtos(self.cs.list_all(), CUSTOMER_FIELDS, entity="customers")
        return self._render(rows, CUSTOMER_FIELDS, f"customers.{fmt}", fmt)

    def export_invoices(self, fmt: FileFmt) -> Response:
        """Export all invoices joined to their customers.

        Unlinked invoices keep their stored customer id with an unknown name.
        """
        rows = rows_from_dtos(self.ivs.list_views(), INVOICE_FIELDS, entity="invoices")
        return self._render(rows, INVOICE_FIELDS, f"invoices.{fmt}", fmt)

    def export_inventory(self, fmt: FileFmt) -> Response:
        rows = rows_from_dtos(self.inv.list_all(), INVENTORY_FIELDS, entity="inventory")
        return self._render(rows, INVENTORY_FIELDS, f"inventory.{fmt}", fmt)
