from typing import List

from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.helper.ids import IdGenerator
from retail_ledger.v1_0.models import Invoice, InvoiceId
from .base_repository import BaseRepository

class InvoiceRepository(BaseRepository[Invoice]):
    def __init__(self, store: LedgerStore, id_generator: IdGenerator):
        super().__init__(store, "invoices", key="invoice_id")
        self.id_generator = id_generator

    def generate_id(self) -> InvoiceId:
        return InvoiceId(self.id_generator.generate(self.ids()))

    def list_by_customer(self, customer_id: str) -> List[Invoice]:
        return [inv for inv in self.items if inv.customer_id == customer_id]

    def list_invoices(self) -> List[Invoice]:
        """All invoices in insertion (chronological) order."""
        return self.list_all()
