from .customer_DTO import CustomerDTO, PointsChangeDTO
from .inventory_DTO import InventoryItemDTO
from .invoice_DTO import (
    InvoiceLineDTO,
    QuoteDTO,
    LoyaltyRedemptionDTO,
    InvoiceDTO,
    InvoiceViewDTO,
    InvoiceReceiptDTO,
)
from .storage_DTO import LoadReportDTO, SaveReportDTO


__all__ = [
    "CustomerDTO", "PointsChangeDTO",
    "InventoryItemDTO",
    "InvoiceLineDTO", "QuoteDTO", "LoyaltyRedemptionDTO",
    "InvoiceDTO", "InvoiceViewDTO", "InvoiceReceiptDTO",
    "LoadReportDTO", "SaveReportDTO",
]
