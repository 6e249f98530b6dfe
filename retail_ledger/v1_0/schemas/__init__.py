from .customer_schema import CustomerCreate, CustomerUpdate, PointsAdjust
from .invoice_schema import (
    InvoiceItemInput,
    InvoiceQuoteRequest,
    InvoiceCreate,
    TaxRateUpdate,
)
__all__ = [
    "CustomerCreate", "CustomerUpdate", "PointsAdjust",
    "InvoiceItemInput", "InvoiceQuoteRequest", "InvoiceCreate",
    "TaxRateUpdate",
]
