from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from retail_ledger.core.errors import InvalidDateError
from retail_ledger.v1_0.helper.io.normalizers import clean
from retail_ledger.v1_0.helper.io.validators import validate_date_mdy

class InvoiceItemInput(BaseModel):
    item_index: int = Field(..., ge=0)
    quantity: int = Field(..., ge=1)

class InvoiceQuoteRequest(BaseModel):
    items: List[InvoiceItemInput] = Field(..., min_length=1)

class InvoiceCreate(BaseModel):
    """
    Everything needed to finalize an invoice in one request.

    The customer is picked by ``customer_id`` or, failing that, by
    ``customer_name``. An unknown name is registered when a phone is given
    and ``register_customer`` is set; otherwise the sale is a walk-in.
    """
    customer_id: Optional[str] = None
    customer_name: Optional[str] = Field(None, max_length=120)
    customer_phone: Optional[str] = Field(None, max_length=30)
    customer_email: str = Field("", max_length=120)
    register_customer: bool = True
    date: str
    items: List[InvoiceItemInput] = Field(..., min_length=1)
    redeem_points: int = Field(0, ge=0)
    deduct_stock: bool = False

    @field_validator("customer_name", "customer_phone", "customer_email")
    @classmethod
    def _clean(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else clean(v)

    @field_validator("date")
    @classmethod
    def _date(cls, v: str) -> str:
        try:
            return validate_date_mdy(v)
        except InvalidDateError as e:
            raise ValueError(e.message)

    @model_validator(mode="after")
    def _customer_given(self):
        if not self.customer_id and not self.customer_name:
            raise ValueError("customer_id or customer_name is required")
        return self

class TaxRateUpdate(BaseModel):
    percent: Decimal = Field(..., ge=0, le=100)
