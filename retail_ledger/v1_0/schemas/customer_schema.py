from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from retail_ledger.v1_0.helper.io.normalizers import clean

class CustomerCreate(BaseModel):
    """Input schema to register a customer."""
    phone: str = Field(..., min_length=1, max_length=30)
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field("", max_length=120)

    @field_validator("phone", "name", "email")
    @classmethod
    def _clean(cls, v: str) -> str:
        return clean(v)

    @field_validator("phone", "name")
    @classmethod
    def _required(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name} is required")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "phone": "555-0100",
                "name": "Jane Doe",
                "email": "jane@example.com",
            }
        }
    }

class CustomerUpdate(BaseModel):
    """Partial update schema for a customer."""
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[str] = Field(None, max_length=120)
    points: Optional[int] = Field(None, ge=0)

    @field_validator("name", "phone", "email")
    @classmethod
    def _clean(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else clean(v)

    @field_validator("name", "phone")
    @classmethod
    def _not_blank(cls, v: Optional[str], info) -> Optional[str]:
        if v is not None and not v:
            raise ValueError(f"{info.field_name} cannot be blank")
        return v

class PointsAdjust(BaseModel):
    """Manual loyalty change: add, subtract, or set an absolute balance."""
    mode: Literal["add", "subtract", "set"] = "add"
    amount: int = Field(..., ge=0)

    @property
    def delta(self) -> int:
        return -self.amount if self.mode == "subtract" else self.amount
