from decimal import Decimal
from pathlib import Path
from typing import Literal, Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "Retail Ledger API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["local", "dev", "staging", "prod"] = "local"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"      # CSV or '*'
    LOG_LEVEL: str = "INFO"
    LOG_COLOR: bool = True

    # Storage
    DATA_DIR: Path = Path(".")
    CUSTOMERS_FILE: str = "customers.csv"
    INVOICES_FILE: str = "invoices.csv"
    INVENTORY_FILE: str = "inventory.csv"
    ATOMIC_WRITES: bool = True
    AUTOSAVE_ON_SHUTDOWN: bool = True
    STRICT_DECODE: bool = False

    # Ledger
    DEFAULT_TAX_RATE: Decimal = Decimal("0.065")
    POINT_VALUE: Decimal = Decimal("0.10")
    ACCRUAL_DIVISOR: Decimal = Decimal("10")

    # Identifiers
    ID_MAX_ATTEMPTS: int = 1000
    ID_SEED: Optional[int] = None
    CUSTOMER_ID_WIDTH: int = 5
    INVOICE_ID_WIDTH: int = 8
    INVOICE_ID_PREFIX: str = "INV-"

    # -------- validators --------
    @field_validator("DEFAULT_TAX_RATE")
    @classmethod
    def _rate_range(cls, v: Decimal, info):
        if v < 0 or v > 1:
            raise ValueError(f"{info.field_name} must be between 0 and 1")
        return v

    @field_validator("POINT_VALUE", "ACCRUAL_DIVISOR")
    @classmethod
    def _positive_decimal(cls, v: Decimal, info):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("ID_MAX_ATTEMPTS", "CUSTOMER_ID_WIDTH", "INVOICE_ID_WIDTH")
    @classmethod
    def _positive_int(cls, v: int, info):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level(cls, v: str) -> str:
        v = (v or "").strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def _normalize_prefix(cls, v: str) -> str:
        v = (v or "").strip().rstrip("/")
        return v if v.startswith("/") or v == "" else f"/{v}"

    # -------- cross-field checks --------
    @model_validator(mode="after")
    def _cross_checks(self):
        names = {self.CUSTOMERS_FILE, self.INVOICES_FILE, self.INVENTORY_FILE}
        if len(names) != 3:
            raise ValueError("CUSTOMERS_FILE, INVOICES_FILE and INVENTORY_FILE must differ")
        return self

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return ["*"] if self.CORS_ORIGINS.strip() == "*" else [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def CUSTOMERS_PATH(self) -> Path:
        return self.DATA_DIR / self.CUSTOMERS_FILE

    @property
    def INVOICES_PATH(self) -> Path:
        return self.DATA_DIR / self.INVOICES_FILE

    @property
    def INVENTORY_PATH(self) -> Path:
        return self.DATA_DIR / self.INVENTORY_FILE

settings = Settings()
