from __future__ import annotations
import re
from datetime import datetime
from typing import Any, Dict, List, Sequence
from retail_ledger.core.errors import InvalidDateError
from retail_ledger.v1_0.helper.io.schemas import FieldSpec
from .normalizers import to_decimal, to_int

DATE_FORMAT = "%m-%d-%Y"
_DATE_RE = re.compile(r"\d{2}-\d{2}-\d{4}")

def _err(row: int, field: str, code: str, message: str, value: Any = None, level: str = "warning") -> Dict[str, Any]:
    return {"row": row, "field": field, "code": code, "message": message, "value": value, "level": level}

def validate_fields(values: Sequence[str], layout: Sequence[FieldSpec], row: int = 0) -> List[Dict[str, Any]]:
    """Report numeric columns that do not parse. Text columns always pass."""
    errors: List[Dict[str, Any]] = []
    for f, raw in zip(layout, values):
        if f.type == "int" and to_int(raw) is None:
            errors.append(_err(row, f.name, "type", "Must be an integer", raw))
        elif f.type == "decimal" and to_decimal(raw) is None:
            errors.append(_err(row, f.name, "type", "Must be numeric", raw))
    return errors

def validate_date_mdy(value: str) -> str:
    """Return the trimmed ``MM-DD-YYYY`` date or raise ``InvalidDateError``."""
    s = (value or "").strip()
    if not _DATE_RE.fullmatch(s):
        raise InvalidDateError(s)
    try:
        datetime.strptime(s, DATE_FORMAT)
    except ValueError:
        raise InvalidDateError(s)
    return s
