from decimal import Decimal, InvalidOperation
from typing import Any

SEPARATOR = ","
SEPARATOR_SUBSTITUTE = ";"

def sanitize_text(v: Any) -> str:
    """Free text safe for a comma-delimited record. Lossy: commas become semicolons."""
    if v is None: return ""
    return str(v).replace(SEPARATOR, SEPARATOR_SUBSTITUTE)

def clean(v: Any) -> str:
    """Trimmed and sanitized operator input."""
    return sanitize_text(v).strip()

def to_decimal(v: Any) -> Decimal | None:
    if v is None: return None
    if isinstance(v, Decimal): return v if v.is_finite() else None
    if isinstance(v, (int, float)): return Decimal(str(v))
    s = str(v).strip()
    if s == "": return None
    try:
        d = Decimal(s)
    except (InvalidOperation, ValueError):
        return None
    return d if d.is_finite() else None

def to_int(v: Any) -> int | None:
    d = to_decimal(v)
    if d is None: return None
    i = int(d)
    return i if i == d else None

def format_decimal(d: Decimal) -> str:
    """Plain positional text of the stored value, no exponent and no fixed scale."""
    text = format(d.normalize(), "f")
    return "0" if text in ("-0", "") else text

def normalize_value(type_: str | None, v: Any) -> Any:
    if type_ == "int": return to_int(v)
    if type_ == "decimal": return to_decimal(v)
    return "" if v is None else str(v)
