from dataclasses import asdict, is_dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Literal

CUSTOMER_FIELDS = ["id", "phone", "name", "email", "points"]
INVOICE_FIELDS = [
    "invoice_id", "customer_id", "customer_name", "customer_phone",
    "date", "sub_total", "tax", "total",
]
INVENTORY_FIELDS = ["index", "name", "unit_price", "sale_price", "qty_on_hand"]

NUMERIC_FIELDS: Dict[str, set[str]] = {
    "customers": {"points"},
    "invoices": {"sub_total", "tax", "total"},
    "inventory": {"unit_price", "sale_price", "qty_on_hand"},
}
FileFmt = Literal["csv", "xlsx"]
def _to_dict(obj: Any) -> Dict[str, Any]:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "model_dump"):
        return obj.model_dump()  # type: ignore[call-arg]
    if isinstance(obj, dict):
        return obj
    return {k: getattr(obj, k) for k in dir(obj) if not k.startswith("_")}

def _cast(v: Any, *, numeric: bool) -> Any:
    if v is None:
        return 0 if numeric else ""
    if isinstance(v, Decimal):
        # two places for reports; storage keeps full precision
        return float(v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
    return v

def rows_from_dtos(dtos: Iterable[Any], fields: List[str], *, entity: str) -> List[Dict]:
    nums = NUMERIC_FIELDS.get(entity, set())
    out: List[Dict] = []
    for obj in dtos:
        base = _to_dict(obj)
        row: Dict[str, Any] = {}
        for k in fields:
            row[k] = _cast(base.get(k), numeric=(k in nums))
        out.append(row)
    return out
