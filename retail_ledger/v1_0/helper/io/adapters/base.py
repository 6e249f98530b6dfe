from typing import Any, Dict, List, Optional, Sequence

from retail_ledger.core.logger import logger
from retail_ledger.core.settings import settings
from retail_ledger.v1_0.helper.io.schemas import FieldSpec, RecordSchema
from ..normalizers import normalize_value
from ..readers import split_record
from ..validators import validate_fields

_ZERO_BY_TYPE = {"int": 0, "decimal": normalize_value("decimal", "0")}


class RecordAdapter:
    """Shared decode path: pick the layout, then parse each column by type."""

    schema: RecordSchema

    def __init__(self, strict: Optional[bool] = None) -> None:
        self.strict = settings.STRICT_DECODE if strict is None else strict

    def fields_of(self, line: str) -> Optional[List[str]]:
        values = split_record(line)
        return values if self.schema.layout_for(len(values)) is not None else None

    def parse(self, line: str, row: int = 0) -> Optional[Dict[str, Any]]:
        """
        Typed column values keyed by field name, or None to drop the line.

        Malformed numbers become zero; in strict mode they drop the record.
        """
        values = split_record(line)
        layout = self.schema.layout_for(len(values))
        if layout is None:
            logger.warning(
                "[%s] row %s dropped: %s fields, need at least %s",
                self.schema.entity, row, len(values), self.schema.min_fields,
            )
            return None

        errors = validate_fields(values, layout, row)
        if errors and self.strict:
            logger.warning("[%s] row %s dropped: %s", self.schema.entity, row, errors)
            return None
        for e in errors:
            logger.warning(
                "[%s] row %s field %s=%r not numeric, using 0",
                self.schema.entity, row, e["field"], e["value"],
            )

        return self._typed(values, layout)

    @staticmethod
    def _typed(values: Sequence[str], layout: Sequence[FieldSpec]) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f, raw in zip(layout, values):
            v = normalize_value(f.type, raw)
            out[f.name] = _ZERO_BY_TYPE[f.type] if v is None else v
        return out
