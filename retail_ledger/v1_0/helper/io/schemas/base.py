from dataclasses import dataclass
from typing import List, Optional

@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    type: Optional[str] = None  # "str" | "int" | "decimal"

@dataclass(frozen=True)
class RecordSchema:
    """Layout of one comma-delimited record file."""
    entity: str
    fields: List[FieldSpec]
    legacy_fields: Optional[List[FieldSpec]] = None

    @property
    def header(self) -> str:
        return ",".join(f.label for f in self.fields)

    @property
    def min_fields(self) -> int:
        if self.legacy_fields:
            return min(len(self.fields), len(self.legacy_fields))
        return len(self.fields)

    def layout_for(self, count: int) -> Optional[List[FieldSpec]]:
        """Pick the layout matching a field count; extra trailing fields are ignored."""
        if self.legacy_fields and count == len(self.legacy_fields):
            return self.legacy_fields
        if count >= len(self.fields):
            return self.fields
        return None
