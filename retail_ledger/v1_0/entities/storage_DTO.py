from dataclasses import dataclass, field
from typing import Dict, List

@dataclass(slots=True)
class LoadReportDTO:
    customers: int = 0
    invoices: int = 0
    inventory: int = 0
    dropped_lines: int = 0
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class SaveReportDTO:
    written: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
