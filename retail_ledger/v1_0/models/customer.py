from dataclasses import dataclass
from typing import NewType

CustomerId = NewType("CustomerId", str)

@dataclass(slots=True)
class Customer:
    id: CustomerId
    phone: str
    name: str
    email: str = ""
    points: int = 0
