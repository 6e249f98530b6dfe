from dataclasses import dataclass

@dataclass(slots=True)
class CustomerDTO:
    id: str
    phone: str
    name: str
    email: str
    points: int


@dataclass(slots=True)
class PointsChangeDTO:
    """Result of a manual loyalty adjustment."""
    customer_id: str
    previous: int
    current: int

    @property
    def applied(self) -> int:
        return self.current - self.previous
