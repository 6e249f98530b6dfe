"""
Ledger error taxonomy.

Services raise these synchronously; the HTTP layer maps them to status codes.
Parse and resource problems are recovered locally and never surface here.
"""


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    status_code = 400


class DuplicatePhoneError(ValidationError):
    status_code = 409

    def __init__(self, phone: str) -> None:
        super().__init__(f"A customer with phone '{phone}' already exists.")
        self.phone = phone


class InvalidQuantityError(ValidationError):
    pass


class InsufficientStockError(ValidationError):
    def __init__(self, item_name: str, on_hand: int, requested: int) -> None:
        super().__init__(f"Not enough stock for '{item_name}'. On hand: {on_hand}, requested: {requested}.")
        self.item_name = item_name
        self.on_hand = on_hand
        self.requested = requested


class InvalidDateError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date '{value}'. Use MM-DD-YYYY (e.g., 10-24-2025).")
        self.value = value


class InvalidTaxRateError(ValidationError):
    pass


class NotFoundError(LedgerError):
    status_code = 404


class CustomerNotFoundError(NotFoundError):
    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer '{customer_id}' not found.")
        self.customer_id = customer_id


class InventoryItemNotFoundError(NotFoundError):
    def __init__(self, item_index: int) -> None:
        super().__init__(f"Inventory item #{item_index} not found.")
        self.item_index = item_index
