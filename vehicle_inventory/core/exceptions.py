"""
Error taxonomy for the inventory gateway.

Not-found conditions are not errors: single-record lookups, updates and
deletes report a miss by returning None.
"""


class InventoryError(Exception):
    """Base class for all inventory gateway errors."""


class InvalidIdentifier(InventoryError):
    """Raised when an id argument is not a well-formed storage identifier."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r}")


class InvalidRange(InventoryError):
    """Raised when a year range has its start after its end."""

    def __init__(self, start_year: int, end_year: int):
        self.start_year = start_year
        self.end_year = end_year
        super().__init__(
            f"Invalid year range: startYear ({start_year}) is greater than endYear ({end_year})"
        )


class EnrichmentUnavailable(InventoryError):
    """Raised when the external joke service cannot supply a joke."""


class StorageUnavailable(InventoryError):
    """Raised when the document store fails to complete an operation."""
