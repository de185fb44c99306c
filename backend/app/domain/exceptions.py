"""Domain-specific exceptions — framework-independent.

A missing entity is not an exception here: services return ``None`` and the
caller decides what that means.
"""


class MissingReferenceError(Exception):
    """Raised when a mutation points at a foreign entity that does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"The {entity_type} with ID {entity_id} does not exist")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DependentEntitiesError(Exception):
    """Raised when a delete is blocked by entities that still reference the target."""

    def __init__(self, entity_type: str, entity_id: int | str, dependents: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.dependents = dependents
        super().__init__(
            f"The {entity_type} with ID {entity_id} cannot be deleted: "
            f"it has associated {dependents}"
        )


class InvalidOperationError(Exception):
    """Raised when an operation would break a business rule."""


class InsufficientStockError(InvalidOperationError):
    """Raised when a stock decrease is larger than the available stock."""

    def __init__(self, record_id: int, requested: int, available: int):
        self.record_id = record_id
        self.requested = requested
        self.available = available
        super().__init__("The decrease cannot be greater than the available stock")
