"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailedError(Exception):
    """Raised when input fields do not satisfy a rule set.

    ``errors`` maps each failing field to its list of messages.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(f"Validation failed for: {', '.join(errors) or 'input'}")


class RecordStoreError(Exception):
    """Raised when the underlying record store fails unexpectedly."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Record store failed during {operation}: {message}")
