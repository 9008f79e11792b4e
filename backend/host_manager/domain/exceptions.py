"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RecordParseError(ValueError):
    """Raised when a stored or submitted value cannot be mapped to a domain type.

    Status strings outside the known enum values end up here instead of
    being passed through unchecked.
    """

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r}")


class AuthenticationError(Exception):
    """Raised when admin credentials or a bearer token are rejected."""

    def __init__(self, message: str = "Invalid username or password"):
        self.message = message
        super().__init__(message)
