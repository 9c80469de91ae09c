class DashboardError(Exception):
    """Base class for errors the dashboard core raises on purpose."""


class EntityNotFoundError(DashboardError, LookupError):
    """Raised when an id does not match any entity in a store."""

    def __init__(self, entity_name: str, entity_id: str):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} not found: {entity_id}")


class RevisionConflictError(DashboardError):
    """Raised when an update was based on an outdated revision of the entity."""

    def __init__(self, entity_name: str, entity_id: str, expected: int, actual: int):
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{entity_name} {entity_id} is at revision {actual}, update expected {expected}"
        )


class AuthenticationError(DashboardError):
    """Login or password reset failure. The message is meant for the user."""


class EntityValidationError(DashboardError, ValueError):
    """Raised when a store write would leave an entity with invalid fields."""

    def __init__(self, entity_name: str, errors: list):
        self.entity_name = entity_name
        self.errors = errors #FieldError list, one entry per failing check
        super().__init__(
            f"Invalid {entity_name}: " + "; ".join(f"{error.field}: {error.message}" for error in errors)
        )
