"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist (or is not visible to the caller)."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PermissionDeniedError(Exception):
    """Raised when the access policy refuses an action for the current user."""

    def __init__(self, action: str, reason: str = ""):
        self.action = action
        self.reason = reason
        message = f"Permission denied for '{action}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when credentials or a session token cannot be verified."""

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


class AssetValidationError(Exception):
    """Raised when an asset (or master data) payload fails validation.

    Carries every failure at once so the form can show them together.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Validation failed: " + "; ".join(errors))
