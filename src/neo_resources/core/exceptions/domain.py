"""Error taxonomy for the authorization and query core."""

from typing import Any, Dict, Optional

from .base import ResourceAclError


class NotFoundError(ResourceAclError):
    """Raised when a referenced resource, user, tenant or grant is absent."""

    def __init__(self, entity_type: str, identifier: Any):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with identifier '{identifier}' not found",
            error_code="NOT_FOUND",
            details={"entity_type": entity_type, "identifier": str(identifier)},
        )


class InvalidArgumentError(ResourceAclError):
    """Raised when a caller supplies an unusable argument."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        details: Dict[str, Any] = {"field": field} if field else {}
        super().__init__(message, error_code="INVALID_ARGUMENT", details=details)


class ConflictError(ResourceAclError):
    """Raised when an insert would break a uniqueness rule."""

    def __init__(self, entity_type: str, identifier: Any):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with identifier '{identifier}' already exists",
            error_code="CONFLICT",
            details={"entity_type": entity_type, "identifier": str(identifier)},
        )


class StoreUnavailableError(ResourceAclError):
    """Raised when the entity store fails. Not recoverable locally."""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        details: Dict[str, Any] = {"operation": operation} if operation else {}
        super().__init__(message, error_code="STORE_UNAVAILABLE", details=details)
