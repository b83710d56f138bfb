"""
Domain Exceptions

Defines the errors raised by the scheduling domain and its adapters. Each
error carries an ``ErrorType`` discriminator so the transport layer can map
it to a response without inspecting messages.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"
    REGISTRY = "registry"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(DomainError):
    """Raised when a raw input cannot be turned into a domain value."""

    def __init__(
        self,
        field_name: str,
        value: object,
        message: str,
    ) -> None:
        self.field_name = field_name
        self.value = value
        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
        }
        super().__init__(message, ErrorType.INVALID_ARGUMENT, details)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str) -> None:
        details = {"entity_type": entity_type, "entity_id": str(entity_id)}
        super().__init__(f"{entity_type} not found: {entity_id}", ErrorType.NOT_FOUND, details)
        self.entity_type = entity_type
        self.entity_id = entity_id


class RepositoryError(DomainError):
    """Raised when the persistence layer fails unexpectedly."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
    ) -> None:
        details = {"operation": operation} if operation else {}
        super().__init__(message, ErrorType.REPOSITORY, details)
        self.operation = operation


class RegistryError(DomainError):
    """Raised when the external employee registry cannot be used."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, ErrorType.REGISTRY, details)
        self.status_code = status_code
