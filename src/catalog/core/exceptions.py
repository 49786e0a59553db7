"""Domain errors raised by the catalog services.

Controllers translate these into HTTP responses; the services never catch
them themselves.
"""

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single violated constraint on a named input field."""

    field: str
    message: str


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class NotFoundError(CatalogError):
    """An id was resolved against a repository and no entity exists."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ValidationFailedError(CatalogError):
    """Input violated one or more constraints."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Validation failed: {summary}")


class ConflictError(CatalogError):
    """Reserved for uniqueness rules; no current operation raises it."""
