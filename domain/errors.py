"""
Domain errors shared by the store, the use cases and the HTTP layer.

Only two failure kinds exist: a missing entity and an invalid payload.
The HTTP layer maps them to 404 and 400 respectively.
"""

from typing import Any, Dict, List, Optional


class EntityNotFoundError(Exception):
    """Raised when an id-keyed lookup misses on an update, delete or use case."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


class ValidationFailure(Exception):
    """Raised when input passes shape validation but violates a business rule."""

    def __init__(
        self,
        entity: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(f"Invalid {entity.lower()} data")
        self.entity = entity
        self.message = f"Invalid {entity.lower()} data"
        self.errors = errors or []
