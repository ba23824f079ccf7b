"""
Shared pydantic base classes for domain models.

Entities use snake_case attributes and serialize with camelCase aliases
(``userId``, ``imageUrl``, ``completedExercises``) to keep the wire format
the web client expects.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base for all entities and payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PatchModel(DomainModel):
    """
    Base for explicit partial-update types.

    Only the fields a client actually sent are applied (shallow merge).
    Sending ``null`` is rejected unless the field is listed in
    ``nullable_fields``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_fields(self) -> "PatchModel":
        """Reject explicit nulls for fields that cannot be cleared."""
        nulls = sorted(
            name
            for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """Return the fields explicitly set on this patch, dumped to plain data."""
        if not self.model_fields_set:
            return {}
        return self.model_dump(include=self.model_fields_set)

    def is_empty(self) -> bool:
        return not self.model_fields_set
