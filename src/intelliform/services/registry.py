"""Read-only registry of known form schemas."""

from collections.abc import Iterable
from dataclasses import dataclass

from intelliform.domain.forms import FormSchema, FormSummary
from intelliform.forms_catalogue import verified_forms


@dataclass
class SchemaRegistry:
    """Lookup table of form schemas, fixed after construction."""

    _schemas: dict[str, FormSchema]

    def __init__(self, schemas: Iterable[FormSchema]) -> None:
        self._schemas = {}
        for schema in schemas:
            if schema.id in self._schemas:
                raise ValueError(f"Form {schema.id!r} registered twice")
            self._schemas[schema.id] = schema

    @classmethod
    def default(cls) -> "SchemaRegistry":
        """Create a registry holding the verified form catalogue."""
        return cls(verified_forms())

    def lookup(self, schema_id: str | None) -> FormSchema | None:
        """Return the schema for an id, or None when it is not registered."""
        if not schema_id:
            return None
        return self._schemas.get(schema_id)

    def list(self) -> list[FormSummary]:
        """Return summaries of every schema in registration order."""
        return [
            FormSummary(
                id=schema.id,
                name=schema.name,
                authority=schema.authority,
                field_count=schema.field_count,
            )
            for schema in self._schemas.values()
        ]

    def all(self) -> tuple[FormSchema, ...]:
        return tuple(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)
