"""Domain models for government form schemas."""

from dataclasses import dataclass, field
from enum import StrEnum


class FieldType(StrEnum):
    """Declared answer type of a form field."""

    TEXT = "text"
    CHOICE = "choice"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    LONG_TEXT = "long-text"


@dataclass(frozen=True)
class FieldDefinition:
    """Single question within a form schema."""

    name: str
    prompt: str
    type: FieldType = FieldType.TEXT
    required: bool = True
    options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FieldType(self.type))
        if self.type is FieldType.CHOICE and not self.options:
            raise ValueError(f"Choice field {self.name!r} has no options")


@dataclass(frozen=True)
class FormSchema:
    """Immutable description of a form and the fields it collects."""

    id: str
    name: str
    authority: str
    fields: tuple[FieldDefinition, ...]
    form_number: str | None = None
    official_website: str | None = None
    documents: tuple[str, ...] = ()
    fees: str | None = None
    processing_time: str | None = None
    last_verified: str | None = None
    keywords: tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for definition in self.fields:
            if definition.name in seen:
                raise ValueError(
                    f"Duplicate field {definition.name!r} in form {self.id!r}"
                )
            seen.add(definition.name)

    @property
    def field_count(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class FormSummary:
    """Listing entry for a registered form."""

    id: str
    name: str
    authority: str
    field_count: int
