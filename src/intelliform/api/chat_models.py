"""Pydantic models for the chat API payloads."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatRequest(_CamelModel):
    """Inbound user message."""

    session_id: str | None = None
    text: str = Field(validation_alias=AliasChoices("text", "message"))


class ChatResponse(_CamelModel):
    """Reply to an inbound message."""

    session_id: str
    state: str
    intent: str
    message: str
    completed: bool
    current_schema: str | None = None
    form_name: str | None = None
    next_prompt: str | None = None
    progress: str | None = None
    errors: list[str] | None = None
    details: dict[str, object] = Field(default_factory=dict)


class GenerateDocumentRequest(_CamelModel):
    """Request to render a completed session."""

    session_id: str


class DocumentResponse(_CamelModel):
    """Reference to a generated document."""

    filename: str
    storage_ref: str | None = None
    schema_id: str
    form_name: str | None = None
    created_at: datetime


class SessionStatus(_CamelModel):
    """Snapshot of a session for status queries."""

    session_id: str
    state: str
    current_schema: str | None = None
    form_name: str | None = None
    progress: str | None = None
    answers: dict[str, str]
    documents: list[DocumentResponse]
    created_at: datetime
    last_activity: datetime


class FormSummaryResponse(_CamelModel):
    """Listing entry for an available form."""

    id: str
    name: str
    authority: str
    field_count: int
