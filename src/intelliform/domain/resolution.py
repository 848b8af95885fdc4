"""Outcomes of mapping free text to a form schema."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class FormMatched:
    """The utterance resolved to a registered form."""

    schema_id: str
    confidence: float
    source: str
    message: str | None = None


@dataclass(frozen=True)
class FormUnmatched:
    """No form matched; carries the prompt to show the user."""

    suggestion: str
    source: str


ResolutionOutcome = FormMatched | FormUnmatched


class AdvisorySuggestion(BaseModel):
    """Structured reply of the advisory service."""

    intent: str
    matched_form_id: str | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    message: str = ""
