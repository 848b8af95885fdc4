"""Domain models for conversation sessions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from uuid import uuid4

from intelliform.domain.forms import FieldDefinition, FormSchema

DEFAULT_LOG_LIMIT = 50


class SessionState(StrEnum):
    """Lifecycle states of a form-acquisition session."""

    INIT = "INIT"
    COLLECTING = "COLLECTING"
    COMPLETE = "COMPLETE"


class SessionInvariantError(RuntimeError):
    """Raised when a session mutation breaks a standing invariant."""


@dataclass(frozen=True)
class ConversationTurn:
    """One immutable entry of a session's conversation log."""

    speaker: str
    text: str
    timestamp: datetime


@dataclass(frozen=True)
class DocumentRef:
    """Reference to a document produced from a completed session."""

    filename: str
    created_at: datetime
    schema_id: str
    storage_ref: str | None = None


@dataclass(frozen=True)
class SessionCheckpoint:
    """Snapshot of the mutable parts of a session."""

    state: SessionState
    schema: FormSchema | None
    cursor: int
    answers: dict[str, str]
    log: tuple[ConversationTurn, ...]
    documents: tuple[DocumentRef, ...]
    last_activity: datetime


def _now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class Session:
    """Mutable state of one user's form conversation."""

    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=_now)
    last_activity: datetime = field(default_factory=_now)
    state: SessionState = SessionState.INIT
    schema: FormSchema | None = None
    cursor: int = 0
    answers: dict[str, str] = field(default_factory=dict)
    log: list[ConversationTurn] = field(default_factory=list)
    documents: list[DocumentRef] = field(default_factory=list)
    log_limit: int = DEFAULT_LOG_LIMIT

    @property
    def form_id(self) -> str | None:
        return self.schema.id if self.schema else None

    @property
    def field_count(self) -> int:
        return self.schema.field_count if self.schema else 0

    def current_field(self) -> FieldDefinition | None:
        """Return the field awaiting an answer, if any."""
        if self.schema is None or self.cursor >= self.schema.field_count:
            return None
        return self.schema.fields[self.cursor]

    def progress(self) -> str | None:
        if self.schema is None:
            return None
        return f"{self.cursor}/{self.schema.field_count}"

    def touch(self, at: datetime | None = None) -> None:
        self.last_activity = at or _now()

    def append_turn(self, speaker: str, text: str, at: datetime | None = None) -> None:
        """Append a turn, dropping the oldest ones beyond the log limit."""
        timestamp = at or _now()
        self.log.append(
            ConversationTurn(speaker=speaker, text=text, timestamp=timestamp)
        )
        overflow = len(self.log) - self.log_limit
        if overflow > 0:
            del self.log[:overflow]
        self.last_activity = timestamp

    def recent_turns(self, limit: int) -> list[ConversationTurn]:
        return self.log[-limit:] if limit > 0 else []

    def checkpoint(self) -> SessionCheckpoint:
        return SessionCheckpoint(
            state=self.state,
            schema=self.schema,
            cursor=self.cursor,
            answers=dict(self.answers),
            log=tuple(self.log),
            documents=tuple(self.documents),
            last_activity=self.last_activity,
        )

    def rollback(self, checkpoint: SessionCheckpoint) -> None:
        self.state = checkpoint.state
        self.schema = checkpoint.schema
        self.cursor = checkpoint.cursor
        self.answers = dict(checkpoint.answers)
        self.log = list(checkpoint.log)
        self.documents = list(checkpoint.documents)
        self.last_activity = checkpoint.last_activity

    def check_invariants(self, previous_cursor: int | None = None) -> None:
        """Validate cursor bounds and state consistency."""
        if previous_cursor is not None and self.cursor < previous_cursor:
            raise SessionInvariantError(
                f"Cursor regressed from {previous_cursor} to {self.cursor}"
            )
        if not 0 <= self.cursor <= self.field_count:
            raise SessionInvariantError(
                f"Cursor {self.cursor} outside [0, {self.field_count}]"
            )
        if self.state is SessionState.INIT and self.schema is not None:
            raise SessionInvariantError("INIT session has a bound schema")
        if self.state is not SessionState.INIT and self.schema is None:
            raise SessionInvariantError(f"{self.state} session has no bound schema")
        if self.state is SessionState.COLLECTING and self.cursor >= self.field_count:
            raise SessionInvariantError("COLLECTING session has no field left")
        if self.state is SessionState.COMPLETE and self.cursor != self.field_count:
            raise SessionInvariantError("COMPLETE session has unanswered fields")
