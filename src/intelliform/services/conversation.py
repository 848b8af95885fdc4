"""Entry point for inbound conversation messages."""

import logging
from dataclasses import dataclass, field

from intelliform.domain.sessions import Session, SessionState
from intelliform.services.sessions import SessionStateMachine, TurnResult
from intelliform.services.store import SessionStore

APOLOGY_MESSAGE = "I encountered an error processing your request. Please try again."

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponsePayload:
    """Reply returned to the transport layer for one message."""

    session_id: str
    state: SessionState
    intent: str
    message: str
    completed: bool
    current_schema: str | None = None
    form_name: str | None = None
    next_prompt: str | None = None
    progress: str | None = None
    errors: tuple[str, ...] = ()
    details: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversationReply:
    """Session handled by a message together with the reply payload."""

    session: Session
    payload: ResponsePayload


@dataclass
class ConversationOrchestrator:
    """Runs one state transition per inbound message."""

    store: SessionStore
    state_machine: SessionStateMachine

    async def handle_message(
        self, session_id: str | None, text: str
    ) -> ConversationReply:
        """Fetch or create the session and advance it under its lock."""
        session = self.store.get_or_create(session_id)
        async with self.store.lock(session.id):
            checkpoint = session.checkpoint()
            try:
                result = await self.state_machine.advance(session, text)
            except Exception:
                _logger.exception("Failed to process message for %s", session.id)
                session.rollback(checkpoint)
                result = TurnResult(
                    intent="error",
                    message=APOLOGY_MESSAGE,
                    errors=("internal_error",),
                )
        payload = build_payload(session, result)
        return ConversationReply(session=session, payload=payload)


def build_payload(session: Session, result: TurnResult) -> ResponsePayload:
    """Combine session status with a transition result."""
    return ResponsePayload(
        session_id=session.id,
        state=session.state,
        intent=result.intent,
        message=result.message,
        completed=session.state is SessionState.COMPLETE,
        current_schema=session.form_id,
        form_name=session.schema.name if session.schema else None,
        next_prompt=result.next_prompt,
        progress=session.progress(),
        errors=result.errors,
        details=result.details,
    )
