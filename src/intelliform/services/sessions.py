"""Session state machine for conversational form filling."""

import logging
from dataclasses import dataclass, field

from intelliform.domain.forms import FieldDefinition, FormSchema
from intelliform.domain.resolution import FormMatched
from intelliform.domain.sessions import Session, SessionState
from intelliform.services.registry import SchemaRegistry
from intelliform.services.resolver import FormResolver, ResolutionContext
from intelliform.services.validation import validate

USER = "user"
ASSISTANT = "assistant"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Represents the reply produced by one transition."""

    intent: str
    message: str
    next_prompt: str | None = None
    errors: tuple[str, ...] = ()
    details: dict[str, object] = field(default_factory=dict)


@dataclass
class SessionStateMachine:
    """Drives a session through INIT, COLLECTING and COMPLETE."""

    registry: SchemaRegistry
    resolver: FormResolver
    history_turns: int = 6

    async def advance(self, session: Session, text: str) -> TurnResult:
        """Apply exactly one transition for an inbound message."""
        previous_cursor = session.cursor
        if session.state is SessionState.INIT:
            result = await self._discover(session, text)
        elif session.state is SessionState.COLLECTING:
            result = self._collect(session, text)
        else:
            result = _already_complete(session)
        session.append_turn(USER, text)
        session.append_turn(ASSISTANT, result.message)
        session.check_invariants(previous_cursor)
        return result

    async def _discover(self, session: Session, text: str) -> TurnResult:
        context = ResolutionContext(
            bound_schema_id=None,
            history=session.recent_turns(self.history_turns),
        )
        outcome = await self.resolver.resolve(text, context)
        if isinstance(outcome, FormMatched):
            schema = self.registry.lookup(outcome.schema_id)
            if schema is not None:
                return self._bind(session, schema, outcome)
            _logger.warning("Resolver matched unregistered form %s", outcome.schema_id)
            return TurnResult(
                intent="clarification_needed",
                message="I could not find that form. Which form do you need?",
            )
        return TurnResult(intent="clarification_needed", message=outcome.suggestion)

    def _bind(
        self, session: Session, schema: FormSchema, outcome: FormMatched
    ) -> TurnResult:
        session.schema = schema
        session.cursor = 0
        session.answers = {}
        intro = outcome.message or f"I found the {schema.name}."
        details = _form_details(schema, outcome)
        if schema.field_count == 0:
            session.state = SessionState.COMPLETE
            return TurnResult(
                intent="form_complete",
                message=f"{intro}\n\n{_COMPLETE_MESSAGE}",
                details=details,
            )
        session.state = SessionState.COLLECTING
        first = schema.fields[0]
        _logger.info("Session %s bound to form %s", session.id, schema.id)
        return TurnResult(
            intent="form_discovered",
            message=(
                f"{intro}\n\nIssued by {schema.authority}.\n\n"
                f"Let's start with the first question:\n\n{_field_prompt(first)}"
            ),
            next_prompt=_field_prompt(first),
            details=details,
        )

    def _collect(self, session: Session, text: str) -> TurnResult:
        current = session.current_field()
        if current is None:
            raise RuntimeError(f"Session {session.id} has no field to collect")
        result = validate(current, text)
        if not result.accepted:
            reason = result.reason or "invalid answer"
            return TurnResult(
                intent="validation_error",
                message=f"Sorry, that is {reason}.\n\n{_field_prompt(current)}",
                next_prompt=_field_prompt(current),
                errors=(reason,),
            )

        session.answers[current.name] = result.normalized_value or ""
        session.cursor += 1
        schema = session.schema
        if schema is None or session.cursor >= schema.field_count:
            session.state = SessionState.COMPLETE
            _logger.info("Session %s completed form %s", session.id, session.form_id)
            return TurnResult(
                intent="form_complete",
                message=_COMPLETE_MESSAGE,
                details={"answers": dict(session.answers)},
            )

        upcoming = schema.fields[session.cursor]
        position = f"{session.cursor + 1}/{schema.field_count}"
        return TurnResult(
            intent="next_question",
            message=f"Great! Next question ({position}):\n\n{_field_prompt(upcoming)}",
            next_prompt=_field_prompt(upcoming),
        )


_COMPLETE_MESSAGE = (
    "Form completed! All required information has been collected. "
    "You can now generate the document."
)


def _already_complete(session: Session) -> TurnResult:
    name = session.schema.name if session.schema else "form"
    return TurnResult(
        intent="already_complete",
        message=(
            f"Your {name} is already complete. Generate the document, or start a "
            "new conversation to fill in another form."
        ),
    )


def _field_prompt(definition: FieldDefinition) -> str:
    if definition.required:
        return definition.prompt
    return f"{definition.prompt} (optional, send an empty reply to skip)"


def _form_details(schema: FormSchema, outcome: FormMatched) -> dict[str, object]:
    return {
        "form_id": schema.id,
        "form_name": schema.name,
        "authority": schema.authority,
        "form_number": schema.form_number,
        "official_website": schema.official_website,
        "documents": list(schema.documents),
        "fees": schema.fees,
        "processing_time": schema.processing_time,
        "confidence": outcome.confidence,
        "resolved_by": outcome.source,
    }
