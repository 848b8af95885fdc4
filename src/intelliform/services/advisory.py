"""Advisory form discovery using LLMs."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from intelliform.domain.resolution import AdvisorySuggestion
from intelliform.domain.sessions import ConversationTurn
from intelliform.services.registry import SchemaRegistry

_logger = logging.getLogger(__name__)


class AdvisoryClient(Protocol):
    """Interface for LLM-backed form discovery."""

    async def suggest(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> dict[str, object]:
        """Return raw structured advisory data."""


@dataclass
class AdvisoryService:
    """Builds discovery prompts and validates advisory replies."""

    client: AdvisoryClient
    registry: SchemaRegistry
    model: str
    reasoning_effort: str | None
    store: bool
    timeout_seconds: float = 10.0

    async def suggest(
        self, utterance: str, history: Sequence[ConversationTurn]
    ) -> AdvisorySuggestion | None:
        """Ask the advisory client for a form; None on any failure or timeout."""
        prompt = build_discovery_prompt(self.registry, utterance, history)
        try:
            raw = await asyncio.wait_for(
                self.client.suggest(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    prompt=prompt,
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError:
            _logger.warning(
                "Advisory call timed out after %ss", self.timeout_seconds
            )
            return None
        except Exception as exc:
            _logger.warning("Advisory call failed: %s", exc)
            return None
        try:
            return AdvisorySuggestion.model_validate(raw)
        except ValidationError as exc:
            _logger.warning("Advisory reply malformed: %s", exc)
            return None


def build_discovery_prompt(
    registry: SchemaRegistry, utterance: str, history: Sequence[ConversationTurn]
) -> str:
    """Render the form discovery prompt for the advisory model."""
    forms = "\n".join(
        f"{schema.id}: {schema.name} ({schema.authority})" for schema in registry.all()
    )
    context = "\n".join(f"{turn.speaker}: {turn.text}" for turn in history)
    return (
        "You are IntelliForm, a government form assistant with access to "
        "verified government form data.\n\n"
        f"VERIFIED FORMS:\n{forms}\n\n"
        f'USER REQUEST: "{utterance}"\n\n'
        f"CONVERSATION CONTEXT:\n{context or '(none)'}\n\n"
        "Only recommend forms from the verified list, using their exact id as "
        "matched_form_id. If the request is not covered, set matched_form_id "
        "to null, use intent clarification_needed and suggest the closest "
        "verified alternative in message."
    )
