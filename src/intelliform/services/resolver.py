"""Resolution of free-text requests to registered form schemas."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from intelliform.domain.resolution import (
    FormMatched,
    FormUnmatched,
    ResolutionOutcome,
)
from intelliform.domain.sessions import ConversationTurn
from intelliform.services.advisory import AdvisoryService
from intelliform.services.registry import SchemaRegistry

GENERIC_FORM_TERMS = (
    "license",
    "registration",
    "certificate",
    "card",
    "permit",
    "application",
    "form",
)
KEYWORD_CONFIDENCE = 0.5

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """What the resolver may know about the session it resolves for."""

    bound_schema_id: str | None = None
    history: Sequence[ConversationTurn] = ()


class ResolutionStrategy(Protocol):
    """One step of the resolution chain."""

    name: str

    async def attempt(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome | None:
        """Return a match to stop the chain, a suggestion, or None."""


@dataclass
class AdvisoryStrategy:
    """Consult the advisory service and accept only registered ids.

    A reply naming no form is returned as a suggestion so its closest
    alternative can reach the user when no later step finds a match.
    """

    advisory: AdvisoryService
    registry: SchemaRegistry
    name: str = "advisory"

    async def attempt(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome | None:
        suggestion = await self.advisory.suggest(utterance, context.history)
        if suggestion is None:
            return None
        if not suggestion.matched_form_id:
            if not suggestion.message.strip():
                return None
            return FormUnmatched(suggestion=suggestion.message, source=self.name)
        schema = self.registry.lookup(suggestion.matched_form_id)
        if schema is None:
            _logger.info(
                "Advisory suggested unknown form %s", suggestion.matched_form_id
            )
            return None
        return FormMatched(
            schema_id=schema.id,
            confidence=suggestion.confidence,
            source=self.name,
            message=suggestion.message or None,
        )


@dataclass
class KeywordStrategy:
    """Whole-word keyword scan; the first registered schema with a hit wins."""

    registry: SchemaRegistry
    name: str = "keyword"

    async def attempt(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome | None:
        schema_id = match_keywords(self.registry, utterance)
        if schema_id is None:
            return None
        return FormMatched(
            schema_id=schema_id, confidence=KEYWORD_CONFIDENCE, source=self.name
        )


@dataclass
class GenericTermStrategy:
    """Ask for a specific form when the user only names a generic one."""

    registry: SchemaRegistry
    terms: tuple[str, ...] = GENERIC_FORM_TERMS
    name: str = "generic_term"

    async def attempt(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome | None:
        lowered = utterance.lower()
        if not any(term in lowered for term in self.terms):
            return None
        names = ", ".join(summary.name for summary in self.registry.list())
        return FormUnmatched(
            suggestion=(
                "I can help with government forms, but I need to know which one. "
                f"Available forms: {names}. Which form do you need?"
            ),
            source=self.name,
        )


@dataclass
class ClarificationStrategy:
    """Terminal step: always ask the user to clarify."""

    name: str = "clarification"

    async def attempt(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome | None:
        return FormUnmatched(
            suggestion=(
                "I help you fill in government forms such as a PAN card, "
                "passport or GST registration. Which form would you like to "
                "apply for?"
            ),
            source=self.name,
        )


@dataclass
class FormResolver:
    """Tries resolution strategies in order.

    The first match from any strategy wins. Without a match, the earliest
    suggestion wins.
    """

    strategies: list[ResolutionStrategy] = field(default_factory=list)

    @classmethod
    def create(
        cls, registry: SchemaRegistry, advisory: AdvisoryService | None = None
    ) -> "FormResolver":
        """Build the standard chain; the advisory step is skipped when absent."""
        strategies: list[ResolutionStrategy] = []
        if advisory is not None:
            strategies.append(AdvisoryStrategy(advisory=advisory, registry=registry))
        strategies.extend(
            [
                KeywordStrategy(registry=registry),
                GenericTermStrategy(registry=registry),
                ClarificationStrategy(),
            ]
        )
        return cls(strategies=strategies)

    async def resolve(
        self, utterance: str, context: ResolutionContext
    ) -> ResolutionOutcome:
        """Map an utterance to a form, always returning a structured outcome."""
        if context.bound_schema_id is not None:
            return FormMatched(
                schema_id=context.bound_schema_id, confidence=1.0, source="session"
            )
        suggestion: FormUnmatched | None = None
        for strategy in self.strategies:
            outcome = await strategy.attempt(utterance, context)
            if isinstance(outcome, FormMatched):
                _logger.debug("Resolved via %s: %s", strategy.name, outcome)
                return outcome
            if suggestion is None and isinstance(outcome, FormUnmatched):
                suggestion = outcome
        if suggestion is not None:
            _logger.debug("Unresolved, suggesting via %s", suggestion.source)
            return suggestion
        return await ClarificationStrategy().attempt(utterance, context)


def match_keywords(registry: SchemaRegistry, utterance: str) -> str | None:
    """Return the first registered schema id whose keywords occur in the text."""
    lowered = utterance.lower()
    for schema in registry.all():
        for keyword in schema.keywords:
            if re.search(rf"\b{re.escape(keyword.lower())}\b", lowered):
                return schema.id
    return None
