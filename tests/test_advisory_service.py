"""Tests for the advisory service."""

import asyncio
from datetime import UTC, datetime

from intelliform.domain.sessions import ConversationTurn
from intelliform.services.advisory import (
    AdvisoryService,
    build_discovery_prompt,
)
from tests.conftest import FailingAdvisoryClient, FakeAdvisoryClient


def _service(registry, client) -> AdvisoryService:
    return AdvisoryService(
        client=client,
        registry=registry,
        model="gpt-test",
        reasoning_effort="low",
        store=False,
    )


def test_advisory_service_returns_structured_suggestion(registry) -> None:
    service = _service(registry, FakeAdvisoryClient())

    suggestion = asyncio.run(service.suggest("travel abroad", []))

    assert suggestion is not None
    assert suggestion.matched_form_id == "passport_application"
    assert suggestion.confidence == 0.92


def test_advisory_service_swallows_client_errors(registry) -> None:
    service = _service(registry, FailingAdvisoryClient())

    assert asyncio.run(service.suggest("anything", [])) is None


def test_advisory_service_rejects_out_of_range_confidence(registry) -> None:
    client = FakeAdvisoryClient(
        payload={
            "intent": "form_discovery",
            "matched_form_id": "voter_id",
            "confidence": 7,
            "message": "",
        }
    )

    assert asyncio.run(_service(registry, client).suggest("vote", [])) is None


def test_discovery_prompt_lists_forms_and_history(registry) -> None:
    history = [
        ConversationTurn(
            speaker="user",
            text="I run a bakery",
            timestamp=datetime(2024, 8, 1, tzinfo=UTC),
        )
    ]

    prompt = build_discovery_prompt(registry, "what do I need?", history)

    assert "fssai_food_license: FSSAI Food Safety License" in prompt
    assert "user: I run a bakery" in prompt
    assert 'USER REQUEST: "what do I need?"' in prompt
