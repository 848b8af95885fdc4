"""Tests for form resolution."""

import asyncio

from intelliform.domain.resolution import FormMatched, FormUnmatched
from intelliform.services.advisory import AdvisoryService
from intelliform.services.registry import SchemaRegistry
from intelliform.services.resolver import (
    FormResolver,
    ResolutionContext,
    match_keywords,
)
from tests.conftest import (
    FailingAdvisoryClient,
    FakeAdvisoryClient,
    SlowAdvisoryClient,
)


def _resolver(registry: SchemaRegistry, client) -> FormResolver:
    advisory = AdvisoryService(
        client=client,
        registry=registry,
        model="gpt-test",
        reasoning_effort=None,
        store=False,
        timeout_seconds=0.05,
    )
    return FormResolver.create(registry, advisory)


def test_keyword_fallback_matches_pan_card_when_advisory_fails(registry) -> None:
    client = FailingAdvisoryClient()
    resolver = _resolver(registry, client)

    outcome = asyncio.run(resolver.resolve("I need a PAN card", ResolutionContext()))

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "pan_card_application"
    assert outcome.source == "keyword"
    assert client.calls == 1


def test_keyword_fallback_is_deterministic(registry) -> None:
    resolver = _resolver(registry, FailingAdvisoryClient())

    outcomes = {
        asyncio.run(
            resolver.resolve("passport and voter id please", ResolutionContext())
        ).schema_id
        for _ in range(5)
    }

    assert outcomes == {"passport_application"}


def test_advisory_match_is_accepted_when_registered(registry) -> None:
    resolver = _resolver(registry, FakeAdvisoryClient())

    outcome = asyncio.run(
        resolver.resolve("I want to travel abroad", ResolutionContext())
    )

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "passport_application"
    assert outcome.confidence == 0.92
    assert outcome.source == "advisory"
    assert outcome.message == "You need a Passport Application."


def test_unknown_advisory_id_falls_back_to_keywords(registry) -> None:
    client = FakeAdvisoryClient(
        payload={
            "intent": "form_discovery",
            "matched_form_id": "trademark_registration",
            "confidence": 0.9,
            "message": "Trademark it is.",
        }
    )
    resolver = _resolver(registry, client)

    outcome = asyncio.run(
        resolver.resolve("register my company", ResolutionContext())
    )

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "company_registration"
    assert outcome.source == "keyword"


def test_malformed_advisory_reply_falls_back(registry) -> None:
    resolver = _resolver(registry, FakeAdvisoryClient(payload={"confidence": "high"}))

    outcome = asyncio.run(resolver.resolve("gst for my shop", ResolutionContext()))

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "gst_registration"


def test_advisory_timeout_falls_back(registry) -> None:
    resolver = _resolver(registry, SlowAdvisoryClient())

    outcome = asyncio.run(
        resolver.resolve("I need an FSSAI licence", ResolutionContext())
    )

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "fssai_food_license"


def test_generic_term_asks_for_specific_form(registry) -> None:
    resolver = _resolver(registry, FailingAdvisoryClient())

    outcome = asyncio.run(
        resolver.resolve("I need a certificate", ResolutionContext())
    )

    assert isinstance(outcome, FormUnmatched)
    assert outcome.source == "generic_term"
    assert "PAN Card Application" in outcome.suggestion


def test_unrelated_text_gets_generic_clarification(registry) -> None:
    resolver = _resolver(registry, FailingAdvisoryClient())

    outcome = asyncio.run(resolver.resolve("hello there", ResolutionContext()))

    assert isinstance(outcome, FormUnmatched)
    assert outcome.source == "clarification"


def test_bound_schema_skips_strategies(registry) -> None:
    client = FailingAdvisoryClient()
    resolver = _resolver(registry, client)

    outcome = asyncio.run(
        resolver.resolve(
            "Asha Rao", ResolutionContext(bound_schema_id="voter_id")
        )
    )

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "voter_id"
    assert client.calls == 0


def test_resolver_without_advisory_uses_keywords(registry) -> None:
    resolver = FormResolver.create(registry)

    outcome = asyncio.run(
        resolver.resolve("Learner driving licence", ResolutionContext())
    )

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "driving_license"


def test_keywords_match_whole_words_only(registry) -> None:
    assert match_keywords(registry, "company registration") == "company_registration"
    assert match_keywords(registry, "Japanese food stall") == "fssai_food_license"
    assert match_keywords(registry, "expand my horizons") is None


_CLOSEST_ALTERNATIVE = {
    "intent": "clarification_needed",
    "matched_form_id": None,
    "confidence": 0.3,
    "message": "Trademarks are not covered; the closest verified form is "
    "Company Registration.",
}


def test_advisory_alternative_replaces_generic_suggestion(registry) -> None:
    resolver = _resolver(registry, FakeAdvisoryClient(payload=_CLOSEST_ALTERNATIVE))

    outcome = asyncio.run(
        resolver.resolve("trademark registration", ResolutionContext())
    )

    assert isinstance(outcome, FormUnmatched)
    assert outcome.source == "advisory"
    assert outcome.suggestion == _CLOSEST_ALTERNATIVE["message"]


def test_keyword_match_beats_advisory_alternative(registry) -> None:
    resolver = _resolver(registry, FakeAdvisoryClient(payload=_CLOSEST_ALTERNATIVE))

    outcome = asyncio.run(resolver.resolve("a gst certificate", ResolutionContext()))

    assert isinstance(outcome, FormMatched)
    assert outcome.schema_id == "gst_registration"
    assert outcome.source == "keyword"


def test_advisory_without_message_falls_back_to_generic_suggestion(registry) -> None:
    client = FakeAdvisoryClient(payload={**_CLOSEST_ALTERNATIVE, "message": "  "})
    resolver = _resolver(registry, client)

    outcome = asyncio.run(
        resolver.resolve("trademark registration", ResolutionContext())
    )

    assert isinstance(outcome, FormUnmatched)
    assert outcome.source == "generic_term"
