"""Shared test fixtures."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from intelliform.config import Settings
from intelliform.containers import AppContainer
from intelliform.domain.forms import FieldDefinition, FieldType, FormSchema
from intelliform.domain.sessions import DocumentRef
from intelliform.services.advisory import AdvisoryClient, AdvisoryService
from intelliform.services.conversation import ConversationOrchestrator
from intelliform.services.documents import DocumentRenderer, DocumentService
from intelliform.services.registry import SchemaRegistry
from intelliform.services.resolver import FormResolver
from intelliform.services.sessions import SessionStateMachine
from intelliform.services.store import InMemorySessionStore
from intelliform.services.sweeper import FileLifecycle, SessionSweeper


@dataclass
class FakeAdvisoryClient(AdvisoryClient):
    """Fake advisory client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "intent": "form_discovery",
            "matched_form_id": "passport_application",
            "confidence": 0.92,
            "message": "You need a Passport Application.",
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def suggest(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FailingAdvisoryClient(AdvisoryClient):
    """Advisory client that always raises."""

    calls: int = 0

    async def suggest(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> dict[str, object]:
        self.calls += 1
        raise RuntimeError("advisory unavailable")


@dataclass
class SlowAdvisoryClient(AdvisoryClient):
    """Advisory client that never answers within the timeout."""

    delay_seconds: float = 5.0

    async def suggest(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> dict[str, object]:
        await asyncio.sleep(self.delay_seconds)
        return {"intent": "form_discovery", "matched_form_id": "voter_id"}


@dataclass
class FakeDocumentRenderer(DocumentRenderer):
    """Renderer that records calls and returns a predictable reference."""

    calls: list[tuple[dict[str, str], str, str]] = field(default_factory=list)

    async def render(
        self, answers: dict[str, str], schema: FormSchema, filename: str
    ) -> str:
        self.calls.append((answers, schema.id, filename))
        return f"downloads/{filename}"


@dataclass
class RecordingFileLifecycle(FileLifecycle):
    """File lifecycle that remembers what it was asked to delete."""

    reclaimed: list[DocumentRef] = field(default_factory=list)

    def reclaim(self, documents: Sequence[DocumentRef]) -> int:
        self.reclaimed.extend(documents)
        return len(documents)


@dataclass
class FrozenClock:
    """Manually advanced clock."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 8, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


CONTACT_FORM = FormSchema(
    id="contact_details",
    name="Contact Details",
    authority="Test Authority",
    fields=(
        FieldDefinition(name="full_name", prompt="What is your full name?"),
        FieldDefinition(
            name="mobile_number",
            prompt="What is your mobile number?",
            type=FieldType.PHONE,
        ),
        FieldDefinition(
            name="email_address",
            prompt="What is your email address?",
            type=FieldType.EMAIL,
        ),
    ),
    keywords=("contact",),
)


def build_state_machine(
    registry: SchemaRegistry, advisory_client: AdvisoryClient | None = None
) -> SessionStateMachine:
    advisory = None
    if advisory_client is not None:
        advisory = AdvisoryService(
            client=advisory_client,
            registry=registry,
            model="gpt-test",
            reasoning_effort=None,
            store=False,
            timeout_seconds=0.2,
        )
    return SessionStateMachine(
        registry=registry, resolver=FormResolver.create(registry, advisory)
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        renderer_base_url="https://renderer.test",
    )


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry.default()


@pytest.fixture
def contact_registry() -> SchemaRegistry:
    return SchemaRegistry([CONTACT_FORM])


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def renderer() -> FakeDocumentRenderer:
    return FakeDocumentRenderer()


@pytest.fixture
def file_lifecycle() -> RecordingFileLifecycle:
    return RecordingFileLifecycle()


@pytest.fixture
def container(
    settings: Settings,
    registry: SchemaRegistry,
    renderer: FakeDocumentRenderer,
    file_lifecycle: RecordingFileLifecycle,
) -> AppContainer:
    store = InMemorySessionStore()
    orchestrator = ConversationOrchestrator(
        store=store,
        state_machine=build_state_machine(registry, FailingAdvisoryClient()),
    )
    sweeper = SessionSweeper(
        store=store,
        file_lifecycle=file_lifecycle,
        max_idle=timedelta(hours=6),
        interval_seconds=3600,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        registry=registry,
        session_store=store,
        orchestrator=orchestrator,
        document_service=DocumentService(store=store, renderer=renderer),
        sweeper=sweeper,
        close_resources=close_resources,
    )
