"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from intelliform.adapters.http_document_renderer import HttpxDocumentRenderer
from intelliform.adapters.local_file_lifecycle import LocalFileLifecycle
from intelliform.adapters.openai_advisory_client import OpenAIAdvisoryClient
from intelliform.config import Settings, advisory_enabled
from intelliform.services.advisory import AdvisoryService
from intelliform.services.conversation import ConversationOrchestrator
from intelliform.services.documents import DocumentService
from intelliform.services.registry import SchemaRegistry
from intelliform.services.resolver import FormResolver
from intelliform.services.sessions import SessionStateMachine
from intelliform.services.store import InMemorySessionStore, SessionStore
from intelliform.services.sweeper import SessionSweeper


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: SchemaRegistry
    session_store: SessionStore
    orchestrator: ConversationOrchestrator
    document_service: DocumentService
    sweeper: SessionSweeper
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    registry = SchemaRegistry.default()
    session_store = InMemorySessionStore(
        log_limit=resolved_settings.conversation_log_limit
    )

    advisory_client: OpenAIAdvisoryClient | None = None
    advisory_service: AdvisoryService | None = None
    if advisory_enabled(resolved_settings):
        advisory_client = OpenAIAdvisoryClient.create(
            resolved_settings.openai_api_key or ""
        )
        advisory_service = AdvisoryService(
            client=advisory_client,
            registry=registry,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
            timeout_seconds=resolved_settings.advisory_timeout_seconds,
        )
    resolver = FormResolver.create(registry, advisory_service)
    state_machine = SessionStateMachine(
        registry=registry,
        resolver=resolver,
        history_turns=resolved_settings.advisory_history_turns,
    )
    orchestrator = ConversationOrchestrator(
        store=session_store, state_machine=state_machine
    )
    renderer = HttpxDocumentRenderer.create(resolved_settings.renderer_base_url)
    document_service = DocumentService(store=session_store, renderer=renderer)
    sweeper = SessionSweeper(
        store=session_store,
        file_lifecycle=LocalFileLifecycle(Path(resolved_settings.downloads_dir)),
        max_idle=timedelta(seconds=resolved_settings.session_max_idle_seconds),
        interval_seconds=resolved_settings.session_sweep_interval_seconds,
    )

    async def close_resources() -> None:
        await renderer.close()
        if advisory_client is not None:
            await advisory_client.close()

    return AppContainer(
        settings=resolved_settings,
        registry=registry,
        session_store=session_store,
        orchestrator=orchestrator,
        document_service=document_service,
        sweeper=sweeper,
        close_resources=close_resources,
    )
