"""Document generation gated on completed sessions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from intelliform.domain.forms import FormSchema
from intelliform.domain.sessions import DocumentRef, SessionState
from intelliform.services.store import SessionStore

_logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a request names a session that does not exist."""


class SessionNotReadyError(RuntimeError):
    """Raised when a document is requested before the form is complete."""


class DocumentRenderer(Protocol):
    """Interface for the external document rendering collaborator."""

    async def render(
        self, answers: dict[str, str], schema: FormSchema, filename: str
    ) -> str:
        """Render a document and return its storage reference."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class DocumentService:
    """Hands completed answer sets to the renderer and records the result."""

    store: SessionStore
    renderer: DocumentRenderer
    clock: Callable[[], datetime] = _utcnow

    async def generate(self, session_id: str) -> DocumentRef:
        """Render the document for a completed session."""
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        async with self.store.lock(session.id):
            if session.state is not SessionState.COMPLETE or session.schema is None:
                raise SessionNotReadyError(
                    f"Session {session_id} is {session.state}, not COMPLETE"
                )
            created_at = self.clock()
            stamp = int(created_at.timestamp() * 1000)
            filename = f"{session.schema.id}_{stamp}_{uuid4().hex[:8]}.pdf"
            storage_ref = await self.renderer.render(
                dict(session.answers), session.schema, filename
            )
            document = DocumentRef(
                filename=filename,
                created_at=created_at,
                schema_id=session.schema.id,
                storage_ref=storage_ref,
            )
            session.documents.append(document)
            session.touch(created_at)
        _logger.info("Generated %s for session %s", filename, session_id)
        return document
