"""Keyed table of active sessions with idle expiry."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import uuid4

from intelliform.domain.sessions import DEFAULT_LOG_LIMIT, DocumentRef, Session

_logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Storage interface for conversation sessions."""

    def get_or_create(self, session_id: str | None) -> Session:
        """Return the session for an id, creating a fresh one if unknown."""

    def get(self, session_id: str) -> Session | None:
        """Return a session by id, if present."""

    def sweep(self, max_idle: timedelta) -> list[DocumentRef]:
        """Remove idle sessions and return their document references."""

    def lock(self, session_id: str) -> asyncio.Lock:
        """Return the lock serializing work on a session."""

    def count(self) -> int:
        """Return the number of live sessions."""


@dataclass
class _StoreEntry:
    session: Session
    lock: asyncio.Lock


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session table."""

    _entries: dict[str, _StoreEntry]
    clock: Callable[[], datetime]
    log_limit: int

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        log_limit: int = DEFAULT_LOG_LIMIT,
    ) -> None:
        self._entries = {}
        self.clock = clock
        self.log_limit = log_limit

    def get_or_create(self, session_id: str | None) -> Session:
        """Return a known session, touching it, or create one under a new id."""
        entry = self._entries.get(session_id) if session_id else None
        if entry is not None:
            entry.session.touch(self.clock())
            return entry.session
        now = self.clock()
        session = Session(
            id=str(uuid4()),
            created_at=now,
            last_activity=now,
            log_limit=self.log_limit,
        )
        self._entries[session.id] = _StoreEntry(session=session, lock=asyncio.Lock())
        _logger.info("Created session %s", session.id)
        return session

    def get(self, session_id: str) -> Session | None:
        entry = self._entries.get(session_id)
        return entry.session if entry else None

    def lock(self, session_id: str) -> asyncio.Lock:
        entry = self._entries.get(session_id)
        if entry is None:
            raise KeyError(session_id)
        return entry.lock

    def sweep(self, max_idle: timedelta) -> list[DocumentRef]:
        """Evict sessions idle for strictly longer than max_idle.

        Sessions whose lock is held are mid-transition and are kept.
        """
        now = self.clock()
        expired = [
            session_id
            for session_id, entry in self._entries.items()
            if now - entry.session.last_activity > max_idle
            and not entry.lock.locked()
        ]
        documents: list[DocumentRef] = []
        for session_id in expired:
            entry = self._entries.pop(session_id)
            documents.extend(entry.session.documents)
        if expired:
            _logger.info("Cleaned up %s expired sessions", len(expired))
        return documents

    def count(self) -> int:
        return len(self._entries)
