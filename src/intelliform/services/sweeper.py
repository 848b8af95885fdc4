"""Periodic expiry of idle sessions."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from intelliform.domain.sessions import DocumentRef
from intelliform.services.store import SessionStore

_logger = logging.getLogger(__name__)


class FileLifecycle(Protocol):
    """Interface for reclaiming artifacts of expired sessions."""

    def reclaim(self, documents: Sequence[DocumentRef]) -> int:
        """Delete the artifacts behind the references; return how many."""


@dataclass
class SessionSweeper:
    """Evicts idle sessions and hands their documents to the file lifecycle."""

    store: SessionStore
    file_lifecycle: FileLifecycle
    max_idle: timedelta
    interval_seconds: float

    def run_once(self) -> list[DocumentRef]:
        """Sweep the store once and reclaim stale documents."""
        documents = self.store.sweep(self.max_idle)
        if documents:
            removed = self.file_lifecycle.reclaim(documents)
            _logger.info(
                "Reclaimed %s of %s stale documents", removed, len(documents)
            )
        return documents

    async def run_forever(self) -> None:
        """Sweep on a fixed interval until cancelled."""
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.run_once()
            except Exception:
                _logger.exception("Session sweep failed")
