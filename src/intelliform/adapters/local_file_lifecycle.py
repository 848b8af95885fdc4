"""Filesystem-backed reclamation of generated documents."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from intelliform.domain.sessions import DocumentRef
from intelliform.services.sweeper import FileLifecycle

_logger = logging.getLogger(__name__)


@dataclass
class LocalFileLifecycle(FileLifecycle):
    """Deletes generated documents from the downloads directory."""

    downloads_dir: Path

    def reclaim(self, documents: Sequence[DocumentRef]) -> int:
        """Delete each referenced file; missing files are skipped."""
        root = self.downloads_dir.resolve()
        removed = 0
        for document in documents:
            path = (root / document.filename).resolve()
            if path.parent != root:
                _logger.warning("Refusing to delete %s outside downloads", path)
                continue
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            removed += 1
        return removed
