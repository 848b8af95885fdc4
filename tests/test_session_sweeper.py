"""Tests for session expiry and file reclamation."""

from datetime import timedelta

from intelliform.adapters.local_file_lifecycle import LocalFileLifecycle
from intelliform.domain.sessions import DocumentRef
from intelliform.services.store import InMemorySessionStore
from intelliform.services.sweeper import SessionSweeper


def test_sweeper_hands_stale_documents_to_file_lifecycle(
    clock, file_lifecycle
) -> None:
    store = InMemorySessionStore(clock=clock)
    session = store.get_or_create(None)
    document = DocumentRef(
        filename="voter_id_1.pdf", created_at=clock.now, schema_id="voter_id"
    )
    session.documents.append(document)
    sweeper = SessionSweeper(
        store=store,
        file_lifecycle=file_lifecycle,
        max_idle=timedelta(hours=6),
        interval_seconds=60,
    )

    assert sweeper.run_once() == []
    clock.advance(timedelta(hours=7))
    assert sweeper.run_once() == [document]

    assert file_lifecycle.reclaimed == [document]
    assert store.count() == 0


def test_local_file_lifecycle_deletes_files(tmp_path, clock) -> None:
    kept = tmp_path / "keep.pdf"
    stale = tmp_path / "stale.pdf"
    kept.write_bytes(b"%PDF")
    stale.write_bytes(b"%PDF")
    lifecycle = LocalFileLifecycle(tmp_path)

    removed = lifecycle.reclaim(
        [
            DocumentRef(filename="stale.pdf", created_at=clock.now, schema_id="x"),
            DocumentRef(filename="gone.pdf", created_at=clock.now, schema_id="x"),
            DocumentRef(filename="../keep.pdf", created_at=clock.now, schema_id="x"),
        ]
    )

    assert removed == 1
    assert not stale.exists()
    assert kept.exists()
