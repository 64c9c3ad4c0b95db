"""Tests for the RecordingRepository over an in-memory key-value store."""

import json
import threading
import time
from itertools import count
from unittest.mock import MagicMock

import pytest

from speech_coach.domain import AnalysisResult
from speech_coach.exceptions import KeyValueStoreError, RecordingStoreError
from speech_coach.infrastructure.interfaces import KeyValueStore
from speech_coach.repositories import RecordingRepository

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _ticking_clock(start: float = 1000.0):
    """Clock advancing one second per call."""
    ticks = count()
    return lambda: start + next(ticks)


@pytest.fixture
def recordings_dir(tmp_path):
    return tmp_path / "recordings"


@pytest.fixture
def repository(kv_store, recordings_dir):
    return RecordingRepository(kv_store, recordings_dir, clock=_ticking_clock())


@pytest.fixture
def make_audio(tmp_path):
    """Creates a throwaway audio file in an incoming directory."""
    incoming = tmp_path / "incoming"
    incoming.mkdir()
    names = count()

    def _make(data: bytes = b"audio-data", suffix: str = ".m4a"):
        path = incoming / f"clip{next(names)}{suffix}"
        path.write_bytes(data)
        return path

    return _make


def _seed(repository, make_audio, n: int):
    return [repository.save(make_audio(), duration=float(i)) for i in range(n)]


# ===================================================================
# list_all
# ===================================================================


def test_missing_key_lists_nothing(repository):
    assert repository.list_all() == []


def test_corrupt_collection_raises(repository, kv_store):
    kv_store.set("recordings", "{not json")

    with pytest.raises(RecordingStoreError) as exc_info:
        repository.list_all()

    assert exc_info.value.operation == "list"


def test_store_failure_surfaces_to_caller(recordings_dir):
    store = MagicMock(spec=KeyValueStore)
    store.get.side_effect = KeyValueStoreError("recordings", "get")
    repository = RecordingRepository(store, recordings_dir)

    with pytest.raises(RecordingStoreError) as exc_info:
        repository.list_all()

    assert isinstance(exc_info.value.cause, KeyValueStoreError)


# ===================================================================
# save
# ===================================================================


def test_save_moves_file_and_records_metadata(repository, make_audio, recordings_dir):
    source = make_audio(b"12345")
    analysis = AnalysisResult(transcript="hi", confidence=70, tips=[])

    recording = repository.save(source, duration=4.2, analysis=analysis)

    assert not source.exists()
    target = recordings_dir / "recording_1000000.m4a"
    assert target.read_bytes() == b"12345"
    assert recording.id == "1000000"
    assert recording.uri == str(target.resolve())
    assert recording.size == 5
    assert recording.duration == 4.2
    assert recording.name == "Recording 1970-01-01 00:16:40"
    assert recording.created_at == "1970-01-01T00:16:40+00:00"
    assert recording.analysis == analysis


def test_save_keeps_newest_first(repository, make_audio):
    first, second = _seed(repository, make_audio, 2)

    assert [r.id for r in repository.list_all()] == [second.id, first.id]


def test_save_serializes_flat_collection_under_key(repository, make_audio, kv_store):
    recording = repository.save(make_audio(), duration=1.0)

    stored = json.loads(kv_store.get("recordings"))

    assert isinstance(stored, list)
    assert stored[0]["id"] == recording.id
    assert stored[0]["createdAt"] == recording.created_at
    assert "created_at" not in stored[0]
    assert stored[0]["analysis"] is None


def test_ids_colliding_in_same_millisecond_are_bumped(kv_store, recordings_dir, make_audio):
    repository = RecordingRepository(kv_store, recordings_dir, clock=lambda: 1000.0)

    first = repository.save(make_audio(), duration=1.0)
    second = repository.save(make_audio(), duration=1.0)

    assert first.id == "1000000"
    assert second.id == "1000001"


def test_save_of_missing_file_leaves_store_untouched(repository, kv_store, tmp_path):
    with pytest.raises(RecordingStoreError) as exc_info:
        repository.save(tmp_path / "ghost.m4a", duration=1.0)

    assert exc_info.value.operation == "save"
    assert kv_store.get("recordings") is None


# ===================================================================
# delete
# ===================================================================


def test_delete_removes_one_entry_and_keeps_order(repository, make_audio):
    oldest, middle, newest = _seed(repository, make_audio, 3)

    assert repository.delete(middle.id) is True

    assert [r.id for r in repository.list_all()] == [newest.id, oldest.id]


def test_delete_removes_audio_file(repository, make_audio):
    recording = repository.save(make_audio(), duration=1.0)

    repository.delete(recording.id)

    assert not (repository._recordings_dir / f"recording_{recording.id}.m4a").exists()


def test_delete_unknown_id_is_noop(repository, make_audio, kv_store):
    _seed(repository, make_audio, 2)
    before = kv_store.get("recordings")

    assert repository.delete("nope") is False
    assert kv_store.get("recordings") == before


def test_delete_tolerates_missing_audio_file(repository, make_audio):
    recording = repository.save(make_audio(), duration=1.0)
    (repository._recordings_dir / f"recording_{recording.id}.m4a").unlink()

    assert repository.delete(recording.id) is True
    assert repository.list_all() == []


# ===================================================================
# rename
# ===================================================================


def test_rename_updates_only_the_target(repository, make_audio):
    first, second = _seed(repository, make_audio, 2)

    renamed = repository.rename(first.id, "Pitch practice")

    assert renamed.name == "Pitch practice"
    stored = {r.id: r.name for r in repository.list_all()}
    assert stored[first.id] == "Pitch practice"
    assert stored[second.id] == second.name


def test_rename_unknown_id_is_noop(repository, make_audio, kv_store):
    _seed(repository, make_audio, 2)
    before = kv_store.get("recordings")

    assert repository.rename("nope", "New name") is None
    assert kv_store.get("recordings") == before


def test_rename_write_failure_surfaces(recordings_dir, kv_store, make_audio):
    repository = RecordingRepository(kv_store, recordings_dir)
    recording = repository.save(make_audio(), duration=1.0)
    store = MagicMock(spec=KeyValueStore)
    store.get.return_value = kv_store.get("recordings")
    store.set.side_effect = KeyValueStoreError("recordings", "set")
    failing = RecordingRepository(store, recordings_dir)

    with pytest.raises(RecordingStoreError) as exc_info:
        failing.rename(recording.id, "x")

    assert exc_info.value.operation == "rename"


# ===================================================================
# write failures and concurrency
# ===================================================================


class _SlowStore(KeyValueStore):
    """Wraps a store and delays reads, widening read-modify-write races."""

    def __init__(self, inner: KeyValueStore, delay: float = 0.05):
        self._inner = inner
        self._delay = delay

    def get(self, key: str) -> str | None:
        value = self._inner.get(key)
        time.sleep(self._delay)
        return value

    def set(self, key: str, value: str) -> None:
        self._inner.set(key, value)


def _failing_writes(kv_store) -> KeyValueStore:
    store = MagicMock(spec=KeyValueStore)
    store.get.side_effect = kv_store.get
    store.set.side_effect = KeyValueStoreError("recordings", "set")
    return store


def test_failed_write_on_save_leaves_no_orphan_file(kv_store, recordings_dir, make_audio):
    repository = RecordingRepository(_failing_writes(kv_store), recordings_dir)

    with pytest.raises(RecordingStoreError) as exc_info:
        repository.save(make_audio(), duration=1.0)

    assert exc_info.value.operation == "save"
    assert list(recordings_dir.iterdir()) == []


def test_failed_write_on_delete_keeps_audio_file(kv_store, recordings_dir, make_audio):
    recording = RecordingRepository(kv_store, recordings_dir).save(make_audio(), 1.0)
    repository = RecordingRepository(_failing_writes(kv_store), recordings_dir)

    with pytest.raises(RecordingStoreError):
        repository.delete(recording.id)

    assert (recordings_dir / f"recording_{recording.id}.m4a").exists()
    assert [r.id for r in RecordingRepository(kv_store, recordings_dir).list_all()] == [
        recording.id
    ]


def test_concurrent_saves_keep_every_recording(kv_store, recordings_dir, make_audio):
    repository = RecordingRepository(
        _SlowStore(kv_store), recordings_dir, clock=_ticking_clock()
    )
    sources = [make_audio() for _ in range(4)]
    start = threading.Barrier(len(sources))
    errors = []

    def _save(path):
        start.wait()
        try:
            repository.save(path, duration=1.0)
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=_save, args=(p,)) for p in sources]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    stored = repository.list_all()
    assert len(stored) == len(sources)
    assert len({r.id for r in stored}) == len(sources)
    assert len(list(recordings_dir.iterdir())) == len(sources)
