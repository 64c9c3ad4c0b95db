"""Repository for the locally stored recording collection."""

import shutil
import threading
import time
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from speech_coach.domain.models import AnalysisResult, Recording
from speech_coach.exceptions import KeyValueStoreError, RecordingStoreError
from speech_coach.infrastructure.interfaces import KeyValueStore
from speech_coach.logging import setup_logging

logger = setup_logging()

_RECORDINGS = TypeAdapter(list[Recording])


class RecordingRepository:
    """
    Handles persistence of recordings and their audio files.

    The whole collection lives under one key as a JSON array, newest first.
    Every storage failure is raised as RecordingStoreError; nothing is
    swallowed, so callers decide how to degrade. Mutations hold a lock
    around their read-modify-write of the collection.
    """

    def __init__(
        self,
        store: KeyValueStore,
        recordings_dir: Path,
        key: str = "recordings",
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self._recordings_dir = recordings_dir
        self._key = key
        self._clock = clock
        self._lock = threading.Lock()

    def list_all(self) -> list[Recording]:
        """
        Returns all recordings, newest first.

        Raises:
            RecordingStoreError: If the collection cannot be read or parsed.
        """
        try:
            raw = self._store.get(self._key)
            if not raw:
                return []
            return _RECORDINGS.validate_json(raw)
        except (KeyValueStoreError, ValidationError) as e:
            logger.exception("Failed to read recordings", extra={"key": self._key})
            raise RecordingStoreError("list", cause=e) from e

    def save(
        self,
        local_file: Path,
        duration: float,
        analysis: AnalysisResult | None = None,
    ) -> Recording:
        """
        Moves an audio file into the recordings directory and records it.

        If the collection cannot be written, the moved file is removed again
        so no audio is left without a record.

        Args:
            local_file: Path of the audio file to take ownership of.
            duration: Recording length in seconds.
            analysis: Optional analysis result to attach.

        Returns:
            The newly stored recording.

        Raises:
            RecordingStoreError: If moving the file or writing the collection fails.
        """
        with self._lock:
            recordings = self.list_all()

            now = self._clock()
            recording_id = self._next_id(now, {r.id for r in recordings})
            created = datetime.fromtimestamp(now, tz=timezone.utc)
            target = (
                self._recordings_dir / f"recording_{recording_id}{local_file.suffix}"
            )

            try:
                self._recordings_dir.mkdir(parents=True, exist_ok=True)
                shutil.move(str(local_file), target)
                size = target.stat().st_size
            except OSError as e:
                logger.exception(
                    "Failed to store recording file", extra={"source": str(local_file)}
                )
                raise RecordingStoreError("save", cause=e) from e

            recording = Recording(
                id=recording_id,
                name=f"Recording {created:%Y-%m-%d %H:%M:%S}",
                uri=str(target.resolve()),
                duration=duration,
                created_at=created.isoformat(),
                size=size,
                analysis=analysis,
            )
            recordings.insert(0, recording)
            try:
                self._write(recordings, "save")
            except RecordingStoreError:
                target.unlink(missing_ok=True)
                raise

        logger.info(
            "Recording saved",
            extra={
                "recording_id": recording.id,
                "size_bytes": size,
                "analyzed": analysis is not None,
            },
        )
        return recording

    def delete(self, recording_id: str) -> bool:
        """
        Removes a recording and then its audio file.

        Returns:
            True if a recording was removed, False if the id is unknown.

        Raises:
            RecordingStoreError: If the collection or the file cannot be updated.
        """
        with self._lock:
            recordings = self.list_all()
            match = next((r for r in recordings if r.id == recording_id), None)
            if match is None:
                logger.info("Recording not found", extra={"recording_id": recording_id})
                return False

            self._write([r for r in recordings if r.id != recording_id], "delete")

        try:
            Path(match.uri).unlink(missing_ok=True)
        except OSError as e:
            logger.exception(
                "Failed to delete recording file",
                extra={"recording_id": recording_id},
            )
            raise RecordingStoreError("delete", cause=e) from e

        logger.info("Recording deleted", extra={"recording_id": recording_id})
        return True

    def rename(self, recording_id: str, name: str) -> Recording | None:
        """
        Renames a recording.

        Returns:
            The renamed recording, or None if the id is unknown. An unknown id
            leaves the stored collection untouched.

        Raises:
            RecordingStoreError: If the collection cannot be read or written.
        """
        with self._lock:
            recordings = self.list_all()
            for index, recording in enumerate(recordings):
                if recording.id == recording_id:
                    renamed = recording.model_copy(update={"name": name})
                    recordings[index] = renamed
                    self._write(recordings, "rename")
                    break
            else:
                logger.info("Recording not found", extra={"recording_id": recording_id})
                return None

        logger.info("Recording renamed", extra={"recording_id": recording_id})
        return renamed

    def _write(self, recordings: list[Recording], operation: str) -> None:
        payload = _RECORDINGS.dump_json(recordings, by_alias=True).decode()
        try:
            self._store.set(self._key, payload)
        except KeyValueStoreError as e:
            logger.exception("Failed to write recordings", extra={"key": self._key})
            raise RecordingStoreError(operation, cause=e) from e

    @staticmethod
    def _next_id(now: float, taken: set[str]) -> str:
        """Millisecond timestamp id, bumped past any id already in use."""
        candidate = int(now * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)
