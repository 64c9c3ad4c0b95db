"""Handler for storing new recordings with an optional analysis."""

from pathlib import Path
from typing import BinaryIO

from speech_coach.domain import AnalysisResult, Recording
from speech_coach.exceptions import AnalysisPipelineError
from speech_coach.logging import setup_logging
from speech_coach.repositories import RecordingRepository
from speech_coach.utils import spool_upload

from .analysis_handler import AnalysisHandler

logger = setup_logging()


class RecordingHandler:
    """Saves uploaded recordings, analyzing them first when requested."""

    def __init__(
        self,
        repository: RecordingRepository,
        analysis_handler: AnalysisHandler,
        upload_dir: Path,
    ):
        self._repository = repository
        self._analysis_handler = analysis_handler
        self._upload_dir = upload_dir

    def create(
        self,
        stream: BinaryIO,
        duration: float,
        suffix: str = "",
        analyze: bool = True,
    ) -> Recording:
        """
        Stores an uploaded recording.

        A failed analysis does not prevent the recording from being saved;
        it is stored without an analysis instead.

        Raises:
            OSError: If the upload cannot be spooled to disk.
            RecordingStoreError: If the recording cannot be stored.
        """
        temp_path = spool_upload(stream, self._upload_dir, suffix)
        try:
            analysis = self._analyze(temp_path) if analyze else None
            return self._repository.save(temp_path, duration, analysis)
        finally:
            # save() moves the file away on success
            temp_path.unlink(missing_ok=True)

    def _analyze(self, path: Path) -> AnalysisResult | None:
        try:
            return self._analysis_handler.analyze(path.read_bytes())
        except AnalysisPipelineError:
            logger.warning(
                "Analysis failed, saving recording without it",
                extra={"path": str(path)},
            )
            return None
