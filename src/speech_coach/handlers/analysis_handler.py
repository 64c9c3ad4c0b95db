"""Handler that drives one audio file through the analysis pipeline."""

import os
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from speech_coach.domain import AnalysisResult, JobPoller, SpeechScorer
from speech_coach.infrastructure.interfaces import TranscriptionProvider
from speech_coach.logging import setup_logging
from speech_coach.utils import spool_upload

logger = setup_logging()


class PipelineStage(str, Enum):
    """Sequential stages of one analysis request."""

    IDLE = "idle"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"
    POLLING = "polling"
    SCORING = "scoring"
    RESPONDING = "responding"
    CLEANING_UP = "cleaning-up"


class AnalysisHandler:
    """Orchestrates upload, job submission, polling and scoring."""

    def __init__(
        self,
        provider: TranscriptionProvider,
        poller: JobPoller,
        scorer: SpeechScorer,
        upload_dir: Path,
    ):
        self._provider = provider
        self._poller = poller
        self._scorer = scorer
        self._upload_dir = upload_dir

    def process_upload(self, stream: BinaryIO, suffix: str = "") -> AnalysisResult:
        """
        Analyzes an uploaded audio stream.

        The stream is spooled to a temporary file under the upload directory,
        which is removed exactly once whether or not the pipeline succeeds.

        Args:
            stream: File-like object with the uploaded audio.
            suffix: Extension for the temporary file, e.g. ".m4a".

        Returns:
            AnalysisResult with transcript, confidence and tips.

        Raises:
            OSError: If the temporary file cannot be written or read.
            AnalysisPipelineError: If any pipeline stage fails.
        """
        temp_path = spool_upload(stream, self._upload_dir, suffix)
        try:
            return self.analyze(temp_path.read_bytes())
        finally:
            self._log_stage(PipelineStage.CLEANING_UP, path=str(temp_path))
            os.remove(temp_path)

    def analyze(self, audio_data: bytes) -> AnalysisResult:
        """
        Runs upload -> submit -> poll -> score for raw audio bytes.

        Raises:
            UploadError: If the provider upload fails.
            SubmissionError: If the transcription job cannot be created.
            JobStatusError: If a status request fails.
            TranscriptionFailedError: If the provider reports the job failed.
            PollingTimeoutError: If the job does not finish in time.
        """
        stage = PipelineStage.IDLE
        try:
            stage = self._log_stage(PipelineStage.UPLOADING, size_bytes=len(audio_data))
            audio_url = self._provider.upload_audio(audio_data)

            stage = self._log_stage(PipelineStage.SUBMITTING)
            job = self._provider.submit_job(audio_url)

            stage = self._log_stage(PipelineStage.POLLING, job_id=job.id)
            transcription = self._poller.wait_for_result(job.id)

            stage = self._log_stage(PipelineStage.SCORING, job_id=job.id)
            result = self._scorer.score(transcription)
        except Exception:
            logger.exception("Analysis pipeline failed", extra={"stage": stage.value})
            raise

        self._log_stage(PipelineStage.RESPONDING, confidence=result.confidence)
        return result

    def _log_stage(self, stage: PipelineStage, **context) -> PipelineStage:
        logger.info("Pipeline stage", extra={"stage": stage.value, **context})
        return stage
