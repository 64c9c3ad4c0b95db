"""Bounded polling of provider transcription jobs."""

import time
from collections.abc import Callable

from speech_coach.exceptions import PollingTimeoutError, TranscriptionFailedError
from speech_coach.infrastructure.interfaces import TranscriptionProvider
from speech_coach.logging import setup_logging

from .models import JobStatus, TranscriptionResult

logger = setup_logging()


class JobPoller:
    """Waits for a transcription job to reach a terminal state."""

    def __init__(
        self,
        provider: TranscriptionProvider,
        interval_seconds: float,
        max_attempts: int,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._provider = provider
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep

    def wait_for_result(self, job_id: str) -> TranscriptionResult:
        """
        Polls a job until it completes, fails, or the attempt budget runs out.

        Sleeps for the configured interval between status requests, never
        before the first one and never after the last one.

        Args:
            job_id: Identifier of the submitted job.

        Returns:
            The transcription result of the completed job.

        Raises:
            JobStatusError: If a status request fails.
            TranscriptionFailedError: If the provider reports the job failed.
            PollingTimeoutError: If the job is still pending after max_attempts.
        """
        for attempt in range(1, self._max_attempts + 1):
            job = self._provider.get_job(job_id)

            if job.status == JobStatus.COMPLETED:
                if job.result is None:
                    raise TranscriptionFailedError(
                        job_id, "job completed without a transcript"
                    )
                logger.info(
                    "Transcription job completed",
                    extra={"job_id": job_id, "attempt": attempt},
                )
                return job.result

            if job.status == JobStatus.ERROR:
                logger.error(
                    "Transcription job failed",
                    extra={"job_id": job_id, "attempt": attempt, "reason": job.error},
                )
                raise TranscriptionFailedError(job_id, job.error)

            logger.info(
                "Transcription job pending",
                extra={
                    "job_id": job_id,
                    "status": job.status.value,
                    "attempt": attempt,
                    "max_attempts": self._max_attempts,
                },
            )
            if attempt < self._max_attempts:
                self._sleep(self._interval_seconds)

        logger.error(
            "Transcription job polling timed out",
            extra={"job_id": job_id, "attempts": self._max_attempts},
        )
        raise PollingTimeoutError(job_id, self._max_attempts)
