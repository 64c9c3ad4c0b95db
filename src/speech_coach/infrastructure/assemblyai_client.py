"""AssemblyAI REST implementation of the TranscriptionProvider interface."""

import httpx

from speech_coach.config import AssemblyAIConfig
from speech_coach.domain.models import JobStatus, TranscriptionJob, TranscriptionResult
from speech_coach.exceptions import JobStatusError, SubmissionError, UploadError
from speech_coach.logging import setup_logging

from .interfaces import TranscriptionProvider

logger = setup_logging()


class AssemblyAIClient(TranscriptionProvider):
    """Talks to the AssemblyAI v2 upload and transcript endpoints."""

    def __init__(self, client: httpx.Client, config: AssemblyAIConfig):
        self._client = client
        self._config = config
        self._base_url = config.base_url.rstrip("/")

    @property
    def _auth_headers(self) -> dict[str, str]:
        return {"authorization": self._config.api_key}

    def upload_audio(self, audio_data: bytes) -> str:
        """Uploads raw audio bytes and returns the provider's upload URL."""
        try:
            response = self._client.post(
                f"{self._base_url}/upload",
                content=audio_data,
                headers={
                    **self._auth_headers,
                    "content-type": "application/octet-stream",
                },
            )
            response.raise_for_status()
            upload_url = response.json()["upload_url"]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.exception(
                "AssemblyAI upload failed", extra={"size_bytes": len(audio_data)}
            )
            raise UploadError(e) from e

        logger.info(
            "Audio uploaded to AssemblyAI", extra={"size_bytes": len(audio_data)}
        )
        return upload_url

    def submit_job(self, audio_url: str) -> TranscriptionJob:
        """Creates a transcript job with sentiment analysis and entity detection."""
        payload = {
            "audio_url": audio_url,
            "sentiment_analysis": self._config.sentiment_analysis,
            "entity_detection": self._config.entity_detection,
        }
        try:
            response = self._client.post(
                f"{self._base_url}/transcript",
                json=payload,
                headers=self._auth_headers,
            )
            response.raise_for_status()
            body = response.json()
            job = TranscriptionJob(
                id=body["id"],
                status=JobStatus(body.get("status", JobStatus.QUEUED.value)),
            )
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.exception(
                "AssemblyAI job submission failed", extra={"audio_url": audio_url}
            )
            raise SubmissionError(audio_url, e) from e

        logger.info(
            "Transcription job submitted",
            extra={"job_id": job.id, "status": job.status.value},
        )
        return job

    def get_job(self, job_id: str) -> TranscriptionJob:
        """Fetches a transcript job; completed jobs carry their parsed result."""
        try:
            response = self._client.get(
                f"{self._base_url}/transcript/{job_id}",
                headers=self._auth_headers,
            )
            response.raise_for_status()
            return self._parse_job(job_id, response.json())
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.exception(
                "AssemblyAI status request failed", extra={"job_id": job_id}
            )
            raise JobStatusError(job_id, e) from e

    def _parse_job(self, job_id: str, body: dict) -> TranscriptionJob:
        status = JobStatus(body["status"])
        result = None
        if status == JobStatus.COMPLETED:
            result = TranscriptionResult(
                text=body.get("text"),
                entities=body.get("entities"),
                sentiment_segments=body.get("sentiment_analysis_results"),
                words=body.get("words"),
                audio_duration=body.get("audio_duration"),
            )
        return TranscriptionJob(
            id=body.get("id") or job_id,
            status=status,
            error=body.get("error"),
            result=result,
        )
