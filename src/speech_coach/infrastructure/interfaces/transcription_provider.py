"""Abstract interface for transcription provider operations."""

from abc import ABC, abstractmethod

from speech_coach.domain.models import TranscriptionJob


class TranscriptionProvider(ABC):
    """Abstract base class for speech-to-text providers with async jobs."""

    @abstractmethod
    def upload_audio(self, audio_data: bytes) -> str:
        """
        Uploads raw audio to the provider.

        Args:
            audio_data: Raw audio file bytes.

        Returns:
            The provider URL referencing the uploaded audio.

        Raises:
            UploadError: If the upload fails.
        """
        pass

    @abstractmethod
    def submit_job(self, audio_url: str) -> TranscriptionJob:
        """
        Requests a transcription job with sentiment and entity analysis.

        Args:
            audio_url: URL returned by upload_audio.

        Returns:
            The newly created job.

        Raises:
            SubmissionError: If the job cannot be created.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> TranscriptionJob:
        """
        Fetches the current state of a transcription job.

        Args:
            job_id: Identifier returned by submit_job.

        Returns:
            The job snapshot; carries a result once completed.

        Raises:
            JobStatusError: If the status request fails.
        """
        pass
