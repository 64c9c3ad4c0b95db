"""Custom exceptions for the speech-coach service."""


class AnalysisPipelineError(Exception):
    """Base class for failures in the upload/submit/poll/score pipeline."""


class UploadError(AnalysisPipelineError):
    """Raised when uploading audio to the transcription provider fails."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        message = "Failed to upload audio to transcription provider"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class SubmissionError(AnalysisPipelineError):
    """Raised when creating a transcription job fails."""

    def __init__(self, audio_url: str, cause: Exception | None = None):
        self.audio_url = audio_url
        self.cause = cause
        message = f"Failed to submit transcription job for '{audio_url}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class JobStatusError(AnalysisPipelineError):
    """Raised when fetching the status of a transcription job fails."""

    def __init__(self, job_id: str, cause: Exception | None = None):
        self.job_id = job_id
        self.cause = cause
        message = f"Failed to fetch status of transcription job '{job_id}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class TranscriptionFailedError(AnalysisPipelineError):
    """Raised when the provider reports that a transcription job failed."""

    def __init__(self, job_id: str, reason: str | None = None):
        self.job_id = job_id
        self.reason = reason
        message = f"Transcription job '{job_id}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PollingTimeoutError(AnalysisPipelineError):
    """Raised when a transcription job does not finish within the poll budget."""

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"Transcription job '{job_id}' did not finish after {attempts} status checks"
        )


class KeyValueStoreError(Exception):
    """Raised when a key-value store operation fails."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Key-value store {operation} failed for key '{key}'")


class RecordingStoreError(Exception):
    """Raised when reading or writing the recording collection fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Recording store {operation} failed")
