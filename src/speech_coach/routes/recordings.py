"""Recording store endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Response, UploadFile

from speech_coach.dependencies import get_recording_handler, get_recording_repository
from speech_coach.domain import Recording
from speech_coach.exceptions import RecordingStoreError
from speech_coach.handlers import RecordingHandler
from speech_coach.logging import setup_logging
from speech_coach.repositories import RecordingRepository
from speech_coach.response_models import ErrorResponse, RenameRequest
from speech_coach.utils import upload_suffix

from .errors import error_response

logger = setup_logging()

router = APIRouter(prefix="/recordings", tags=["recordings"])

RepositoryDep = Annotated[RecordingRepository, Depends(get_recording_repository)]
RecordingHandlerDep = Annotated[RecordingHandler, Depends(get_recording_handler)]


@router.get(
    "",
    response_model=list[Recording],
    responses={500: {"model": ErrorResponse}},
)
def list_recordings(repo: RepositoryDep):
    """Returns all recordings, newest first."""
    try:
        return repo.list_all()
    except RecordingStoreError as e:
        return error_response(str(e))


@router.post(
    "",
    response_model=Recording,
    status_code=201,
    responses={500: {"model": ErrorResponse}},
)
def create_recording(
    handler: RecordingHandlerDep,
    audio: UploadFile,
    duration: Annotated[float, Form(ge=0)],
    analyze: Annotated[bool, Form()] = True,
):
    """Stores a new recording, attaching its analysis when requested."""
    logger.info(
        "Received recording upload",
        extra={"file_name": audio.filename, "duration": duration, "analyze": analyze},
    )
    try:
        return handler.create(
            audio.file, duration, suffix=upload_suffix(audio.filename), analyze=analyze
        )
    except (RecordingStoreError, OSError) as e:
        logger.error(f"Error saving recording {audio.filename}: {e}")
        return error_response(str(e))


@router.patch(
    "/{recording_id}",
    response_model=Recording,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def rename_recording(recording_id: str, body: RenameRequest, repo: RepositoryDep):
    """Renames a recording."""
    try:
        recording = repo.rename(recording_id, body.name)
    except RecordingStoreError as e:
        return error_response(str(e))
    if recording is None:
        return error_response(f"Recording {recording_id} not found", status_code=404)
    return recording


@router.delete(
    "/{recording_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_recording(recording_id: str, repo: RepositoryDep):
    """Deletes a recording and its audio file."""
    try:
        deleted = repo.delete(recording_id)
    except RecordingStoreError as e:
        return error_response(str(e))
    if not deleted:
        return error_response(f"Recording {recording_id} not found", status_code=404)
    return Response(status_code=204)
