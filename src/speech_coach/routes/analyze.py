"""Speech analysis endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from speech_coach.dependencies import get_analysis_handler
from speech_coach.domain import AnalysisResult
from speech_coach.handlers import AnalysisHandler
from speech_coach.logging import setup_logging
from speech_coach.response_models import ErrorResponse
from speech_coach.utils import upload_suffix

from .errors import error_response

logger = setup_logging()

router = APIRouter(tags=["analysis"])

AnalysisHandlerDep = Annotated[AnalysisHandler, Depends(get_analysis_handler)]


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={500: {"model": ErrorResponse}},
)
def analyze_audio(
    handler: AnalysisHandlerDep,
    audio: Annotated[UploadFile | None, File()] = None,
):
    """
    Transcribes an uploaded recording and scores how confident it sounds.

    Any failure, including a missing file, is reported as 500 {"error": ...}.
    """
    if audio is None:
        logger.error("Analyze request without audio file")
        return error_response("No audio file uploaded")

    logger.info(
        "Received analyze request",
        extra={"file_name": audio.filename, "content_type": audio.content_type},
    )

    try:
        return handler.process_upload(audio.file, upload_suffix(audio.filename))
    except Exception as e:
        logger.error(f"Error analyzing {audio.filename}: {e}")
        return error_response(str(e))
