from fastapi.responses import JSONResponse

from speech_coach.response_models import ErrorResponse


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Builds the uniform {"error": ...} response."""
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )
