"""Request and response models for the speech-coach API."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str


class RenameRequest(BaseModel):
    """Body of a recording rename request."""

    name: str = Field(min_length=1)
