import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO


def spool_upload(stream: BinaryIO, directory: Path, suffix: str = "") -> Path:
    """
    Copies an uploaded stream into a new temporary file.

    The caller owns the returned path and is responsible for deleting it.
    """
    directory.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(suffix=suffix, dir=directory)
    try:
        with os.fdopen(fd, "wb") as fh:
            shutil.copyfileobj(stream, fh)
    except BaseException:
        os.remove(name)
        raise
    return Path(name)


def upload_suffix(filename: str | None) -> str:
    """Returns the lower-cased extension of an uploaded file name, if any."""
    return os.path.splitext(filename or "")[1].lower()
