"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI

from speech_coach.config import load_config
from speech_coach.routes import analyze_router, recordings_router

patch_all()

app = FastAPI(title="Speech Coach Service")
app.include_router(analyze_router)
app.include_router(recordings_router)


def main():
    """Serves the API with uvicorn, keeping the JSON log handlers."""
    config = load_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
