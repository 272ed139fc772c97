"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from label_lookup.core.app_factory import create_app
from label_lookup.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Label Lookup API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    from label_lookup.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "label_lookup.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
