"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from renderer_views.core.app_factory import create_app
from renderer_views.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Renderer Views", "views": "/views/{view_name}", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    from renderer_views.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "renderer_views.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
