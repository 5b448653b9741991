"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn layout_repair.main:app --reload
"""

from fastapi import FastAPI

from layout_repair.core.config import settings
from layout_repair.core.logging_config import configure_logging
from layout_repair.routers import repair

configure_logging()

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.DEBUG,
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# repair.router: /layout-repair/project, /layout-repair/component
app.include_router(repair.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
