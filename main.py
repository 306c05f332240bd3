"""
PointsDesk - Loyalty Points Desk
FastAPI Application Entry Point
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from pointsdesk import __version__
from pointsdesk.core import settings, setup_logging
from pointsdesk.api import api_router
from pointsdesk.views import build_workspace

logger = logging.getLogger(__name__)


# Lifespan for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: wire the screens unless a workspace was provided up front
    if getattr(app.state, "workspace", None) is None:
        app.state.workspace = build_workspace()
    logger.info(f"{settings.APP_NAME} starting on port {settings.APP_PORT} (API: {settings.API_BASE_URL})")

    yield

    # Shutdown
    app.state.workspace.notifier.dismiss()
    logger.info(f"{settings.APP_NAME} shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Loyalty points desk: customers, purchases, redemptions and points history",
    version=__version__,
    lifespan=lifespan
)

# Include routers
app.include_router(api_router, prefix="/api")


# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.APP_NAME}


if __name__ == "__main__":
    setup_logging()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
