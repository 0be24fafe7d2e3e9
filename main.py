"""
SkillSync - Interview Practice Service

Main application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillsync.config.settings import get_settings
from skillsync.api.router import api_router
from skillsync.api.dependencies import build_orchestrator, cleanup
from skillsync.api.errors import register_exception_handlers
from skillsync.api.security import check_jwt_secret

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting SkillSync...")
    settings = get_settings()
    logger.info(f"Running in {'debug' if settings.debug else 'production'} mode")
    check_jwt_secret(settings)

    orchestrator = build_orchestrator(settings)
    app.state.orchestrator = orchestrator
    logger.info(
        f"Storage backend: {settings.storage_backend}, "
        f"AI provider: {orchestrator.ai_reasoning.provider_name}"
    )

    yield

    # Shutdown
    logger.info("Shutting down SkillSync...")
    await cleanup(orchestrator)


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title="SkillSync",
    description="Interview practice sessions with AI-generated questions",
    version=settings.app_version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Mount API routes
app.include_router(api_router, prefix="/api")


# ============================================================================
# ROOT ROUTES
# ============================================================================

@app.get("/")
async def root():
    """Service banner."""
    return {
        "message": "SkillSync API is running!",
        "version": settings.app_version,
        "endpoints": {
            "interview": "/api/interview",
        },
        "status": "healthy",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
