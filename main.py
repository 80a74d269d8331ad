"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from api.routes import email_router, archive_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Campaign Mailer API",
        environment=settings.environment,
        debug=settings.debug,
        model=settings.gemini_model,
    )

    if not settings.has_gemini_credentials:
        logfire.error(
            "Gemini API key is not configured",
            hint="Set GEMINI_API_KEY in .env; generation requests will fail until it is set",
        )

    logfire.info("Campaign Mailer API startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Campaign Mailer API")


# Initialize FastAPI app
app = FastAPI(
    title="Campaign Mailer API",
    description="Generates and archives marketing emails for Etsy digital products",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Union[str, bool]]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status and whether Gemini is configured
    """
    configured = settings.has_gemini_credentials

    return {
        "status": "healthy" if configured else "degraded",
        "service": "campaign-mailer",
        "version": "1.0.0",
        "gemini_configured": configured,
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Campaign Mailer API",
        "version": "1.0.0",
        "description": "Marketing email generation for digital products",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Email generation and draft editing
app.include_router(email_router)

# Archived emails
app.include_router(archive_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
