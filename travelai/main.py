"""
TravelAI Chat Service - FastAPI Application
LLM Provider:
- If OPENAI_API_KEY is set: use OpenAI
- If no OPENAI_API_KEY: deterministic template replies
Search enrichment uses SerpAPI when SERPAPI_KEY is set.
"""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .config import settings
from .api.chat import router as chat_router
from .api.travel import router as travel_router
from .agents.chat_service import get_chat_service, shutdown_chat_service


# ============================================
# Logging
# ============================================

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)


# ============================================
# Application Lifespan
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("=" * 50)
    logger.info("Starting TravelAI Chat Service")
    logger.info("=" * 50)
    logger.info(f"Environment: {settings.API_ENV}")
    logger.info(f"LLM Provider: {'OpenAI' if settings.openai_configured else 'Fallback templates'}")
    if settings.openai_configured:
        logger.info(f"  Model: {settings.OPENAI_MODEL}")
    logger.info(f"Search enrichment: {'SerpAPI' if settings.search_configured else 'disabled'}")
    logger.info(f"Store backend: {settings.STORE_BACKEND}")

    get_chat_service()

    yield

    await shutdown_chat_service()
    logger.info("TravelAI Service shutdown complete")


# ============================================
# FastAPI Application
# ============================================

app = FastAPI(
    title="TravelAI Chat Service",
    description="Travel-planning chat assistant with search enrichment and deterministic fallbacks.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router)
app.include_router(travel_router)


# ============================================
# REST Endpoints
# ============================================

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "TravelAI Chat Service",
        "version": __version__,
        "status": "running",
        "llm_provider": "OpenAI" if settings.openai_configured else "fallback",
        "docs": "/docs",
        "endpoints": [
            "/api/health",
            "/api/chat/sessions",
            "/api/travel/search"
        ]
    }


@app.get("/api/health")
async def health_check():
    return {
        "status": "healthy",
        "llm_configured": settings.openai_configured,
        "search_configured": settings.search_configured,
        "store_backend": settings.STORE_BACKEND
    }


# ============================================
# Main
# ============================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "travelai.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_ENV == "development"
    )
