"""CreativeSnap Course Marketplace API - Application Factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging

from creativesnap.core.config import settings
from creativesnap.core.errors import register_error_handlers
from creativesnap.core.store import Store
from creativesnap.services.gateway import PaymentGateway
from creativesnap.api.routes import router as api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[Store] = None, gateway: Optional[PaymentGateway] = None) -> FastAPI:
    """Create and configure FastAPI application

    ``store`` and ``gateway`` default to ones built from settings; a store
    passed in is owned by the caller and is not closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown"""
        owns_store = store is None
        try:
            logger.info("Starting application...")
            app.state.store = store or Store.from_settings()
            app.state.gateway = gateway or PaymentGateway.from_settings()
            if owns_store and await app.state.store.ping():
                logger.info("✓ Pinged your deployment. You successfully connected to MongoDB!")
            await app.state.store.ensure_indexes()
        except Exception as e:
            logger.error(f"Failed to initialize database client: {e}")
            raise

        yield

        # Shutdown
        if owns_store:
            app.state.store.close()
        app.state.store = None

    app = FastAPI(
        title=settings.API_TITLE,
        description="Classes, carts and payments for the CreativeSnap course marketplace",
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "server is running ..............."

    @app.get("/health")
    async def health_check():
        reachable = app.state.store is not None and await app.state.store.ping()
        return {
            "status": "healthy" if reachable else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": settings.API_VERSION,
            "database": "connected" if reachable else "unavailable",
        }

    logger.info("FastAPI application created")
    return app


# Create app instance
app = create_app()
