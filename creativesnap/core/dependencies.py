"""Dependency injection for FastAPI routes"""

from fastapi import Request
import logging

from creativesnap.core.errors import ServiceUnavailable
from creativesnap.core.store import Store
from creativesnap.services.gateway import PaymentGateway

logger = logging.getLogger(__name__)


async def get_store(request: Request) -> Store:
    """Get the store handle opened by the application lifespan"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Database client is not available")
        raise ServiceUnavailable("Database client unavailable")
    return store


async def get_gateway(request: Request) -> PaymentGateway:
    """Get the payment gateway adapter"""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        logger.error("Payment gateway is not configured")
        raise ServiceUnavailable("Payment gateway unavailable")
    return gateway
