"""Token endpoint"""

from fastapi import APIRouter
import logging

from creativesnap.core.security import create_access_token
from creativesnap.schemas.auth import TokenRequest, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/jwt", response_model=TokenResponse)
async def sign_token(request: TokenRequest) -> TokenResponse:
    """Sign the identity payload into a bearer token valid for 10 hours"""
    token = create_access_token(request.model_dump())
    logger.info(f"🔑 Issued token for {request.email}")
    return TokenResponse(token=token)
