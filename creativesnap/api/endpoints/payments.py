# ============================================================================
# FILE: creativesnap/api/endpoints/payments.py
# ============================================================================
"""Payment endpoints - payment intents, checkout and purchase history"""

from fastapi import APIRouter, Depends
from pymongo import DESCENDING
import logging

from creativesnap.core.dependencies import get_gateway, get_store
from creativesnap.core.security import ensure_same_email, verify_token
from creativesnap.core.store import Store
from creativesnap.schemas.payments import (
    CheckoutResponse,
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
)
from creativesnap.services.checkout import checkout
from creativesnap.services.gateway import PaymentGateway, to_minor_units
from creativesnap.utils.documents import to_json

logger = logging.getLogger(__name__)
router = APIRouter()


# ==================== PAYMENT INTENT ====================

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_gateway),
    decoded: dict = Depends(verify_token),
) -> PaymentIntentResponse:
    """Authorize a charge of ``price`` dollars; the client confirms it with the secret"""
    amount = to_minor_units(request.price)
    client_secret = await gateway.create_payment_intent(amount)
    return PaymentIntentResponse(clientSecret=client_secret)


# ==================== CHECKOUT ====================

@router.post("/payments", response_model=CheckoutResponse)
async def create_payment(
    payment: PaymentCreate,
    store: Store = Depends(get_store),
    decoded: dict = Depends(verify_token),
) -> CheckoutResponse:
    """Record a completed payment

    Steps:
    1. Reserve a seat on the purchased class
    2. Save the payment record
    3. Remove the item from the cart
    4. Credit the instructor with the sale
    """
    result = await checkout(store, payment)
    return CheckoutResponse(**result)


# ==================== PAYMENT HISTORY ====================

@router.get("/payments/{email}")
async def list_payments(email: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    """Payments made by ``email``, newest first"""
    ensure_same_email(decoded, email)
    payments = await store.payments.find({"email": email}).sort("date", DESCENDING).to_list(None)
    return to_json(payments)
