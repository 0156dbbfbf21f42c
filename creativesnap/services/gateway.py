"""Stripe payment intents adapter"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
import logging

import httpx

from creativesnap.core.config import settings
from creativesnap.core.errors import GatewayError, InvalidArgument

logger = logging.getLogger(__name__)


def to_minor_units(price: Any) -> int:
    """Convert a decimal currency price (number or numeric string) to cents.

    Raises InvalidArgument for anything that is not a finite, positive number.
    """
    if isinstance(price, bool) or price is None:
        raise InvalidArgument("Invalid price")
    try:
        amount = Decimal(str(price).strip()) * 100
    except (InvalidOperation, ValueError):
        raise InvalidArgument("Invalid price")

    if not amount.is_finite():
        raise InvalidArgument("Invalid price")
    cents = int(amount)
    if cents <= 0:
        raise InvalidArgument("Invalid price")
    return cents


class PaymentGateway:
    """Creates payment intents through the Stripe REST API"""

    def __init__(
        self,
        secret_key: str,
        api_url: str = "https://api.stripe.com",
        currency: str = "usd",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.secret_key = secret_key
        self.api_url = api_url.rstrip("/")
        self.currency = currency
        self.transport = transport
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "PaymentGateway":
        return cls(
            secret_key=settings.STRIPE_SECRET_KEY,
            api_url=settings.STRIPE_API_URL,
            currency=settings.PAYMENT_CURRENCY,
        )

    async def create_payment_intent(self, amount: int) -> str:
        """Request a payment intent for ``amount`` minor units, return its client secret"""
        logger.info(f"💳 Creating payment intent: {amount} {self.currency}")
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as http_client:
                response = await http_client.post(
                    f"{self.api_url}/v1/payment_intents",
                    data={
                        "amount": str(amount),
                        "currency": self.currency,
                        "payment_method_types[]": "card",
                    },
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                )
                response.raise_for_status()
                intent = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ Stripe rejected payment intent: {e.response.status_code} {e.response.text}")
            raise GatewayError() from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ Stripe API error: {e}")
            raise GatewayError() from e

        client_secret = intent.get("client_secret")
        if not client_secret:
            logger.error(f"❌ Stripe response has no client_secret: {intent.get('id')}")
            raise GatewayError()

        logger.info(f"✓ Payment intent created: {intent.get('id')}")
        return client_secret
