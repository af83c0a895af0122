import logging
from functools import lru_cache

import stripe

from app.config import STRIPE_SECRET_KEY, STRIPE_CURRENCY

logger = logging.getLogger(__name__)


class PaymentNotConfiguredError(Exception):
    """No Stripe secret key is configured."""


class PaymentProcessorError(Exception):
    """Stripe rejected or failed the request."""


def to_minor_units(amount: float) -> int:
    """Convert rupees to paise (or dollars to cents)."""
    return int(round(amount * 100))


class PaymentService:
    def __init__(self, api_key: str, currency: str = "inr"):
        self.api_key = api_key
        self.currency = currency

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def create_payment_intent(self, amount: float) -> str:
        """Create a card PaymentIntent and return its client secret."""
        if not self.configured:
            raise PaymentNotConfiguredError(
                "Stripe is not configured properly. Please check your environment variables."
            )

        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=to_minor_units(amount),
                currency=self.currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe payment error: {str(e)}")
            raise PaymentProcessorError(str(e)) from e

        logger.info(f"Created payment intent {intent.id} for {amount} {self.currency}")
        return intent.client_secret


@lru_cache()
def get_payment_service() -> PaymentService:
    if not STRIPE_SECRET_KEY:
        logger.warning("Missing Stripe Secret Key - Stripe payments will not work")
    return PaymentService(api_key=STRIPE_SECRET_KEY, currency=STRIPE_CURRENCY)
