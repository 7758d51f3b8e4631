"""
Thin wrapper around the Stripe PaymentIntent API.

The rest of the codebase only sees `PaymentIntent` values and the two
calls of the processor contract: create an intent, retrieve an intent.
Stripe errors are translated into the project's error taxonomy here so
callers never import `stripe`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import stripe
from django.conf import settings

from common.exceptions import PaymentNotCompleted, UpstreamUnavailable

logger = logging.getLogger(__name__)

STATUS_SUCCEEDED = "succeeded"


def _field(obj, key):
    # StripeObject supports item access but is not always a dict
    try:
        return obj[key]
    except KeyError:
        return None


@dataclass(frozen=True)
class PaymentIntent:
    """Read-only snapshot of a processor-side payment intent."""

    id: str
    status: str
    amount: int  # minor units (cents)
    currency: str
    client_secret: str = ""
    metadata: dict = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCEEDED

    @classmethod
    def from_stripe(cls, obj) -> "PaymentIntent":
        return cls(
            id=obj["id"],
            status=_field(obj, "status") or "",
            amount=int(_field(obj, "amount") or 0),
            currency=_field(obj, "currency") or "",
            client_secret=_field(obj, "client_secret") or "",
            metadata=dict(_field(obj, "metadata") or {}),
        )


class StripeGateway:
    """Single payment processor used by the settlement coordinator."""

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key if api_key is not None else settings.STRIPE_SECRET_KEY

    def _configure(self) -> None:
        if not self.api_key:
            raise UpstreamUnavailable("Payment processor is not configured")
        stripe.api_key = self.api_key
        # Failed calls surface to the client, which retries the whole flow.
        stripe.max_network_retries = 0

    def create_payment_intent(self, amount_minor: int, currency: str, metadata: dict) -> PaymentIntent:
        self._configure()
        try:
            obj = stripe.PaymentIntent.create(
                amount=amount_minor,
                currency=currency,
                metadata=metadata,
            )
        except stripe.StripeError as exc:
            logger.warning("Stripe PaymentIntent.create failed: %s", exc)
            raise UpstreamUnavailable("Failed to create payment intent") from exc
        return PaymentIntent.from_stripe(obj)

    def retrieve_payment_intent(self, intent_id: str) -> PaymentIntent:
        self._configure()
        try:
            obj = stripe.PaymentIntent.retrieve(intent_id)
        except stripe.InvalidRequestError as exc:
            logger.info("Stripe has no payment intent %s: %s", intent_id, exc)
            raise PaymentNotCompleted("Unknown payment intent") from exc
        except stripe.StripeError as exc:
            logger.warning("Stripe PaymentIntent.retrieve(%s) failed: %s", intent_id, exc)
            raise UpstreamUnavailable("Failed to verify payment") from exc
        return PaymentIntent.from_stripe(obj)
