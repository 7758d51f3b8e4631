"""
Payment settlement coordinator.

Creates payment intents for card registrations and re-derives the
status of a claimed payment from the processor on every confirmation.
Nothing a client sends about the outcome of a payment is trusted.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

from common.exceptions import InvalidAmount, InvalidInput, PaymentNotCompleted
from .gateway import PaymentIntent, StripeGateway

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def get_gateway() -> StripeGateway:
    return StripeGateway()


def to_minor_units(amount) -> int:
    """Round a client-supplied amount (already in cents) to a whole number."""
    try:
        value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except (ArithmeticError, ValueError, TypeError):
        raise InvalidAmount()
    return int(value)


def to_major_units(amount_minor: int) -> Decimal:
    """Convert processor minor units (cents) into a two-decimal amount."""
    return (Decimal(amount_minor) / 100).quantize(CENTS)


def create_intent(
    amount,
    currency: str,
    camp_name: str,
    registrant: dict | None,
    organizer_email: str,
    gateway: StripeGateway | None = None,
) -> PaymentIntent:
    """
    Open a payment intent for `amount` minor units.

    The camp name, registrant and organizer are attached as metadata so
    payments can be traced from the processor dashboard.
    """
    if amount is None or to_minor_units(amount) <= 0:
        raise InvalidAmount()
    registrant = registrant or {}
    if not camp_name or not registrant.get("name") or not registrant.get("email"):
        raise InvalidInput("Camp and registration data are required")
    currency = (currency or settings.STRIPE_CURRENCY).lower()
    if currency != settings.STRIPE_CURRENCY.lower():
        raise InvalidInput(f"Unsupported currency: {currency}")

    gateway = gateway or get_gateway()
    intent = gateway.create_payment_intent(
        to_minor_units(amount),
        currency,
        {
            "campName": camp_name,
            "participantName": registrant["name"],
            "participantEmail": registrant["email"],
            "organizerEmail": organizer_email,
        },
    )
    logger.info("Payment intent %s created for %s (%s)", intent.id, camp_name, registrant["email"])
    return intent


def verify_intent(intent_id: str, gateway: StripeGateway | None = None) -> PaymentIntent:
    """Fetch the intent from the processor; never from the request."""
    if not intent_id:
        raise InvalidInput("payment_intent_id is required")
    gateway = gateway or get_gateway()
    return gateway.retrieve_payment_intent(intent_id)


def require_succeeded(intent: PaymentIntent) -> PaymentIntent:
    if not intent.succeeded:
        logger.info("Payment intent %s not settled (status=%s)", intent.id, intent.status)
        raise PaymentNotCompleted()
    return intent
