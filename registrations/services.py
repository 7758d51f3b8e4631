"""
Registration workflow.

Both entry points run the same checks in the same order (caller,
eligibility, form, camp) and then commit the registration row and the
camp's participant count in one transaction:

    register_cash          -> pending payment, settled at the camp
    confirm_card_payment   -> payment verified with Stripe first, then paid

Duplicates are rejected by the database's unique constraints, not by a
prior lookup, so concurrent submissions for the same camp and participant
cannot both succeed.
"""
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce

from camps.directory import get_camp, increment_participant_count, list_by_organizer
from camps.models import Camp
from common.exceptions import Conflict, InvalidInput
from payments.gateway import PaymentIntent
from payments.serializers import ConfirmPaymentSerializer
from payments.settlement import require_succeeded, to_major_units, verify_intent
from .eligibility import resolve_participant
from .models import Registration
from .serializers import CashRegistrationSerializer, RegistrationDetailsSerializer

logger = logging.getLogger(__name__)


def _validated(serializer_class, payload) -> dict:
    serializer = serializer_class(data=payload if payload is not None else {})
    if not serializer.is_valid():
        raise InvalidInput(fields=serializer.errors)
    return serializer.validated_data


def _create_registration(user, camp: Camp, details: dict, **payment) -> Registration:
    """
    Insert the registration and bump the camp count atomically.

    Any unique-constraint violation rolls both writes back and is
    reported as `Conflict`.
    """
    try:
        with transaction.atomic():
            registration = Registration.objects.create(
                camp=camp,
                camp_name=camp.name,
                user=user,
                user_email=user.email,
                name=details["name"],
                email=details["email"],
                phone=details["phone"],
                age=details["age"],
                gender=details["gender"],
                emergency_contact=details["emergency_contact"],
                medical_history=details.get("medical_history") or "",
                status=Registration.STATUS_CONFIRMED,
                **payment,
            )
            increment_participant_count(camp.pk)
    except IntegrityError:
        if Registration.objects.filter(camp=camp, user=user).exists():
            logger.info("Duplicate registration rejected: user=%s camp=%s", user.pk, camp.pk)
            raise Conflict("You are already registered for this camp")
        intent_id = payment.get("payment_intent_id")
        if intent_id and Registration.objects.filter(payment_intent_id=intent_id).exists():
            logger.warning("Payment intent %s replayed by user=%s", intent_id, user.pk)
            raise Conflict("This payment has already been used for a registration")
        raise

    logger.info(
        "Registration %s created: user=%s camp=%s method=%s status=%s",
        registration.pk,
        user.pk,
        camp.pk,
        registration.payment_method,
        registration.payment_status,
    )
    return registration


def register_cash(user, payload) -> Registration:
    """Register `user` for a camp, to be paid in cash on site."""
    participant = resolve_participant(user)
    data = _validated(CashRegistrationSerializer, payload)
    camp = get_camp(data["camp_id"])

    return _create_registration(
        participant,
        camp,
        data,
        payment_method=Registration.METHOD_CASH,
        payment_status=Registration.PAYMENT_PENDING,
    )


def confirm_card_payment(user, payload) -> tuple[Registration, PaymentIntent]:
    """
    Settle a card registration once Stripe reports the intent succeeded.

    `payload` is the raw confirm-payment body; it is only validated once the
    caller is known to be eligible.  The amount recorded is the amount
    Stripe settled, whatever the client claims.  A processor failure leaves
    nothing written.
    """
    participant = resolve_participant(user)
    envelope = _validated(ConfirmPaymentSerializer, payload)
    details = _validated(RegistrationDetailsSerializer, envelope["registrationData"])
    if envelope.get("campId") is None:
        raise InvalidInput(fields={"campId": ["This field is required."]})
    camp = get_camp(envelope["campId"])

    intent = require_succeeded(verify_intent(envelope["payment_intent_id"]))

    registration = _create_registration(
        participant,
        camp,
        details,
        payment_method=Registration.METHOD_CARD,
        payment_status=Registration.PAYMENT_PAID,
        payment_intent_id=intent.id,
        amount_paid=to_major_units(intent.amount),
    )
    if registration.amount_paid != camp.fees:
        logger.warning(
            "Registration %s settled %s but camp %s charges %s",
            registration.pk,
            registration.amount_paid,
            camp.pk,
            camp.fees,
        )
    return registration, intent


def list_for_participant(user):
    return Registration.objects.filter(user=user).select_related("camp")


def list_for_organizer_camps(user):
    """Registrations for every camp the caller organizes."""
    camp_ids = list(list_by_organizer(user.email).values_list("id", flat=True))
    return Registration.objects.filter(camp_id__in=camp_ids).select_related("camp")


def reconcile_participant_counts(dry_run: bool = False) -> list[tuple[int, int, int]]:
    """
    Recompute every camp's participant count from its registrations.

    Returns ``(camp_id, stored, actual)`` for each camp that drifted.
    """
    actual = (
        Registration.objects.filter(camp=OuterRef("pk"), status=Registration.STATUS_CONFIRMED)
        .order_by()
        .values("camp")
        .annotate(n=Count("pk"))
        .values("n")
    )
    drifted = []
    camps = Camp.objects.annotate(actual=Coalesce(Subquery(actual), Value(0)))
    for camp in camps.iterator():
        if camp.participant_count == camp.actual:
            continue
        drifted.append((camp.pk, camp.participant_count, camp.actual))
        logger.warning(
            "Camp %s participant_count=%s but has %s registrations",
            camp.pk,
            camp.participant_count,
            camp.actual,
        )
        if not dry_run:
            # Re-count inside the UPDATE so registrations committed since the scan are included
            Camp.objects.filter(pk=camp.pk).update(
                participant_count=Coalesce(Subquery(actual), Value(0))
            )
    return drifted
