"""
Field extraction for Razorpay success events.

The same fact (buyer email, reference id, ...) shows up in different places
depending on the flow: a direct checkout fills payload.payment.entity, a paid
payment link also carries payload.payment_link.entity. Each field is resolved
by trying an ordered list of lookups; the first non-empty value wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from payrelay.core.razorpay_events import DEFAULT_CURRENCY, NOT_AVAILABLE

logger = logging.getLogger(__name__)

Entity = dict[str, Any]
Lookup = Callable[[Entity, Entity], Any]


@dataclass(frozen=True)
class PaymentDetails:
    event_type: str
    amount_minor: int
    currency: str
    payment_id: str
    reference: str
    buyer_email: Optional[str] = None
    buyer_phone: Optional[str] = None


def _dig(obj: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _first_text(payment: Entity, link: Entity, lookups: Sequence[Lookup]) -> Optional[str]:
    for lookup in lookups:
        value = lookup(payment, link)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _first_int(payment: Entity, link: Entity, lookups: Sequence[Lookup]) -> Optional[int]:
    for lookup in lookups:
        value = lookup(payment, link)
        # bool is an int subclass; a JSON true is not an amount
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if value.is_integer():
                return int(value)
            logger.warning("Ignoring fractional amount in minor units: %r", value)
    return None


EMAIL_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: p.get("email"),
    lambda p, link: _dig(p, "notes", "email"),
    lambda p, link: _dig(link, "customer", "email"),
)

PHONE_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: p.get("contact"),
    lambda p, link: _dig(link, "customer", "contact"),
)

AMOUNT_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: p.get("amount"),
    lambda p, link: link.get("amount"),
)

CURRENCY_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: p.get("currency"),
    lambda p, link: link.get("currency"),
)

PAYMENT_ID_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: p.get("id"),
)

REFERENCE_LOOKUPS: tuple[Lookup, ...] = (
    lambda p, link: link.get("reference_id"),
    lambda p, link: link.get("id"),
    lambda p, link: p.get("order_id"),
)


def _entities(event: dict[str, Any]) -> tuple[Entity, Entity]:
    payment = _dig(event, "payload", "payment", "entity")
    link = _dig(event, "payload", "payment_link", "entity")
    return (
        payment if isinstance(payment, dict) else {},
        link if isinstance(link, dict) else {},
    )


def _warn_on_mismatch(payment: Entity, link: Entity) -> None:
    # payment entity is the source of truth; a mismatch is only reported
    if not payment or not link:
        return
    for field in ("amount", "currency"):
        p_val, l_val = payment.get(field), link.get(field)
        if p_val is not None and l_val is not None and p_val != l_val:
            logger.warning(
                "Payment and payment link disagree on %s (payment=%r, link=%r); using payment value",
                field,
                p_val,
                l_val,
            )


def extract_payment_details(
    event: dict[str, Any],
    *,
    fallback_email: Optional[str] = None,
) -> PaymentDetails:
    payment, link = _entities(event)
    _warn_on_mismatch(payment, link)

    amount = _first_int(payment, link, AMOUNT_LOOKUPS)
    buyer_email = _first_text(payment, link, EMAIL_LOOKUPS) or (fallback_email or None)

    return PaymentDetails(
        event_type=str(event.get("event")),
        amount_minor=amount if amount is not None else 0,
        currency=_first_text(payment, link, CURRENCY_LOOKUPS) or DEFAULT_CURRENCY,
        payment_id=_first_text(payment, link, PAYMENT_ID_LOOKUPS) or NOT_AVAILABLE,
        reference=_first_text(payment, link, REFERENCE_LOOKUPS) or NOT_AVAILABLE,
        buyer_email=buyer_email,
        buyer_phone=_first_text(payment, link, PHONE_LOOKUPS),
    )
