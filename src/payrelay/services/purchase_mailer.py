from __future__ import annotations

import logging
from typing import Any

from payrelay.core.config import Settings
from payrelay.core.razorpay_events import HANDLED_EVENT_TYPES
from payrelay.integrations.resend.client import send_email
from payrelay.services.notifications.slack import send_slack_message
from payrelay.services.notifications.templates import (
    build_purchase_email,
    email_failure_to_slack_text,
)
from payrelay.services.payment_extract import extract_payment_details

logger = logging.getLogger(__name__)

NO_EMAIL_NOTE = "No email found in payload"


def handle_event(event: dict[str, Any], settings: Settings) -> dict[str, Any]:
    """
    Act on a verified, decoded Razorpay event and return the ack body.

    Always returns a 2xx-worthy result: Razorpay redelivers on anything else,
    and an event we cannot act on will not get better on retry.
    """
    event_type = event.get("event")
    logger.info("Webhook event: %s", event_type)

    # untrusted JSON: the tag may be a list or object (unhashable)
    if not isinstance(event_type, str) or event_type not in HANDLED_EVENT_TYPES:
        return {"ok": True, "ignored": event_type}

    details = extract_payment_details(event, fallback_email=settings.fallback_to_email)

    logger.info("Resolved email: %s", details.buyer_email)
    logger.info("Amount (paise): %s Currency: %s", details.amount_minor, details.currency)
    logger.info("Payment ID: %s Reference: %s", details.payment_id, details.reference)

    if not details.buyer_email:
        logger.info("No buyer email found in payload; skipping email send.")
        return {"ok": True, "note": NO_EMAIL_NOTE}

    content = build_purchase_email(details)

    assert settings.resend_api_key is not None
    assert settings.mail_from is not None

    result = send_email(
        api_key=settings.resend_api_key.get_secret_value(),
        from_email=settings.mail_from,
        to_email=details.buyer_email,
        subject=content.subject,
        html=content.html,
        api_url=settings.resend_api_url,
        timeout=settings.resend_timeout_sec,
    )

    if not result.ok:
        # ack anyway (no Razorpay retry storm); surface for manual follow-up
        logger.error("Resend send failed: %s %s", result.status, result.text)
        send_slack_message(email_failure_to_slack_text(details, result), settings=settings)
        return {"ok": False, "resend_error": result.text}

    logger.info("Resend response: %s %s", result.status, result.text)
    return {"ok": True}
