from typing import Final

# Success events that carry a completed purchase. Everything else is acked and ignored.
EVENT_PAYMENT_CAPTURED: Final[str] = "payment.captured"
EVENT_PAYMENT_LINK_PAID: Final[str] = "payment_link.paid"

HANDLED_EVENT_TYPES: Final[set[str]] = {
    EVENT_PAYMENT_CAPTURED,
    EVENT_PAYMENT_LINK_PAID,
}

SIGNATURE_HEADER: Final[str] = "X-Razorpay-Signature"

DEFAULT_CURRENCY: Final[str] = "INR"
NOT_AVAILABLE: Final[str] = "NA"
