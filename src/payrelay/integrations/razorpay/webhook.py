import hashlib
import hmac
import json
from typing import Any


class InvalidPayloadError(ValueError):
    """Body passed signature verification but is not a JSON object."""


def compute_signature(payload: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def verify_signature(payload: bytes, signature: str | None, secret: str) -> bool:
    """
    Razorpay signs the raw body with HMAC-SHA256 (hex).
    Must run on the exact received bytes, before any JSON parsing.
    Returns False (never raises) for a missing or mismatched signature.
    """
    if not signature:
        return False

    expected = compute_signature(payload, secret).encode("utf-8")
    provided = signature.encode("utf-8")
    if len(expected) != len(provided):
        return False

    return hmac.compare_digest(expected, provided)


def parse_event(payload: bytes) -> dict[str, Any]:
    """Decode a verified body. Raises InvalidPayloadError on anything but a JSON object."""
    try:
        event = json.loads(payload.decode("utf-8"))
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise InvalidPayloadError(str(e)) from e

    if not isinstance(event, dict):
        raise InvalidPayloadError(f"expected a JSON object, got {type(event).__name__}")
    return event
