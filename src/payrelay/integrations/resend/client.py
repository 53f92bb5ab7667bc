from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"


@dataclass(frozen=True)
class EmailSendResult:
    ok: bool
    status: int
    text: str


def send_email(
    *,
    api_key: str,
    from_email: str,
    to_email: str,
    subject: str,
    html: str,
    api_url: str = DEFAULT_RESEND_API_URL,
    timeout: float = 10,
) -> EmailSendResult:
    """
    Send one email through the Resend API.

    Delivery failures are returned, not raised: the caller must still ack the
    payment webhook. status=0 means the request never got an HTTP response.
    """
    try:
        resp = requests.post(
            api_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={
                "from": from_email,
                "to": [to_email],
                "subject": subject,
                "html": html,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error("Resend request failed: %s", e)
        return EmailSendResult(ok=False, status=0, text=str(e))

    return EmailSendResult(ok=resp.ok, status=resp.status_code, text=resp.text or "")
