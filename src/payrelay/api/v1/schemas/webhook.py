from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class WebhookAck(BaseModel):
    ok: bool
    note: Optional[str] = None
    # echoes whatever tag Razorpay sent, which is not guaranteed to be a string
    ignored: Optional[Any] = None
    resend_error: Optional[str] = None
