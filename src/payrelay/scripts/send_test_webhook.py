from __future__ import annotations

import argparse
import json
import time

import requests

from payrelay.core.config import settings
from payrelay.core.products import PRICE_COMPLETE_PAISE
from payrelay.core.razorpay_events import (
    EVENT_PAYMENT_CAPTURED,
    EVENT_PAYMENT_LINK_PAID,
    SIGNATURE_HEADER,
)
from payrelay.integrations.razorpay.webhook import compute_signature


def build_payload(*, event: str, amount: int, email: str | None, currency: str = "INR") -> dict:
    stamp = int(time.time())
    payment = {
        "id": f"pay_test{stamp}",
        "entity": "payment",
        "amount": amount,
        "currency": currency,
        "status": "captured",
        "order_id": f"order_test{stamp}",
        "email": email or "",
        "contact": "+919000000000",
        "notes": {},
    }
    payload: dict = {"payment": {"entity": payment}}

    if event == EVENT_PAYMENT_LINK_PAID:
        payload["payment_link"] = {
            "entity": {
                "id": f"plink_test{stamp}",
                "amount": amount,
                "currency": currency,
                "reference_id": f"ref_test{stamp}",
                "status": "paid",
                "customer": {"email": email or "", "contact": "+919000000000"},
            }
        }

    return {
        "entity": "event",
        "account_id": "acc_test",
        "event": event,
        "contains": sorted(payload),
        "payload": payload,
        "created_at": stamp,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="POST a signed Razorpay test event")
    parser.add_argument("--url", default="http://localhost:8000/api/v1/razorpay/webhook")
    parser.add_argument(
        "--event",
        default=EVENT_PAYMENT_LINK_PAID,
        choices=[EVENT_PAYMENT_LINK_PAID, EVENT_PAYMENT_CAPTURED],
    )
    parser.add_argument("--amount", type=int, default=PRICE_COMPLETE_PAISE, help="minor units (paise)")
    parser.add_argument("--email", default=None)
    args = parser.parse_args()

    secret = settings.razorpay_webhook_secret
    if not secret:
        print("❌ RAZORPAY_WEBHOOK_SECRET is not set")
        return 1

    body = json.dumps(build_payload(event=args.event, amount=args.amount, email=args.email)).encode("utf-8")
    signature = compute_signature(body, secret.get_secret_value())

    resp = requests.post(
        args.url,
        data=body,
        headers={"Content-Type": "application/json", SIGNATURE_HEADER: signature},
        timeout=30,
    )
    print(f"➡️ {args.event} ({args.amount} paise) -> {resp.status_code}")
    print(resp.text)
    return 0 if resp.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
