from __future__ import annotations

from dataclasses import dataclass
from html import escape

from payrelay.core.products import Product, format_amount, known_price_labels, lookup_product
from payrelay.integrations.resend.client import EmailSendResult
from payrelay.services.payment_extract import PaymentDetails


@dataclass(frozen=True)
class EmailContent:
    subject: str
    html: str


_LINK_ITEM = (
    '<li{style}>'
    "<b>{label}</b>: "
    '<a href="{url}" target="_blank" rel="noopener noreferrer">Open folder</a>'
    "</li>"
)


def _links_html(product: Product) -> str:
    if not product.links:
        prices = " or ".join(known_price_labels())
        return (
            '<p style="margin:10px 0 0">'
            "Thanks for your purchase. Your payment was received, but this amount "
            f"doesn’t match {prices}. "
            "Reply to this email with your Payment ID and we’ll help you immediately."
            "</p>"
        )

    items = [
        _LINK_ITEM.format(
            style=' style="margin-top:6px"' if i else "",
            label=escape(link.label),
            url=escape(link.url, quote=True),
        )
        for i, link in enumerate(product.links)
    ]
    return '<ul style="margin:10px 0 0; padding-left:18px">' + "".join(items) + "</ul>"


def build_purchase_email(details: PaymentDetails) -> EmailContent:
    product = lookup_product(details.amount_minor)
    amount = format_amount(details.amount_minor)

    lines = [
        '<div style="font-family:system-ui,-apple-system,Segoe UI,Roboto,Arial,sans-serif;line-height:1.5">',
        '<h2 style="margin:0 0 10px">Payment confirmed ✅</h2>',
        '<p style="margin:0 0 10px">',
        f"Thanks for your purchase! Your payment of <b>{escape(details.currency)} {amount}</b> was successful.",
        "</p>",
        '<div style="border:1px solid #eee; border-radius:10px; padding:12px; margin:12px 0">',
        '<div style="font-weight:600; margin-bottom:6px">Your access links</div>',
        _links_html(product),
        "</div>",
        '<p style="margin:10px 0 0; color:#444">',
        f"<b>Reference:</b> {escape(details.reference)}<br/>",
        f"<b>Payment ID:</b> {escape(details.payment_id)}",
        "</p>",
        '<p style="margin:14px 0 0; color:#666; font-size:12px">',
        "If you face any access issues, reply to this email with your Payment ID.",
        "</p>",
        "</div>",
    ]

    return EmailContent(
        subject=f"Your {product.title} access links ✅",
        html="\n".join(lines),
    )


def email_failure_to_slack_text(details: PaymentDetails, result: EmailSendResult) -> str:
    lines = [
        "🚨 *Purchase email failed*",
        f"*Event:* {details.event_type}",
        f"*To:* {details.buyer_email}",
        f"*Amount:* {details.currency} {format_amount(details.amount_minor)}",
        f"*Payment ID:* {details.payment_id}",
        f"*Reference:* {details.reference}",
        f"*Resend status:* {result.status}",
    ]

    if result.text:
        lines.append(f"*Response:* `{result.text[:500]}`")

    return "\n".join(lines)
