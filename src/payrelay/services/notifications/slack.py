import logging

import requests

from payrelay.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def send_slack_message(text: str, *, settings: Settings | None = None) -> bool:
    """Operator alert. Returns False when skipped or failed; never raises."""
    url = (settings or default_settings).slack_webhook_url
    webhook_url = url.get_secret_value() if url else None
    if not webhook_url:
        return False  # optional channel: skip quietly

    try:
        resp = requests.post(webhook_url, json={"text": text}, timeout=3)
    except requests.RequestException as e:
        # an alert failure must not break the webhook ack
        logger.warning("Slack alert failed: %s", e)
        return False

    if resp.status_code >= 400:
        logger.warning("Slack alert rejected: %s %s", resp.status_code, resp.text)
        return False
    return True
