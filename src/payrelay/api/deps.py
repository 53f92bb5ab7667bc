import logging

from fastapi import Depends, HTTPException

from payrelay.core.config import Settings, settings

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """FastAPI dependency: app settings (overridden in tests)"""
    return settings


def configured_settings(config: Settings = Depends(get_settings)) -> Settings:  # noqa: B008
    """FastAPI dependency: settings with every required key present, else 500"""
    missing = config.missing_required()
    if missing:
        logger.error(
            "Missing env vars %s",
            {
                "has_webhook_secret": "RAZORPAY_WEBHOOK_SECRET" not in missing,
                "has_resend_api_key": "RESEND_API_KEY" not in missing,
                "has_mail_from": "MAIL_FROM" not in missing,
            },
        )
        raise HTTPException(status_code=500, detail="Missing env vars")
    return config
