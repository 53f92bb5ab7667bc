import logging

from fastapi import FastAPI

from payrelay.api.v1.routers.health import router as health_router
from payrelay.api.v1.routers.razorpay_webhook import legacy_router as razorpay_legacy_router
from payrelay.api.v1.routers.razorpay_webhook import router as razorpay_router
from payrelay.core.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="payrelay", version="0.1.0")
app.include_router(health_router, prefix="/api/v1")
app.include_router(razorpay_router, prefix="/api/v1")
app.include_router(razorpay_legacy_router)


@app.on_event("startup")
def validate_settings() -> None:
    # Enforced per request (500); surfaced here so a bad deploy shows up before the first webhook.
    if not settings.is_configured:
        logger.warning("Missing required env vars: %s", ", ".join(settings.missing_required()))
