import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from payrelay.api.deps import configured_settings
from payrelay.api.v1.schemas.webhook import WebhookAck
from payrelay.core.config import Settings
from payrelay.core.razorpay_events import SIGNATURE_HEADER
from payrelay.integrations.razorpay.webhook import InvalidPayloadError, parse_event, verify_signature
from payrelay.services.purchase_mailer import handle_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/razorpay", tags=["razorpay"])

# Path the Razorpay dashboard webhook was first registered with; mounted without the /api/v1 prefix.
legacy_router = APIRouter(tags=["razorpay"])


async def razorpay_webhook(
    request: Request,
    config: Settings = Depends(configured_settings),  # noqa: B008
    razorpay_signature: str | None = Header(default=None, alias=SIGNATURE_HEADER),
):
    # 1) Raw bytes first: the signature covers the body exactly as sent
    payload = await request.body()

    # 2) Verify
    assert config.razorpay_webhook_secret is not None
    if not verify_signature(payload, razorpay_signature, config.razorpay_webhook_secret.get_secret_value()):
        logger.warning("Invalid Razorpay signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    # 3) Decode (only after verification)
    try:
        event = parse_event(payload)
    except InvalidPayloadError as e:
        logger.error("Invalid JSON body: %s", e)
        raise HTTPException(status_code=400, detail="Invalid JSON") from e

    # 4) Dispatch + email. requests is blocking, keep it off the event loop.
    return await run_in_threadpool(handle_event, event, config)


router.add_api_route(
    "/webhook",
    razorpay_webhook,
    methods=["POST"],
    response_model=WebhookAck,
    response_model_exclude_none=True,
)

legacy_router.add_api_route(
    "/api/razorpay-webhook",
    razorpay_webhook,
    methods=["POST"],
    response_model=WebhookAck,
    response_model_exclude_none=True,
)
