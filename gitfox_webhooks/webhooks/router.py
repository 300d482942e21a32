import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gitfox_webhooks.core.config import config
from gitfox_webhooks.core.errors import (
    AuthenticationError,
    ConfigurationError,
    SelectionMiss,
    WebhookError,
)
from gitfox_webhooks.core.models import WebhookRequest
from gitfox_webhooks.webhooks.dispatcher import WebhookDispatcher
from gitfox_webhooks.webhooks.models import WebhookResponse

logger = structlog.get_logger(__name__)
router = APIRouter()

dispatcher = WebhookDispatcher.from_config(config.webhook)


# Dependency providers for the dispatcher and the event selection.
# Tests override these to inject secrets and interest sets.
def get_dispatcher() -> WebhookDispatcher:
    """Returns the shared WebhookDispatcher instance."""
    return dispatcher


def get_events() -> list[str]:
    """Returns the triggers this service is interested in."""
    return config.webhook.events


def _status_for(error: WebhookError) -> int:
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, ConfigurationError):
        return 500
    return 400


def _respond(status_code: int, response: WebhookResponse) -> JSONResponse:
    return JSONResponse(response.model_dump(), status_code=status_code)


@router.post("/gitfox", summary="Endpoint for Gitfox webhooks")
async def gitfox_webhook_endpoint(
    request: Request,
    dispatcher_instance: WebhookDispatcher = Depends(get_dispatcher),
    events: list[str] = Depends(get_events),
) -> JSONResponse:
    """
    Receives Gitfox webhook deliveries.

    - The raw body is read once and handed to the dispatcher, which checks the
      trigger, verifies the signature and decodes the payload.
    - Events outside the configured selection are answered with 404.
    """
    body = await request.body()
    webhook_request = WebhookRequest(method=request.method, headers=request.headers, body=body)
    trigger = request.headers.get("X-Gitfox-Trigger")

    # The dispatcher logs rejections and misses.
    try:
        event = dispatcher_instance.parse(webhook_request, *events)
    except SelectionMiss as e:
        return _respond(404, WebhookResponse(status="ignored", detail=str(e), event_type=e.trigger))
    except WebhookError as e:
        return _respond(_status_for(e), WebhookResponse(status="error", detail=e.code, event_type=trigger))

    logger.info("webhook_received", **event.summary())
    return _respond(200, WebhookResponse(status="ok", event_type=event.event_type.value))
