from pydantic import ValidationError

from gitfox_webhooks.core.errors import DecodeError, UnsupportedEventError
from gitfox_webhooks.core.models import HookEventType, WebhookEvent
from gitfox_webhooks.webhooks.registry import payload_model


def decode_payload(event_type: HookEventType, payload: bytes) -> WebhookEvent:
    """
    Decode a raw JSON body into the payload model of ``event_type``.

    Aliased triggers are decoded with their canonical model and keep their own
    ``event_type`` on the returned event.

    Raises:
        UnsupportedEventError: If no model is registered for the trigger.
        DecodeError: If the body is not valid JSON for the model.
    """
    model = payload_model(event_type)
    if model is None:
        raise UnsupportedEventError(event_type.value)

    try:
        decoded = model.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(event_type.value, e) from e

    return WebhookEvent(event_type=event_type, payload=decoded)
