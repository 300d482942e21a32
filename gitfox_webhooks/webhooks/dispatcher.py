from __future__ import annotations

from dataclasses import dataclass

import structlog
from pydantic import ValidationError

from gitfox_webhooks.core.config import WebhookConfig
from gitfox_webhooks.core.errors import (
    ConfigurationError,
    DecodeError,
    EmptyPayloadError,
    InvalidMethodError,
    MissingHeaderError,
    SelectionMiss,
    UnsupportedEventError,
    WebhookError,
)
from gitfox_webhooks.core.models import HookEventType, WebhookEvent, WebhookRequest
from gitfox_webhooks.webhooks.auth import SIGNATURE_HEADER, verify_signature
from gitfox_webhooks.webhooks.decoder import decode_payload
from gitfox_webhooks.webhooks.registry import normalize_events, payload_model, resolve

logger = structlog.get_logger(__name__)

TRIGGER_HEADER = "X-Gitfox-Trigger"


@dataclass(frozen=True)
class WebhookOptions:
    """
    Dispatcher options.

    An empty secret disables signature verification.
    """

    secret: str = ""


class WebhookDispatcher:
    """
    Verifies Gitfox webhook deliveries and decodes them into typed payloads.

    The dispatcher only holds immutable options, so one instance can serve any
    number of concurrent requests.
    """

    def __init__(self, options: WebhookOptions | None = None):
        options = options or WebhookOptions()
        if not isinstance(options, WebhookOptions):
            raise ConfigurationError(f"Invalid dispatcher options: {options!r}")
        if not isinstance(options.secret, str):
            raise ConfigurationError("Webhook secret must be a string")
        self._options = options

    @classmethod
    def from_config(cls, webhook_config: WebhookConfig) -> WebhookDispatcher:
        """Build a dispatcher from the webhook section of the app config."""
        return cls(WebhookOptions(secret=webhook_config.secret))

    @property
    def verifies_signatures(self) -> bool:
        return bool(self._options.secret)

    def parse(self, request: WebhookRequest, *events: HookEventType | str) -> WebhookEvent:
        """
        Verify and decode a webhook delivery.

        Checks run in a fixed order and stop at the first failure. The request
        body is drained and released on every exit path.

        Args:
            request: The inbound request.
            *events: The triggers the caller wants parsed.

        Returns:
            The decoded payload tagged with its trigger.

        Raises:
            ConfigurationError: If no events were given.
            RequestShapeError: On a wrong method, missing header, or empty body.
            SelectionMiss: If the trigger is not one of ``events``.
            UnsupportedEventError: If a requested trigger has no payload model.
            AuthenticationError: If the signature does not match.
            DecodeError: If the body does not fit the payload model.
        """
        try:
            return self._parse(request, events)
        except SelectionMiss as e:
            logger.debug("webhook_event_not_requested", trigger=e.trigger)
            raise
        except WebhookError as e:
            # Error messages may quote the body, so only the code is logged.
            context: dict[str, str | int] = {"code": e.code}
            if isinstance(e, DecodeError) and isinstance(e.cause, ValidationError):
                context["error_count"] = e.cause.error_count()
            logger.warning("webhook_rejected", **context)
            raise
        finally:
            request.release()

    def _parse(self, request: WebhookRequest, events: tuple[HookEventType | str, ...]) -> WebhookEvent:
        interested = normalize_events(events)

        if request.method != "POST":
            raise InvalidMethodError(request.method)

        trigger = request.header(TRIGGER_HEADER)
        if not trigger:
            raise MissingHeaderError(TRIGGER_HEADER)

        if trigger not in interested:
            raise SelectionMiss(trigger)

        event_type = resolve(trigger)
        if event_type is None or payload_model(event_type) is None:
            raise UnsupportedEventError(trigger)

        try:
            payload = request.read_body()
        except (OSError, ValueError) as e:
            raise EmptyPayloadError(f"Error reading payload: {e}") from e
        if not payload:
            raise EmptyPayloadError("Empty payload")

        # If we have a secret set, we should check the MAC
        if self._options.secret:
            signature = request.header(SIGNATURE_HEADER)
            if not signature:
                raise MissingHeaderError(SIGNATURE_HEADER)
            verify_signature(self._options.secret, payload, signature)

        event = decode_payload(event_type, payload)
        logger.debug("webhook_parsed", **event.summary())
        return event
