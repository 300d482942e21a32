"""Verify and decode Gitfox webhook deliveries into typed payloads."""

from gitfox_webhooks.core.errors import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    EmptyPayloadError,
    InvalidMethodError,
    MissingHeaderError,
    RequestShapeError,
    SelectionMiss,
    UnsupportedEventError,
    WebhookError,
)
from gitfox_webhooks.core.models import HookEventType, WebhookEvent, WebhookRequest
from gitfox_webhooks.webhooks import WebhookDispatcher, WebhookOptions

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "EmptyPayloadError",
    "HookEventType",
    "InvalidMethodError",
    "MissingHeaderError",
    "RequestShapeError",
    "SelectionMiss",
    "UnsupportedEventError",
    "WebhookDispatcher",
    "WebhookError",
    "WebhookEvent",
    "WebhookOptions",
    "WebhookRequest",
]
