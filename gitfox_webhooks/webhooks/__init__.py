"""
Gitfox webhook verification and decoding.

``WebhookDispatcher.parse`` checks the request method and trigger header,
filters on the caller's events, verifies the HMAC signature when a secret is
configured, and decodes the body into the payload model of the trigger.
"""

from gitfox_webhooks.webhooks.auth import compute_signature, verify_signature
from gitfox_webhooks.webhooks.decoder import decode_payload
from gitfox_webhooks.webhooks.dispatcher import TRIGGER_HEADER, WebhookDispatcher, WebhookOptions

__all__ = [
    "TRIGGER_HEADER",
    "WebhookDispatcher",
    "WebhookOptions",
    "compute_signature",
    "decode_payload",
    "verify_signature",
]
