"""
Core error classes for the Gitfox webhook pipeline.

Every failure raised by ``WebhookDispatcher.parse`` derives from ``WebhookError``,
except ``SelectionMiss``, which signals a valid request for an event the caller
did not ask for.
"""


class WebhookError(Exception):
    """Base class for all webhook pipeline failures."""

    code = "webhook_error"


class ConfigurationError(WebhookError):
    """Raised when the dispatcher is built or called with invalid settings."""

    code = "configuration_error"


class RequestShapeError(WebhookError):
    """Raised when the request is not a well-formed webhook delivery."""

    code = "request_shape_error"


class InvalidMethodError(RequestShapeError):
    """Raised when the request method is not POST."""

    code = "invalid_http_method"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Invalid HTTP method: {method!r}")


class MissingHeaderError(RequestShapeError):
    """Raised when a required header is absent or empty."""

    code = "missing_header"

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"Missing {header} header")


class EmptyPayloadError(RequestShapeError):
    """Raised when the request body is empty or cannot be read."""

    code = "empty_payload"


class AuthenticationError(WebhookError):
    """Raised when the HMAC signature does not match the request body."""

    code = "hmac_verification_failed"


class DecodeError(WebhookError):
    """Raised when the body is not valid JSON for the resolved payload shape."""

    code = "payload_decode_failed"

    def __init__(self, event_type: str, cause: Exception) -> None:
        self.event_type = event_type
        self.cause = cause
        super().__init__(f"Error parsing {event_type} payload: {cause}")


class UnsupportedEventError(WebhookError):
    """Raised when a requested trigger has no payload shape in the registry."""

    code = "unsupported_event"

    def __init__(self, trigger: str) -> None:
        self.trigger = trigger
        super().__init__(f"Event type {trigger!r} not yet supported")


class SelectionMiss(Exception):
    """Raised when the trigger is valid but not among the requested events.

    This is not a ``WebhookError``: the request is fine, it is just irrelevant
    to the caller.
    """

    code = "event_not_requested"

    def __init__(self, trigger: str) -> None:
        self.trigger = trigger
        super().__init__(f"Event {trigger!r} not defined to be parsed")
