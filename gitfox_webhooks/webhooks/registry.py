"""
Registry of supported Gitfox triggers.

Maps every trigger to the payload model it decodes into. Some triggers carry
exactly the same body as another one and are registered as aliases of it, so a
single model definition serves both.
"""

from collections.abc import Iterable

from gitfox_webhooks.core.errors import ConfigurationError
from gitfox_webhooks.core.models import HookEventType
from gitfox_webhooks.webhooks.models import (
    Payload,
    PullReqBranchUpdatedPayload,
    PullReqClosedPayload,
    PullReqCommentPayload,
    PullReqCommentUpdatedPayload,
    PullReqCreatedPayload,
    PullReqReviewerChangedPayload,
    PullReqReviewSubmittedPayload,
    PullReqUpdatedPayload,
    ReferencePayload,
)

# Canonical triggers and the model their body is decoded into.
_PAYLOAD_MODELS: dict[HookEventType, type[Payload]] = {
    HookEventType.BRANCH_CREATED: ReferencePayload,
    HookEventType.BRANCH_UPDATED: ReferencePayload,
    HookEventType.BRANCH_DELETED: ReferencePayload,
    HookEventType.TAG_CREATED: ReferencePayload,
    HookEventType.TAG_UPDATED: ReferencePayload,
    HookEventType.TAG_DELETED: ReferencePayload,
    HookEventType.PULLREQ_CREATED: PullReqCreatedPayload,
    HookEventType.PULLREQ_BRANCH_UPDATED: PullReqBranchUpdatedPayload,
    HookEventType.PULLREQ_CLOSED: PullReqClosedPayload,
    HookEventType.PULLREQ_UPDATED: PullReqUpdatedPayload,
    HookEventType.PULLREQ_COMMENT_CREATED: PullReqCommentPayload,
    HookEventType.PULLREQ_COMMENT_UPDATED: PullReqCommentUpdatedPayload,
    HookEventType.PULLREQ_REVIEWER_CREATED: PullReqReviewerChangedPayload,
    HookEventType.PULLREQ_REVIEWER_DELETED: PullReqReviewerChangedPayload,
    HookEventType.PULLREQ_REVIEW_SUBMITTED: PullReqReviewSubmittedPayload,
}

# Alias trigger -> canonical trigger whose shape it shares.
_ALIASES: dict[HookEventType, HookEventType] = {
    HookEventType.PULLREQ_REOPENED: HookEventType.PULLREQ_CREATED,
    HookEventType.PULLREQ_MERGED: HookEventType.PULLREQ_CLOSED,
    HookEventType.PULLREQ_REQUIRED_CHECKS_PASSED: HookEventType.PULLREQ_REVIEWER_CREATED,
}


def resolve(trigger: str) -> HookEventType | None:
    """Return the event type for an exact trigger value, or None if unknown."""
    try:
        return HookEventType(trigger)
    except ValueError:
        return None


def canonical_event(event_type: HookEventType) -> HookEventType:
    """Return the trigger whose payload shape ``event_type`` decodes into."""
    return _ALIASES.get(event_type, event_type)


def payload_model(event_type: HookEventType) -> type[Payload] | None:
    """Return the payload model for a trigger, following aliases."""
    return _PAYLOAD_MODELS.get(canonical_event(event_type))


def supported_events() -> frozenset[HookEventType]:
    """All triggers that have a payload model."""
    return frozenset(event for event in HookEventType if payload_model(event) is not None)


def normalize_events(events: Iterable[HookEventType | str]) -> frozenset[str]:
    """
    Turn the caller's interest set into exact trigger strings.

    Raises:
        ConfigurationError: If the set is empty or holds non-string values.
    """
    normalized = set()
    for event in events:
        if isinstance(event, HookEventType):
            normalized.add(event.value)
        elif isinstance(event, str) and event:
            normalized.add(event)
        else:
            raise ConfigurationError(f"Invalid event to parse: {event!r}")

    if not normalized:
        raise ConfigurationError("No event specified to parse")
    return frozenset(normalized)
