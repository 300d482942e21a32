from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gitfox_webhooks.webhooks.models import Payload


class HookEventType(str, Enum):
    """Supported Gitfox webhook triggers."""

    BRANCH_CREATED = "branch_created"
    BRANCH_UPDATED = "branch_updated"
    BRANCH_DELETED = "branch_deleted"

    TAG_CREATED = "tag_created"
    TAG_UPDATED = "tag_updated"
    TAG_DELETED = "tag_deleted"

    PULLREQ_CREATED = "pullreq_created"
    PULLREQ_REOPENED = "pullreq_reopened"
    PULLREQ_BRANCH_UPDATED = "pullreq_branch_updated"
    PULLREQ_CLOSED = "pullreq_closed"
    PULLREQ_MERGED = "pullreq_merged"
    PULLREQ_UPDATED = "pullreq_updated"
    PULLREQ_COMMENT_CREATED = "pullreq_comment_created"
    PULLREQ_COMMENT_UPDATED = "pullreq_comment_updated"
    PULLREQ_REVIEWER_CREATED = "pullreq_reviewer_created"
    PULLREQ_REVIEWER_DELETED = "pullreq_reviewer_deleted"
    PULLREQ_REVIEW_SUBMITTED = "pullreq_review_submitted"
    PULLREQ_REQUIRED_CHECKS_PASSED = "pullreq_required_checks_passed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WebhookRequest:
    """
    Read-only view of an inbound HTTP request.

    The body may be raw bytes or a binary stream. Header lookups are
    case-insensitive.
    """

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | IO[bytes] = b""

    def header(self, name: str) -> str:
        """Return the header value, or an empty string when absent."""
        value = self.headers.get(name)
        if value is None:
            wanted = name.lower()
            value = next((v for k, v in self.headers.items() if k.lower() == wanted), None)
        return value or ""

    def read_body(self) -> bytes:
        if isinstance(self.body, (bytes, bytearray)):
            return bytes(self.body)
        return self.body.read()

    def release(self) -> None:
        """Drain whatever is left of a streamed body and close it."""
        if isinstance(self.body, (bytes, bytearray)):
            return
        try:
            while self.body.read(65536):
                pass
        except (OSError, ValueError):
            # Already closed or broken; closing below is all that is left to do.
            pass
        finally:
            self.body.close()


@dataclass(frozen=True)
class WebhookEvent:
    """
    A decoded webhook delivery, tagged with the trigger it arrived under.

    For aliased triggers (e.g. ``pullreq_reopened``) the payload has the
    canonical event's shape while ``event_type`` keeps the original trigger.
    """

    event_type: HookEventType
    payload: Payload

    @property
    def repo_path(self) -> str:
        """The repository path (e.g., 'acme/widgets')."""
        return self.payload.repo.path

    @property
    def principal_uid(self) -> str:
        """The uid of the principal that triggered the event."""
        return self.payload.principal.uid

    def summary(self) -> dict[str, Any]:
        """Small, log-friendly description of the event."""
        return {
            "event_type": self.event_type.value,
            "repo": self.repo_path,
            "principal": self.principal_uid,
        }
