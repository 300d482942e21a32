"""
Shared fixtures: Gitfox payload bodies and signed webhook requests.
"""

import io
import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gitfox_webhooks.core.models import HookEventType, WebhookRequest  # noqa: E402
from gitfox_webhooks.webhooks.auth import compute_signature  # noqa: E402

SECRET = "s3cr3t"

REPO = {
    "id": 1,
    "path": "acme/widgets",
    "identifier": "widgets",
    "default_branch": "main",
    "git_url": "https://gitfox.example.com/git/acme/widgets.git",
}

PRINCIPAL = {
    "id": 7,
    "uid": "octo",
    "display_name": "Octo Cat",
    "email": "octo@example.com",
    "type": "user",
    "created": 1714564800000,
    "updated": 1714564800000,
}

REVIEWER = {
    "id": 8,
    "uid": "hubot",
    "display_name": "Hubot",
    "email": "hubot@example.com",
    "type": "user",
    "created": 1714564800000,
    "updated": 1714564800000,
}

SIGNATURE = {"identity": {"name": "Octo Cat", "email": "octo@example.com"}, "when": "2024-05-01T12:00:00Z"}

COMMIT = {
    "sha": "a" * 40,
    "message": "Add widget",
    "author": SIGNATURE,
    "committer": SIGNATURE,
    "added": ["widget.py"],
    "removed": [],
    "modified": None,
}

PULL_REQ = {
    "number": 42,
    "state": "open",
    "is_draft": False,
    "title": "Add widget",
    "description": "Adds the widget module",
    "source_repo_id": 1,
    "source_branch": "feature/widget",
    "target_repo_id": 1,
    "target_branch": "main",
    "author": PRINCIPAL,
    "pr_url": "https://gitfox.example.com/acme/widgets/pulls/42",
}

COMMENT = {"id": 11, "text": "Looks good", "created": 1714564900000, "updated": 1714564900000, "kind": "comment"}

CODE_LOCATION = {
    "outdated": False,
    "merge_base_sha": "b" * 40,
    "source_sha": "a" * 40,
    "path": "widget.py",
    "line_new": 10,
    "span_new": 2,
    "line_old": 9,
    "span_old": 1,
}


def _segments() -> dict[str, dict[str, Any]]:
    return {
        "ref": {"ref": {"name": "feature/widget", "repo": REPO}},
        "details": {"sha": "a" * 40, "head_commit": COMMIT, "commits": [COMMIT], "total_commits_count": 1},
        "update": {"old_sha": "0" * 40, "forced": False},
        "pull_req": {"pull_req": PULL_REQ},
        "target": {"target_ref": {"name": "main", "repo": REPO}},
        "comment": {"comment": COMMENT},
        "pr_update": {
            "title_changed": True,
            "title_old": "Add widget",
            "title_new": "Add the widget",
            "description_changed": False,
            "description_old": "",
            "description_new": "",
        },
        "reviewer": {"reviewer": REVIEWER},
        "review": {"review_decision": "approved", "reviewer": REVIEWER},
    }


# Segments carried by each trigger's body.
EVENT_SEGMENTS: dict[HookEventType, tuple[str, ...]] = {
    HookEventType.BRANCH_CREATED: ("ref", "details", "update"),
    HookEventType.BRANCH_UPDATED: ("ref", "details", "update"),
    HookEventType.BRANCH_DELETED: ("ref", "details", "update"),
    HookEventType.TAG_CREATED: ("ref", "details", "update"),
    HookEventType.TAG_UPDATED: ("ref", "details", "update"),
    HookEventType.TAG_DELETED: ("ref", "details", "update"),
    HookEventType.PULLREQ_CREATED: ("pull_req", "target", "ref", "details"),
    HookEventType.PULLREQ_REOPENED: ("pull_req", "target", "ref", "details"),
    HookEventType.PULLREQ_BRANCH_UPDATED: ("pull_req", "target", "ref", "details", "update"),
    HookEventType.PULLREQ_CLOSED: ("pull_req", "target", "ref", "details"),
    HookEventType.PULLREQ_MERGED: ("pull_req", "target", "ref", "details"),
    HookEventType.PULLREQ_UPDATED: ("pull_req", "target", "ref", "pr_update"),
    HookEventType.PULLREQ_COMMENT_CREATED: ("pull_req", "target", "ref", "details", "comment"),
    HookEventType.PULLREQ_COMMENT_UPDATED: ("pull_req", "target", "ref", "comment"),
    HookEventType.PULLREQ_REVIEWER_CREATED: ("pull_req", "reviewer"),
    HookEventType.PULLREQ_REVIEWER_DELETED: ("pull_req", "reviewer"),
    HookEventType.PULLREQ_REVIEW_SUBMITTED: ("pull_req", "target", "ref", "review"),
    HookEventType.PULLREQ_REQUIRED_CHECKS_PASSED: ("pull_req", "reviewer"),
}


def build_payload(event_type: HookEventType) -> dict[str, Any]:
    segments = _segments()
    payload: dict[str, Any] = {"trigger": event_type.value, "repo": REPO, "principal": PRINCIPAL}
    for name in EVENT_SEGMENTS[event_type]:
        payload.update(segments[name])
    return payload


@pytest.fixture
def payload_factory() -> Callable[[HookEventType], dict[str, Any]]:
    """Builds a well-formed body dict for a trigger."""
    return build_payload


@pytest.fixture
def branch_created_body() -> bytes:
    """Raw body of a branch_created delivery."""
    return json.dumps(build_payload(HookEventType.BRANCH_CREATED)).encode()


@pytest.fixture
def make_request() -> Callable[..., WebhookRequest]:
    """Builds a WebhookRequest with trigger and signature headers."""

    def _make(
        body: bytes,
        trigger: str | None = "branch_created",
        secret: str | None = SECRET,
        signature: str | None = None,
        method: str = "POST",
        stream: bool = False,
    ) -> WebhookRequest:
        headers = {"Content-Type": "application/json"}
        if trigger is not None:
            headers["X-Gitfox-Trigger"] = trigger
        if signature is not None:
            headers["X-Gitfox-Signature"] = signature
        elif secret is not None:
            headers["X-Gitfox-Signature"] = compute_signature(secret, body)
        return WebhookRequest(method=method, headers=headers, body=io.BytesIO(body) if stream else body)

    return _make


@pytest.fixture
def secret() -> str:
    """Shared secret used to sign test deliveries."""
    return SECRET


@pytest.fixture
def code_location() -> dict[str, Any]:
    """Flat inline code-comment keys as sent next to a comment."""
    return dict(CODE_LOCATION)
