"""
Gitfox webhook payload models.

Payloads are flat JSON objects assembled from reusable segments. Each segment
is a frozen pydantic model contributing a fixed group of top-level keys, and
every payload shape is the composition of the segments it carries.

Only keys the sender may omit are optional; anything else missing or of the
wrong type fails validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, hide_input_in_errors=True)


# --- Shared records ---


class Repo(_Record):
    """Repository descriptor."""

    id: int
    path: str = Field(..., description="Full repository path (e.g., 'acme/widgets')")
    identifier: str
    default_branch: str
    git_url: str
    uid: str | None = None


class PrincipalInfo(_Record):
    """A user or service account acting on the platform."""

    id: int
    uid: str
    display_name: str
    email: str
    type: str
    created: int = Field(..., description="Creation time in epoch milliseconds")
    updated: int = Field(..., description="Last update time in epoch milliseconds")


class IdentityInfo(_Record):
    name: str
    email: str


class SignatureInfo(_Record):
    identity: IdentityInfo
    when: datetime


class CommitInfo(_Record):
    """A single commit as reported by the sender."""

    sha: str
    message: str
    author: SignatureInfo
    committer: SignatureInfo
    added: list[str] | None
    removed: list[str] | None
    modified: list[str] | None


class ReferenceInfo(_Record):
    """A branch or tag together with its owning repository."""

    name: str
    repo: Repo


class PullReqInfo(_Record):
    number: int
    state: str
    is_draft: bool
    title: str
    description: str
    source_repo_id: int
    source_branch: str
    target_repo_id: int
    target_branch: str
    merge_strategy: str | None = None
    author: PrincipalInfo
    pr_url: str


class CommentInfo(_Record):
    id: int
    parent_id: int | None = None
    text: str
    created: int
    updated: int
    kind: str


class CodeCommentInfo(_Record):
    """Location of an inline code comment."""

    outdated: bool
    merge_base_sha: str
    source_sha: str
    path: str
    line_new: int
    span_new: int
    line_old: int
    span_old: int


# --- Segments ---


class BaseSegment(_Record):
    """Common segment for all payloads."""

    trigger: str
    repo: Repo
    principal: PrincipalInfo


class ReferenceSegment(_Record):
    ref: ReferenceInfo


class ReferenceDetailsSegment(_Record):
    """Extra details for reference related payloads."""

    sha: str
    head_commit: CommitInfo | None = None
    commits: list[CommitInfo] | None = None
    total_commits_count: int | None = None
    # Deprecated by the sender in favour of head_commit.
    commit: CommitInfo | None = None


class ReferenceUpdateSegment(_Record):
    old_sha: str
    forced: bool


class PullReqSegment(_Record):
    pull_req: PullReqInfo


class PullReqTargetReferenceSegment(_Record):
    target_ref: ReferenceInfo


class PullReqCommentSegment(_Record):
    """
    Comment segment.

    Code comments carry their location as flat top-level keys next to
    ``comment``; they are all absent for plain text comments.
    """

    comment: CommentInfo
    outdated: bool | None = None
    merge_base_sha: str | None = None
    source_sha: str | None = None
    path: str | None = None
    line_new: int | None = None
    span_new: int | None = None
    line_old: int | None = None
    span_old: int | None = None

    @property
    def code_comment(self) -> CodeCommentInfo | None:
        """The inline code location, or None for a plain text comment."""
        if self.path is None:
            return None
        return CodeCommentInfo(
            outdated=bool(self.outdated),
            merge_base_sha=self.merge_base_sha or "",
            source_sha=self.source_sha or "",
            path=self.path,
            line_new=self.line_new or 0,
            span_new=self.span_new or 0,
            line_old=self.line_old or 0,
            span_old=self.span_old or 0,
        )


class PullReqUpdateSegment(_Record):
    """What changed in an edited pull request."""

    title_changed: bool
    title_old: str
    title_new: str
    description_changed: bool
    description_old: str
    description_new: str


class ReviewerSegment(_Record):
    reviewer: PrincipalInfo


class PullReqReviewSegment(_Record):
    review_decision: str
    reviewer: PrincipalInfo


# --- Payload shapes ---


class ReferencePayload(BaseSegment, ReferenceSegment, ReferenceDetailsSegment, ReferenceUpdateSegment):
    """Branch and tag created, updated and deleted."""


class PullReqCreatedPayload(
    BaseSegment, PullReqSegment, PullReqTargetReferenceSegment, ReferenceSegment, ReferenceDetailsSegment
):
    """Pull request opened; also used for reopened."""


class PullReqBranchUpdatedPayload(
    BaseSegment,
    PullReqSegment,
    PullReqTargetReferenceSegment,
    ReferenceSegment,
    ReferenceDetailsSegment,
    ReferenceUpdateSegment,
):
    """New commits pushed to a pull request's source branch."""


class PullReqClosedPayload(
    BaseSegment, PullReqSegment, PullReqTargetReferenceSegment, ReferenceSegment, ReferenceDetailsSegment
):
    """Pull request closed; also used for merged."""


class PullReqCommentPayload(
    BaseSegment,
    PullReqSegment,
    PullReqTargetReferenceSegment,
    ReferenceSegment,
    ReferenceDetailsSegment,
    PullReqCommentSegment,
):
    pass


class PullReqCommentUpdatedPayload(
    BaseSegment, PullReqSegment, PullReqTargetReferenceSegment, ReferenceSegment, PullReqCommentSegment
):
    pass


class PullReqUpdatedPayload(
    BaseSegment, PullReqSegment, PullReqTargetReferenceSegment, ReferenceSegment, PullReqUpdateSegment
):
    """Pull request title or description edited."""


class PullReqReviewerChangedPayload(BaseSegment, PullReqSegment, ReviewerSegment):
    """Reviewer added to or removed from a pull request."""


class PullReqReviewSubmittedPayload(
    BaseSegment, PullReqSegment, PullReqTargetReferenceSegment, ReferenceSegment, PullReqReviewSegment
):
    pass


Payload = (
    ReferencePayload
    | PullReqCreatedPayload
    | PullReqBranchUpdatedPayload
    | PullReqClosedPayload
    | PullReqCommentPayload
    | PullReqCommentUpdatedPayload
    | PullReqUpdatedPayload
    | PullReqReviewerChangedPayload
    | PullReqReviewSubmittedPayload
)


class WebhookResponse(BaseModel):
    """Standardized response model for the webhook endpoint."""

    status: str = Field(..., description="Processing status: ok, ignored, error")
    detail: str | None = Field(None, description="Additional context or error message")
    event_type: str | None = Field(None, description="Gitfox trigger of the delivery")
