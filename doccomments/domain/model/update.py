"""Update log entry.

Append-only audit trail of edits, deletions and restorations.
"""

from datetime import datetime

from pydantic import Field

from doccomments.domain.model.common import DomainModel
from doccomments.domain.value import CommentId, UpdateAction, UserId


class UpdateLogEntry(DomainModel):
    """One moderation or edit action on a comment."""

    comment_id: CommentId
    user_id: UserId
    action: UpdateAction
    created_at: datetime = Field(default_factory=datetime.now)
