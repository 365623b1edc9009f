"""Mailer interface."""

from abc import ABC, abstractmethod
from typing import Optional

from doccomments.domain.model import Comment


class Mailer(ABC):
    """Sends notifications about new comments.

    Notification is fire-and-forget: callers log failures and never let
    them affect the comment that triggered them.
    """

    @abstractmethod
    async def notify(self, comment: Comment, thread_url: Optional[str]) -> None:
        """Announce a new comment.

        Args:
            comment: The comment as stored
            thread_url: Link to the page showing the thread
        """
        pass
