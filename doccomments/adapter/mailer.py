"""Notification mailers."""

import asyncio
import smtplib
from email.message import EmailMessage
from typing import Optional

import logfire

from doccomments.adapter.error import MailDeliveryError
from doccomments.config import EmailSettings
from doccomments.domain.model import Comment
from doccomments.domain.service import Mailer


def build_message(
    comment: Comment, thread_url: Optional[str], sender: str, recipient: str
) -> EmailMessage:
    """Compose the notification e-mail for a new comment.

    Args:
        comment: The new comment
        thread_url: Link to the page showing the thread
        sender: From address
        recipient: To address

    Returns:
        The message, ready to send
    """
    target = ".".join(p for p in (comment.target.name, comment.target.member) if p)

    message = EmailMessage()
    message["Subject"] = f"Comment on '{target}' [{comment.domain.root}]"
    message["From"] = sender
    message["To"] = recipient

    lines = [f"{comment.username} commented on {target}:", "", comment.content, ""]
    if thread_url:
        lines += ["--", f"Original thread: {thread_url}"]
    message.set_content("\n".join(lines))
    return message


class SmtpMailer(Mailer):
    """Sends notifications about new comments to the mailing list over SMTP."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize mailer.

        Args:
            settings: E-mail settings
        """
        self.settings = settings

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port) as smtp:
            smtp.send_message(message)

    async def notify(self, comment: Comment, thread_url: Optional[str]) -> None:
        """Mail the comment to the configured mailing list.

        Raises:
            MailDeliveryError: If the SMTP server rejects or cannot be reached
        """
        if not self.settings.mailing_list:
            logfire.info("No mailing list configured", comment_id=comment.id)
            return

        message = build_message(
            comment, thread_url, self.settings.sender, self.settings.mailing_list
        )
        with logfire.span(
            "mailer.notify",
            comment_id=comment.id,
            recipient=self.settings.mailing_list,
        ):
            try:
                # smtplib is synchronous
                await asyncio.to_thread(self._send, message)
            except (smtplib.SMTPException, OSError) as e:
                raise MailDeliveryError(f"Failed to mail comment {comment.id}: {e}") from e

            logfire.info("Comment notification sent", comment_id=comment.id)


class LogMailer(Mailer):
    """Mailer that only logs, used when e-mail is disabled."""

    def __init__(self) -> None:
        self.sent: list[tuple[Comment, Optional[str]]] = []

    async def notify(self, comment: Comment, thread_url: Optional[str]) -> None:
        """Record and log the notification instead of sending it."""
        self.sent.append((comment, thread_url))
        logfire.info(
            "Comment notification skipped, e-mail disabled",
            comment_id=comment.id,
            thread_url=thread_url,
        )
