"""Unit tests for AddCommentUseCase."""

import asyncio

import pytest

from doccomments.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
)
from doccomments.application.usecase.common import email_hash
from doccomments.domain.error import AuthenticationRequiredError, ValidationError
from doccomments.domain.service import CommentService, Mailer
from tests.conftest import PANEL_TITLE, SDK, VERSION, seed_user, target_json
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddComment:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_returns_comment_as_author_sees_it(self, unit_env):
        """Response carries the new comment with author fields."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        viewer = await seed_user(unit_env, 1, username="alice", email="alice@example.com")

        # Act
        response = await use_case.execute(
            AddCommentRequest(
                sdk=SDK,
                version=VERSION,
                viewer=viewer,
                target=target_json(PANEL_TITLE),
                content="Nice *docs*",
            )
        )

        # Assert
        comment = response.comment
        assert response.id == comment.id
        assert comment.author == "alice"
        assert comment.target == ["class", "Ext.Panel", "cfg-title"]
        assert comment.email_hash == email_hash("alice@example.com")
        assert comment.score == 0
        assert comment.up_vote is False
        assert comment.read is None  # Read flags are for moderators only

    @pytest.mark.asyncio
    async def test_moderator_comment_is_marked_read(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        viewer = await seed_user(unit_env, 1, moderator=True)

        response = await use_case.execute(
            AddCommentRequest(
                sdk=SDK,
                version=VERSION,
                viewer=viewer,
                target=target_json(PANEL_TITLE),
                content="Answered",
            )
        )

        assert response.comment.read is True
        assert response.comment.moderator is True

    @pytest.mark.asyncio
    async def test_notification_is_sent_in_background(self, unit_env):
        """The mailer receives the comment and the thread URL."""
        use_case = await unit_env.get(AddCommentUseCase)
        mailer = await unit_env.get(Mailer)
        viewer = await seed_user(unit_env, 1)

        response = await use_case.execute(
            AddCommentRequest(
                sdk=SDK,
                version=VERSION,
                viewer=viewer,
                target=target_json(PANEL_TITLE),
                content="Ping",
                url="http://docs.example.com/#!/api/Ext.Panel",
            )
        )
        await asyncio.gather(*list(use_case.notifications))

        [(comment, thread_url)] = mailer.sent
        assert comment.id == response.id
        assert thread_url == "http://docs.example.com/#!/api/Ext.Panel"

    @pytest.mark.asyncio
    async def test_failed_notification_does_not_fail_the_request(self, unit_env):
        """Mail errors are logged, the comment stays."""

        class FailingMailer(Mailer):
            async def notify(self, comment, thread_url):
                raise ConnectionError("smtp down")

        comment_service = await unit_env.get(CommentService)
        use_case = AddCommentUseCase(comment_service=comment_service, mailer=FailingMailer())
        viewer = await seed_user(unit_env, 1)

        response = await use_case.execute(
            AddCommentRequest(
                sdk=SDK,
                version=VERSION,
                viewer=viewer,
                target=target_json(PANEL_TITLE),
                content="Still saved",
            )
        )
        await asyncio.gather(*list(use_case.notifications))

        assert response.comment.content == "Still saved"

    @pytest.mark.asyncio
    async def test_anonymous_request_raises(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                AddCommentRequest(
                    sdk=SDK, version=VERSION, target=target_json(PANEL_TITLE), content="x"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_target_raises(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        viewer = await seed_user(unit_env, 1)

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddCommentRequest(
                    sdk=SDK, version=VERSION, viewer=viewer, target="[1", content="x"
                )
            )
