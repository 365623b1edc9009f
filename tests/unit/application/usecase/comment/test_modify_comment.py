"""Unit tests for the comment modification use cases."""

import pytest

from doccomments.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    MarkReadRequest,
    MarkReadUseCase,
    SetDeletedRequest,
    SetDeletedUseCase,
    SetParentRequest,
    SetParentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from doccomments.domain.error import (
    AuthenticationRequiredError,
    NotAuthorizedError,
    NotFoundError,
)
from doccomments.domain.model import Viewer
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, CommentView, UserId
from tests.conftest import DOMAIN, PANEL, SDK, VERSION, seed_user, target_json
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def post(env, viewer: Viewer, parent_id: int | None = None) -> int:
    use_case = await env.get(AddCommentUseCase)
    response = await use_case.execute(
        AddCommentRequest(
            sdk=SDK,
            version=VERSION,
            viewer=viewer,
            target=target_json(PANEL),
            content="Original",
            parent_id=parent_id,
        )
    )
    return response.id


class TestUpdateComment:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(
            UpdateCommentRequest(
                sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id, content="Edited"
            )
        )

        assert response.comment.content == "Edited"
        assert response.comment.content_html == "<p>Edited</p>"

    @pytest.mark.asyncio
    async def test_moderator_can_update_deleted_comment(self, unit_env):
        """Moderators see and edit deleted comments."""
        author = await seed_user(unit_env, 1)
        moderator = await seed_user(unit_env, 2, moderator=True)
        comment_id = await post(unit_env, author)
        delete = await unit_env.get(SetDeletedUseCase)
        await delete.execute(
            SetDeletedRequest(
                sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id, deleted=True
            )
        )
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(
            UpdateCommentRequest(
                sdk=SDK, version=VERSION, viewer=moderator, comment_id=comment_id, content="Fixed"
            )
        )

        assert response.comment.content == "Fixed"
        assert response.comment.deleted is True

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        author = await seed_user(unit_env, 1)
        stranger = await seed_user(unit_env, 2)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    sdk=SDK, version=VERSION, viewer=stranger, comment_id=comment_id, content="Mine now"
                )
            )


class TestSetDeleted:
    """Tests for SetDeletedUseCase."""

    @pytest.mark.asyncio
    async def test_delete_returns_no_comment_and_undo_returns_it(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(SetDeletedUseCase)

        deleted = await use_case.execute(
            SetDeletedRequest(
                sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id, deleted=True
            )
        )
        restored = await use_case.execute(
            SetDeletedRequest(
                sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id, deleted=False
            )
        )

        assert deleted.success is True
        assert deleted.comment is None
        assert restored.comment.id == comment_id
        assert restored.comment.deleted is False

    @pytest.mark.asyncio
    async def test_anonymous_cannot_delete(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(SetDeletedUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                SetDeletedRequest(sdk=SDK, version=VERSION, comment_id=comment_id, deleted=True)
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        moderator = await seed_user(unit_env, 1, moderator=True)
        use_case = await unit_env.get(SetDeletedUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SetDeletedRequest(
                    sdk=SDK, version=VERSION, viewer=moderator, comment_id=404, deleted=True
                )
            )


class TestSetParent:
    """Tests for SetParentUseCase."""

    @pytest.mark.asyncio
    async def test_moderator_moves_reply_to_top_level_of_thread(self, unit_env):
        moderator = await seed_user(unit_env, 1, moderator=True)
        top = await post(unit_env, moderator)
        reply = await post(unit_env, moderator, parent_id=top)
        other = await post(unit_env, moderator)
        use_case = await unit_env.get(SetParentUseCase)

        response = await use_case.execute(
            SetParentRequest(
                sdk=SDK, version=VERSION, viewer=moderator, comment_id=other, parent_id=reply
            )
        )

        assert response.parent_id == top

    @pytest.mark.asyncio
    async def test_author_who_is_not_moderator_cannot_move(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(SetParentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SetParentRequest(
                    sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id
                )
            )


class TestMarkRead:
    """Tests for MarkReadUseCase."""

    @pytest.mark.asyncio
    async def test_logged_in_user_marks_read(self, unit_env):
        author = await seed_user(unit_env, 1)
        reader = await seed_user(unit_env, 2)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(MarkReadUseCase)
        comment_service = await unit_env.get(CommentService)

        response = await use_case.execute(
            MarkReadRequest(sdk=SDK, version=VERSION, viewer=reader, comment_id=comment_id)
        )

        assert response.success is True
        comment = await comment_service.get_by_id(
            DOMAIN, CommentId(comment_id), CommentView(read_by=UserId(2))
        )
        assert comment.read is True

    @pytest.mark.asyncio
    async def test_anonymous_cannot_mark_read(self, unit_env):
        use_case = await unit_env.get(MarkReadUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(MarkReadRequest(sdk=SDK, version=VERSION, comment_id=1))
