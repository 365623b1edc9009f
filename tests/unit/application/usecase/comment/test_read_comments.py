"""Unit tests for the comment listing use cases."""

import pytest

from doccomments.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRecentCommentsRequest,
    GetRecentCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from doccomments.application.usecase.tag import AddTagRequest, AddTagUseCase
from doccomments.application.usecase.vote import VoteRequest, VoteUseCase
from doccomments.config import CommentSettings
from doccomments.domain.error import NotFoundError, ValidationError
from doccomments.domain.model import Viewer
from doccomments.domain.service import CommentService
from tests.conftest import PANEL, SDK, VERSION, seed_user, target_json
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def post(env, viewer: Viewer, parent_id: int | None = None, content="Hi") -> int:
    use_case = await env.get(AddCommentUseCase)
    response = await use_case.execute(
        AddCommentRequest(
            sdk=SDK,
            version=VERSION,
            viewer=viewer,
            target=target_json(PANEL),
            content=content,
            parent_id=parent_id,
        )
    )
    return response.id


class TestGetComments:
    """Tests for GetCommentsUseCase and GetRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_thread_with_viewer_votes(self, unit_env):
        """Logged-in viewers see their own vote direction."""
        author = await seed_user(unit_env, 1)
        voter = await seed_user(unit_env, 2)
        top = await post(unit_env, author)
        await post(unit_env, author, parent_id=top)
        vote = await unit_env.get(VoteUseCase)
        await vote.execute(
            VoteRequest(sdk=SDK, version=VERSION, viewer=voter, comment_id=top, vote="up")
        )
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(
                sdk=SDK, version=VERSION, viewer=voter, target=target_json(PANEL)
            )
        )

        [comment] = response.comments
        assert comment.id == top
        assert comment.up_vote is True
        assert comment.down_vote is False
        assert comment.score == 1
        assert comment.reply_count == 1

    @pytest.mark.asyncio
    async def test_replies_listed_under_parent(self, unit_env):
        author = await seed_user(unit_env, 1)
        top = await post(unit_env, author)
        reply = await post(unit_env, author, parent_id=top)
        use_case = await unit_env.get(GetRepliesUseCase)

        response = await use_case.execute(
            GetRepliesRequest(sdk=SDK, version=VERSION, parent_id=top)
        )

        assert [c.id for c in response.comments] == [reply]
        assert response.comments[0].parent_id == top

    @pytest.mark.asyncio
    async def test_invalid_version_raises(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                GetCommentsRequest(sdk=SDK, version="latest", target=target_json(PANEL))
            )

    @pytest.mark.asyncio
    async def test_hyphenated_sdk_name(self, unit_env):
        """An SDK name containing a hyphen addresses its own domain."""
        author = await seed_user(unit_env, 1)
        add_comment = await unit_env.get(AddCommentUseCase)
        added = await add_comment.execute(
            AddCommentRequest(
                sdk="ext-js",
                version="4",
                viewer=author,
                target=target_json(PANEL),
                content="Hi",
            )
        )
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(sdk="ext-js", version="4", target=target_json(PANEL))
        )
        other = await use_case.execute(
            GetCommentsRequest(sdk=SDK, version=VERSION, target=target_json(PANEL))
        )

        assert [c.id for c in response.comments] == [added.id]
        assert other.comments == []

    @pytest.mark.asyncio
    async def test_get_single_comment(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author, content="Single")
        use_case = await unit_env.get(GetCommentUseCase)

        response = await use_case.execute(
            GetCommentRequest(sdk=SDK, version=VERSION, comment_id=comment_id)
        )

        assert response.comment.content == "Single"

    @pytest.mark.asyncio
    async def test_get_comment_of_other_version_raises(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentRequest(sdk=SDK, version="3", comment_id=comment_id)
            )


class TestGetRecentComments:
    """Tests for GetRecentCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_page_info_on_last_item(self, unit_env):
        author = await seed_user(unit_env, 1)
        for i in range(3):
            await post(unit_env, author, content=f"c{i}")
        use_case = await unit_env.get(GetRecentCommentsUseCase)

        response = await use_case.execute(
            GetRecentCommentsRequest(sdk=SDK, version=VERSION, limit=2)
        )

        first, last = response.comments
        assert first.total_rows is None
        assert (last.total_rows, last.offset, last.limit) == (3, 0, 2)

    @pytest.mark.asyncio
    async def test_limit_is_clamped_to_max_page_size(self, unit_env):
        author = await seed_user(unit_env, 1)
        for i in range(3):
            await post(unit_env, author, content=f"c{i}")
        use_case = GetRecentCommentsUseCase(
            comment_service=await unit_env.get(CommentService),
            comment_settings=CommentSettings(default_page_size=1, max_page_size=2),
        )

        default_page = await use_case.execute(
            GetRecentCommentsRequest(sdk=SDK, version=VERSION)
        )
        clamped_page = await use_case.execute(
            GetRecentCommentsRequest(sdk=SDK, version=VERSION, limit=50)
        )

        assert len(default_page.comments) == 1
        assert len(clamped_page.comments) == 2
        assert clamped_page.comments[-1].limit == 2

    @pytest.mark.asyncio
    async def test_hide_flags_ignored_for_anonymous_viewer(self, unit_env):
        author = await seed_user(unit_env, 1)
        await post(unit_env, author)
        use_case = await unit_env.get(GetRecentCommentsUseCase)

        response = await use_case.execute(
            GetRecentCommentsRequest(
                sdk=SDK, version=VERSION, hide_current_user=True, hide_read=True
            )
        )

        assert len(response.comments) == 1

    @pytest.mark.asyncio
    async def test_hide_read_and_own_comments(self, unit_env):
        moderator = await seed_user(unit_env, 1, moderator=True)
        author = await seed_user(unit_env, 2)
        await post(unit_env, moderator)
        read = await post(unit_env, author, content="read")
        unread = await post(unit_env, author, content="unread")
        mark_read = await unit_env.get(MarkReadUseCase)
        await mark_read.execute(
            MarkReadRequest(sdk=SDK, version=VERSION, viewer=moderator, comment_id=read)
        )
        use_case = await unit_env.get(GetRecentCommentsUseCase)

        response = await use_case.execute(
            GetRecentCommentsRequest(
                sdk=SDK,
                version=VERSION,
                viewer=moderator,
                hide_current_user=True,
                hide_read=True,
            )
        )

        assert [c.id for c in response.comments] == [unread]
        assert response.comments[0].read is False

    @pytest.mark.asyncio
    async def test_tag_filter_is_stripped_like_stored_tags(self, unit_env):
        """Surrounding whitespace in the filter matches the stripped stored tag."""
        moderator = await seed_user(unit_env, 1, moderator=True)
        tagged = await post(unit_env, moderator, content="tagged")
        await post(unit_env, moderator, content="untagged")
        add_tag = await unit_env.get(AddTagUseCase)
        await add_tag.execute(
            AddTagRequest(
                sdk=SDK, version=VERSION, viewer=moderator, comment_id=tagged, tagname=" beta "
            )
        )
        use_case = await unit_env.get(GetRecentCommentsUseCase)

        response = await use_case.execute(
            GetRecentCommentsRequest(sdk=SDK, version=VERSION, tagname=" beta ")
        )

        assert [c.id for c in response.comments] == [tagged]

    @pytest.mark.asyncio
    async def test_blank_tag_filter_is_ignored(self, unit_env):
        author = await seed_user(unit_env, 1)
        await post(unit_env, author)
        use_case = await unit_env.get(GetRecentCommentsUseCase)

        response = await use_case.execute(
            GetRecentCommentsRequest(sdk=SDK, version=VERSION, tagname="   ")
        )

        assert len(response.comments) == 1
