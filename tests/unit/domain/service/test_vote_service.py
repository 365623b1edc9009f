"""Unit tests for VoteService."""

import pytest

from doccomments.domain.error import NotFoundError
from doccomments.domain.model import NewComment, VoteState
from doccomments.domain.repository import VoteRepository
from doccomments.domain.service import CommentService, VoteService
from doccomments.domain.value import CommentId, UserId, VoteValue
from tests.conftest import DOMAIN, PANEL, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create_comment(env, author_id: int = 1) -> CommentId:
    comment_service = await env.get(CommentService)
    await seed_user(env, author_id)
    return await comment_service.add(
        DOMAIN, NewComment(user_id=UserId(author_id), target=PANEL, content="Vote me")
    )


class TestCast:
    """Tests for cast method."""

    @pytest.mark.asyncio
    async def test_vote_sequence(self, unit_env):
        """up, up, down, down gives (1,1), (0,1), (0,0), (-1,-1)."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_id = await create_comment(unit_env)
        voter = UserId(2)

        # Act
        results = [
            await comment_service.vote(DOMAIN, voter, comment_id, value)
            for value in (VoteValue.UP, VoteValue.UP, VoteValue.DOWN, VoteValue.DOWN)
        ]

        # Assert
        assert results == [(1, 1), (0, 1), (0, 0), (-1, -1)]

    @pytest.mark.asyncio
    async def test_retraction_removes_the_vote_row(self, unit_env):
        """The ledger keeps no row for a retracted vote."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment_id = await create_comment(unit_env)

        await vote_service.cast(DOMAIN, UserId(2), comment_id, VoteValue.DOWN)
        result = await vote_service.cast(DOMAIN, UserId(2), comment_id, VoteValue.UP)

        assert result.state == VoteState.NO_VOTE
        assert await vote_repo.find_for_update(UserId(2), comment_id) is None

    @pytest.mark.asyncio
    async def test_votes_of_different_users_add_up(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment_id = await create_comment(unit_env)

        for user_id in (2, 3, 4):
            await vote_service.cast(DOMAIN, UserId(user_id), comment_id, VoteValue.UP)
        await vote_service.cast(DOMAIN, UserId(5), comment_id, VoteValue.DOWN)

        assert await vote_service.get_score(comment_id) == 2

    @pytest.mark.asyncio
    async def test_vote_on_deleted_comment_raises(self, unit_env):
        """Deleted comments cannot be voted on."""
        vote_service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        comment_id = await create_comment(unit_env)
        await comment_service.set_deleted(DOMAIN, comment_id, UserId(1), True)

        with pytest.raises(NotFoundError):
            await vote_service.cast(DOMAIN, UserId(2), comment_id, VoteValue.UP)

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast(DOMAIN, UserId(2), CommentId(404), VoteValue.UP)
