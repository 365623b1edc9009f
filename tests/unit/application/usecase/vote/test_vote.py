"""Unit tests for VoteUseCase."""

import pytest

from doccomments.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from doccomments.application.usecase.vote import VoteRequest, VoteUseCase
from doccomments.domain.error import (
    AuthenticationRequiredError,
    NotAuthorizedError,
    NotFoundError,
)
from tests.conftest import PANEL, SDK, VERSION, seed_user, target_json
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def post(env, viewer) -> int:
    use_case = await env.get(AddCommentUseCase)
    response = await use_case.execute(
        AddCommentRequest(
            sdk=SDK, version=VERSION, viewer=viewer, target=target_json(PANEL), content="Hi"
        )
    )
    return response.id


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_up_then_down_retracts(self, unit_env):
        """An opposite vote clears the direction instead of flipping it."""
        # Arrange
        author = await seed_user(unit_env, 1)
        voter = await seed_user(unit_env, 2)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(VoteUseCase)

        # Act
        up = await use_case.execute(
            VoteRequest(sdk=SDK, version=VERSION, viewer=voter, comment_id=comment_id, vote="up")
        )
        down = await use_case.execute(
            VoteRequest(sdk=SDK, version=VERSION, viewer=voter, comment_id=comment_id, vote="down")
        )

        # Assert
        assert (up.direction, up.total) == ("up", 1)
        assert (down.direction, down.total) == (None, 0)

    @pytest.mark.asyncio
    async def test_down_vote(self, unit_env):
        author = await seed_user(unit_env, 1)
        voter = await seed_user(unit_env, 2)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(VoteUseCase)

        response = await use_case.execute(
            VoteRequest(sdk=SDK, version=VERSION, viewer=voter, comment_id=comment_id, vote="down")
        )

        assert response.success is True
        assert (response.direction, response.total) == ("down", -1)

    @pytest.mark.asyncio
    async def test_author_cannot_vote_own_comment(self, unit_env):
        author = await seed_user(unit_env, 1)
        comment_id = await post(unit_env, author)
        use_case = await unit_env.get(VoteUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                VoteRequest(
                    sdk=SDK, version=VERSION, viewer=author, comment_id=comment_id, vote="up"
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_cannot_vote(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                VoteRequest(sdk=SDK, version=VERSION, comment_id=1, vote="up")
            )

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises(self, unit_env):
        voter = await seed_user(unit_env, 2)
        use_case = await unit_env.get(VoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                VoteRequest(sdk=SDK, version=VERSION, viewer=voter, comment_id=404, vote="up")
            )
