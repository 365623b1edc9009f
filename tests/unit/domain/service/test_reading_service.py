"""Unit tests for ReadingService and TargetService."""

import pytest

from doccomments.domain.model import NewComment
from doccomments.domain.repository import ReadingRepository
from doccomments.domain.service import CommentService, ReadingService, TargetService
from doccomments.domain.value import CommentView, Domain, UserId
from tests.conftest import DOMAIN, PANEL, PANEL_TITLE, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMarkRead:
    """Tests for ReadingService.mark_read."""

    @pytest.mark.asyncio
    async def test_marking_twice_is_idempotent(self, unit_env):
        """A second mark_read neither fails nor duplicates the marker."""
        reading_service = await unit_env.get(ReadingService)
        reading_repo = await unit_env.get(ReadingRepository)
        comment_service = await unit_env.get(CommentService)
        await seed_user(unit_env, 1)
        comment_id = await comment_service.add(
            DOMAIN, NewComment(user_id=UserId(1), target=PANEL, content="Read me")
        )

        await reading_service.mark_read(UserId(2), comment_id)
        await reading_service.mark_read(UserId(2), comment_id)

        comment = await comment_service.get_by_id(
            DOMAIN, comment_id, CommentView(read_by=UserId(2))
        )
        assert comment.read is True
        assert not await reading_repo.insert_if_absent(UserId(2), comment_id)


class TestEnsureTarget:
    """Tests for TargetService.ensure."""

    @pytest.mark.asyncio
    async def test_same_target_resolves_to_same_id(self, unit_env):
        target_service = await unit_env.get(TargetService)

        first = await target_service.ensure(DOMAIN, PANEL)
        second = await target_service.ensure(DOMAIN, PANEL)

        assert first == second

    @pytest.mark.asyncio
    async def test_member_and_domain_distinguish_targets(self, unit_env):
        target_service = await unit_env.get(TargetService)

        ids = {
            await target_service.ensure(DOMAIN, PANEL),
            await target_service.ensure(DOMAIN, PANEL_TITLE),
            await target_service.ensure(Domain("extjs-4"), PANEL),
        }

        assert len(ids) == 3
