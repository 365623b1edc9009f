"""Test configuration and fixtures."""

import json

from dishka import AsyncContainer

from doccomments.domain.model import User, Viewer
from doccomments.domain.repository import UserRepository
from doccomments.domain.value import Domain, Target, TargetType, UserId

SDK = "touch"
VERSION = "2"
DOMAIN = Domain("touch-2")

PANEL = Target(type=TargetType.CLASS, name="Ext.Panel")
PANEL_TITLE = Target(type=TargetType.CLASS, name="Ext.Panel", member="cfg-title")
GETTING_STARTED = Target(type=TargetType.GUIDE, name="getting_started")


def target_json(target: Target) -> str:
    """JSON array form of a target, as clients send it."""
    return json.dumps(target.to_list())


async def seed_user(
    env: AsyncContainer,
    user_id: int,
    username: str | None = None,
    moderator: bool = False,
    email: str = "",
) -> Viewer:
    """Store a user and return the matching viewer.

    Args:
        env: Request-scoped test container
        user_id: ID of the user
        username: Defaults to "user<id>"
        moderator: Whether the user moderates comments
        email: E-mail address

    Returns:
        Viewer for requests made as this user
    """
    user_repo = await env.get(UserRepository)
    await user_repo.upsert(
        User(
            id=UserId(user_id),
            username=username or f"user{user_id}",
            email=email or f"user{user_id}@example.com",
            moderator=moderator,
        )
    )
    return Viewer(user_id=UserId(user_id), moderator=moderator)
