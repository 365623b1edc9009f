"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from doccomments.domain.model import (
    Comment,
    TagCount,
    TargetCount,
    TopTarget,
    TopUser,
    UpdateLogEntry,
    User,
    Vote,
)
from doccomments.domain.value import (
    CommentId,
    Domain,
    Target,
    TargetId,
    TargetType,
    UpdateAction,
    UserId,
    VoteValue,
)


def row_to_target(row: Dict[str, Any]) -> Target:
    """Convert the type/cls/member columns of a row to a Target.

    Args:
        row: Database row as dict

    Returns:
        Target value object
    """
    return Target(
        type=TargetType(row["type"]),
        name=row["cls"],
        member=row.get("member") or "",
    )


def target_to_dict(target: Target) -> Dict[str, Any]:
    """Convert a Target to the columns of the targets table.

    Args:
        target: Target value object

    Returns:
        Dict suitable for database insertion
    """
    return {"type": target.type.value, "cls": target.name, "member": target.member}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email") or "",
        moderator=bool(row.get("moderator")),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a joined comment row to Comment domain model.

    The row carries the comment columns plus the target (domain, type, cls,
    member) and author (username, email, moderator) columns, and the
    computed score, vote_dir, read and reply_count.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        domain=Domain(row["domain"]),
        target_id=TargetId(row["target_id"]),
        target=row_to_target(row),
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        user_id=UserId(row["user_id"]),
        username=row["username"],
        email=row.get("email") or "",
        moderator=bool(row.get("moderator")),
        content=row["content"],
        content_html=row["content_html"],
        created_at=row["created_at"],
        deleted=bool(row["deleted"]),
        score=int(row.get("score") or 0),
        vote_dir=int(row["vote_dir"]) if row.get("vote_dir") is not None else None,
        read=bool(row["read"]) if row.get("read") is not None else None,
        reply_count=int(row["reply_count"])
        if row.get("reply_count") is not None
        else None,
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        user_id=UserId(row["user_id"]),
        comment_id=CommentId(row["comment_id"]),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "user_id": vote.user_id,
        "comment_id": vote.comment_id,
        "value": int(vote.value),
        "created_at": vote.created_at,
    }


def row_to_update_log_entry(row: Dict[str, Any]) -> UpdateLogEntry:
    """Convert database row to UpdateLogEntry domain model.

    Args:
        row: Database row as dict

    Returns:
        UpdateLogEntry domain model
    """
    return UpdateLogEntry(
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        action=UpdateAction(row["action"]),
        created_at=row["created_at"],
    )


def update_log_entry_to_dict(entry: UpdateLogEntry) -> Dict[str, Any]:
    """Convert UpdateLogEntry domain model to database dict.

    Args:
        entry: UpdateLogEntry domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "comment_id": entry.comment_id,
        "user_id": entry.user_id,
        "action": entry.action.value,
        "created_at": entry.created_at,
    }


def row_to_target_count(row: Dict[str, Any]) -> TargetCount:
    """Convert a per-target count row to TargetCount."""
    return TargetCount(key=row_to_target(row).key, value=int(row["value"]))


def row_to_top_user(row: Dict[str, Any]) -> TopUser:
    """Convert a ranking row to TopUser."""
    return TopUser(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email") or "",
        moderator=bool(row.get("moderator")),
        score=int(row["score"] or 0),
    )


def row_to_top_target(row: Dict[str, Any]) -> TopTarget:
    """Convert a ranking row to TopTarget."""
    return TopTarget(
        id=TargetId(row["id"]),
        type=TargetType(row["type"]),
        name=row["cls"],
        member=row.get("member") or "",
        score=int(row["score"]),
    )


def row_to_tag_count(row: Dict[str, Any]) -> TagCount:
    """Convert a ranking row to TagCount."""
    return TagCount(tagname=row["tagname"], score=int(row["score"]))
