"""Unit tests for row mappers."""

from datetime import datetime, timezone

from doccomments.domain.value import TargetType, UpdateAction
from doccomments.persistence.mappers import (
    row_to_comment,
    row_to_target,
    row_to_target_count,
    row_to_update_log_entry,
    target_to_dict,
)


def comment_row(**overrides) -> dict:
    row = {
        "id": 10,
        "domain": "touch-2",
        "target_id": 3,
        "type": "class",
        "cls": "Ext.Panel",
        "member": "",
        "parent_id": None,
        "user_id": 1,
        "username": "alice",
        "email": None,
        "moderator": False,
        "content": "Hi",
        "content_html": "<p>Hi</p>",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "deleted": False,
        "score": 3,
    }
    row.update(overrides)
    return row


class TestTargetMapping:
    """Tests for target columns."""

    def test_name_is_stored_in_cls_column(self):
        target = row_to_target({"type": "guide", "cls": "getting_started", "member": None})

        assert target.type == TargetType.GUIDE
        assert target.name == "getting_started"
        assert target.member == ""
        assert target_to_dict(target) == {
            "type": "guide",
            "cls": "getting_started",
            "member": "",
        }

    def test_count_row_key(self):
        count = row_to_target_count(
            {"type": "class", "cls": "Ext.Panel", "member": "cfg-title", "value": 4}
        )

        assert (count.key, count.value) == ("class__Ext.Panel__cfg-title", 4)


class TestCommentMapping:
    """Tests for row_to_comment."""

    def test_optional_columns_absent(self):
        """Columns the view did not ask for stay None."""
        comment = row_to_comment(comment_row())

        assert comment.vote_dir is None
        assert comment.read is None
        assert comment.reply_count is None
        assert comment.email == ""
        assert comment.score == 3

    def test_computed_columns_present(self):
        comment = row_to_comment(
            comment_row(vote_dir=-1, read=True, reply_count=0, parent_id=7)
        )

        assert comment.vote_dir == -1
        assert comment.read is True
        assert comment.reply_count == 0
        assert comment.parent_id == 7
        assert comment.is_reply


def test_update_log_entry_action():
    entry = row_to_update_log_entry(
        {
            "comment_id": 1,
            "user_id": 2,
            "action": "undo_delete",
            "created_at": datetime(2024, 1, 1),
        }
    )

    assert entry.action == UpdateAction.UNDO_DELETE
