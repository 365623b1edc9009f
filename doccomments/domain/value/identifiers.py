"""Strongly typed identifiers for comment system entities.

All identifiers are integers assigned by the database. NewType keeps
comment, user, target and tag ids from being mixed up.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
UserId = NewType("UserId", int)
TargetId = NewType("TargetId", int)
TagId = NewType("TagId", int)
