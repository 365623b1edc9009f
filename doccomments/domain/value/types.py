"""Domain value objects for the comment system.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import json
import re
from enum import Enum, IntEnum

from pydantic import field_validator

from doccomments.domain.error import ValidationError
from doccomments.domain.value.common import RootValueObject, ValueObject


class Domain(RootValueObject[str]):
    """Comment partition, one per documentation version.

    Examples: 'touch-2', 'extjs-4', 'ext-js-4'. The SDK part may itself
    contain hyphens; the version after the last one is a plain number.
    """

    @field_validator("root")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Validate domain format."""
        if not re.fullmatch(r"[A-Za-z0-9_.-]+-[0-9]+", v):
            raise ValueError("Domain must look like '<sdk>-<version>'")
        return v

    @classmethod
    def from_parts(cls, sdk: str, version: str) -> "Domain":
        """Build a domain from SDK name and version number.

        Raises:
            ValidationError: If the version is not a positive ASCII number or
                the SDK name is empty or contains other punctuation
        """
        if not re.fullmatch(r"[0-9]+", version) or int(version) == 0:
            raise ValidationError(f"Invalid documentation version: {version!r}")
        try:
            return cls(f"{sdk}-{version}")
        except ValueError as e:
            raise ValidationError(f"Invalid SDK name {sdk!r}: {e}")


class TargetType(str, Enum):
    """Kind of documentation page a comment thread is attached to."""

    CLASS = "class"
    GUIDE = "guide"
    VIDEO = "video"


class Target(ValueObject):
    """Descriptor of a documented entity.

    Identified within a domain by (type, name, member). Member is the empty
    string for comments on the entity itself.
    """

    type: TargetType
    name: str
    member: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the entity name is present."""
        if not v or len(v) > 255:
            raise ValueError("Target name must be 1-255 characters")
        return v

    @property
    def key(self) -> str:
        """Key used by the per-target comment counts."""
        return f"{self.type.value}__{self.name}__{self.member}"

    def to_list(self) -> list[str]:
        """Return the [type, name, member] form used by clients."""
        return [self.type.value, self.name, self.member]

    @classmethod
    def from_json(cls, raw: str) -> "Target":
        """Parse the JSON array form, e.g. '["class", "Ext.Panel", "cfg-title"]'.

        Raises:
            ValidationError: If the string is not a valid target descriptor
        """
        try:
            parts = json.loads(raw)
        except (TypeError, ValueError):
            raise ValidationError(f"Unable to parse JSON string: {raw}")

        if not isinstance(parts, list) or len(parts) < 2 or len(parts) > 3:
            raise ValidationError(f"Target must be a list of 2 or 3 items: {raw}")

        try:
            return cls(
                type=TargetType(parts[0]),
                name=parts[1],
                member=(parts[2] if len(parts) > 2 else "") or "",
            )
        except ValueError as e:
            raise ValidationError(f"Invalid target {raw}: {e}")


class TagName(RootValueObject[str]):
    """Free-text tag attached to comments by moderators."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Strip whitespace and validate length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Tag name must be 1-100 characters")
        return v


class VoteValue(IntEnum):
    """Direction of a single vote."""

    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, value: int | str) -> "VoteValue":
        """Accept 1/-1 or 'up'/'down'.

        Raises:
            ValidationError: For anything else
        """
        if value == "up":
            return cls.UP
        if value == "down":
            return cls.DOWN
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValidationError(f"Vote must be one of +1, -1: {value!r}")


class UpdateAction(str, Enum):
    """Kinds of entries in the comment update log."""

    UPDATE = "update"
    DELETE = "delete"
    UNDO_DELETE = "undo_delete"


class RecentOrder(str, Enum):
    """Sort key of the recent comments feed (always descending)."""

    CREATED_AT = "created_at"
    SCORE = "score"


class TopUsersSort(str, Enum):
    """Ranking key for top users."""

    VOTES = "votes"
    COMMENTS = "comments"
