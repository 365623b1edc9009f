"""Shared configuration of domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model for rows read from and written to storage.

    Derived fields (score, vote_dir, read, reply_count, tags, page) are
    attached with model_copy rather than by mutation.
    """

    model_config = ConfigDict(frozen=True)
