"""Tag use cases."""

from .add_tag import AddTagRequest, AddTagResponse, AddTagUseCase
from .list_top_tags import ListTopTagsRequest, ListTopTagsResponse, ListTopTagsUseCase
from .remove_tag import RemoveTagRequest, RemoveTagResponse, RemoveTagUseCase

__all__ = [
    "AddTagRequest",
    "AddTagResponse",
    "AddTagUseCase",
    "ListTopTagsRequest",
    "ListTopTagsResponse",
    "ListTopTagsUseCase",
    "RemoveTagRequest",
    "RemoveTagResponse",
    "RemoveTagUseCase",
]
