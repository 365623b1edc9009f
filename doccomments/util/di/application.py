"""Application layer DI providers."""

from dishka import Scope, provide

from doccomments.application.usecase.comment import (
    AddCommentUseCase,
    GetCommentUseCase,
    GetCommentsUseCase,
    GetRecentCommentsUseCase,
    GetRepliesUseCase,
    MarkReadUseCase,
    SetDeletedUseCase,
    SetParentUseCase,
    UpdateCommentUseCase,
)
from doccomments.application.usecase.stats import (
    GetCommentCountsUseCase,
    GetTopTargetsUseCase,
    GetTopUsersUseCase,
)
from doccomments.application.usecase.tag import (
    AddTagUseCase,
    ListTopTagsUseCase,
    RemoveTagUseCase,
)
from doccomments.application.usecase.vote import VoteUseCase
from doccomments.config import CommentSettings
from doccomments.domain.service import CommentService, Mailer
from doccomments.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_recent_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetRecentCommentsUseCase:
        """Provide recent comments use case."""
        return GetRecentCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, mailer: Mailer
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service, mailer=mailer)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_set_deleted_use_case(
        self, comment_service: CommentService
    ) -> SetDeletedUseCase:
        """Provide delete/undo-delete use case."""
        return SetDeletedUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_set_parent_use_case(
        self, comment_service: CommentService
    ) -> SetParentUseCase:
        """Provide set parent use case."""
        return SetParentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(self, comment_service: CommentService) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(self, comment_service: CommentService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(comment_service=comment_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_add_tag_use_case(self, comment_service: CommentService) -> AddTagUseCase:
        """Provide add tag use case."""
        return AddTagUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_tag_use_case(
        self, comment_service: CommentService
    ) -> RemoveTagUseCase:
        """Provide remove tag use case."""
        return RemoveTagUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_top_tags_use_case(
        self, comment_service: CommentService
    ) -> ListTopTagsUseCase:
        """Provide top tags use case."""
        return ListTopTagsUseCase(comment_service=comment_service)

    # Stats use cases
    @provide(scope=Scope.REQUEST)
    def get_top_users_use_case(
        self, comment_service: CommentService
    ) -> GetTopUsersUseCase:
        """Provide top users use case."""
        return GetTopUsersUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_top_targets_use_case(
        self, comment_service: CommentService
    ) -> GetTopTargetsUseCase:
        """Provide top targets use case."""
        return GetTopTargetsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_counts_use_case(
        self, comment_service: CommentService
    ) -> GetCommentCountsUseCase:
        """Provide comment counts use case."""
        return GetCommentCountsUseCase(comment_service=comment_service)
