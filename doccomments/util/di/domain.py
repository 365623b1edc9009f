"""Domain layer DI providers."""

from dishka import Scope, provide

from doccomments.adapter.formatter import BasicFormatter
from doccomments.domain.repository import (
    CommentRepository,
    ReadingRepository,
    TagRepository,
    TargetRepository,
    UpdateLogRepository,
    VoteRepository,
)
from doccomments.domain.service import (
    CommentService,
    Formatter,
    ReadingService,
    TagService,
    TargetService,
    VoteService,
)
from doccomments.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_formatter(self) -> Formatter:
        """Provide comment content formatter."""
        return BasicFormatter()

    @provide
    def get_target_service(self, target_repository: TargetRepository) -> TargetService:
        """Provide target resolution domain service."""
        return TargetService(target_repository=target_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, comment_repository: CommentRepository
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, comment_repository=comment_repository
        )

    @provide
    def get_reading_service(
        self, reading_repository: ReadingRepository
    ) -> ReadingService:
        """Provide reading domain service."""
        return ReadingService(reading_repository=reading_repository)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, comment_repository: CommentRepository
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        update_log_repository: UpdateLogRepository,
        target_service: TargetService,
        tag_service: TagService,
        vote_service: VoteService,
        reading_service: ReadingService,
        formatter: Formatter,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            update_log_repository=update_log_repository,
            target_service=target_service,
            tag_service=tag_service,
            vote_service=vote_service,
            reading_service=reading_service,
            formatter=formatter,
        )
