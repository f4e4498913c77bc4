"""Domain layer DI providers."""

from dishka import Scope, provide

from graphreview.config import AuthSettings, CommentSettings, NotificationSettings
from graphreview.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
)
from graphreview.domain.service import (
    CommentService,
    EmailSender,
    JWTService,
    NotificationService,
    ProfileService,
    VoteService,
)
from graphreview.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_settings=comment_settings
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, comment_service: CommentService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, comment_service=comment_service
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_notification_service(
        self,
        email_sender: EmailSender,
        comment_service: CommentService,
        profile_service: ProfileService,
        notification_settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            email_sender=email_sender,
            comment_service=comment_service,
            profile_service=profile_service,
            notification_settings=notification_settings,
        )
