"""Application layer DI providers."""

from dishka import Scope, provide

from graphreview.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from graphreview.application.usecase.notification import (
    NotifyMentionsUseCase,
    NotifyReplyUseCase,
)
from graphreview.application.usecase.profile import ListProfilesUseCase
from graphreview.application.usecase.vote import CastVoteUseCase, RemoveVoteUseCase
from graphreview.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    ProfileService,
    VoteService,
)
from graphreview.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        jwt_service: JWTService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_notify_mentions_use_case(
        self,
        notification_service: NotificationService,
        comment_service: CommentService,
        profile_service: ProfileService,
    ) -> NotifyMentionsUseCase:
        """Provide notify mentions use case."""
        return NotifyMentionsUseCase(
            notification_service=notification_service,
            comment_service=comment_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_notify_reply_use_case(
        self, notification_service: NotificationService
    ) -> NotifyReplyUseCase:
        """Provide notify reply use case."""
        return NotifyReplyUseCase(notification_service=notification_service)
