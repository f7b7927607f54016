"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from holding.config import AuthSettings, InvitationSettings
from holding.domain.repository import (
    AccessGrantRepository,
    BagItemRepository,
    BagRepository,
    InvitationRepository,
    UserRepository,
)
from holding.domain.service import (
    AccessService,
    BagItemService,
    BagService,
    InvitationService,
    JWTService,
    NotificationSink,
    TokenGenerator,
    UserService,
)
from holding.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_generator(self) -> TokenGenerator:
        """Provide the invitation token generator."""
        return TokenGenerator()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_service(
        self, access_grant_repository: AccessGrantRepository
    ) -> AccessService:
        """Provide access control service."""
        return AccessService(access_grant_repository=access_grant_repository)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        access_service: AccessService,
        token_generator: TokenGenerator,
        notification_sink: NotificationSink,
        bag_repository: BagRepository,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            access_service=access_service,
            token_generator=token_generator,
            notification_sink=notification_sink,
            bag_repository=bag_repository,
            default_ttl=timedelta(hours=invitation_settings.default_ttl_hours),
        )

    @provide
    def get_bag_service(
        self,
        bag_repository: BagRepository,
        access_service: AccessService,
        notification_sink: NotificationSink,
    ) -> BagService:
        """Provide bag domain service."""
        return BagService(
            bag_repository=bag_repository,
            access_service=access_service,
            notification_sink=notification_sink,
        )

    @provide
    def get_bag_item_service(
        self,
        bag_item_repository: BagItemRepository,
        access_service: AccessService,
        notification_sink: NotificationSink,
    ) -> BagItemService:
        """Provide bag item domain service."""
        return BagItemService(
            bag_item_repository=bag_item_repository,
            access_service=access_service,
            notification_sink=notification_sink,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
