"""Application layer DI providers."""

from dishka import Scope, provide

from holding.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from holding.application.usecase.bag import (
    CreateBagUseCase,
    GetBagUseCase,
    ListBagsUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
)
from holding.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    ListInvitationsUseCase,
    ValidateInvitationUseCase,
)
from holding.application.usecase.item import (
    AddItemUseCase,
    ListItemsUseCase,
    RemoveItemUseCase,
    UpdateItemUseCase,
)
from holding.config import Settings
from holding.domain.service import (
    AccessService,
    BagItemService,
    BagService,
    InvitationService,
    JWTService,
    UserService,
)
from holding.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        access_service: AccessService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            access_service=access_service,
        )

    # Bag use cases
    @provide
    def get_create_bag_use_case(self, bag_service: BagService) -> CreateBagUseCase:
        """Provide create bag use case."""
        return CreateBagUseCase(bag_service=bag_service)

    @provide
    def get_get_bag_use_case(
        self, bag_service: BagService, access_service: AccessService
    ) -> GetBagUseCase:
        """Provide get bag use case."""
        return GetBagUseCase(bag_service=bag_service, access_service=access_service)

    @provide
    def get_list_bags_use_case(
        self, bag_service: BagService, access_service: AccessService
    ) -> ListBagsUseCase:
        """Provide list bags use case."""
        return ListBagsUseCase(bag_service=bag_service, access_service=access_service)

    @provide
    def get_list_members_use_case(
        self, bag_service: BagService, user_service: UserService
    ) -> ListMembersUseCase:
        """Provide list members use case."""
        return ListMembersUseCase(bag_service=bag_service, user_service=user_service)

    @provide
    def get_remove_member_use_case(
        self, bag_service: BagService
    ) -> RemoveMemberUseCase:
        """Provide remove member use case."""
        return RemoveMemberUseCase(bag_service=bag_service)

    # Item use cases
    @provide
    def get_add_item_use_case(self, bag_item_service: BagItemService) -> AddItemUseCase:
        """Provide add item use case."""
        return AddItemUseCase(bag_item_service=bag_item_service)

    @provide
    def get_update_item_use_case(
        self, bag_item_service: BagItemService
    ) -> UpdateItemUseCase:
        """Provide update item use case."""
        return UpdateItemUseCase(bag_item_service=bag_item_service)

    @provide
    def get_remove_item_use_case(
        self, bag_item_service: BagItemService
    ) -> RemoveItemUseCase:
        """Provide remove item use case."""
        return RemoveItemUseCase(bag_item_service=bag_item_service)

    @provide
    def get_list_items_use_case(
        self, bag_item_service: BagItemService
    ) -> ListItemsUseCase:
        """Provide list items use case."""
        return ListItemsUseCase(bag_item_service=bag_item_service)

    # Invitation use cases
    @provide
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_accept_invitation_use_case(
        self, invitation_service: InvitationService, access_service: AccessService
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_service=invitation_service, access_service=access_service
        )
