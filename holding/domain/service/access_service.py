"""Access control domain service."""

import logfire

from holding.domain.error import ConflictError, ForbiddenError, NotFoundError
from holding.domain.model.access_grant import AccessGrant
from holding.domain.repository import AccessGrantRepository
from holding.domain.value import BagId, Role, UserId

from .base import Service


class AccessService(Service):
    """Resolves and records who may act on a bag.

    Every decision re-reads the repository. Nothing is cached between calls,
    so a revoked member loses access on their next request.
    """

    def __init__(self, access_grant_repository: AccessGrantRepository) -> None:
        """Initialize access service.

        Args:
            access_grant_repository: Access grant repository
        """
        self.access_grant_repository = access_grant_repository

    async def grant(self, bag_id: BagId, user_id: UserId, role: Role) -> AccessGrant:
        """Grant a role on a bag.

        Granting the role a user already holds is a no-op. Changing a role
        requires an explicit revoke first.

        Args:
            bag_id: Bag to grant access to
            user_id: User receiving the grant
            role: Role to grant

        Returns:
            The existing or newly created grant

        Raises:
            ConflictError: If the user already holds a different role
        """
        with logfire.span(
            "access_service.grant",
            bag_id=str(bag_id),
            user_id=str(user_id),
            role=role.value,
        ):
            existing = await self.access_grant_repository.find(bag_id, user_id)
            if existing is None:
                try:
                    grant = await self.access_grant_repository.insert(
                        AccessGrant(bag_id=bag_id, user_id=user_id, role=role)
                    )
                    logfire.info(
                        "Access granted",
                        bag_id=str(bag_id),
                        user_id=str(user_id),
                        role=role.value,
                    )
                    return grant
                except ConflictError:
                    # Lost an insert race; judge against the winner's grant
                    existing = await self.access_grant_repository.find(
                        bag_id, user_id
                    )
                    if existing is None:
                        raise

            if existing.role != role:
                logfire.warn(
                    "Role change rejected",
                    bag_id=str(bag_id),
                    user_id=str(user_id),
                    current_role=existing.role.value,
                    requested_role=role.value,
                )
                raise ConflictError(
                    f"User {user_id} already holds role {existing.role.value} "
                    f"on bag {bag_id}"
                )
            return existing

    async def revoke(self, bag_id: BagId, user_id: UserId) -> None:
        """Remove a user's grant on a bag.

        Raises:
            NotFoundError: If the user holds no grant on the bag
        """
        with logfire.span(
            "access_service.revoke", bag_id=str(bag_id), user_id=str(user_id)
        ):
            deleted = await self.access_grant_repository.delete(bag_id, user_id)
            if not deleted:
                raise NotFoundError("AccessGrant", f"{bag_id}/{user_id}")
            logfire.info("Access revoked", bag_id=str(bag_id), user_id=str(user_id))

    async def get_role(self, bag_id: BagId, user_id: UserId) -> Role | None:
        """Return the user's role on the bag, or None."""
        grant = await self.access_grant_repository.find(bag_id, user_id)
        return grant.role if grant else None

    async def has_access(self, bag_id: BagId, user_id: UserId) -> bool:
        """Whether the user holds any role on the bag."""
        return await self.get_role(bag_id, user_id) is not None

    async def require_role(
        self, bag_id: BagId, user_id: UserId, min_role: Role
    ) -> Role:
        """Ensure the user holds at least ``min_role`` on the bag.

        Returns:
            The role the user actually holds

        Raises:
            ForbiddenError: If the role is missing or ranks below min_role
        """
        role = await self.get_role(bag_id, user_id)
        if role is None or not role.satisfies(min_role):
            logfire.warn(
                "Access denied",
                bag_id=str(bag_id),
                user_id=str(user_id),
                required_role=min_role.value,
                actual_role=role.value if role else None,
            )
            raise ForbiddenError(str(bag_id), str(user_id), min_role.value)
        return role

    async def list_members(self, bag_id: BagId) -> list[AccessGrant]:
        """List every grant on a bag."""
        return await self.access_grant_repository.list_by_bag(bag_id)

    async def list_bag_ids(self, user_id: UserId) -> list[BagId]:
        """List the bags a user can access."""
        grants = await self.access_grant_repository.list_by_user(user_id)
        return [grant.bag_id for grant in grants]
