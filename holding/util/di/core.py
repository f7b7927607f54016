"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from holding.config import AuthSettings, InvitationSettings, Settings
from holding.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider.

    The Settings instance is supplied as container context, so the app
    factory and every injected dependency see the same configuration.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations
