"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

from holding.domain.service.token_generator import TokenGenerator
from holding.domain.value import InvitationToken


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FixedTokenGenerator(TokenGenerator):
    """Hands out the same token every time, to provoke collisions."""

    def __init__(self, token: str = "fixed-token-value") -> None:
        super().__init__()
        self.token = token

    def generate(self) -> InvitationToken:
        return InvitationToken(root=self.token)
