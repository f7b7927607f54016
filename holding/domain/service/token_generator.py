"""Invitation token generation."""

import secrets

from holding.domain.value import InvitationToken

from .base import Service

# 32 bytes = 256 bits of entropy, encoded as 43 URL-safe characters
TOKEN_BYTES = 32


class TokenGenerator(Service):
    """Produces unguessable, fixed-length, URL-safe invitation tokens.

    Tokens come straight from the OS CSPRNG via ``secrets``; nothing about
    the caller, the clock or earlier tokens feeds into them. If the entropy
    source is unavailable the error propagates untouched.
    """

    def __init__(self, token_bytes: int = TOKEN_BYTES) -> None:
        if token_bytes < 16:
            raise ValueError("Invitation tokens need at least 128 bits of entropy")
        self.token_bytes = token_bytes

    def generate(self) -> InvitationToken:
        """Generate a new invitation token."""
        return InvitationToken(root=secrets.token_urlsafe(self.token_bytes))
