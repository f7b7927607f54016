"""Unit tests for TokenGenerator."""

import re

import pytest

from holding.domain.service import TokenGenerator


class TestTokenGenerator:
    """Tests for invitation token generation."""

    def test_tokens_are_url_safe(self):
        """Tokens should only use the URL-safe base64 alphabet."""
        generator = TokenGenerator()

        token = generator.generate()

        assert re.fullmatch(r"[A-Za-z0-9_-]+", token.root)

    def test_tokens_have_fixed_length(self):
        """32 random bytes always encode to 43 characters."""
        generator = TokenGenerator()

        lengths = {len(generator.generate().root) for _ in range(50)}

        assert lengths == {43}

    def test_tokens_are_unique(self):
        """A large batch of tokens should contain no duplicates."""
        generator = TokenGenerator()

        tokens = {generator.generate().root for _ in range(10_000)}

        assert len(tokens) == 10_000

    def test_rejects_short_tokens(self):
        """Fewer than 128 bits of entropy is refused up front."""
        with pytest.raises(ValueError, match="128 bits"):
            TokenGenerator(token_bytes=8)
