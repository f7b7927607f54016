"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from holding.domain.value import Email, Handle, InvitationStatus, InvitationToken, Role


class TestRole:
    """Roles are ordered by rank, not by their string values."""

    def test_owner_outranks_member(self):
        assert Role.MEMBER < Role.OWNER
        assert Role.OWNER > Role.MEMBER
        assert Role.OWNER >= Role.OWNER

    def test_satisfies(self):
        assert Role.OWNER.satisfies(Role.MEMBER)
        assert Role.MEMBER.satisfies(Role.MEMBER)
        assert not Role.MEMBER.satisfies(Role.OWNER)


class TestInvitationStatus:
    """Pending is the only status that can change."""

    @pytest.mark.parametrize(
        "target", [InvitationStatus.ACCEPTED, InvitationStatus.EXPIRED]
    )
    def test_pending_can_resolve(self, target):
        assert InvitationStatus.PENDING.can_transition_to(target)

    @pytest.mark.parametrize(
        "source", [InvitationStatus.ACCEPTED, InvitationStatus.EXPIRED]
    )
    def test_terminal_statuses_never_change(self, source):
        for target in InvitationStatus:
            assert not source.can_transition_to(target)

    def test_pending_cannot_stay_pending(self):
        assert not InvitationStatus.PENDING.can_transition_to(InvitationStatus.PENDING)


class TestInvitationToken:
    def test_rejects_characters_outside_url_safe_alphabet(self):
        with pytest.raises(ValidationError):
            InvitationToken(root="not a token!")

    def test_redacted_keeps_prefix_only(self):
        token = InvitationToken(root="abcdefghijklmnop")
        assert token.redacted == "abcdefgh..."


class TestHandleAndEmail:
    def test_handle_is_lowercased(self):
        assert Handle("Alice_01").root == "alice_01"

    def test_handle_too_short(self):
        with pytest.raises(ValidationError):
            Handle("ab")

    def test_email_is_lowercased(self):
        assert Email("Alice@Example.COM").root == "alice@example.com"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            Email("not-an-email")
