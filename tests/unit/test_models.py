"""Tests for domain models and errors."""

import pytest
from pydantic import ValidationError
from shared.domain.models import CredentialEntry
from shared.domain.errors import (
    CredentialStoreError,
    MalformedCredentialsError,
    UnknownUsernameError,
)


class TestCredentialEntry:
    """Tests for CredentialEntry model."""

    def test_entry_creation(self):
        """Test creating a CredentialEntry."""
        entry = CredentialEntry(username="alice", password="wonderland")
        assert entry.username == "alice"
        assert entry.password == "wonderland"

    def test_entry_is_frozen(self):
        """Test that entries cannot be mutated."""
        entry = CredentialEntry(username="alice", password="wonderland")
        with pytest.raises(ValidationError):
            entry.password = "changed"

    def test_entry_requires_strings(self):
        """Test that non-string fields are rejected."""
        with pytest.raises(ValidationError):
            CredentialEntry(username=42, password="x")
        with pytest.raises(ValidationError):
            CredentialEntry(username="alice")

    def test_serializable_entry(self):
        """Test that a plain entry is serializable."""
        assert CredentialEntry(username="alice", password="a:b c").is_serializable() is True

    @pytest.mark.parametrize(
        "username,password",
        [
            ("a:b", "x"),
            ("a\nb", "x"),
            ("alice", "x\ny"),
        ],
    )
    def test_unserializable_entry(self, username, password):
        """Test that colon/newline violations are detected."""
        entry = CredentialEntry(username=username, password=password)
        assert entry.is_serializable() is False


class TestErrors:
    """Tests for the error taxonomy."""

    def test_malformed_is_value_error(self):
        """Test that MalformedCredentialsError is a ValueError."""
        error = MalformedCredentialsError(3)
        assert isinstance(error, ValueError)
        assert isinstance(error, CredentialStoreError)
        assert error.position == 3
        assert str(error) == "username or password contains illegal characters"

    def test_unknown_username_is_key_error(self):
        """Test that UnknownUsernameError is a KeyError with a readable message."""
        error = UnknownUsernameError("mallory")
        assert isinstance(error, KeyError)
        assert isinstance(error, CredentialStoreError)
        assert error.username == "mallory"
        assert str(error) == "username not present: mallory"
