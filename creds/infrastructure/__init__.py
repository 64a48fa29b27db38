"""Credential infrastructure layer."""

from creds.infrastructure.credential_store import CredentialStore

__all__ = [
    "CredentialStore",
]
