"""Pytest configuration and fixtures."""

import pytest
from shared.config.config import config
from creds.infrastructure.credential_store import CredentialStore


@pytest.fixture(autouse=True)
def isolated_creds_file(tmp_path, monkeypatch):
    """
    Point the default credentials file at a per-test temp path.

    Keeps tests from touching data/creds.txt in the working directory.
    """
    creds_file = tmp_path / "creds.txt"
    monkeypatch.setattr(config, "CREDS_FILE", str(creds_file))
    yield creds_file


@pytest.fixture
def populated_store():
    """Store with three entries inserted in a known order."""
    store = CredentialStore()
    store.insert("alice", "wonderland")
    store.insert("bob", "builder:can-we-fix-it")
    store.insert("carol", "")
    return store
