"""Configuration loaded from environment variables."""

import os


def _get_env_str(key: str, default: str) -> str:
    """Get string environment variable, falling back to default when blank.

    The value is returned unmodified so paths with surrounding spaces are kept.
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value


class Config:
    """Centralized configuration from environment variables."""

    # Default credentials file used when no path is passed to file I/O
    CREDS_FILE: str = _get_env_str("CREDS_FILE", "data/creds.txt")

    # Text encoding for reading and writing the credentials file
    CREDS_FILE_ENCODING: str = _get_env_str("CREDS_FILE_ENCODING", "utf-8")


config = Config()
