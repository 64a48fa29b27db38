"""In-memory credential store with colon-delimited file persistence."""

import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union
from shared.config.config import config
from shared.domain.errors import UnknownUsernameError
from shared.domain.models import CredentialEntry
from creds.services.line_codec import read_entries, write_entries

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CredentialStore:
    """
    Ordered mapping of username -> password.

    Insertion order is preserved and is the order entries are written in.
    Inserting an existing username overwrites its password in place.

    Usernames must not contain ':' or newlines and passwords must not
    contain newlines. This is only checked when the store is written,
    so an invalid entry can sit in memory until the next write fails.

    Not thread-safe. Callers sharing a store across threads must
    provide their own locking.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def clear(self) -> None:
        """Remove all stored credentials."""
        self._entries.clear()
        logger.debug("Credential store cleared")

    def insert(self, username: str, password: str) -> None:
        """
        Store password for username, overwriting any existing password.

        An overwritten username keeps its original position.

        Raises:
            pydantic.ValidationError: If username or password is not a string.
        """
        entry = CredentialEntry(username=username, password=password)
        self._entries[entry.username] = entry.password
        logger.debug(f"Stored credentials for user {entry.username!r}")

    def get(self, username: str) -> Optional[str]:
        """Get password for username, or None if unknown."""
        return self._entries.get(username)

    def get_or_abort(self, username: str) -> str:
        """
        Get password for a username that must be present.

        A miss is a bug in the caller. The raised error is not meant to be
        handled; left uncaught it terminates the calling thread.

        Raises:
            UnknownUsernameError: If username is not stored.
        """
        try:
            return self._entries[username]
        except KeyError:
            raise UnknownUsernameError(username) from None

    def __getitem__(self, username: str) -> str:
        return self.get_or_abort(username)

    def __contains__(self, username: object) -> bool:
        return username in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        # Passwords stay out of logs and tracebacks
        return f"{type(self).__name__}(usernames={list(self._entries)!r})"

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate (username, password) pairs in insertion order."""
        return iter(self._entries.items())

    def entries(self) -> Iterator[CredentialEntry]:
        """Iterate entries in insertion order."""
        for username, password in self._entries.items():
            yield CredentialEntry(username=username, password=password)

    def copy(self) -> "CredentialStore":
        """Return an independent copy of this store."""
        clone = type(self)()
        clone._entries = dict(self._entries)
        return clone

    def write(self, stream: TextIO) -> None:
        """
        Write the credentials to a text stream.

        Output is one ``<username>:<password>`` line per entry. Entries are
        validated one by one as they are written; lines already written
        before a malformed entry are not rolled back.

        Raises:
            MalformedCredentialsError: If an entry contains illegal characters.
        """
        write_entries(self.entries(), stream)

    @classmethod
    def read(cls, stream: TextIO) -> "CredentialStore":
        """
        Parse credentials from a text stream.

        Lines are split at the first ':'. Lines without one are skipped.
        A username seen again overwrites the earlier password.
        """
        store = cls()
        for entry in read_entries(stream):
            store.insert(entry.username, entry.password)
        return store

    def write_to_file(self, path: Optional[PathLike] = None) -> None:
        """
        Write the credential store to a file, truncating it if it exists.

        Defaults to config.CREDS_FILE. See also: write().
        """
        file_path = Path(path if path is not None else config.CREDS_FILE)
        try:
            with open(file_path, "w", encoding=config.CREDS_FILE_ENCODING, newline="\n") as f:
                self.write(f)
        except OSError as e:
            logger.error(f"Failed to write credentials file {file_path}: {e}")
            raise
        logger.info(f"Wrote {len(self)} credentials to {file_path}")

    @classmethod
    def read_from_file(cls, path: Optional[PathLike] = None) -> "CredentialStore":
        """
        Parse a credential store from a file.

        Defaults to config.CREDS_FILE. See also: read().
        """
        file_path = Path(path if path is not None else config.CREDS_FILE)
        try:
            with open(file_path, "r", encoding=config.CREDS_FILE_ENCODING, newline="\n") as f:
                store = cls.read(f)
        except OSError as e:
            logger.error(f"Failed to read credentials file {file_path}: {e}")
            raise
        logger.info(f"Loaded {len(store)} credentials from {file_path}")
        return store
