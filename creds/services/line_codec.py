"""Colon-delimited line format for credential entries.

Each entry is written as one line::

    <username1>:<password1>
    <username2>:<password2>
    ...

Lines are split at the *first* colon, so a password may contain colons
while a username may not. The round trip is only safe because usernames
are barred from containing ':'. Relaxing that rule without changing the
format would silently move part of the username into the password on the
next read.
"""

import logging
from typing import Iterable, Iterator, Optional, TextIO
from shared.domain.consts import CredentialFormat
from shared.domain.errors import MalformedCredentialsError
from shared.domain.models import CredentialEntry

logger = logging.getLogger(__name__)


def format_line(entry: CredentialEntry) -> str:
    """Render a single entry as a terminated line.

    Raises:
        MalformedCredentialsError: If the entry contains illegal characters.
    """
    if not entry.is_serializable():
        raise MalformedCredentialsError()
    return (
        f"{entry.username}{CredentialFormat.FIELD_SEPARATOR}"
        f"{entry.password}{CredentialFormat.LINE_TERMINATOR}"
    )


def parse_line(line: str) -> Optional[CredentialEntry]:
    """
    Parse a single line into an entry.

    Only the "\\n" terminator is stripped. A "\\r" before it belongs to the
    password, so CRLF files yield passwords ending in "\\r".

    Returns:
        CredentialEntry, or None if the line has no separator.
    """
    if line.endswith(CredentialFormat.LINE_TERMINATOR):
        line = line[:-1]

    username, separator, password = line.partition(CredentialFormat.FIELD_SEPARATOR)
    if not separator:
        return None
    return CredentialEntry(username=username, password=password)


def write_entries(entries: Iterable[CredentialEntry], stream: TextIO) -> int:
    """
    Write entries to a text stream, one line each, in iteration order.

    Validation happens per entry, right before it is written. Lines written
    before a malformed entry stay in the stream.

    Returns:
        Number of entries written.

    Raises:
        MalformedCredentialsError: On the first entry with illegal characters,
            with ``position`` set to its index.
    """
    written = 0
    for position, entry in enumerate(entries):
        try:
            line = format_line(entry)
        except MalformedCredentialsError as e:
            e.position = position
            logger.error(
                f"Entry {position}: username or password contains illegal characters, "
                f"aborting write after {written} entries"
            )
            raise
        stream.write(line)
        written += 1
    return written


def read_entries(stream: TextIO) -> Iterator[CredentialEntry]:
    """Yield entries parsed from a text stream, skipping lines without a separator."""
    for line_num, line in enumerate(stream, 1):
        entry = parse_line(line)
        if entry is None:
            logger.debug(f"Line {line_num}: no '{CredentialFormat.FIELD_SEPARATOR}' separator, skipping")
            continue
        yield entry
