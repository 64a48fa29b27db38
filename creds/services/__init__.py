"""Credential services layer."""

from creds.services.line_codec import format_line, parse_line, read_entries, write_entries

__all__ = [
    "format_line",
    "parse_line",
    "read_entries",
    "write_entries",
]
