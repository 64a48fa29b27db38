"""Constants to avoid string typos and magic numbers."""


class CredentialFormat:
    """Constants for the colon-delimited credentials file format."""
    FIELD_SEPARATOR = ":"
    LINE_TERMINATOR = "\n"

    # Characters that break the round trip when they appear in a field
    ILLEGAL_USERNAME_CHARS = (FIELD_SEPARATOR, LINE_TERMINATOR)
    ILLEGAL_PASSWORD_CHARS = (LINE_TERMINATOR,)


class ErrorMessages:
    """Error message strings."""
    ILLEGAL_CHARACTERS = "username or password contains illegal characters"
    USERNAME_NOT_PRESENT = "username not present: {username}"
