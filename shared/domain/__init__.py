"""Domain models, constants, and errors."""

from shared.domain.models import CredentialEntry
from shared.domain.consts import CredentialFormat, ErrorMessages
from shared.domain.errors import (
    CredentialStoreError,
    MalformedCredentialsError,
    UnknownUsernameError,
)

__all__ = [
    "CredentialEntry",
    "CredentialFormat",
    "ErrorMessages",
    "CredentialStoreError",
    "MalformedCredentialsError",
    "UnknownUsernameError",
]
