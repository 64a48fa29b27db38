"""Error types raised by the credential store."""

from typing import Optional
from shared.domain.consts import ErrorMessages


class CredentialStoreError(Exception):
    """Base class for credential store errors."""


class MalformedCredentialsError(CredentialStoreError, ValueError):
    """
    Raised when an entry cannot be written without breaking the file format.

    Only the write path raises this. Inserting such an entry is allowed;
    the store fails once it is asked to serialize it.
    """

    def __init__(self, position: Optional[int] = None) -> None:
        super().__init__(ErrorMessages.ILLEGAL_CHARACTERS)
        self.position = position


class UnknownUsernameError(CredentialStoreError, KeyError):
    """
    Raised by indexed access when the username is not stored.

    This marks a programming error at the call site. Callers that expect
    a miss should use ``CredentialStore.get`` instead of catching this.
    """

    def __init__(self, username: str) -> None:
        super().__init__(ErrorMessages.USERNAME_NOT_PRESENT.format(username=username))
        self.username = username

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
