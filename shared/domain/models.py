"""Domain models for credential entries."""

from pydantic import BaseModel, ConfigDict, Field
from shared.domain.consts import CredentialFormat


class CredentialEntry(BaseModel):
    """A single username/password pair held by the store."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "correct horse battery staple",
            }
        }
    )

    username: str = Field(..., description="Login name, must not contain ':' or newline to be written")
    password: str = Field(..., description="Password, must not contain a newline to be written")

    def is_serializable(self) -> bool:
        """Check if the entry survives a write/read round trip."""
        if any(char in self.username for char in CredentialFormat.ILLEGAL_USERNAME_CHARS):
            return False
        return not any(char in self.password for char in CredentialFormat.ILLEGAL_PASSWORD_CHARS)
