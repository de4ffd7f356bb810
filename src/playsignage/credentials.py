"""API key credential for the PlaySignage API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, TypedDict

from .errors import CredentialsError

API_KEY_ENV = "PLAYSIGNAGE_API_KEY"


class CredentialProperty(TypedDict):
    """Single field of a credential form."""
    displayName: str
    name: str
    type: str
    default: str


class CredentialType(TypedDict):
    """Credential form definition rendered by workflow hosts."""
    name: str
    displayName: str
    properties: list[CredentialProperty]


CREDENTIAL_TYPE: CredentialType = {
    "name": "playSignageApi",
    "displayName": "API Key",
    "properties": [
        {"displayName": "API Key", "name": "apiKey", "type": "string", "default": ""},
    ],
}


@dataclass(frozen=True)
class PlaySignageCredentials:
    """Holds the API key sent in the ``Authorization`` header."""
    api_key: str

    def __repr__(self) -> str:
        return "PlaySignageCredentials(api_key='***')"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PlaySignageCredentials":
        """Read the API key from ``PLAYSIGNAGE_API_KEY``.

        Raises
        ------
        CredentialsError
            If the variable is unset or blank.
        """
        env = os.environ if environ is None else environ
        api_key = env.get(API_KEY_ENV, "")
        if not api_key.strip():
            raise CredentialsError(f"{API_KEY_ENV} is not set")
        return cls(api_key=api_key)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "PlaySignageCredentials":
        """Build credentials from a host credential store entry (``{"apiKey": ...}``)."""
        api_key = data.get("apiKey")
        if not isinstance(api_key, str) or not api_key.strip():
            raise CredentialsError("Credential entry has no apiKey")
        return cls(api_key=api_key)


__all__ = ["API_KEY_ENV", "CREDENTIAL_TYPE", "CredentialType", "PlaySignageCredentials"]
