"""
Data models for the shared credentials file.

A credentials file is a set of named profiles. Each profile holds exactly
one Credentials record; the ProfileStore is the plain mapping between them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass
class Credentials:
    """
    AWS credentials for a single profile.

    Attributes:
        access_key_id: Value of aws_access_key_id (empty when unset).
        secret_access_key: Value of aws_secret_access_key (empty when unset).
        session_token: Value of aws_session_token, or None when absent.
    """

    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str | None = None

    def copy(self) -> Credentials:
        """Return an independent copy of this record."""
        return replace(self)

    @classmethod
    def from_sts(cls, credentials: Mapping[str, Any]) -> Credentials:
        """
        Create from the Credentials block of an STS response.

        Accepts the dictionary returned by boto3 for calls such as
        assume_role or get_session_token (response["Credentials"]).

        Args:
            credentials: Mapping with AccessKeyId, SecretAccessKey and
                        optionally SessionToken.

        Returns:
            New Credentials instance.

        Raises:
            ValueError: If the access key id or secret access key is missing.
        """
        access_key_id = credentials.get("AccessKeyId")
        if access_key_id is None:
            raise ValueError("Missing access key id")

        secret_access_key = credentials.get("SecretAccessKey")
        if secret_access_key is None:
            raise ValueError("Missing secret access key")

        return cls(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=credentials.get("SessionToken"),
        )


# Profile name -> credentials. Names are case-sensitive.
ProfileStore = dict[str, Credentials]
