"""
Parser and serializer for the shared credentials file format.

The format is line oriented:

    [default]
    aws_access_key_id = ACCESS_KEY
    aws_secret_access_key = SECRET_KEY
    aws_session_token = SESSION_TOKEN

Parsing is lenient. Blank lines, comments, unknown keys, lines without an
'=' and assignments outside any section are ignored rather than rejected.
Only the three recognised keys survive a parse/serialize cycle.
"""

from __future__ import annotations

from awscred.credentials.errors import ParseError
from awscred.credentials.models import Credentials, ProfileStore

ACCESS_KEY_ID = "aws_access_key_id"
SECRET_ACCESS_KEY = "aws_secret_access_key"
SESSION_TOKEN = "aws_session_token"

# File key -> Credentials attribute
FIELD_MAP: dict[str, str] = {
    ACCESS_KEY_ID: "access_key_id",
    SECRET_ACCESS_KEY: "secret_access_key",
    SESSION_TOKEN: "session_token",
}


def parse(text: str) -> ProfileStore:
    """
    Parse credentials file text into a profile store.

    A repeated section name overwrites the earlier section. Recognised
    fields missing from a section keep their defaults.

    Args:
        text: Full contents of a credentials file.

    Returns:
        Mapping of profile name to Credentials.

    Raises:
        ParseError: If the input is not text or a record cannot be built.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected text, got {type(text).__name__}")

    store: ProfileStore = {}
    section: str | None = None
    fields: dict[str, str] = {}

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if not line:
            continue

        if line.startswith("[") and line.endswith("]"):
            if section is not None:
                store[section] = _commit(fields)
            section = line[1:-1]
            fields = {}
            continue

        if line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep or section is None:
            continue

        attr = FIELD_MAP.get(key.strip())
        if attr is not None:
            fields[attr] = value.strip()

    if section is not None:
        store[section] = _commit(fields)

    return store


def _commit(fields: dict[str, str]) -> Credentials:
    """Build the record for a finished section."""
    try:
        return Credentials(**fields)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Cannot build credentials: {e}") from e


def serialize(store: ProfileStore) -> str:
    """
    Serialize a profile store to credentials file text.

    Profiles are written in mapping order, each followed by a blank line.
    The session token line is only written when a token is present. Values
    are not escaped.

    Args:
        store: Mapping of profile name to Credentials.

    Returns:
        Credentials file text.
    """
    lines: list[str] = []

    for name, credentials in store.items():
        lines.append(f"[{name}]")
        lines.append(f"{ACCESS_KEY_ID} = {credentials.access_key_id}")
        lines.append(f"{SECRET_ACCESS_KEY} = {credentials.secret_access_key}")
        if credentials.session_token is not None:
            lines.append(f"{SESSION_TOKEN} = {credentials.session_token}")
        lines.append("")

    return "".join(f"{line}\n" for line in lines)
