"""
Tests for the credentials file parser and serializer.

Uses Python's unittest module.
"""

from __future__ import annotations

import unittest

from awscred.credentials.codec import parse, serialize
from awscred.credentials.errors import ParseError
from awscred.credentials.models import Credentials

SAMPLE = """\
[default]
aws_access_key_id = ACCESS_KEY
aws_secret_access_key = SECRET_KEY
aws_session_token = SESSION_TOKEN

[other]
aws_access_key_id = OTHER_KEY
aws_secret_access_key = OTHER_SECRET
"""


class TestParse(unittest.TestCase):
    """Tests for parse()."""

    def test_concrete_scenario(self) -> None:
        """Test the minimal single-profile file."""
        text = "\n[default]\naws_access_key_id = ACCESS_KEY\naws_secret_access_key = SECRET_KEY\n"

        store = parse(text)

        self.assertEqual(list(store), ["default"])
        self.assertEqual(
            store["default"],
            Credentials(
                access_key_id="ACCESS_KEY",
                secret_access_key="SECRET_KEY",
                session_token=None,
            ),
        )

    def test_multiple_profiles(self) -> None:
        """Test parsing several sections with and without tokens."""
        store = parse(SAMPLE)

        self.assertEqual(set(store), {"default", "other"})
        self.assertEqual(store["default"].session_token, "SESSION_TOKEN")
        self.assertEqual(store["other"].access_key_id, "OTHER_KEY")
        self.assertEqual(store["other"].secret_access_key, "OTHER_SECRET")
        self.assertIsNone(store["other"].session_token)

    def test_empty_text(self) -> None:
        """Test that empty input yields an empty store."""
        self.assertEqual(parse(""), {})
        self.assertEqual(parse("\n\n   \n"), {})

    def test_unknown_keys_ignored(self) -> None:
        """Test that unrecognised keys leave no trace."""
        store = parse(
            "[default]\nfoo = bar\naws_access_key_id = A\nregion = us-east-1\n"
        )

        self.assertEqual(store["default"], Credentials(access_key_id="A"))
        self.assertFalse(hasattr(store["default"], "foo"))

    def test_comments_and_blank_lines_ignored(self) -> None:
        """Test that comments and blank lines do not change the result."""
        noisy = """\
# leading comment

[default]
# inside a section
aws_access_key_id = ACCESS_KEY

   # indented comment
aws_secret_access_key = SECRET_KEY
aws_session_token = SESSION_TOKEN


[other]
aws_access_key_id = OTHER_KEY
aws_secret_access_key = OTHER_SECRET
# trailing
"""
        self.assertEqual(parse(noisy), parse(SAMPLE))

    def test_missing_fields_default(self) -> None:
        """Test that omitted fields fall back to defaults."""
        store = parse("[default]\naws_access_key_id = A\n")

        self.assertEqual(store["default"].access_key_id, "A")
        self.assertEqual(store["default"].secret_access_key, "")
        self.assertIsNone(store["default"].session_token)

    def test_empty_section(self) -> None:
        """Test that a header with no fields still creates a profile."""
        store = parse("[empty]\n[next]\naws_access_key_id = N\n")

        self.assertEqual(store["empty"], Credentials())
        self.assertEqual(store["next"].access_key_id, "N")

    def test_duplicate_section_last_wins(self) -> None:
        """Test that a repeated section replaces the earlier one entirely."""
        text = """\
[default]
aws_access_key_id = FIRST
aws_secret_access_key = FIRST_SECRET
aws_session_token = FIRST_TOKEN

[default]
aws_access_key_id = SECOND
"""
        store = parse(text)

        self.assertEqual(len(store), 1)
        self.assertEqual(store["default"], Credentials(access_key_id="SECOND"))

    def test_assignments_before_header_dropped(self) -> None:
        """Test that assignments outside any section are ignored."""
        store = parse("aws_access_key_id = ORPHAN\n[default]\naws_secret_access_key = S\n")

        self.assertEqual(store["default"], Credentials(secret_access_key="S"))

    def test_lines_without_equals_ignored(self) -> None:
        """Test that malformed lines are skipped."""
        store = parse("[default]\njust some words\naws_access_key_id = A\n")

        self.assertEqual(store["default"].access_key_id, "A")

    def test_split_on_first_equals(self) -> None:
        """Test that values may contain '=' characters."""
        store = parse("[default]\naws_session_token = abc==def=\n")

        self.assertEqual(store["default"].session_token, "abc==def=")

    def test_whitespace_trimmed(self) -> None:
        """Test trimming of lines, keys and values."""
        store = parse("   [default]   \n\taws_access_key_id=A   \n  aws_secret_access_key   =   S\n")

        self.assertEqual(store["default"], Credentials(access_key_id="A", secret_access_key="S"))

    def test_empty_value(self) -> None:
        """Test that an empty value is kept as an empty string."""
        store = parse("[default]\naws_session_token =\n")

        self.assertEqual(store["default"].session_token, "")

    def test_section_name_not_trimmed(self) -> None:
        """Test that spaces inside the brackets are part of the name."""
        store = parse("[ spaced ]\naws_access_key_id = A\n")

        self.assertIn(" spaced ", store)
        self.assertNotIn("spaced", store)

    def test_header_detected_before_comment(self) -> None:
        """Test that header detection takes priority over comments."""
        store = parse("[#hash]\naws_access_key_id = A\n")

        self.assertEqual(store["#hash"].access_key_id, "A")

    def test_names_case_sensitive(self) -> None:
        """Test that profile names differing by case are distinct."""
        store = parse("[Default]\naws_access_key_id = UPPER\n[default]\naws_access_key_id = LOWER\n")

        self.assertEqual(store["Default"].access_key_id, "UPPER")
        self.assertEqual(store["default"].access_key_id, "LOWER")

    def test_crlf_line_endings(self) -> None:
        """Test that Windows line endings parse the same way."""
        self.assertEqual(parse(SAMPLE.replace("\n", "\r\n")), parse(SAMPLE))

    def test_only_newline_separates_lines(self) -> None:
        """Test that other Unicode line breaks stay inside a value."""
        store = parse("[default]\naws_secret_access_key = ab\x0ccd ef\x85gh\n")

        self.assertEqual(store["default"].secret_access_key, "ab\x0ccd ef\x85gh")

    def test_no_trailing_newline(self) -> None:
        """Test that the last line does not need a newline."""
        store = parse("[default]\naws_access_key_id = A")

        self.assertEqual(store["default"].access_key_id, "A")

    def test_non_text_input(self) -> None:
        """Test that non-string input raises ParseError."""
        with self.assertRaises(ParseError):
            parse(b"[default]\n")  # type: ignore[arg-type]


class TestSerialize(unittest.TestCase):
    """Tests for serialize()."""

    def test_serialize_layout(self) -> None:
        """Test exact output for a single profile with a token."""
        store = {
            "default": Credentials(
                access_key_id="ACCESS_KEY",
                secret_access_key="SECRET_KEY",
                session_token="SESSION_TOKEN",
            )
        }

        self.assertEqual(
            serialize(store),
            "[default]\n"
            "aws_access_key_id = ACCESS_KEY\n"
            "aws_secret_access_key = SECRET_KEY\n"
            "aws_session_token = SESSION_TOKEN\n"
            "\n",
        )

    def test_token_omitted_when_absent(self) -> None:
        """Test that no token line is written without a token."""
        text = serialize({"default": Credentials(access_key_id="A", secret_access_key="S")})

        self.assertNotIn("aws_session_token", text)

    def test_empty_token_written(self) -> None:
        """Test that an empty but present token is still written."""
        text = serialize({"default": Credentials(session_token="")})

        self.assertIn("aws_session_token = \n", text)

    def test_empty_store(self) -> None:
        """Test that an empty store serializes to empty text."""
        self.assertEqual(serialize({}), "")

    def test_round_trip(self) -> None:
        """Test that parse recovers a serialized store."""
        store = {
            "default": Credentials("A", "S", "T"),
            "no-token": Credentials("B", "S2"),
            "blank": Credentials(),
            "Mixed Case": Credentials("C", "", ""),
        }

        self.assertEqual(parse(serialize(store)), store)

    def test_round_trip_unicode_line_breaks(self) -> None:
        """Test round trip of values holding form feeds and line separators."""
        store = {
            "default": Credentials("AK", "ab\x0ccd"),
            "p": Credentials("X\u2028Y", "S", "T\x1eU"),
        }

        self.assertEqual(parse(serialize(store)), store)

    def test_serialize_is_stable(self) -> None:
        """Test that reserializing parsed output gives identical text."""
        first = serialize(parse(SAMPLE))
        second = serialize(parse(first))

        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
