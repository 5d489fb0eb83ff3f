"""Tests for snapshot and locale table parsing."""

import pytest

from i18nx.exceptions import ParseError
from i18nx.snapshot import dump_snapshot, parse_locale_table, parse_snapshot

SNAPSHOT = """{
  "Hello": {
    "de": "Hallo",
    "fr": "Bonjour",
  },
  "Hello {name}!": {
    "de": "Hallo {name}!",
    "fr": "Bonjour {name}!",
  },
}
"""


class TestParseSnapshot:
    """Tests for parse_snapshot."""

    def test_trailing_commas(self) -> None:
        """Trailing commas in nested mappings are accepted."""
        assert parse_snapshot(SNAPSHOT) == {
            "Hello": {"de": "Hallo", "fr": "Bonjour"},
            "Hello {name}!": {"de": "Hallo {name}!", "fr": "Bonjour {name}!"},
        }

    def test_strict_json(self) -> None:
        """Plain JSON is a valid snapshot."""
        assert parse_snapshot('{"Hello":{"de":"Hallo"}}') == {"Hello": {"de": "Hallo"}}

    def test_bare_words(self) -> None:
        """Unquoted words are read as strings."""
        assert parse_snapshot("{Hello: {de: Hallo, fr: Bonjour,},}") == {
            "Hello": {"de": "Hallo", "fr": "Bonjour"}
        }

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('{"Hello": {no: Hei}}', {"Hello": {"no": "Hei"}}),
            ('{"Yes": {de: yes}}', {"Yes": {"de": "yes"}}),
            ('{"Answer": {de: 42}}', {"Answer": {"de": "42"}}),
            ('{"Nothing": {de: null}}', {"Nothing": {"de": "null"}}),
        ],
        ids=["norwegian-locale", "boolean-word", "number", "null-word"],
    )
    def test_plain_scalars_stay_strings(
        self, text: str, expected: dict[str, dict[str, str]]
    ) -> None:
        """Words YAML would usually convert keep their text."""
        assert parse_snapshot(text) == expected

    def test_block_style(self) -> None:
        """Indented YAML mappings are accepted too."""
        text = "Hello:\n  de: Hallo\n  fr: Bonjour\n"
        assert parse_snapshot(text) == {"Hello": {"de": "Hallo", "fr": "Bonjour"}}

    def test_empty_translations(self) -> None:
        """A template without any locale is kept."""
        assert parse_snapshot('{"Hello": {}}') == {"Hello": {}}

    def test_unbalanced_braces(self) -> None:
        """Malformed syntax raises ParseError carrying the YAML error."""
        with pytest.raises(ParseError, match="Invalid snapshot") as exc_info:
            parse_snapshot('{"Hello": {"de": "Hallo"}')
        assert exc_info.value.source is not None
        assert exc_info.value.line is not None
        assert exc_info.value.column is not None

    @pytest.mark.parametrize(
        "text",
        [
            "",
            '["Hello", "Hallo"]',
            '{"Hello": "Hallo"}',
            '{"Hello": {"de": ["Hallo"]}}',
            '{"Hello": {"de": !!int 3}}',
        ],
        ids=["empty", "sequence", "one-level", "nested-sequence", "tagged-int"],
    )
    def test_wrong_shape(self, text: str) -> None:
        """Documents without the two-level shape raise ParseError."""
        with pytest.raises(ParseError, match="Invalid snapshot") as exc_info:
            parse_snapshot(text)
        assert exc_info.value.source is None


class TestParseLocaleTable:
    """Tests for parse_locale_table."""

    def test_parse(self) -> None:
        """A one-level mapping is parsed with its unicode content."""
        text = '{\n  "Hello": "Привет",\n  "Hello {name}!": "Привет {name}!",\n}\n'
        assert parse_locale_table(text) == {
            "Hello": "Привет",
            "Hello {name}!": "Привет {name}!",
        }

    def test_nested_mapping_rejected(self) -> None:
        """A snapshot is not a valid locale table."""
        with pytest.raises(ParseError, match="expected a string"):
            parse_locale_table(SNAPSHOT)

    def test_malformed(self) -> None:
        """Malformed syntax raises ParseError."""
        with pytest.raises(ParseError, match="Invalid locale table"):
            parse_locale_table('{"Hello": "Привет"')


class TestDumpSnapshot:
    """Tests for dump_snapshot."""

    def test_round_trip(self) -> None:
        """A dumped resource parses back to the same content."""
        resource = parse_snapshot(SNAPSHOT)
        resource["Hello"]["no"] = "Hei"
        resource["Hello"]["cn"] = "你好"
        assert parse_snapshot(dump_snapshot(resource)) == resource

    def test_unicode_kept(self) -> None:
        """Non ASCII text is written as is."""
        assert "Привет" in dump_snapshot({"Hello": {"ru": "Привет"}})
