"""Parsing and serialization of translation payloads.

Two payload shapes are supported:

* a *snapshot*, mapping each template to a mapping of locale id to
  localized template::

      {
        "Hello {name}!": {
          "de": "Hallo {name}!",
          "fr": "Bonjour {name}!",
        },
      }

* a *locale table*, mapping each template directly to its localized
  template for a single locale::

      { "Hello {name}!": "Привет {name}!", }

Payloads are YAML documents, so JSON input, trailing commas in flow
mappings and unquoted words are all accepted.
"""

from typing import Any, Mapping

import yaml

from i18nx.exceptions import ParseError

Template = str
"""Template string, used both as lookup key and as untranslated output."""

LocaleId = str
"""Opaque locale identifier such as ``"fr"`` or ``"pt-BR"``."""

LocaleTable = dict[Template, str]
"""Localized templates of one locale, keyed by template."""

Resource = dict[Template, dict[LocaleId, str]]
"""Localized templates keyed by template, then by locale id."""


class SnapshotLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """YAML loader that keeps every plain scalar as a string.

    Implicit resolution is disabled so that words such as ``no``, ``on``
    or ``null`` and numbers remain text.
    """


SnapshotLoader.yaml_implicit_resolvers = {}


def _load_mapping(text: str, what: str) -> dict[Any, Any]:
    try:
        document = yaml.load(text, Loader=SnapshotLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid {what}: {e}", source=e) from e

    if not isinstance(document, dict):
        raise ParseError(
            f"Invalid {what}: expected a mapping, got {type(document).__name__}"
        )
    return document


def _check_string(value: Any, what: str, context: str) -> str:
    if not isinstance(value, str):
        raise ParseError(
            f"Invalid {what}: expected a string {context}, "
            f"got {type(value).__name__} {value!r}"
        )
    return value


def parse_locale_table(text: str) -> LocaleTable:
    """Parse a one-level locale table.

    Args:
        text: Serialized mapping of template to localized template.

    Returns:
        The parsed table.

    Raises:
        ParseError: If the text is malformed or not a mapping of strings.
    """
    document = _load_mapping(text, "locale table")
    table: LocaleTable = {}
    for template, translation in document.items():
        template = _check_string(template, "locale table", "as template")
        table[template] = _check_string(
            translation, "locale table", f"for template {template!r}"
        )
    return table


def parse_snapshot(text: str) -> Resource:
    """Parse a two-level snapshot.

    Args:
        text: Serialized mapping of template to locale id to localized template.

    Returns:
        The parsed resource.

    Raises:
        ParseError: If the text is malformed or does not have the snapshot shape.
    """
    document = _load_mapping(text, "snapshot")
    resource: Resource = {}
    for template, translations in document.items():
        template = _check_string(template, "snapshot", "as template")
        if not isinstance(translations, dict):
            raise ParseError(
                f"Invalid snapshot: expected a mapping of locales for template "
                f"{template!r}, got {type(translations).__name__}"
            )
        resource[template] = {
            _check_string(locale, "snapshot", f"as locale of {template!r}"): (
                _check_string(
                    translation,
                    "snapshot",
                    f"for locale {locale!r} of {template!r}",
                )
            )
            for locale, translation in translations.items()
        }
    return resource


def dump_snapshot(resource: Mapping[Template, Mapping[LocaleId, str]]) -> str:
    """Serialize a resource to a snapshot that :func:`parse_snapshot` reads back."""
    return yaml.safe_dump(
        {template: dict(translations) for template, translations in resource.items()},
        allow_unicode=True,
        sort_keys=True,
        default_flow_style=False,
    )
