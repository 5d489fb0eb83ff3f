"""Module for the Dictionary class."""

import logging
from typing import Mapping, Self

from i18nx.snapshot import (
    LocaleId,
    Resource,
    Template,
    dump_snapshot,
    parse_locale_table,
    parse_snapshot,
)

logger = logging.getLogger(__name__)


class Dictionary:
    """Holds the active locale and the translations of every template.

    Example:
        >>> dictionary = Dictionary.from_snapshot('''{
        ...   "Hello {name}!": {
        ...     "de": "Hallo {name}!",
        ...     "fr": "Bonjour {name}!",
        ...   },
        ... }''')
        >>> dictionary.locale = "fr"
        >>> dictionary.get("Hello {name}!")
        'Bonjour {name}!'
    """

    def __init__(
        self,
        locale: LocaleId | None = None,
        resource: Mapping[Template, Mapping[LocaleId, str]] | None = None,
    ) -> None:
        """Initialize the dictionary.

        Args:
            locale: Active locale, ``None`` to leave templates untranslated.
            resource: Initial translations, copied into the dictionary.
        """
        self.locale = locale
        self.resource: Resource = {
            template: dict(translations)
            for template, translations in (resource or {}).items()
        }

    @classmethod
    def new(cls) -> Self:
        """Create an empty dictionary with no active locale."""
        return cls()

    @classmethod
    def from_snapshot(cls, text: str) -> Self:
        """Create a dictionary from a serialized snapshot.

        The locale of the new dictionary is left unset.

        Raises:
            ParseError: If the snapshot is malformed.
        """
        resource = parse_snapshot(text)
        logger.debug("Loaded snapshot with %d templates", len(resource))
        return cls(resource=resource)

    @property
    def locales(self) -> list[LocaleId]:
        """Return the sorted locale ids having at least one translation."""
        return sorted(
            {locale for translations in self.resource.values() for locale in translations}
        )

    def merge_table(self, locale: LocaleId, table: Mapping[Template, str]) -> Self:
        """Merge already parsed translations of one locale.

        Translations of other locales for the same templates are kept.
        """
        for template, translation in table.items():
            self.resource.setdefault(template, {})[locale] = translation
        logger.debug("Merged %d translations for locale %r", len(table), locale)
        return self

    def merge(self, other: "Dictionary") -> Self:
        """Merge every translation of another dictionary, locale by locale.

        Translations of the other dictionary win for the locales it has;
        the active locale is left unchanged.
        """
        for template in other.resource:
            self.resource.setdefault(template, {})
        for locale in other.locales:
            self.merge_table(
                locale,
                {
                    template: translations[locale]
                    for template, translations in other.resource.items()
                    if locale in translations
                },
            )
        return self

    def merge_locale(self, locale: LocaleId, text: str) -> Self:
        """Merge a serialized locale table into the dictionary.

        The table is parsed before anything is modified, so a malformed
        table leaves the dictionary untouched.

        Args:
            locale: Locale the translations belong to.
            text: Serialized mapping of template to localized template.

        Returns:
            The dictionary itself, to chain merges.

        Raises:
            ParseError: If the locale table is malformed.
        """
        return self.merge_table(locale, parse_locale_table(text))

    def get(self, key: Template) -> str | None:
        """Lookup the translation of a template in the active locale.

        Returns:
            The localized template, or ``None`` when no locale is active or
            the active locale has no translation for this template.
        """
        if self.locale is None:
            return None
        return self.resource.get(key, {}).get(self.locale)

    def clear(self) -> None:
        """Remove every translation and unset the locale."""
        self.locale = None
        self.resource = {}

    def replace(self, other: "Dictionary") -> None:
        """Install the content of another dictionary in this instance."""
        self.locale = other.locale
        self.resource = {
            template: dict(translations)
            for template, translations in other.resource.items()
        }
        logger.debug("Replaced dictionary with %d templates", len(self.resource))

    def to_snapshot(self) -> str:
        """Serialize the translations, without the locale, as a snapshot."""
        return dump_snapshot(self.resource)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self.locale == other.locale and self.resource == other.resource

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(locale={self.locale!r}, "
            f"templates={len(self.resource)})"
        )
