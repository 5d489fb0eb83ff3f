"""Process-wide dictionary for applications that translate from anywhere.

Passing a :class:`~i18nx.dictionary.Dictionary` explicitly to the code that
needs it is preferred. This module is a convenience built on top of it:
one lazily created instance shared by the whole process and guarded by a
lock.

Usage:
    >>> from i18nx import global_dictionary as i18n
    >>> i18n.load_snapshot('{"Hello {name}!": {"fr": "Bonjour {name}!"}}')
    >>> i18n.set_locale("fr")
    >>> i18n.t("Hello {name}!", name="Ada")
    'Bonjour Ada!'

Payloads are parsed before the lock is taken and templates are formatted
after it is released, so other threads never observe a partial update.
The instance is updated in place: references returned by
:func:`global_dictionary` stay valid across resets.
"""

import logging
import threading
from typing import Any

from i18nx.dictionary import Dictionary
from i18nx.snapshot import LocaleId, parse_locale_table
from i18nx.translation import render, resolve

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instance: Dictionary | None = None


def global_dictionary() -> Dictionary:
    """Return the process-wide dictionary, creating it on first use.

    Mutating the returned instance directly bypasses the lock; use the
    functions of this module when other threads may translate concurrently.
    """
    global _instance  # pylint: disable=global-statement
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = Dictionary()
    return _instance


def _install(replacement: Dictionary, *, preserve_locale: bool) -> None:
    dictionary = global_dictionary()
    with _lock:
        if preserve_locale:
            replacement.locale = dictionary.locale
        dictionary.replace(replacement)


def reset() -> None:
    """Remove every translation and unset the locale."""
    _install(Dictionary(), preserve_locale=False)


def reset_preserving_locale() -> None:
    """Remove every translation but keep the active locale."""
    _install(Dictionary(), preserve_locale=True)


def load_snapshot(text: str) -> None:
    """Replace the whole content with a snapshot and unset the locale.

    Raises:
        ParseError: If the snapshot is malformed; the content is unchanged.
    """
    _install(Dictionary.from_snapshot(text), preserve_locale=False)


def load_snapshot_preserving_locale(text: str) -> None:
    """Replace every translation with a snapshot but keep the active locale.

    Raises:
        ParseError: If the snapshot is malformed; the content is unchanged.
    """
    _install(Dictionary.from_snapshot(text), preserve_locale=True)


def merge_locale(locale: LocaleId, text: str) -> None:
    """Merge a serialized locale table into the process-wide dictionary.

    Raises:
        ParseError: If the locale table is malformed; the content is unchanged.
    """
    table = parse_locale_table(text)
    dictionary = global_dictionary()
    with _lock:
        dictionary.merge_table(locale, table)


def set_locale(locale: LocaleId | None) -> None:
    """Set the active locale, or unset it with ``None``."""
    dictionary = global_dictionary()
    with _lock:
        dictionary.locale = locale
    logger.debug("Global locale set to %r", locale)


def get_locale() -> LocaleId | None:
    """Return the active locale of the process-wide dictionary."""
    dictionary = global_dictionary()
    with _lock:
        return dictionary.locale


def t(template: str, *args: Any, **kwargs: Any) -> str:
    """Translate a template with the process-wide dictionary.

    Same as :func:`i18nx.translation.translate`.

    Raises:
        FormatError: If the resolved template does not match the values.
    """
    dictionary = global_dictionary()
    with _lock:
        resolved = resolve(dictionary, template)
    return render(resolved, args, kwargs)
