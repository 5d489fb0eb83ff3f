"""Runtime localization of format templates.

A :class:`Dictionary` maps each template to its translations per locale.
:func:`translate` looks the template up in the active locale, falls back
to the template itself, then formats it with :meth:`str.format` syntax::

    from i18nx import Dictionary, translate

    dictionary = Dictionary.from_snapshot('''{
      "Hello {name}!": {
        "de": "Hallo {name}!",
        "fr": "Bonjour {name}!",
      },
    }''')
    dictionary.merge_locale("ru", '{"Hello {name}!": "Привет {name}!"}')
    dictionary.locale = "fr"
    translate(dictionary, "Hello {name}!", name="Ada")  # 'Bonjour Ada!'

A process-wide dictionary is available in :mod:`i18nx.global_dictionary`.
"""

from i18nx.dictionary import Dictionary
from i18nx.exceptions import FormatError, I18nxError, ParseError
from i18nx.formatting import format_template
from i18nx.snapshot import dump_snapshot, parse_locale_table, parse_snapshot
from i18nx.translation import resolve, translate

__all__ = [
    "Dictionary",
    "FormatError",
    "I18nxError",
    "ParseError",
    "dump_snapshot",
    "format_template",
    "parse_locale_table",
    "parse_snapshot",
    "resolve",
    "translate",
]
