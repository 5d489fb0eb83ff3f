"""Translation of templates through a :class:`~i18nx.dictionary.Dictionary`."""

from typing import Any, Mapping, Sequence

from i18nx.dictionary import Dictionary
from i18nx.formatting import format_template


def resolve(dictionary: Dictionary, template: str) -> str:
    """Return the localized template, or the template itself when untranslated."""
    translated = dictionary.get(template)
    return template if translated is None else translated


def render(resolved: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    """Format a resolved template, returning it as is when no value is given."""
    if not args and not kwargs:
        return resolved
    return format_template(resolved, args, kwargs)


def translate(dictionary: Dictionary, template: str, *args: Any, **kwargs: Any) -> str:
    """Translate a template and format it with the given values.

    Without any value the resolved template is returned as is, so a
    template can be used without formatting.

    Args:
        dictionary: Dictionary holding the translations and active locale.
        template: Template to translate, also the fallback output.
        *args: Values for ``{0}``, ``{1}``... placeholders.
        **kwargs: Values for ``{name}`` placeholders.

    Raises:
        FormatError: If the resolved template does not match the values.
    """
    return render(resolve(dictionary, template), args, kwargs)
