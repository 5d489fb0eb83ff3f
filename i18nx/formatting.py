"""Formatting of resolved templates with positional and named values."""

from typing import Any, Mapping, Sequence

from i18nx.exceptions import FormatError


def format_template(
    template: str,
    args: Sequence[Any] = (),
    kwargs: Mapping[str, Any] | None = None,
) -> str:
    """Format a template with :meth:`str.format`.

    ``{0}``, ``{1}``... refer to positional values, ``{name}`` to named
    values, and ``{{``/``}}`` produce literal braces.

    Templates can read attributes and items of the values (``{0.name}``,
    ``{0[key]}``), so translation files must come from trusted sources.

    Raises:
        FormatError: If a placeholder has no matching value, the template
            is malformed, or a value cannot be rendered.
    """
    try:
        return template.format(*args, **(kwargs or {}))
    except KeyError as e:
        raise FormatError(template, f"missing named value {e.args[0]!r}") from e
    except IndexError as e:
        raise FormatError(template, f"missing positional value ({e})") from e
    except (ValueError, AttributeError, TypeError) as e:
        raise FormatError(template, str(e)) from e
