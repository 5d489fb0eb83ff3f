"""Custom exception hierarchy for i18nx."""

import yaml


class I18nxError(Exception):
    """Base exception for all i18nx errors."""


class ParseError(I18nxError):
    """A snapshot or locale table could not be parsed."""

    def __init__(self, message: str, *, source: yaml.YAMLError | None = None) -> None:
        super().__init__(message)
        self.source = source
        mark = getattr(source, "problem_mark", None)
        self.line: int | None = mark.line + 1 if mark is not None else None
        self.column: int | None = mark.column + 1 if mark is not None else None


class FormatError(I18nxError):
    """A template could not be formatted with the supplied values."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Cannot format {template!r}: {reason}")
        self.template = template
        self.reason = reason
