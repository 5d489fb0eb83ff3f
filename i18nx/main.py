"""Command line interface for i18nx.

Examples:
    i18nx -s demo.yaml -l fr translate "Hello {name}!" -n name=Ada
    i18nx -m ru demo.ru.yaml -l ru translate "I'd rather be {1} than {0}" right happy
    i18nx -c i18nx.yaml dump
"""
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty

from i18nx.config import Config
from i18nx.dictionary import Dictionary
from i18nx.exceptions import I18nxError
from i18nx.translation import translate

logger = logging.getLogger(__name__)


def parse_named_value(value: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` command line argument."""
    name, separator, named_value = value.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, named_value


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    """
    parser = argparse.ArgumentParser(
        prog="i18nx", description="Translate templates with i18nx dictionaries"
    )
    parser.add_argument(
        "-c",
        "--config",
        help="YAML configuration listing translation files",
        type=Path,
    )
    parser.add_argument(
        "-s",
        "--snapshot",
        help="Snapshot file (template -> locale -> translation), may be repeated",
        type=Path,
        action="append",
        default=[],
    )
    parser.add_argument(
        "-m",
        "--merge",
        help="Locale table file (template -> translation) for LOCALE, may be repeated",
        nargs=2,
        metavar=("LOCALE", "PATH"),
        action="append",
        default=[],
    )
    parser.add_argument(
        "-l",
        "--locale",
        help="Active locale, overrides the configured one",
    )
    sub_parser = parser.add_subparsers(dest="command")

    translate_parser = sub_parser.add_parser("translate", help="Translate a template")
    translate_parser.add_argument("template", help="Template to translate")
    translate_parser.add_argument(
        "values",
        help="Positional values for {0}, {1}...",
        nargs="*",
    )
    translate_parser.add_argument(
        "-n",
        "--named",
        help="Named value for {NAME}, may be repeated",
        type=parse_named_value,
        metavar="NAME=VALUE",
        action="append",
        default=[],
    )

    sub_parser.add_parser("dump", help="Print the loaded translations")
    return parser


def load_dictionary(args: argparse.Namespace) -> Dictionary:
    """
    Build the dictionary from the configuration file and the command line.
    Command line snapshots replace the configured translations, locale
    tables are merged on top of them.
    """
    config = Config()
    if args.config is not None:
        config.parse(args.config)
        config.setup_logging()
    if args.snapshot:
        config.snapshot_paths = args.snapshot
    for locale, path in args.merge:
        config.locale_table_paths.setdefault(locale, []).append(Path(path))
    if args.locale is not None:
        config.locale = args.locale
    return config.build_dictionary()


def handle_translate_command(
    dictionary: Dictionary, template: str, values: list[str], named: dict[str, str]
) -> None:
    """Handle the translate command."""
    print(translate(dictionary, template, *values, **named))


def handle_dump_command(dictionary: Dictionary, console: Console) -> None:
    """Handle the dump command."""
    console.print(f"Locale: {dictionary.locale}")
    console.print(f"Locales: {', '.join(dictionary.locales) or '-'}")
    console.print(Pretty(dictionary.resource))


def main(argv: list[str] | None = None) -> int:
    """
    Command Line Interface for i18nx.
    Two commands are available:
    - translate: Translate and format a template
    - dump: Print the loaded translations
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    error_console = Console(stderr=True)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        dictionary = load_dictionary(args)
        logger.debug("Loaded %r", dictionary)

        match args.command:
            case "translate":
                handle_translate_command(
                    dictionary, args.template, args.values, dict(args.named)
                )
            case "dump":
                handle_dump_command(dictionary, Console())
    except (I18nxError, OSError, ValueError) as e:
        error_console.print(
            f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
