"""Walk through the global dictionary API.

Usage:
    python scripts/demo.py

Prints the formatted sentence, the merged translations, the Russian
greeting, then the emptied translations.
"""
from pathlib import Path

from rich.pretty import pprint

from i18nx import global_dictionary as i18n

ASSETS_DIR = Path(__file__).parent / "assets" / "localization"


def read_asset(name: str) -> str:
    """Read a translation file shipped with the demo."""
    return (ASSETS_DIR / name).read_text(encoding="utf-8")


def main() -> None:
    """Run the demo."""
    # Formatting works without any translation loaded
    print(i18n.t("I'd rather be {1} than {0}", "right", "happy"))

    # Set language at runtime, keep it while importing a new snapshot
    i18n.set_locale("ru")
    i18n.load_snapshot_preserving_locale(read_asset("demo.yaml"))

    # Locales can also be stored separately
    i18n.merge_locale("cn", read_asset("demo.cn.yaml"))
    i18n.merge_locale("ru", read_asset("demo.ru.yaml"))
    pprint(i18n.global_dictionary().resource)

    print(i18n.t("Hello {name}!", name="Rustaceans"))

    # Reset translations and locale
    i18n.reset()
    pprint(i18n.global_dictionary().resource)


if __name__ == "__main__":
    main()
