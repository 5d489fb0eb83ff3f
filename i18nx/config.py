"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from i18nx.dictionary import Dictionary

logger = logging.getLogger(__name__)


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        # Translation sources
        self.locale: str | None = None
        self.snapshot_paths: list[Path] = []
        self.locale_table_paths: dict[str, list[Path]] = {}
        # Logging config, passed to logging.config.dictConfig
        self.logging_config: dict[str, Any] | None = None

    @staticmethod
    def __resolve(base_dir: Path, path: str) -> Path:
        resolved = Path(path).expanduser()
        return resolved if resolved.is_absolute() else base_dir / resolved

    @staticmethod
    def __check_locale(locale: object) -> str:
        # YAML reads unquoted no, on or 1 as booleans and numbers
        if not isinstance(locale, str):
            raise ValueError(
                f"Invalid locale {locale!r}: locale ids must be strings, "
                "quote them in the configuration file"
            )
        return locale

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        base_dir = yaml_path.parent
        with open(yaml_path, encoding="utf-8") as file:
            try:
                config = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid configuration file {yaml_path}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(
                f"Invalid configuration file {yaml_path}: expected a mapping, "
                f"got {type(config).__name__}"
            )

        if (locale := config.get("locale")) is not None:
            self.locale = self.__check_locale(locale)

        self.snapshot_paths = [
            self.__resolve(base_dir, path) for path in config.get("snapshots") or []
        ]

        self.locale_table_paths = {}
        for locale_id, paths in (config.get("locales") or {}).items():
            if isinstance(paths, str):
                paths = [paths]
            self.locale_table_paths[self.__check_locale(locale_id)] = [
                self.__resolve(base_dir, path) for path in paths
            ]

        self.logging_config = config.get("logging")

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in (".yaml", ".yml"):
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def build_dictionary(self) -> Dictionary:
        """Create a dictionary from the configured translation files.

        Snapshots are applied in order, each one overriding the translations
        of the previous ones template by template, then locale tables are
        merged. The configured locale is made active.

        Raises:
            ParseError: If one of the files is malformed.
            OSError: If one of the files cannot be read.
        """
        dictionary = Dictionary()
        for path in self.snapshot_paths:
            snapshot = Dictionary.from_snapshot(path.read_text(encoding="utf-8"))
            dictionary.merge(snapshot)
            logger.debug("Loaded snapshot %s", path)

        for locale, paths in self.locale_table_paths.items():
            for path in paths:
                dictionary.merge_locale(locale, path.read_text(encoding="utf-8"))
                logger.debug("Loaded %r locale table %s", locale, path)

        dictionary.locale = self.locale
        return dictionary

    def setup_logging(self) -> None:
        """Configure logging from the config, or log to a file by default."""
        if self.logging_config is not None:
            try:
                logging.config.dictConfig(self.logging_config)
                return
            except (ValueError, TypeError, AttributeError, ImportError) as e:
                logging.basicConfig(level=logging.WARNING)
                logger.warning("Invalid logging configuration, using defaults: %s", e)
                return

        log_dir = Path.home() / ".local" / "share" / "i18nx"
        log_dir.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_dir / "i18nx.log",
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
