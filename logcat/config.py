"""Parser configuration from an optional YAML file and environment variables.

Precedence: environment > YAML file > defaults.

    # logcat.yml
    year: 2024
    min_level: warning
"""

import logging
import os
from dataclasses import dataclass

import yaml

from logcat.errors import UnknownLevelError
from logcat.level import Level
from logcat.threadtime import ThreadTimeParser

logger = logging.getLogger(__name__)

ENV_YEAR = "LOGCAT_YEAR"
ENV_MIN_LEVEL = "LOGCAT_MIN_LEVEL"


@dataclass(frozen=True)
class ParserConfig:
    year: int | None = None
    min_level: Level | None = None

    def make_parser(self) -> ThreadTimeParser:
        return ThreadTimeParser(year=self.year)


KNOWN_KEYS = frozenset({"year", "min_level"})


def load_yaml_config(path: str | None) -> dict:
    """Read parser settings from *path*.

    No path, or a path that does not exist, yields {} so the environment
    and defaults apply. Unknown keys are logged and ignored.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("No parser settings at %s", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    unknown = sorted(str(k) for k in data if k not in KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))
    logger.debug("Parser settings from %s: %s", path, data)
    return {k: v for k, v in data.items() if k in KNOWN_KEYS}


def _setting(env_name: str, yaml_data: dict, key: str):
    # An empty env var counts as unset.
    value = os.environ.get(env_name, "")
    if value.strip():
        return value
    return yaml_data.get(key)


def _parse_year(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid year: {value!r}") from None
    if not 1 <= year <= 9999:
        raise ValueError(f"Year out of range: {year}")
    return year


def _parse_level(value) -> Level | None:
    if value is None or value == "":
        return None
    try:
        return Level.from_name(str(value))
    except UnknownLevelError:
        raise ValueError(f"Invalid log level: {value!r}") from None


def load_config(yaml_data: dict | None = None) -> ParserConfig:
    """Build ParserConfig from parsed YAML data overlaid with env vars."""
    yaml_data = yaml_data or {}
    return ParserConfig(
        year=_parse_year(_setting(ENV_YEAR, yaml_data, "year")),
        min_level=_parse_level(_setting(ENV_MIN_LEVEL, yaml_data, "min_level")),
    )
