"""
Per-locale lookup tables for OCR text.

Each game client language gets one YAML table under data/locales/ holding:
- confusions: glyphs the OCR engine returns instead of the intended one
- triggers: the substring each classification predicate looks for
- whitelist: characters the OCR engine should be restricted to

Keeping the substrings here means a new client language is a new YAML
file, not a change to the classifier.

Example:
    >>> from artifactscorer.locales import load_locale
    >>> table = load_locale("ja")
    >>> table.trigger("attack")
    '攻'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any

import yaml

from artifactscorer.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "ja"

# Predicates the classifier needs; every locale must define all of them
TRIGGER_KEYS = ("hp", "defense", "attack", "recharge", "rate", "damage", "mastery")

_LOCALE_PACKAGE = "artifactscorer"
_LOCALE_DIR = ("data", "locales")


@dataclass(frozen=True)
class LocaleTable:
    """Immutable lookup table for one client language."""

    name: str
    description: str
    confusions: Mapping[str, str]
    triggers: Mapping[str, str]
    whitelist: str = ""

    def trigger(self, key: str) -> str:
        """Return the substring for a classification predicate."""
        try:
            return self.triggers[key]
        except KeyError:
            raise ConfigurationError(
                f"Locale {self.name!r} has no trigger for {key!r}"
            ) from None


def _locale_root():
    root = resources.files(_LOCALE_PACKAGE)
    for part in _LOCALE_DIR:
        root = root / part
    return root


def available_locales() -> list[str]:
    """Return the names of all bundled locale tables."""
    return sorted(
        entry.name.removesuffix(".yaml")
        for entry in _locale_root().iterdir()
        if entry.name.endswith(".yaml")
    )


def build_locale_table(name: str, data: dict[str, Any]) -> LocaleTable:
    """Validate a raw locale mapping and freeze it into a LocaleTable."""
    triggers = data.get("triggers") or {}
    missing = [key for key in TRIGGER_KEYS if not triggers.get(key)]
    if missing:
        raise ConfigurationError(
            f"Locale {name!r} is missing triggers: {', '.join(missing)}"
        )

    confusions = data.get("confusions") or {}
    for wrong, right in confusions.items():
        if not isinstance(wrong, str) or not isinstance(right, str) or not wrong:
            raise ConfigurationError(
                f"Locale {name!r} has an invalid confusion entry {wrong!r} -> {right!r}"
            )

    return LocaleTable(
        name=name,
        description=str(data.get("description", "")),
        confusions=MappingProxyType(dict(confusions)),
        triggers=MappingProxyType({key: str(triggers[key]) for key in TRIGGER_KEYS}),
        whitelist=str(data.get("whitelist", "")),
    )


@lru_cache(maxsize=None)
def load_locale(name: str = DEFAULT_LOCALE) -> LocaleTable:
    """
    Load a bundled locale table.

    Args:
        name: Locale name, e.g. "ja" or "en".

    Returns:
        The parsed LocaleTable (cached per name).

    Raises:
        ConfigurationError: If the locale does not exist or is incomplete.
    """
    path = _locale_root() / f"{name}.yaml"
    if not path.is_file():
        raise ConfigurationError(
            f"Unknown locale {name!r}. Available: {', '.join(available_locales())}"
        )

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Locale {name!r} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Locale {name!r} must be a mapping")

    table = build_locale_table(name, data)
    logger.debug(
        "Loaded locale %s (%d confusions)", name, len(table.confusions)
    )
    return table
