"""
Line classifier: status name -> SubstatType.

Rules are evaluated top to bottom and the first match wins. Order is the
tie-break: a status name can contain several trigger substrings (元素チャージ
効率 contains the 率 of 会心率), so the list order decides the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from artifactscorer.locales import DEFAULT_LOCALE, LocaleTable, load_locale
from artifactscorer.models import SubstatType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationRule:
    """Maps a locale trigger to a substat type."""

    trigger: str  # Key into LocaleTable.triggers
    result: SubstatType

    def matches(self, status_name: str, table: LocaleTable) -> bool:
        return table.trigger(self.trigger) in status_name


PERCENT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("hp", SubstatType.HP_PER),
    ClassificationRule("defense", SubstatType.DEF_PER),
    ClassificationRule("attack", SubstatType.ATK_PER),
    ClassificationRule("recharge", SubstatType.ENERGY_RECHARGE),
    ClassificationRule("rate", SubstatType.CRIT_RATE),
    ClassificationRule("damage", SubstatType.CRIT_DAMAGE),
)

ACTUAL_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("hp", SubstatType.HP_ACT),
    ClassificationRule("defense", SubstatType.DEF_ACT),
    ClassificationRule("attack", SubstatType.ATK_ACT),
    ClassificationRule("mastery", SubstatType.ELEMENTAL_MASTERY),
)


def classify(
    status_name: str, is_percent: bool, locale: str = DEFAULT_LOCALE
) -> SubstatType:
    """
    Determine which statistic a normalized status name refers to.

    Args:
        status_name: Normalized text before the "+" separator.
        is_percent: Whether the value part contained "%".
        locale: Locale table supplying the trigger substrings.

    Returns:
        The first matching SubstatType, or UNDETECTED when no rule matches.
        Never raises for any input string.

    Example:
        >>> classify("会心率", is_percent=True)
        <SubstatType.CRIT_RATE: 'crit_rate'>
        >>> classify("会心率", is_percent=False)
        <SubstatType.UNDETECTED: 'undetected'>
    """
    table = load_locale(locale)
    rules = PERCENT_RULES if is_percent else ACTUAL_RULES

    for rule in rules:
        if rule.matches(status_name, table):
            return rule.result

    logger.debug("No rule matched %r (percent=%s)", status_name, is_percent)
    return SubstatType.UNDETECTED
