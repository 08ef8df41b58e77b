"""
Scoring engine.

compute_score() sums weighted substat values under a profile.
compute_roll_quality() says how close a substat is to the best total it
could reach: its value over six maximum rolls (one initial roll plus five
upgrades over the artifact's life).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from artifactscorer.exceptions import ConfigurationError
from artifactscorer.models import Substat, SubstatType
from artifactscorer.scoring.profiles import CalcProfile, get_profile

logger = logging.getLogger(__name__)


# Highest single roll per substat type (5-star artifact)
MAX_ROLL_VALUES: dict[SubstatType, float] = {
    SubstatType.ATK_ACT: 19.45,
    SubstatType.ATK_PER: 5.83,
    SubstatType.DEF_ACT: 23.15,
    SubstatType.DEF_PER: 7.29,
    SubstatType.HP_ACT: 298.75,
    SubstatType.HP_PER: 5.83,
    SubstatType.CRIT_RATE: 3.89,
    SubstatType.CRIT_DAMAGE: 7.77,
    SubstatType.ENERGY_RECHARGE: 6.48,
    SubstatType.ELEMENTAL_MASTERY: 23.31,
}

MAX_ROLLS = 6

# (lower bound, tier), checked from the top; bounds are inclusive
SCORE_TIERS: tuple[tuple[float, str], ...] = (
    (45.0, "SS"),
    (35.0, "S"),
    (25.0, "A"),
)
LOWEST_TIER = "B"


def compute_score(substats: Iterable[Substat], profile: CalcProfile | str) -> float:
    """
    Compute the quality score of a set of substats.

    Args:
        substats: Parsed substats, in any order.
        profile: Scoring profile selecting the secondary stat.

    Returns:
        Unrounded, non-negative score. Rounding is left to presentation.

    Example:
        >>> compute_score(parse_substats("会心率+③.⑨%").substats, CalcProfile.HP)
        7.8
    """
    table = get_profile(profile)
    # Correctly rounded sum; independent of line order
    return math.fsum(table.weight(s.type) * s.value for s in substats)


def score_tier(score: float) -> str:
    """Map a score to its tier: SS (>=45), S (>=35), A (>=25), otherwise B."""
    for lower_bound, tier in SCORE_TIERS:
        if score >= lower_bound:
            return tier
    return LOWEST_TIER


def compute_roll_quality(substat: Substat) -> float:
    """
    Percentage of the best possible total roll value a substat reached.

    UNDETECTED substats have no maximum and must be excluded by the caller;
    use compute_roll_qualities() to do that automatically.

    Returns:
        round(value / (max_roll * 6) * 100, 1)

    Raises:
        ConfigurationError: If the substat type has no registered maximum.
    """
    try:
        max_roll = MAX_ROLL_VALUES[substat.type]
    except KeyError:
        raise ConfigurationError(
            f"No maximum roll value registered for {substat.type.name}"
        ) from None

    return round(substat.value / (max_roll * MAX_ROLLS) * 100, 1)


def compute_roll_qualities(substats: Iterable[Substat]) -> list[tuple[Substat, float]]:
    """Roll quality for every detected substat, in input order."""
    qualities = []
    for substat in substats:
        if not substat.is_detected:
            logger.debug("Excluding undetected substat %r from roll quality", substat.label)
            continue
        qualities.append((substat, compute_roll_quality(substat)))
    return qualities
