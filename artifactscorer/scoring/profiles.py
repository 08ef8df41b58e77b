"""Scoring profiles.

A profile decides which substats add to an artifact's score. Crit stats
count under every profile (crit rate doubled, so one point of rate is worth
two of crit damage); each profile adds exactly one secondary stat on top.

Standard profiles:
- CRIT: crit + ATK%
- ENERGY_RECHARGE: crit + Energy Recharge
- DEF: crit + DEF%
- HP: crit + HP%
- ELEMENTAL_MASTERY: crit + half of Elemental Mastery
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from artifactscorer.exceptions import ConfigurationError
from artifactscorer.models import SubstatType


class CalcProfile(Enum):
    """Selectable scoring mode."""

    CRIT = "crit"
    ENERGY_RECHARGE = "energy_recharge"
    DEF = "def"
    HP = "hp"
    ELEMENTAL_MASTERY = "elemental_mastery"


@dataclass(frozen=True)
class ScoringProfile:
    """Weights applied to substat values under one CalcProfile.

    Attributes:
        profile: The CalcProfile this table belongs to.
        display_name: Label shown in the calculation mode selector.
        description: Human-readable description.
        weights: (SubstatType, weight) pairs; types not listed weigh 0.
    """

    profile: CalcProfile
    display_name: str
    description: str
    weights: tuple[tuple[SubstatType, float], ...] = ()

    def weight(self, substat_type: SubstatType) -> float:
        """Return the weight for a substat type (0 when not scored)."""
        for scored_type, weight in self.weights:
            if scored_type is substat_type:
                return weight
        return 0.0

    @property
    def scored_types(self) -> tuple[SubstatType, ...]:
        return tuple(t for t, w in self.weights if w)


# Shared by every profile
CRIT_WEIGHTS: tuple[tuple[SubstatType, float], ...] = (
    (SubstatType.CRIT_RATE, 2.0),
    (SubstatType.CRIT_DAMAGE, 1.0),
)


CRIT_PROFILE = ScoringProfile(
    profile=CalcProfile.CRIT,
    display_name="攻撃力",
    description="Crit plus ATK%",
    weights=CRIT_WEIGHTS + ((SubstatType.ATK_PER, 1.0),),
)

ENERGY_RECHARGE_PROFILE = ScoringProfile(
    profile=CalcProfile.ENERGY_RECHARGE,
    display_name="元素チャージ効率",
    description="Crit plus Energy Recharge",
    weights=CRIT_WEIGHTS + ((SubstatType.ENERGY_RECHARGE, 1.0),),
)

DEF_PROFILE = ScoringProfile(
    profile=CalcProfile.DEF,
    display_name="防御力",
    description="Crit plus DEF%",
    weights=CRIT_WEIGHTS + ((SubstatType.DEF_PER, 1.0),),
)

HP_PROFILE = ScoringProfile(
    profile=CalcProfile.HP,
    display_name="HP",
    description="Crit plus HP%",
    weights=CRIT_WEIGHTS + ((SubstatType.HP_PER, 1.0),),
)

ELEMENTAL_MASTERY_PROFILE = ScoringProfile(
    profile=CalcProfile.ELEMENTAL_MASTERY,
    display_name="元素熟知",
    description="Crit plus half of Elemental Mastery",
    weights=CRIT_WEIGHTS + ((SubstatType.ELEMENTAL_MASTERY, 0.5),),
)


# Profile lookup dictionary
PROFILES: dict[CalcProfile, ScoringProfile] = {
    CalcProfile.CRIT: CRIT_PROFILE,
    CalcProfile.ENERGY_RECHARGE: ENERGY_RECHARGE_PROFILE,
    CalcProfile.DEF: DEF_PROFILE,
    CalcProfile.HP: HP_PROFILE,
    CalcProfile.ELEMENTAL_MASTERY: ELEMENTAL_MASTERY_PROFILE,
}


def resolve_profile(profile: CalcProfile | str) -> CalcProfile:
    """Turn a CalcProfile, its name ("CRIT") or its value ("crit") into a CalcProfile.

    Raises:
        ConfigurationError: If the string names no profile.
    """
    if isinstance(profile, CalcProfile):
        return profile

    key = str(profile)
    if key.upper() in CalcProfile.__members__:
        return CalcProfile[key.upper()]
    try:
        return CalcProfile(key.lower())
    except ValueError:
        valid = ", ".join(p.name for p in CalcProfile)
        raise ConfigurationError(
            f"Unknown scoring profile {profile!r}. Available: {valid}"
        ) from None


def get_profile(profile: CalcProfile | str) -> ScoringProfile:
    """Get the weight table for a profile.

    Args:
        profile: CalcProfile member or its name/value string.

    Returns:
        The matching ScoringProfile.

    Raises:
        ConfigurationError: If the profile is unknown.
    """
    return PROFILES[resolve_profile(profile)]
