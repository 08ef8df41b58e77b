"""
Scoring module.

- compute_score: weighted sum of substat values under a CalcProfile
- compute_roll_quality: how close a substat is to its best possible total
- score_tier: SS / S / A / B banding of a score

Profiles:
- CRIT_PROFILE, ENERGY_RECHARGE_PROFILE, DEF_PROFILE, HP_PROFILE,
  ELEMENTAL_MASTERY_PROFILE
"""

from artifactscorer.scoring.engine import (
    MAX_ROLL_VALUES,
    MAX_ROLLS,
    SCORE_TIERS,
    compute_roll_qualities,
    compute_roll_quality,
    compute_score,
    score_tier,
)
from artifactscorer.scoring.profiles import (
    CRIT_PROFILE,
    DEF_PROFILE,
    ELEMENTAL_MASTERY_PROFILE,
    ENERGY_RECHARGE_PROFILE,
    HP_PROFILE,
    PROFILES,
    CalcProfile,
    ScoringProfile,
    get_profile,
    resolve_profile,
)

__all__ = [
    # Engine
    "compute_score",
    "compute_roll_quality",
    "compute_roll_qualities",
    "score_tier",
    "MAX_ROLL_VALUES",
    "MAX_ROLLS",
    "SCORE_TIERS",
    # Profiles
    "CalcProfile",
    "ScoringProfile",
    "get_profile",
    "resolve_profile",
    "PROFILES",
    "CRIT_PROFILE",
    "ENERGY_RECHARGE_PROFILE",
    "DEF_PROFILE",
    "HP_PROFILE",
    "ELEMENTAL_MASTERY_PROFILE",
]
