"""Tests for scoring profiles.

ScoringProfile holds the per-type weights each CalcProfile applies.
"""

import pytest

from artifactscorer import ConfigurationError, SubstatType
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


class TestScoringProfile:
    """Test ScoringProfile dataclass."""

    def test_profile_creation(self):
        """Can create a profile with required fields."""
        profile = ScoringProfile(
            profile=CalcProfile.CRIT,
            display_name="test",
            description="A test profile",
        )
        assert profile.display_name == "test"
        assert profile.weights == ()

    def test_unlisted_type_weighs_zero(self):
        """Types missing from weights weigh 0."""
        assert CRIT_PROFILE.weight(SubstatType.HP_ACT) == 0.0
        assert CRIT_PROFILE.weight(SubstatType.UNDETECTED) == 0.0

    def test_frozen(self):
        """Profiles are immutable."""
        with pytest.raises(AttributeError):
            CRIT_PROFILE.description = "changed"


class TestStandardProfiles:
    """Test standard profile constants."""

    def test_profiles_dict_contains_all(self):
        """PROFILES has an entry for every CalcProfile."""
        assert set(PROFILES) == set(CalcProfile)
        for calc_profile, table in PROFILES.items():
            assert table.profile is calc_profile

    @pytest.mark.parametrize("table", list(PROFILES.values()))
    def test_crit_weights_shared(self, table):
        """Every profile doubles crit rate and counts crit damage once."""
        assert table.weight(SubstatType.CRIT_RATE) == 2.0
        assert table.weight(SubstatType.CRIT_DAMAGE) == 1.0

    @pytest.mark.parametrize(
        "table, secondary, weight",
        [
            (CRIT_PROFILE, SubstatType.ATK_PER, 1.0),
            (ENERGY_RECHARGE_PROFILE, SubstatType.ENERGY_RECHARGE, 1.0),
            (DEF_PROFILE, SubstatType.DEF_PER, 1.0),
            (HP_PROFILE, SubstatType.HP_PER, 1.0),
            (ELEMENTAL_MASTERY_PROFILE, SubstatType.ELEMENTAL_MASTERY, 0.5),
        ],
    )
    def test_one_secondary_stat(self, table, secondary, weight):
        """Each profile adds exactly one secondary stat."""
        assert table.weight(secondary) == weight
        assert set(table.scored_types) == {
            SubstatType.CRIT_RATE,
            SubstatType.CRIT_DAMAGE,
            secondary,
        }


class TestGetProfile:
    """Test get_profile() and resolve_profile()."""

    def test_enum_member(self):
        """get_profile accepts a CalcProfile."""
        assert get_profile(CalcProfile.DEF) is DEF_PROFILE

    @pytest.mark.parametrize("name", ["ELEMENTAL_MASTERY", "elemental_mastery", "Elemental_Mastery"])
    def test_string_names(self, name):
        """Names and values resolve case-insensitively."""
        assert resolve_profile(name) is CalcProfile.ELEMENTAL_MASTERY

    def test_unknown(self):
        """Unknown names raise ConfigurationError listing the choices."""
        with pytest.raises(ConfigurationError, match="CRIT"):
            get_profile("speed")
