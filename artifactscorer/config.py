"""
Configuration for ArtifactScorer parsing and scoring.

All options have sensible defaults; the Japanese client and the
crit-plus-attack profile match the original scorer.
"""

from dataclasses import dataclass, field
from typing import Literal

from artifactscorer.locales import DEFAULT_LOCALE
from artifactscorer.scoring.profiles import CalcProfile


@dataclass
class ScorerConfig:
    """
    Configuration for parsing OCR text and scoring the result.

    Example:
        >>> config = ScorerConfig(
        ...     locale="en",
        ...     on_malformed_line="raise",
        ... )
        >>> report = artifactscorer.evaluate(text, config=config)
    """

    # Locale table used for glyph corrections and classification triggers
    locale: str = DEFAULT_LOCALE

    # Error handling for lines without "+" or with a non-numeric value
    on_malformed_line: Literal["raise", "warn", "skip"] = "warn"

    # Corrections applied after the locale's own confusion table
    extra_confusions: dict[str, str] = field(default_factory=dict)

    # Scoring
    default_profile: CalcProfile = CalcProfile.CRIT
    score_precision: int = 1  # Decimal places for display_score

    def __post_init__(self):
        """Validate configuration."""
        valid_policies = ("raise", "warn", "skip")
        if self.on_malformed_line not in valid_policies:
            raise ValueError(
                f"on_malformed_line must be one of {valid_policies}, "
                f"got {self.on_malformed_line!r}"
            )

        if not isinstance(self.default_profile, CalcProfile):
            raise ValueError(
                f"default_profile must be a CalcProfile, got {self.default_profile!r}"
            )

        if self.score_precision < 0:
            raise ValueError(f"score_precision must be >= 0, got {self.score_precision}")

        for wrong in self.extra_confusions:
            if not wrong:
                raise ValueError("extra_confusions keys must be non-empty strings")
