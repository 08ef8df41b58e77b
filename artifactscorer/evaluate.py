"""
Evaluation orchestrator.

This module provides the main `evaluate()` function that turns one OCR
text block into a ScoreReport by wiring together:
- parse_substats (normalize, split, classify)
- compute_score / score_tier (profile-weighted score)
- compute_roll_qualities (per-substat roll quality)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from artifactscorer.config import ScorerConfig
from artifactscorer.exceptions import ArtifactScorerError, MalformedLineError
from artifactscorer.extractors.substats import parse_substats
from artifactscorer.models import Substat
from artifactscorer.scoring.engine import (
    compute_roll_qualities,
    compute_score,
    score_tier,
)
from artifactscorer.scoring.profiles import CalcProfile, resolve_profile

logger = logging.getLogger(__name__)


@dataclass
class ScoreReport:
    """
    Everything the UI shows for one OCR block.

    score is unrounded. tier is read from display_score, so the two always
    agree on screen.

    Example:
        >>> report = artifactscorer.evaluate("会心率+①0.0%\\n会心ダメージ+②0.0%")
        >>> report.display_score, report.tier
        (40.0, 'S')
    """

    substats: list[Substat]
    profile: CalcProfile
    score: float
    tier: str
    roll_qualities: list[tuple[Substat, float]] = field(default_factory=list)
    errors: list[MalformedLineError] = field(default_factory=list)
    precision: int = 1

    @property
    def display_score(self) -> float:
        """Score rounded for display."""
        return round(self.score, self.precision)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the report
        """
        return {
            "profile": self.profile.value,
            "score": self.display_score,
            "tier": self.tier,
            "substats": [s.to_dict() for s in self.substats],
            "roll_qualities": [
                {"label": s.label, "quality": quality} for s, quality in self.roll_qualities
            ],
            "errors": [str(e) for e in self.errors],
        }


def evaluate(
    text: str,
    profile: CalcProfile | str | None = None,
    config: ScorerConfig | None = None,
) -> ScoreReport:
    """
    Parse an OCR text block and score it.

    Args:
        text: Multi-line OCR output for the substat region.
        profile: Scoring profile; defaults to config.default_profile.
        config: Parsing and scoring configuration.

    Returns:
        ScoreReport with substats, score, tier, roll qualities and the
        malformed lines that were collected.

    Raises:
        MalformedLineError: When config.on_malformed_line == "raise".
        ConfigurationError: For an unknown profile or locale.
    """
    config = config or ScorerConfig()
    calc_profile = resolve_profile(profile) if profile is not None else config.default_profile

    parsed = parse_substats(text, config)
    score = compute_score(parsed.substats, calc_profile)
    display_score = round(score, config.score_precision)

    report = ScoreReport(
        substats=parsed.substats,
        profile=calc_profile,
        score=score,
        tier=score_tier(display_score),
        roll_qualities=compute_roll_qualities(parsed.substats),
        errors=parsed.errors,
        precision=config.score_precision,
    )
    logger.debug(
        "Scored %d substats under %s: %.1f (%s)",
        len(report.substats),
        calc_profile.name,
        score,
        report.tier,
    )
    return report


def evaluate_batch(
    blocks: Iterable[str],
    profile: CalcProfile | str | None = None,
    config: ScorerConfig | None = None,
    parallel: bool = False,
    max_workers: int = 4,
) -> Iterator[tuple[int, ScoreReport | ArtifactScorerError]]:
    """
    Evaluate multiple OCR blocks, yielding results in input order.

    Evaluation is pure, so blocks can be spread over a thread pool without
    any locking. Arguments are checked when the call is made, not on the
    first iteration. With parallel=True every block is submitted up front,
    so a lazy or unbounded iterable is read to the end before the first
    result is yielded.

    Args:
        blocks: OCR text blocks
        profile: Scoring profile applied to every block
        config: Parsing and scoring configuration
        parallel: Whether to evaluate in a thread pool
        max_workers: Max parallel workers (if parallel=True)

    Returns:
        Iterator of (index, result) tuples where result is a ScoreReport
        or the ArtifactScorerError raised for that block

    Raises:
        ValueError: If max_workers < 1
    """
    config = config or ScorerConfig()
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    return _iter_batch(blocks, profile, config, parallel, max_workers)


def _iter_batch(
    blocks: Iterable[str],
    profile: CalcProfile | str | None,
    config: ScorerConfig,
    parallel: bool,
    max_workers: int,
) -> Iterator[tuple[int, ScoreReport | ArtifactScorerError]]:
    def _evaluate_one(text: str) -> ScoreReport | ArtifactScorerError:
        try:
            return evaluate(text, profile, config)
        except ArtifactScorerError as e:
            logger.warning("Evaluation failed: %s", e)
            return e

    if not parallel:
        for index, text in enumerate(blocks):
            yield (index, _evaluate_one(text))
        return

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        yield from enumerate(executor.map(_evaluate_one, blocks))
