"""
ArtifactScorer: score game artifacts from OCR'd substat text.

This library turns the OCR output of an artifact's substat panel into
typed substat records and computes a weighted quality score for them
under a selectable scoring profile.

Example:
    >>> import artifactscorer
    >>> report = artifactscorer.evaluate("会心率+⑦.⑧%\\n会心ダメージ+②①.0%")
    >>> report.display_score, report.tier
    (36.6, 'S')

    >>> for substat, quality in report.roll_qualities:
    ...     print(substat.label, quality)
"""

from artifactscorer.collection import (
    filter_artifacts,
    make_artifact,
    new_artifact_id,
    set_ids,
)
from artifactscorer.config import ScorerConfig
from artifactscorer.evaluate import ScoreReport, evaluate, evaluate_batch
from artifactscorer.exceptions import (
    ArtifactScorerError,
    ConfigurationError,
    MalformedLineError,
    NumericValueError,
)
from artifactscorer.extractors import ParseResult, classify, parse_line, parse_substats
from artifactscorer.locales import LocaleTable, available_locales, load_locale
from artifactscorer.models import (
    Artifact,
    ArtifactType,
    ParamKind,
    Substat,
    SubstatParam,
    SubstatType,
)
from artifactscorer.normalizers import normalize_line
from artifactscorer.scoring import (
    PROFILES,
    CalcProfile,
    ScoringProfile,
    compute_roll_qualities,
    compute_roll_quality,
    compute_score,
    get_profile,
    score_tier,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "evaluate",
    "evaluate_batch",
    "ScoreReport",
    # Configuration
    "ScorerConfig",
    "LocaleTable",
    "load_locale",
    "available_locales",
    # Parsing
    "normalize_line",
    "classify",
    "parse_line",
    "parse_substats",
    "ParseResult",
    # Scoring
    "compute_score",
    "compute_roll_quality",
    "compute_roll_qualities",
    "score_tier",
    "CalcProfile",
    "ScoringProfile",
    "get_profile",
    "PROFILES",
    # Models
    "SubstatType",
    "ParamKind",
    "SubstatParam",
    "Substat",
    "ArtifactType",
    "Artifact",
    # Collection
    "new_artifact_id",
    "make_artifact",
    "filter_artifacts",
    "set_ids",
    # Exceptions
    "ArtifactScorerError",
    "MalformedLineError",
    "NumericValueError",
    "ConfigurationError",
]
