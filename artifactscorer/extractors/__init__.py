"""
Substat extraction from normalized OCR text.

- classify: status name -> SubstatType, first matching rule wins
- parse_line / parse_substats: OCR lines -> Substat records
"""

from artifactscorer.extractors.classifier import (
    ACTUAL_RULES,
    PERCENT_RULES,
    ClassificationRule,
    classify,
)
from artifactscorer.extractors.substats import (
    ParseResult,
    parse_line,
    parse_substats,
    parse_value,
)

__all__ = [
    # Classifier
    "classify",
    "ClassificationRule",
    "PERCENT_RULES",
    "ACTUAL_RULES",
    # Parser
    "parse_substats",
    "parse_line",
    "parse_value",
    "ParseResult",
]
