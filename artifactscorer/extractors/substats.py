"""
Substat parser: OCR text block -> ordered Substat records.

Each line is normalized and dropped if nothing is left. The rest are split
on their first "+" into a status name and a value, classified, and turned
into a Substat. Output order is the reading order of the block, which the
UI relies on for display.

Malformed lines are handled per ScorerConfig.on_malformed_line:
- "raise": the first MalformedLineError propagates
- "warn": the error is logged and collected in ParseResult.errors
- "skip": the line is dropped without a record

No deduplication happens here; repeated types are left to the caller.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from artifactscorer.config import ScorerConfig
from artifactscorer.exceptions import MalformedLineError, NumericValueError
from artifactscorer.extractors.classifier import classify
from artifactscorer.locales import DEFAULT_LOCALE
from artifactscorer.models import ParamKind, Substat, SubstatParam
from artifactscorer.normalizers.text import normalize_line

logger = logging.getLogger(__name__)

SEPARATOR = "+"
PERCENT_SIGN = "%"

# Digits with at most one decimal point; rejects "nan", "1e3", "-5"
NUMBER_PATTERN = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


@dataclass
class ParseResult:
    """Substats parsed from one OCR block, plus the lines that failed."""

    substats: list[Substat] = field(default_factory=list)
    errors: list[MalformedLineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def __iter__(self):
        return iter(self.substats)

    def __len__(self) -> int:
        return len(self.substats)


def parse_value(text: str, line: str = "", line_number: int | None = None) -> SubstatParam:
    """
    Parse the value half of a line.

    Args:
        text: Normalized text after the "+" separator, e.g. "5.8%".
        line: Full line, used in error messages.
        line_number: Position of the line, used in error messages.

    Returns:
        SubstatParam keeping the text as its label and the number as value.

    Raises:
        NumericValueError: If the text without "%" is not a plain number.
    """
    is_percent = PERCENT_SIGN in text
    number_text = text.replace(PERCENT_SIGN, "")

    if not NUMBER_PATTERN.match(number_text):
        raise NumericValueError(
            line or text,
            f"value {number_text!r} is not numeric",
            line_number=line_number,
        )

    return SubstatParam(
        label=text,
        kind=ParamKind.PERCENT if is_percent else ParamKind.ACTUAL,
        value=float(number_text),
    )


def parse_line(
    line: str,
    locale: str = DEFAULT_LOCALE,
    extra_confusions: dict[str, str] | None = None,
    line_number: int | None = None,
) -> Substat:
    """
    Parse a single OCR line into a Substat.

    Args:
        line: Raw OCR line.
        locale: Locale table for normalization and classification.
        extra_confusions: Additional glyph corrections.
        line_number: Position of the line in its block, for error reporting.

    Returns:
        The classified Substat (possibly UNDETECTED).

    Raises:
        MalformedLineError: If the line has no "+" separator.
        NumericValueError: If the value part is not a number.

    Example:
        >>> parse_line("会心率+①②.0%").type
        <SubstatType.CRIT_RATE: 'crit_rate'>
    """
    normalized = normalize_line(line, locale, extra_confusions)
    return _parse_normalized(normalized, line, locale, line_number)


def _parse_normalized(
    normalized: str, line: str, locale: str, line_number: int | None
) -> Substat:
    status_name, sep, param_text = normalized.partition(SEPARATOR)
    if not sep:
        raise MalformedLineError(
            line, f"missing {SEPARATOR!r} separator", line_number=line_number
        )

    param = parse_value(param_text, line=line, line_number=line_number)
    substat_type = classify(status_name, param.is_percent, locale)
    logger.debug("Classified %r as %s", normalized, substat_type.name)

    return Substat(type=substat_type, status_name=status_name, param=param)


def parse_substats(text: str, config: ScorerConfig | None = None) -> ParseResult:
    """
    Parse a full OCR text block.

    Args:
        text: Multi-line OCR output for the cropped substat region.
        config: Locale and malformed-line policy.

    Returns:
        ParseResult with one Substat per well-formed non-blank line, in
        input order, and the errors collected for the others.

    Raises:
        MalformedLineError: Only when config.on_malformed_line == "raise".

    Example:
        >>> result = parse_substats("会心率+①②.0%\\nHP+④⑦⑧0")
        >>> [s.type.name for s in result.substats]
        ['CRIT_RATE', 'HP_ACT']
    """
    config = config or ScorerConfig()
    result = ParseResult()

    # Blank means empty after normalization; line numbers count kept lines only
    lines = []
    for line in text.splitlines():
        normalized = normalize_line(line, config.locale, config.extra_confusions)
        if normalized:
            lines.append((line, normalized))

    for line_number, (line, normalized) in enumerate(lines, start=1):
        try:
            substat = _parse_normalized(normalized, line, config.locale, line_number)
        except MalformedLineError as e:
            if config.on_malformed_line == "raise":
                raise
            elif config.on_malformed_line == "warn":
                logger.warning("Skipping malformed OCR line: %s", e)
                result.errors.append(e)
            continue

        result.substats.append(substat)

    return result
