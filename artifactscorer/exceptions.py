"""
Exception classes for ArtifactScorer.

All ArtifactScorer exceptions inherit from ArtifactScorerError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     substat = artifactscorer.parse_line("攻撃力5.8%")
    ... except artifactscorer.MalformedLineError as e:
    ...     print(f"Bad OCR line: {e.line!r}")
    ... except artifactscorer.ArtifactScorerError as e:
    ...     print(f"ArtifactScorer error: {e}")
"""


class ArtifactScorerError(Exception):
    """
    Base exception for all ArtifactScorer errors.

    Catch this to handle any ArtifactScorer-specific error.
    """

    pass


class MalformedLineError(ArtifactScorerError):
    """
    Raised when an OCR line cannot be turned into a substat.

    A line without the "+" separator almost always means the OCR pass
    corrupted the text, so the caller is told instead of the line being
    dropped silently.

    Attributes:
        line: The offending line as it was received.
        line_number: 1-based position among the non-blank lines of the block,
            or None when the line was parsed on its own.
        reason: Short description of what was wrong.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Malformed {where} {line!r}: {reason}")


class NumericValueError(MalformedLineError):
    """
    Raised when the value part of a line is not a number.

    Example:
        >>> parse_line("会心率+1.2.3%")
        NumericValueError: Malformed line '会心率+1.2.3%': value '1.2.3' is not numeric
    """

    pass


class ConfigurationError(ArtifactScorerError):
    """
    Raised for invalid configuration or missing lookup data.

    Example:
        >>> load_locale("xx")
        ConfigurationError: Unknown locale 'xx'. Available: en, ja
    """

    pass
