"""
Normalizers for transforming raw OCR text.

- normalize_line: whitespace removal, glyph confusion correction and
  circled-digit conversion for a single OCR line
"""

from artifactscorer.normalizers.text import (
    CIRCLED_DIGIT_OFFSET,
    convert_circled_digits,
    correct_confusions,
    normalize_line,
    strip_whitespace,
)

__all__ = [
    "normalize_line",
    "strip_whitespace",
    "correct_confusions",
    "convert_circled_digits",
    "CIRCLED_DIGIT_OFFSET",
]
