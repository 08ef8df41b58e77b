"""
OCR line normalization.

Turns one raw OCR line into the canonical form the classifier expects:
- all whitespace removed (OCR inserts spaces between CJK glyphs)
- known glyph confusions replaced from the locale table (カ -> 力)
- circled numerals ①..⑨ turned into ASCII digits

The OCR whitelist has no plain 1-9, so the engine reports those digits
as circled glyphs and they only become numbers here.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from artifactscorer.locales import DEFAULT_LOCALE, load_locale

# ① is U+2460, so subtracting this offset yields 1
CIRCLED_DIGIT_OFFSET = 0x245F
CIRCLED_DIGIT_FIRST = 0x2460
CIRCLED_DIGIT_LAST = 0x2468

WHITESPACE_PATTERN = re.compile(r"\s+")
CIRCLED_DIGIT_PATTERN = re.compile(f"[{chr(CIRCLED_DIGIT_FIRST)}-{chr(CIRCLED_DIGIT_LAST)}]")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character, including full-width spaces."""
    return WHITESPACE_PATTERN.sub("", text)


def convert_circled_digits(text: str) -> str:
    """Replace circled numerals ①..⑨ with the digits 1..9."""
    return CIRCLED_DIGIT_PATTERN.sub(
        lambda m: str(ord(m.group()) - CIRCLED_DIGIT_OFFSET), text
    )


def correct_confusions(text: str, confusions: Mapping[str, str]) -> str:
    """
    Replace misrecognized glyphs with their intended character.

    Longer keys are applied first so multi-character confusions win over
    single-character ones that overlap them.
    """
    for wrong in sorted(confusions, key=len, reverse=True):
        text = text.replace(wrong, confusions[wrong])
    return text


def normalize_line(
    line: str,
    locale: str = DEFAULT_LOCALE,
    extra_confusions: Mapping[str, str] | None = None,
) -> str:
    """
    Normalize one OCR line.

    Args:
        line: Raw OCR text for a single line.
        locale: Locale table supplying the confusion corrections.
        extra_confusions: Additional corrections applied after the locale's.

    Returns:
        The line with no whitespace, no circled digits and canonical glyphs.
        Empty input yields an empty string.

    Example:
        >>> normalize_line("攻撃カ + ⑤.⑧%")
        '攻撃力+5.8%'
    """
    if not line:
        return ""

    text = strip_whitespace(line)
    text = correct_confusions(text, load_locale(locale).confusions)
    if extra_confusions:
        text = correct_confusions(text, extra_confusions)
    return convert_circled_digits(text)
