"""Period Text Normalization
---------------------------

Utility functions for normalizing period text before parsing.

Examples:
  >>> normalize_period_text("Fall 2026")
  'fall 2026'

  >>> normalize_period_text("2026_Fall")
  '2026 fall'

  >>> normalize_period_text(" J-Term, 2027 ")
  'j term 2027'
"""

import re
from typing import Optional, Tuple

from academicperiods.utils.normalize import normalize_text

CODE_PATTERN = re.compile(r"[A-Za-z]{2}[0-9]{2}")
NUMERIC_PATTERN = re.compile(r"[0-9]{5,6}")
YEAR_TOKEN_PATTERN = re.compile(r"[0-9]{4}")


def normalize_period_text(text: str) -> str:
    """
    Normalize period text for consistent parsing.

    Transformations:
      - Strip whitespace
      - Lowercase
      - Normalize Unicode (NFC)
      - Normalize dashes (—, –, − → -)
      - Collapse runs of separators (space, comma, hyphen, underscore) to one space

    Args:
        text: Raw period text (e.g., "Fall 2026", "2026-fall")

    Returns:
        Normalized text for parsing

    Examples:
        >>> normalize_period_text("Fall  2026")
        'fall 2026'

        >>> normalize_period_text("SPRING,2027")
        'spring 2027'

        >>> normalize_period_text("Summer–2027")
        'summer 2027'
    """
    return normalize_text(text)


def normalize_period_name(name: str) -> str:
    """Normalize a period definition name the same way input text is normalized.

    Examples:
        >>> normalize_period_name("J-Term")
        'j term'
    """
    return normalize_period_text(name)


def split_name_year(text: str) -> Tuple[Optional[str], Optional[int]]:
    """
    Split normalized text into a name part and a 4-digit year.

    The year must be the first or the last token; the remaining tokens
    form the name.

    Args:
        text: Normalized period text

    Returns:
        (name, year) tuple or (None, None) if there is no year token at
        either end, or nothing left for the name

    Examples:
        >>> split_name_year("fall 2026")
        ('fall', 2026)

        >>> split_name_year("2027 j term")
        ('j term', 2027)

        >>> split_name_year("fall")
        (None, None)
    """
    tokens = text.split(" ") if text else []
    if len(tokens) < 2:
        return (None, None)

    if YEAR_TOKEN_PATTERN.fullmatch(tokens[-1]):
        return (" ".join(tokens[:-1]), int(tokens[-1]))

    if YEAR_TOKEN_PATTERN.fullmatch(tokens[0]):
        return (" ".join(tokens[1:]), int(tokens[0]))

    return (None, None)


def is_code_format(text: str) -> bool:
    """Two ASCII letters followed by two digits, e.g. 'fa26'."""
    return bool(CODE_PATTERN.fullmatch(text))


def is_numeric_format(text: str) -> bool:
    """Five or six ASCII digits, e.g. '20268' or '202610'."""
    return bool(NUMERIC_PATTERN.fullmatch(text))


__all__ = [
    "normalize_period_text",
    "normalize_period_name",
    "split_name_year",
    "is_code_format",
    "is_numeric_format",
]
