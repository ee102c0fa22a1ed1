"""Shared text normalization utilities.

Calendar validation and the text parser both compare period names through
``normalize_text``, so two names that fold to the same key can never be
registered side by side.
"""

import re
import unicodedata

# em dash, en dash, minus sign, figure dash
_DASHES = ("—", "–", "−", "‒")

# Separators treated as one delimiter: space, comma, hyphen, underscore
_SEPARATORS = re.compile(r"[\s,\-_]+")


def normalize_text(s: str) -> str:
    """Lowercase, NFC-normalize, fold dashes and collapse separators to one space.

    Examples:
        >>> normalize_text(" J-Term, 2027 ")
        'j term 2027'

        >>> normalize_text("J_TERM")
        'j term'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFC", s.strip().lower())
    for dash in _DASHES:
        s = s.replace(dash, "-")

    return _SEPARATORS.sub(" ", s).strip()


__all__ = [
    "normalize_text",
]
