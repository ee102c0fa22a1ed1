"""Period Format Parsing
---------------------

Parsers for the three period encodings, plus the dispatcher that
classifies raw input and delegates:

  - Code:    "fa26"            two-letter period code + 2-digit year (20YY)
  - Numeric: "20268", "202610" 4-digit year + start month (YYYYM / YYYYMM)
  - Text:    "Fall 2026", "2026_fall", "J-Term, 2027"

Each parser works against one CalendarConfig snapshot and either returns a
``Matched`` outcome or raises a PeriodParseError. The dispatcher is an
ordered chain of matchers; each matcher returns ``Matched``, ``NO_MATCH``
(input does not look like its encoding) or ``Failed`` (it does, but is
invalid). The first outcome that is not ``NO_MATCH`` wins.

Dispatch order:
  1. Exactly 2 ASCII letters + 2 digits  -> code parser
  2. 5 or 6 ASCII digits                  -> numeric parser
  3. Known period name + 4-digit year     -> text parser
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from academicperiods.calendars.calendarconfig import CalendarConfig, Diagnostic, PeriodDefinition
from academicperiods.exceptions import (
    InvalidMonthError,
    InvalidNumericFormatError,
    PeriodParseError,
    UnknownCodeError,
    UnknownPeriodNameError,
    UnrecognizedFormatError,
)
from academicperiods.period.periodinstance import PeriodInstance, build_instance
from academicperiods.period.periodnormalize import (
    is_code_format,
    is_numeric_format,
    normalize_period_name,
    normalize_period_text,
    split_name_year,
)
from academicperiods.period.periodresolver import resolve

logger = logging.getLogger(__name__)

# Minimum WRatio score for a "did you mean" suggestion
SUGGESTION_THRESHOLD = 80


# ---- Tagged outcomes ----

@dataclass(frozen=True)
class Matched:
    period: PeriodInstance
    diagnostics: Tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class Failed:
    error: PeriodParseError


class _NoMatch:
    def __repr__(self):
        return "NO_MATCH"


NO_MATCH = _NoMatch()

Outcome = Union[Matched, Failed, _NoMatch]


def _clean(raw) -> str:
    if not isinstance(raw, str):
        raise UnrecognizedFormatError(raw)
    return raw.strip()


# ---- Code parser ----

def parse_code(raw: str, config: CalendarConfig) -> Matched:
    """
    Parse code format: 2-letter period code + 2-digit year.

    The year is 2000 + the two digits; the code is matched case-insensitively.

    Raises:
        UnrecognizedFormatError: not 2 letters + 2 digits
        UnknownCodeError: code not defined in the calendar

    Examples:
        >>> parse_code("fa26", state_u).period
        PeriodInstance(name='Fall', code='fa', year=2026, ...,
                       ay_start=2026, ay_end=2027, calendar_id='state_u')

        >>> parse_code("SP27", state_u).period.ay_start
        2026
    """
    text = _clean(raw)
    if not is_code_format(text):
        raise UnrecognizedFormatError(raw)

    definition = config.definition_by_code(text[:2])
    if definition is None:
        raise UnknownCodeError(text[:2], config.calendar_id)

    year = 2000 + int(text[2:])
    return Matched(build_instance(config, definition, year))


# ---- Numeric parser ----

def _split_numeric(raw, text: str) -> Tuple[int, int]:
    """Validate YYYYM / YYYYMM text and return (year, month)."""
    if not text.isascii() or not text.isdigit():
        raise InvalidNumericFormatError(raw, "expected only digits")
    if len(text) not in (5, 6):
        raise InvalidNumericFormatError(raw, f"expected 5 or 6 digits, got {len(text)}")

    year = int(text[:4])
    if year < 1:
        raise InvalidNumericFormatError(raw, "year must be 0001 or later")

    month_part = text[4:]
    if len(month_part) == 2 and month_part.startswith("0"):
        raise InvalidNumericFormatError(raw, "months 1-9 must use the 5-digit form (YYYYM)")

    month = int(month_part)
    if len(month_part) == 1 and month == 0:
        raise InvalidMonthError(month)
    if len(month_part) == 2 and not 10 <= month <= 12:
        raise InvalidMonthError(month)

    return year, month


def parse_numeric(raw: str, config: CalendarConfig) -> Matched:
    """
    Parse numeric format: 4-digit year + start month (1-9 as one digit, 10-12 as two).

    The month is resolved to a period with the ambiguity resolver. A
    defaulted ambiguous month is logged as a warning and attached to the
    outcome as a Diagnostic.

    Raises:
        InvalidNumericFormatError: wrong length, non-digits, or zero-padded month
        InvalidMonthError: month 0 or 13-99
        NoPeriodForMonthError: no period starts in the month
        AmbiguousYYYYMError: ambiguous month in a strict calendar

    Examples:
        >>> parse_numeric("20268", state_u).period.name
        'Fall'

        >>> parse_numeric("202608", state_u)
        Traceback (most recent call last):
        InvalidNumericFormatError: ...
    """
    text = _clean(raw)
    year, month = _split_numeric(raw, text)

    definition, diagnostic = resolve(config, month)
    diagnostics = ()
    if diagnostic is not None:
        logger.warning(f"{raw!r} in calendar {config.calendar_id!r}: {diagnostic.message}")
        diagnostics = (diagnostic,)

    return Matched(build_instance(config, definition, year), diagnostics)


# ---- Text parser ----

def _definition_by_normalized_name(config: CalendarConfig, name: str) -> Optional[PeriodDefinition]:
    for definition in config.periods:
        if normalize_period_name(definition.name) == name:
            return definition
    return None


def suggest_period_name(name: str, config: CalendarConfig) -> Optional[str]:
    """
    Closest defined period name, for error messages.

    Uses RapidFuzz WRatio against the calendar's period names.

    Examples:
        >>> suggest_period_name("fal", state_u)
        'Fall'

        >>> suggest_period_name("xyz", state_u) is None
        True
    """
    choices = {d.name: normalize_period_name(d.name) for d in config.periods}
    match = process.extractOne(
        name,
        choices,
        scorer=fuzz.WRatio,
        score_cutoff=SUGGESTION_THRESHOLD,
    )
    if match is None:
        return None
    # extractOne on a dict returns (value, score, key)
    return match[2]


def parse_text(raw: str, config: CalendarConfig) -> Matched:
    """
    Parse text format: period name and 4-digit year, in either order.

    Separators (space, comma, hyphen, underscore) are interchangeable and
    names match case-insensitively.

    Raises:
        UnrecognizedFormatError: no 4-digit year at either end, or no name
        UnknownPeriodNameError: name not defined in the calendar

    Examples:
        >>> parse_text("Fall 2026", state_u).period.code
        'fa'

        >>> parse_text("2027_spring", state_u).period.start_date
        datetime.date(2027, 1, 15)
    """
    text = normalize_period_text(_clean(raw))
    name, year = split_name_year(text)
    if name is None or year < 1:
        raise UnrecognizedFormatError(raw)

    definition = _definition_by_normalized_name(config, name)
    if definition is None:
        raise UnknownPeriodNameError(
            name, config.calendar_id, suggestion=suggest_period_name(name, config)
        )

    return Matched(build_instance(config, definition, year))


# ---- Auto dispatch ----

def _attempt(parser, raw, config) -> Outcome:
    try:
        return parser(raw, config)
    except PeriodParseError as e:
        return Failed(e)


def match_code(raw: str, config: CalendarConfig) -> Outcome:
    if not is_code_format(raw):
        return NO_MATCH
    return _attempt(parse_code, raw, config)


def match_numeric(raw: str, config: CalendarConfig) -> Outcome:
    if not is_numeric_format(raw):
        return NO_MATCH
    return _attempt(parse_numeric, raw, config)


def match_text(raw: str, config: CalendarConfig) -> Outcome:
    name, year = split_name_year(normalize_period_text(raw))
    if name is None or _definition_by_normalized_name(config, name) is None:
        return NO_MATCH
    return _attempt(parse_text, raw, config)


MATCHERS = (
    ("code", match_code),
    ("numeric", match_numeric),
    ("text", match_text),
)


def dispatch(raw, config: CalendarConfig) -> Union[Matched, Failed]:
    """
    Run the matcher chain and return the first decisive outcome.

    Never raises for bad input: unrecognized input comes back as
    ``Failed(UnrecognizedFormatError)``.
    """
    if not isinstance(raw, str):
        return Failed(UnrecognizedFormatError(raw))

    text = raw.strip()
    for kind, matcher in MATCHERS:
        outcome = matcher(text, config)
        if outcome is not NO_MATCH:
            logger.debug(f"{raw!r} classified as {kind} format")
            return outcome

    return Failed(UnrecognizedFormatError(raw))


def parse_auto(raw: str, config: CalendarConfig) -> Matched:
    """
    Classify ``raw`` and parse it with the matching parser.

    Raises:
        UnrecognizedFormatError: if no encoding matches
        PeriodParseError: whatever the delegated parser raises

    Examples:
        >>> parse_auto("fa26", state_u).period == parse_auto("Fall 2026", state_u).period
        True
    """
    outcome = dispatch(raw, config)
    if isinstance(outcome, Failed):
        raise outcome.error
    return outcome


PARSERS = {
    "auto": parse_auto,
    "code": parse_code,
    "numeric": parse_numeric,
    "text": parse_text,
}


__all__ = [
    "Matched",
    "Failed",
    "NO_MATCH",
    "parse_code",
    "parse_numeric",
    "parse_text",
    "parse_auto",
    "dispatch",
    "suggest_period_name",
    "PARSERS",
]
