"""Period parsing API.

Public API for turning code, numeric and text encodings into
PeriodInstance objects against a registered calendar, one at a time or in
batches.

Batch functions resolve the calendar once and parse every element against
that snapshot. Each element gets its own PeriodResult (period or error,
plus diagnostics) at the same position as its input; one bad element never
hides the others.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from academicperiods.calendars.calendarconfig import CalendarConfig, Diagnostic
from academicperiods.calendars.calendarregistry import CalendarRegistry, resolve_registry
from academicperiods.exceptions import PeriodParseError
from academicperiods.period import periodidentity
from academicperiods.period.periodformat import format_period
from academicperiods.period.periodinstance import PeriodInstance


@dataclass(frozen=True)
class PeriodResult:
    """Outcome of parsing one raw input."""

    raw: object
    period: Optional[PeriodInstance] = None
    error: Optional[PeriodParseError] = None
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None


def _parser_for(kind: str):
    try:
        return periodidentity.PARSERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown parse kind: {kind!r}. Use one of: {', '.join(periodidentity.PARSERS)}"
        ) from None


def _parse_one(raw, config: CalendarConfig, parser) -> PeriodResult:
    try:
        matched = parser(raw, config)
    except PeriodParseError as e:
        return PeriodResult(raw=raw, error=e)
    return PeriodResult(raw=raw, period=matched.period, diagnostics=matched.diagnostics)


def parse_period_result(
    raw: str,
    calendar_id: str,
    *,
    kind: str = "auto",
    registry: Optional[CalendarRegistry] = None,
) -> PeriodResult:
    """Parse one input without raising parse errors.

    Use this instead of parse_period when the diagnostics of a defaulted
    ambiguous month are needed.

    Raises:
        UnknownCalendarError: if the calendar is not registered
        ValueError: unknown kind
    """
    parser = _parser_for(kind)
    config = resolve_registry(registry).get(calendar_id)
    return _parse_one(raw, config, parser)


def parse_period(
    raw: str,
    calendar_id: str,
    *,
    kind: str = "auto",
    registry: Optional[CalendarRegistry] = None,
) -> PeriodInstance:
    """
    Parse period text into a PeriodInstance.

    Supports:
      - Code: "fa26", "SP27" (two-letter code + 2-digit year, 20YY)
      - Numeric: "20268", "202610" (year + start month)
      - Text: "Fall 2026", "2026-fall", "J-Term, 2027"

    Args:
        raw: Period text
        calendar_id: Registered calendar id
        kind: "auto" (classify), "code", "numeric" or "text"
        registry: Registry to read from (default: process-wide registry)

    Returns:
        PeriodInstance

    Raises:
        UnknownCalendarError, UnrecognizedFormatError, UnknownCodeError,
        UnknownPeriodNameError, InvalidNumericFormatError, InvalidMonthError,
        NoPeriodForMonthError, AmbiguousYYYYMError

    Examples:
        >>> parse_period("20268", "state_u")
        PeriodInstance(name='Fall', code='fa', year=2026,
                       start_date=datetime.date(2026, 8, 23),
                       ay_start=2026, ay_end=2027, calendar_id='state_u')

        >>> parse_period("Spring 2027", "state_u").ay
        '2026-27'
    """
    result = parse_period_result(raw, calendar_id, kind=kind, registry=registry)
    if result.error is not None:
        raise result.error
    return result.period


def parse_auto(raw: str, calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    """Classify the encoding, then parse, e.g. 'fa26', '20268' or 'Fall 2026'."""
    return parse_period(raw, calendar_id, kind="auto", registry=registry)


def parse_code(raw: str, calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    """Parse code format only, e.g. 'fa26'."""
    return parse_period(raw, calendar_id, kind="code", registry=registry)


def parse_numeric(raw: str, calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    """Parse numeric format only, e.g. '20268' or '202610'."""
    return parse_period(raw, calendar_id, kind="numeric", registry=registry)


def parse_text(raw: str, calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    """Parse text format only, e.g. 'Fall 2026'."""
    return parse_period(raw, calendar_id, kind="text", registry=registry)


def parse_periods(
    raws: Iterable[str],
    calendar_id: str,
    *,
    kind: str = "auto",
    registry: Optional[CalendarRegistry] = None,
) -> List[PeriodResult]:
    """Batch parse against one calendar snapshot.

    Args:
        raws: Iterable of raw inputs
        calendar_id: Registered calendar id
        kind: "auto", "code", "numeric" or "text"

    Returns:
        One PeriodResult per input, in input order

    Raises:
        UnknownCalendarError: if the calendar is not registered (nothing is parsed)

    Examples:
        >>> results = parse_periods(["fa26", "xx99", "Spring 2027"], "state_u")
        >>> [r.ok for r in results]
        [True, False, True]
        >>> type(results[1].error).__name__
        'UnknownCodeError'
    """
    parser = _parser_for(kind)
    config = resolve_registry(registry).get(calendar_id)
    return [_parse_one(raw, config, parser) for raw in raws]


def results_to_frame(results: Iterable[PeriodResult]) -> pd.DataFrame:
    """Tabulate batch results.

    Returns:
        DataFrame with one row per result: raw, ok, name, code, year,
        start_date, ay_start, ay_end, calendar_id, numeric, error, error_code,
        warnings. Period columns are None for failed rows.
    """
    columns = [
        "raw", "ok", "name", "code", "year", "start_date", "ay_start", "ay_end",
        "calendar_id", "numeric", "error", "error_code", "warnings",
    ]
    rows = []
    for result in results:
        period = result.period
        rows.append({
            "raw": result.raw,
            "ok": result.ok,
            "name": period.name if period else None,
            "code": period.code if period else None,
            "year": period.year if period else None,
            "start_date": period.start_date if period else None,
            "ay_start": period.ay_start if period else None,
            "ay_end": period.ay_end if period else None,
            "calendar_id": period.calendar_id if period else None,
            "numeric": format_period(period, "numeric") if period else None,
            "error": str(result.error) if result.error else None,
            "error_code": result.error.code if result.error else None,
            "warnings": "; ".join(d.message for d in result.diagnostics) or None,
        })
    return pd.DataFrame(rows, columns=columns)


__all__ = [
    "PeriodResult",
    "parse_period",
    "parse_period_result",
    "parse_auto",
    "parse_code",
    "parse_numeric",
    "parse_text",
    "parse_periods",
    "results_to_frame",
]
