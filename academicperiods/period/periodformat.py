"""Period Formatting
-----------------

Accessor values for display placeholders, the fixed output formats, and a
simple placeholder renderer.

Fixed formats (for Fall 2026 in a Fall/Spring/Summer calendar):
    key         26-27_20268_Fall
    code        fa26
    numeric     20268           (month unpadded for 1-9, two digits for 10-12)
    text        Fall 2026
    ay_term     2026-27 T1
    iso_date    2026-08-23
    year_month  2026-08

``code`` and ``numeric`` are the inverse of the code and numeric parsers,
so formatting then parsing returns the same period (numeric only when the
start month resolves back to the same period).
"""

from typing import Dict, Optional

from academicperiods.calendars.calendarregistry import CalendarRegistry
from academicperiods.period.periodalgebra import period_term
from academicperiods.period.periodinstance import PeriodInstance

FORMAT_KINDS = ("key", "code", "numeric", "text", "ay_term", "iso_date", "year_month")


def accessor_values(
    period: PeriodInstance,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> Dict[str, object]:
    """
    Values for every display placeholder.

    Examples:
        >>> accessor_values(parse_period("sp27", "state_u"))
        {'ay': '2026-27', 'ay_short': '26-27', 'ay_long': '2026-2027',
         'ay_start': 2026, 'ay_end': 2027, 'name': 'Spring', 'code': 'sp',
         'year': 2027, 'term': 2, 'month': 1, 'month_pad': '01',
         'date': '2027-01-15', 'year_month': '2027-01'}
    """
    start = period.start_date
    return {
        "ay": period.ay,
        "ay_short": f"{period.ay_start % 100:02d}-{period.ay_end % 100:02d}",
        "ay_long": f"{period.ay_start}-{period.ay_end}",
        "ay_start": period.ay_start,
        "ay_end": period.ay_end,
        "name": period.name,
        "code": period.code,
        "year": period.year,
        "term": period_term(period, registry=registry),
        "month": start.month,
        "month_pad": f"{start.month:02d}",
        "date": start.isoformat(),
        "year_month": f"{start.year:04d}-{start.month:02d}",
    }


def _numeric(period: PeriodInstance) -> str:
    return f"{period.year:04d}{period.start_date.month}"


def format_period(
    period: PeriodInstance,
    kind: str = "text",
    *,
    registry: Optional[CalendarRegistry] = None,
) -> str:
    """
    Format a period in one of the fixed formats.

    Args:
        period: Period instance
        kind: One of key, code, numeric, text, ay_term, iso_date, year_month

    Raises:
        ValueError: unknown kind

    Examples:
        >>> format_period(fa26, "numeric")
        '20268'
        >>> format_period(fa26, "key")
        '26-27_20268_Fall'
    """
    if kind not in FORMAT_KINDS:
        raise ValueError(f"Unknown format kind: {kind!r}. Use one of: {', '.join(FORMAT_KINDS)}")

    if kind == "code":
        return f"{period.code.lower()}{period.year % 100:02d}"
    if kind == "numeric":
        return _numeric(period)
    if kind == "text":
        return f"{period.name} {period.year}"
    if kind == "iso_date":
        return period.start_date.isoformat()
    if kind == "year_month":
        return f"{period.year:04d}-{period.start_date.month:02d}"

    values = accessor_values(period, registry=registry)
    if kind == "key":
        return f"{values['ay_short']}_{_numeric(period)}_{period.name}"
    return f"{values['ay']} T{values['term']}"


def render(
    period: PeriodInstance,
    template: str,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> str:
    """
    Substitute ``{placeholder}`` fields in ``template``.

    Raises:
        KeyError: unknown placeholder

    Examples:
        >>> render(fa26, "{name} term {term}, AY {ay_long}")
        'Fall term 1, AY 2026-2027'
    """
    return template.format_map(accessor_values(period, registry=registry))


__all__ = [
    "FORMAT_KINDS",
    "accessor_values",
    "format_period",
    "render",
]
