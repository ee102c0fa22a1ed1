"""Period module for academic period resolution.

This module parses code, numeric and text encodings of academic periods
against a registered calendar, and provides arithmetic, sequencing,
ordering and formatting over the resulting PeriodInstance objects.

Public API:
    parse_period(raw, calendar_id) -> PeriodInstance
        Classify and parse a single input

    parse_periods(raws, calendar_id) -> list[PeriodResult]
        Batch parse with per-element results

    add / subtract / difference / sequence / period_term
        Period arithmetic within one calendar

    format_period(period, kind) -> str
        Fixed output formats (key, code, numeric, text, ...)

Examples:
    >>> from academicperiods.period import parse_period, sequence
    >>>
    >>> fa26 = parse_period("fa26", "state_u")
    >>> (fa26 + 1).name
    'Spring'
    >>>
    >>> [str(p) for p in sequence(fa26, parse_period("Fall 2027", "state_u"))]
    ['Fall 2026', 'Spring 2027', 'Summer 2027', 'Fall 2027']
"""

from academicperiods.period.periodinstance import PeriodInstance
from academicperiods.period.periodapi import (
    PeriodResult,
    parse_period,
    parse_period_result,
    parse_auto,
    parse_code,
    parse_numeric,
    parse_text,
    parse_periods,
    results_to_frame,
)
from academicperiods.period.periodalgebra import (
    add,
    subtract,
    difference,
    sequence,
    period_term,
    cycle_position,
    absolute_index,
    period_for_date,
    current_period,
)
from academicperiods.period.periodformat import (
    FORMAT_KINDS,
    accessor_values,
    format_period,
    render,
)
from academicperiods.period.periodresolver import resolve

__all__ = [
    "PeriodInstance",
    "PeriodResult",
    "parse_period",
    "parse_period_result",
    "parse_auto",
    "parse_code",
    "parse_numeric",
    "parse_text",
    "parse_periods",
    "results_to_frame",
    "add",
    "subtract",
    "difference",
    "sequence",
    "period_term",
    "cycle_position",
    "absolute_index",
    "period_for_date",
    "current_period",
    "FORMAT_KINDS",
    "accessor_values",
    "format_period",
    "render",
    "resolve",
]
