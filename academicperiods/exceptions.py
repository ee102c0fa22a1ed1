"""
Typed Exception Hierarchy for academic period resolution.

Every error raised by this package is an input or configuration defect:
none of them are transient, and nothing in the package retries. Callers
decide what to do (fix the calendar, re-parse, skip the record).

    AcademicPeriodError (base)
    |
    +-- CalendarError
    |   +-- InvalidCalendarConfigError
    |   +-- UnknownCalendarError
    |
    +-- PeriodParseError
    |   +-- UnknownCodeError
    |   +-- UnknownPeriodNameError
    |   +-- UnrecognizedFormatError
    |   +-- InvalidNumericFormatError
    |   +-- InvalidMonthError
    |   +-- NoPeriodForMonthError
    |   +-- AmbiguousYYYYMError
    |
    +-- PeriodAlgebraError
        +-- IncompatibleCalendarError
        +-- InvalidStepError
        +-- PeriodOutOfRangeError

Each class carries a machine-readable ``code`` class attribute and keeps
its context as attributes, so callers never need to parse messages:

    try:
        parse_period("20271", "state_u")
    except AmbiguousYYYYMError as e:
        print(e.code, e.month, e.candidates)
"""

from typing import Iterable, List, Optional


class AcademicPeriodError(Exception):
    """Base exception for all academic period errors."""

    code: str = "ACADEMIC_PERIOD_ERROR"


# Calendar configuration / registry


class CalendarError(AcademicPeriodError):
    """Base exception for calendar configuration and registry errors."""

    code: str = "CALENDAR_ERROR"


class InvalidCalendarConfigError(CalendarError):
    """Calendar configuration violates one or more structural rules.

    ``violations`` lists every rule that failed, not just the first.
    """

    code: str = "INVALID_CALENDAR_CONFIG"

    def __init__(self, calendar_id: Optional[str], violations: Iterable[str]):
        self.calendar_id = calendar_id
        self.violations: List[str] = list(violations)
        details = "; ".join(self.violations)
        super().__init__(f"Invalid calendar configuration {calendar_id!r}: {details}")


class UnknownCalendarError(CalendarError):
    """No calendar registered under the given id."""

    code: str = "UNKNOWN_CALENDAR"

    def __init__(self, calendar_id: str):
        self.calendar_id = calendar_id
        super().__init__(f"Unknown calendar: {calendar_id!r}")


# Parsing


class PeriodParseError(AcademicPeriodError):
    """Base exception for errors raised while parsing period text."""

    code: str = "PERIOD_PARSE_ERROR"


class UnknownCodeError(PeriodParseError):
    """Two-letter period code is not defined in the calendar."""

    code: str = "UNKNOWN_CODE"

    def __init__(self, period_code: str, calendar_id: str):
        self.period_code = period_code
        self.calendar_id = calendar_id
        super().__init__(f"Unknown period code {period_code!r} in calendar {calendar_id!r}")


class UnknownPeriodNameError(PeriodParseError):
    """Period name is not defined in the calendar."""

    code: str = "UNKNOWN_PERIOD_NAME"

    def __init__(self, name: str, calendar_id: str, suggestion: Optional[str] = None):
        self.name = name
        self.calendar_id = calendar_id
        self.suggestion = suggestion
        message = f"Unknown period name {name!r} in calendar {calendar_id!r}"
        if suggestion:
            message += f" (did you mean {suggestion!r}?)"
        super().__init__(message)


class UnrecognizedFormatError(PeriodParseError):
    """Input matches none of the code, numeric or text encodings."""

    code: str = "UNRECOGNIZED_FORMAT"

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Unrecognized period format: {raw!r}")


class InvalidNumericFormatError(PeriodParseError):
    """Numeric (YYYYM / YYYYMM) input is malformed."""

    code: str = "INVALID_NUMERIC_FORMAT"

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid numeric period {raw!r}: {reason}")


class InvalidMonthError(PeriodParseError):
    """Month is outside 1-12."""

    code: str = "INVALID_MONTH"

    def __init__(self, month: int):
        self.month = month
        super().__init__(f"Invalid month: {month} (expected 1-12)")


class NoPeriodForMonthError(PeriodParseError):
    """No period in the calendar starts in the given month."""

    code: str = "NO_PERIOD_FOR_MONTH"

    def __init__(self, month: int, calendar_id: Optional[str] = None):
        self.month = month
        self.calendar_id = calendar_id
        super().__init__(f"No period starts in month {month} in calendar {calendar_id!r}")


class AmbiguousYYYYMError(PeriodParseError):
    """Several periods start in the month and the calendar is strict."""

    code: str = "AMBIGUOUS_YYYYM"

    def __init__(self, month: int, candidates: Iterable[str]):
        self.month = month
        self.candidates: List[str] = list(candidates)
        super().__init__(
            f"Month {month} is ambiguous: {', '.join(self.candidates)} all start in it; "
            f"add a month mapping or disable yyyym_strict"
        )


# Algebra


class PeriodAlgebraError(AcademicPeriodError):
    """Base exception for period arithmetic and sequencing errors."""

    code: str = "PERIOD_ALGEBRA_ERROR"


class IncompatibleCalendarError(PeriodAlgebraError):
    """Operation needs both periods to come from the same calendar."""

    code: str = "INCOMPATIBLE_CALENDAR"

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"Periods belong to different calendars: {left!r} vs {right!r}")


class InvalidStepError(PeriodAlgebraError):
    """Sequence step of zero."""

    code: str = "INVALID_STEP"

    def __init__(self, step: int):
        self.step = step
        super().__init__(f"Sequence step must be non-zero, got {step}")


class PeriodOutOfRangeError(PeriodAlgebraError):
    """Arithmetic moved a period outside calendar years 1-9999."""

    code: str = "PERIOD_OUT_OF_RANGE"

    def __init__(self, year: int):
        self.year = year
        super().__init__(f"Period year {year} is outside the supported range 1-9999")


__all__ = [
    "AcademicPeriodError",
    "CalendarError",
    "InvalidCalendarConfigError",
    "UnknownCalendarError",
    "PeriodParseError",
    "UnknownCodeError",
    "UnknownPeriodNameError",
    "UnrecognizedFormatError",
    "InvalidNumericFormatError",
    "InvalidMonthError",
    "NoPeriodForMonthError",
    "AmbiguousYYYYMError",
    "PeriodAlgebraError",
    "IncompatibleCalendarError",
    "InvalidStepError",
    "PeriodOutOfRangeError",
]
