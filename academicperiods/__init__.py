"""Academic Periods - calendar-aware academic period resolution

Public API for institution calendars and the academic periods they name.

Usage:
    from academicperiods import load_preset, parse_period, sequence

    # Register a calendar (Fall / Spring / Summer, AY starts in Fall)
    load_preset("semester")

    # Parse any supported encoding
    fa26 = parse_period("fa26", "semester")         # code
    fa26 = parse_period("20268", "semester")        # numeric YYYYM
    fa26 = parse_period("Fall 2026", "semester")    # text

    # Arithmetic and ordering
    fa26 + 1                                        # Spring 2027, AY 2026-27
    parse_period("fa27", "semester") - fa26         # 3
    sequence(fa26, parse_period("fa27", "semester"))

    # Formatting
    format_period(fa26, "key")                      # '26-27_20268_Fall'
"""

__version__ = "0.1.0"

# ============================================================================
# Calendar API
# ============================================================================

from .calendars.calendarconfig import (
    PeriodDefinition,        # One recurring period type (name, code, start month/day)
    CalendarConfig,          # Ordered periods + AY anchor + YYYYM policy
    Diagnostic,              # Non-fatal ambiguity finding
    calendar_from_dict,      # Build a CalendarConfig from plain data
)
from .calendars.calendarregistry import (
    CalendarRegistry,        # Injectable calendar store
    default_registry,        # Process-wide store used when none is passed
)
from .calendars.calendarapi import (
    register_calendar,       # Validate + store a calendar
    get_calendar,            # Look up a calendar by id
    validate_calendar,       # Audit a calendar (ambiguous months)
    set_month_mapping,       # Resolve an ambiguous month explicitly
    list_calendars,          # Registered ids
    remove_calendar,         # Drop a calendar
    list_periods,            # Period definitions as a DataFrame
    load_calendar_file,      # Register calendars from YAML
    list_presets,            # Preset calendars shipped with the package
    load_preset,             # Register a preset calendar
)

# ============================================================================
# Period API
# ============================================================================

from .period.periodinstance import PeriodInstance
from .period.periodapi import (
    PeriodResult,            # Per-element batch result
    parse_period,            # Primary API - classify and parse
    parse_period_result,     # Parse without raising, with diagnostics
    parse_auto,              # Same as parse_period
    parse_code,              # 'fa26'
    parse_numeric,           # '20268', '202610'
    parse_text,              # 'Fall 2026'
    parse_periods,           # Batch parse
    results_to_frame,        # Batch results as a DataFrame
)
from .period.periodalgebra import (
    add,
    subtract,
    difference,
    sequence,
    period_term,
    period_for_date,
    current_period,
)
from .period.periodformat import (
    format_period,           # Fixed formats: key, code, numeric, text, ...
    accessor_values,         # Placeholder values for display templates
    render,                  # '{name} {year}' style templates
)
from .period.periodresolver import resolve

from .exceptions import (
    AcademicPeriodError,
    InvalidCalendarConfigError,
    UnknownCalendarError,
    UnknownCodeError,
    UnknownPeriodNameError,
    UnrecognizedFormatError,
    InvalidNumericFormatError,
    InvalidMonthError,
    NoPeriodForMonthError,
    AmbiguousYYYYMError,
    IncompatibleCalendarError,
    InvalidStepError,
    PeriodOutOfRangeError,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "load_preset",          # Register a preset calendar
    "register_calendar",    # Register a custom calendar
    "parse_period",         # Parse period text -> PeriodInstance
    "parse_periods",        # Batch parse -> list[PeriodResult]
    "format_period",        # PeriodInstance -> text

    # ========================================================================
    # Calendars
    # ========================================================================
    "PeriodDefinition",
    "CalendarConfig",
    "Diagnostic",
    "calendar_from_dict",
    "CalendarRegistry",
    "default_registry",
    "get_calendar",
    "validate_calendar",
    "set_month_mapping",
    "list_calendars",
    "remove_calendar",
    "list_periods",
    "load_calendar_file",
    "list_presets",

    # ========================================================================
    # Periods
    # ========================================================================
    "PeriodInstance",
    "PeriodResult",
    "parse_period_result",
    "parse_auto",
    "parse_code",
    "parse_numeric",
    "parse_text",
    "results_to_frame",
    "add",
    "subtract",
    "difference",
    "sequence",
    "period_term",
    "period_for_date",
    "current_period",
    "accessor_values",
    "render",
    "resolve",

    # ========================================================================
    # Errors
    # ========================================================================
    "AcademicPeriodError",
    "InvalidCalendarConfigError",
    "UnknownCalendarError",
    "UnknownCodeError",
    "UnknownPeriodNameError",
    "UnrecognizedFormatError",
    "InvalidNumericFormatError",
    "InvalidMonthError",
    "NoPeriodForMonthError",
    "AmbiguousYYYYMError",
    "IncompatibleCalendarError",
    "InvalidStepError",
    "PeriodOutOfRangeError",
]
