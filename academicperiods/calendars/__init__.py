"""Calendar module: per-institution academic calendars.

Public API:
    register_calendar(config) -> CalendarConfig
    get_calendar(calendar_id) -> CalendarConfig
    validate_calendar(calendar_id) -> list[Diagnostic]
    set_month_mapping(calendar_id, month, period_name) -> CalendarConfig
    list_calendars() -> list[str]
    load_preset(name) / load_calendar_file(path)
"""

from academicperiods.calendars.calendarconfig import (
    PeriodDefinition,
    CalendarConfig,
    Diagnostic,
    calendar_from_dict,
)
from academicperiods.calendars.calendarregistry import (
    CalendarRegistry,
    default_registry,
)
from academicperiods.calendars.calendarapi import (
    register_calendar,
    get_calendar,
    validate_calendar,
    set_month_mapping,
    list_calendars,
    remove_calendar,
    list_periods,
    load_calendar_file,
    list_presets,
    load_preset,
)

__all__ = [
    "PeriodDefinition",
    "CalendarConfig",
    "Diagnostic",
    "calendar_from_dict",
    "CalendarRegistry",
    "default_registry",
    "register_calendar",
    "get_calendar",
    "validate_calendar",
    "set_month_mapping",
    "list_calendars",
    "remove_calendar",
    "list_periods",
    "load_calendar_file",
    "list_presets",
    "load_preset",
]
