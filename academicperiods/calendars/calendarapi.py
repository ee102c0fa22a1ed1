"""Calendar configuration API.

Public API for registering, inspecting and loading institution calendars.
Every function takes an optional ``registry``; when omitted the
process-wide ``default_registry`` is used. Nothing is registered
automatically: load a preset or a YAML file, or register a
CalendarConfig, before parsing.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from academicperiods.calendars.calendarconfig import (
    CalendarConfig,
    Diagnostic,
    calendar_from_dict,
)
from academicperiods.calendars.calendarregistry import CalendarRegistry, resolve_registry
from academicperiods.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)

logger = logging.getLogger(__name__)

CALENDARS_PATH_ENV = "ACADEMICPERIODS_CALENDARS_PATH"


def register_calendar(
    config: CalendarConfig,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> CalendarConfig:
    """Validate and register a calendar, replacing any prior one with the same id.

    Args:
        config: Calendar configuration
        registry: Registry to store into (default: process-wide registry)

    Returns:
        The validated configuration as stored

    Raises:
        InvalidCalendarConfigError: listing every violated rule

    Examples:
        >>> register_calendar(CalendarConfig(
        ...     "state_u",
        ...     [PeriodDefinition("Fall", "fa", 8, 23),
        ...      PeriodDefinition("Spring", "sp", 1, 15),
        ...      PeriodDefinition("Summer", "su", 6, 1)],
        ...     ay_start_period_name="Fall",
        ... ))
    """
    return resolve_registry(registry).register(config)


def get_calendar(calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> CalendarConfig:
    """Return the registered configuration or raise UnknownCalendarError."""
    return resolve_registry(registry).get(calendar_id)


def validate_calendar(
    calendar_id: str,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> List[Diagnostic]:
    """Audit a registered calendar.

    Re-runs the structural checks and lists months shared by several
    periods without an explicit mapping. The audit never changes the
    registry.

    Returns:
        List of ``Diagnostic(kind="ambiguous_month")`` (empty when clean)

    Examples:
        >>> load_preset("semester_jterm")  # month 1 mapped to Spring
        >>> validate_calendar("semester_jterm")
        []
        >>> validate_calendar("unmapped_jterm")
        [Diagnostic(kind='ambiguous_month', month=1, chosen=None,
                    alternatives=('J-Term', 'Spring'))]
    """
    return resolve_registry(registry).validate(calendar_id)


def set_month_mapping(
    calendar_id: str,
    month: int,
    period_name: str,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> CalendarConfig:
    """Map a month to one period for YYYYM parsing (add or overwrite)."""
    return resolve_registry(registry).set_month_mapping(calendar_id, month, period_name)


def list_calendars(*, registry: Optional[CalendarRegistry] = None) -> List[str]:
    """Registered calendar ids in registration order."""
    return resolve_registry(registry).list()


def remove_calendar(calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> None:
    """Drop a calendar; periods bound to it can no longer be used in calendar operations."""
    resolve_registry(registry).remove(calendar_id)


def list_periods(calendar_id: str, *, registry: Optional[CalendarRegistry] = None) -> pd.DataFrame:
    """List a calendar's period definitions in academic-year order.

    Returns:
        DataFrame with columns: cycle_position, term, name, code,
        start_month, start_day, year_offset

    Examples:
        >>> list_periods("semester")[["term", "name", "code"]]
           term    name code
        0     1    Fall   fa
        1     2  Spring   sp
        2     3  Summer   su
    """
    config = get_calendar(calendar_id, registry=registry)
    rows = [
        {
            "cycle_position": position,
            "term": position + 1,
            "name": definition.name,
            "code": definition.code,
            "start_month": definition.start_month,
            "start_day": definition.start_day,
            "year_offset": config.year_offsets[position],
        }
        for position, definition in enumerate(config.cycle)
    ]
    return pd.DataFrame(rows, columns=[
        "cycle_position", "term", "name", "code", "start_month", "start_day", "year_offset",
    ])


# ---- YAML calendars ----

def _calendar_entries(data: dict) -> List[dict]:
    """A YAML file holds either one calendar or a ``calendars:`` list."""
    if "calendars" in data:
        return list(data["calendars"] or [])
    return [data]


def load_calendar_file(
    path: Optional[Union[str, Path]] = None,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> List[str]:
    """Register every calendar defined in a YAML file.

    Args:
        path: YAML file. If None, ${ACADEMICPERIODS_CALENDARS_PATH} is used.
        registry: Registry to store into (default: process-wide registry)

    Returns:
        Calendar ids registered, in file order

    Raises:
        FileNotFoundError: if no file was given or found
        InvalidCalendarConfigError: if a calendar in the file is invalid;
            calendars earlier in the file stay registered

    Examples:
        >>> load_calendar_file("calendars.yaml")
        ['state_u', 'tech_quarters']
    """
    if path is None:
        found_path = find_data_file(
            module_file=__file__,
            filenames=[],
            env_var=CALENDARS_PATH_ENV,
            module_local_data=False,
        )
        if found_path is None:
            error_msg = format_not_found_error(
                what="calendar",
                searched_locations=[
                    ("Explicit path argument", "not given"),
                    (f"Environment variable {CALENDARS_PATH_ENV}", "not set or missing file"),
                ],
                fix_instructions=[
                    "Pass a YAML path: load_calendar_file('calendars.yaml')",
                    f"Or set {CALENDARS_PATH_ENV} to a YAML calendar file",
                    "Or register a preset: load_preset('semester')",
                ],
            )
            raise FileNotFoundError(error_msg)
        path = found_path

    data = load_yaml_file(Path(path))
    registered = []
    for entry in _calendar_entries(data):
        config = register_calendar(calendar_from_dict(entry), registry=registry)
        registered.append(config.calendar_id)

    logger.info(f"Loaded {len(registered)} calendars from {path}")
    return registered


# ---- Presets ----

@lru_cache(maxsize=1)
def _load_presets() -> dict:
    found_path = find_data_file(module_file=__file__, filenames=["presets.yaml"])
    if found_path is None:
        error_msg = format_not_found_error(
            what="preset calendar",
            searched_locations=[("Module-local data", Path(__file__).parent / "data")],
            fix_instructions=["Reinstall academicperiods; presets.yaml ships with the package."],
        )
        raise FileNotFoundError(error_msg)
    return load_yaml_file(found_path).get("presets", {})


def list_presets() -> pd.DataFrame:
    """List preset calendars shipped with the package.

    Returns:
        DataFrame with columns: preset, description, ay_start, periods
    """
    rows = [
        {
            "preset": name,
            "description": entry.get("description", ""),
            "ay_start": entry.get("ay_start"),
            "periods": len(entry.get("periods", [])),
        }
        for name, entry in _load_presets().items()
    ]
    return pd.DataFrame(rows, columns=["preset", "description", "ay_start", "periods"])


def load_preset(
    name: str,
    *,
    calendar_id: Optional[str] = None,
    registry: Optional[CalendarRegistry] = None,
) -> CalendarConfig:
    """Register a preset calendar.

    Args:
        name: Preset name ('semester', 'quarter', 'trimester', 'semester_jterm')
        calendar_id: Id to register under (default: the preset name)
        registry: Registry to store into (default: process-wide registry)

    Raises:
        KeyError: if the preset does not exist

    Examples:
        >>> load_preset("quarter", calendar_id="tech")
        >>> parse_period("wi27", "tech").ay_start
        2026
    """
    presets = _load_presets()
    if name not in presets:
        raise KeyError(f"Unknown preset {name!r}. Available: {', '.join(presets)}")
    config = calendar_from_dict(presets[name], calendar_id=calendar_id or name)
    return register_calendar(config, registry=registry)


__all__ = [
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
