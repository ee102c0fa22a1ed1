"""Calendar Configuration
----------------------

Immutable calendar model: an ordered set of period definitions, an
academic-year anchor and the policy used to resolve ambiguous months.

A calendar is plain data until it is validated. ``prepare_calendar``
collects every structural violation at once, then primes the derived
views the parsers and the algebra read many times:

  - cyclic order: definitions rotated so the AY-start period comes first
  - year offsets: 0 for periods in the AY-start calendar year, 1 for
    periods in the following calendar year. The offset steps up where
    start dates wrap past the year end in cycle order; for the usual
    calendars this equals "every period after the AY-start one is offset
    1", and it keeps Spring-anchored or Fall/Late-Fall calendars in
    chronological order
  - month index: definitions grouped by start month, insertion order kept

Example:
    >>> fall = PeriodDefinition("Fall", "fa", 8, 23)
    >>> spring = PeriodDefinition("Spring", "sp", 1, 15)
    >>> summer = PeriodDefinition("Summer", "su", 6, 1)
    >>> cal = prepare_calendar(CalendarConfig("state_u", [fall, spring, summer], "Fall"))
    >>> [d.name for d in cal.cycle]
    ['Fall', 'Spring', 'Summer']
    >>> cal.year_offsets
    (0, 1, 1)
"""

from __future__ import annotations

import calendar as _stdcalendar
import re
from dataclasses import dataclass, field, replace
from functools import cached_property
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from academicperiods.exceptions import InvalidCalendarConfigError
from academicperiods.utils.normalize import normalize_text

# Any non-leap year works; start days are validated against it so 29 Feb
# never becomes a start date.
REFERENCE_YEAR = 2001

_CODE_PATTERN = re.compile(r"[A-Za-z]{2}")


@dataclass(frozen=True)
class PeriodDefinition:
    """One recurring period type of a calendar (e.g. Fall, starting 23 Aug)."""

    name: str
    code: str
    start_month: int
    start_day: int

    @property
    def month_day(self) -> Tuple[int, int]:
        return (self.start_month, self.start_day)


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal finding attached to a result or returned by an audit.

    kind is ``ambiguous_month`` (configuration audit) or
    ``ambiguous_month_defaulted`` (a YYYYM parse picked the first candidate).
    """

    kind: str
    month: int
    chosen: Optional[str] = None
    alternatives: Tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if self.chosen is None:
            return (
                f"month {self.month} is shared by {', '.join(self.alternatives)} "
                f"and has no explicit mapping"
            )
        return (
            f"month {self.month} is ambiguous; defaulted to {self.chosen!r} "
            f"(alternatives: {', '.join(self.alternatives)})"
        )


@dataclass(frozen=True)
class CalendarConfig:
    """Ordered period definitions plus academic-year anchor and YYYYM policy."""

    calendar_id: str
    periods: Tuple[PeriodDefinition, ...]
    ay_start_period_name: str
    yyyym_strict: bool = False
    month_mapping: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "periods", tuple(self.periods))
        object.__setattr__(
            self, "month_mapping", MappingProxyType(dict(self.month_mapping or {}))
        )

    # ---- Lookups ----

    @property
    def period_count(self) -> int:
        return len(self.periods)

    def definition_by_code(self, code: str) -> Optional[PeriodDefinition]:
        code = code.lower()
        for definition in self.periods:
            if isinstance(definition.code, str) and definition.code.lower() == code:
                return definition
        return None

    def definition_by_name(self, name: str) -> Optional[PeriodDefinition]:
        name = name.strip().lower()
        for definition in self.periods:
            if isinstance(definition.name, str) and definition.name.strip().lower() == name:
                return definition
        return None

    # ---- Derived views (computed once per configuration) ----

    @cached_property
    def cycle(self) -> Tuple[PeriodDefinition, ...]:
        """Definitions in academic-year order, AY-start period first."""
        anchor = self.definition_by_name(self.ay_start_period_name)
        idx = self.periods.index(anchor)
        return self.periods[idx:] + self.periods[:idx]

    @cached_property
    def year_offsets(self) -> Tuple[int, ...]:
        """Calendar-year offset from ``ay_start`` for each cycle position."""
        offsets = [0]
        wraps = 0
        for prev, cur in zip(self.cycle, self.cycle[1:]):
            if cur.month_day < prev.month_day:
                wraps += 1
            offsets.append(wraps)
        return tuple(offsets)

    @cached_property
    def month_index(self) -> Mapping[int, Tuple[PeriodDefinition, ...]]:
        grouped: Dict[int, List[PeriodDefinition]] = {}
        for definition in self.periods:
            grouped.setdefault(definition.start_month, []).append(definition)
        return MappingProxyType({m: tuple(defs) for m, defs in grouped.items()})

    def cycle_position(self, definition: PeriodDefinition) -> int:
        return self.cycle.index(definition)

    def candidates_for_month(self, month: int) -> Tuple[PeriodDefinition, ...]:
        return self.month_index.get(month, ())

    def with_month_mapping(self, month: int, period_name: str) -> "CalendarConfig":
        mapping = dict(self.month_mapping)
        mapping[month] = period_name
        return replace(self, month_mapping=mapping)


# ---- Validation ----

def _is_valid_day(month: int, day: int) -> bool:
    if not isinstance(month, int) or not 1 <= month <= 12:
        return False
    if not isinstance(day, int):
        return False
    return 1 <= day <= _stdcalendar.monthrange(REFERENCE_YEAR, month)[1]


def _cycle_violations(config: CalendarConfig) -> List[str]:
    """Check the AY cycle fits inside two consecutive calendar years."""
    offsets = config.year_offsets
    if offsets[-1] > 1:
        return [
            "academic year spans more than two calendar years "
            "(period start dates wrap past January more than once in cycle order)"
        ]
    if offsets[-1] == 1 and config.cycle[-1].month_day > config.cycle[0].month_day:
        return [
            f"period {config.cycle[-1].name!r} starts after the next academic year "
            f"begins with {config.cycle[0].name!r}"
        ]
    return []


def structural_violations(config: CalendarConfig) -> List[str]:
    """
    Collect every structural rule the configuration violates.

    Args:
        config: Calendar configuration (validated or not)

    Returns:
        List of human-readable violations, empty when the configuration is valid

    Examples:
        >>> bad = CalendarConfig("x", [PeriodDefinition("Fall", "fa", 8, 23),
        ...                            PeriodDefinition("Fall II", "FA", 10, 15)], "Fall")
        >>> structural_violations(bad)
        ["duplicate period code 'fa'"]
    """
    violations: List[str] = []

    if not isinstance(config.calendar_id, str) or not config.calendar_id.strip():
        violations.append("calendar_id must be a non-empty string")

    if not config.periods:
        violations.append("calendar must define at least one period")
        return violations

    seen_codes = set()
    seen_names = set()
    for definition in config.periods:
        name = definition.name if isinstance(definition.name, str) else ""
        code = definition.code if isinstance(definition.code, str) else ""

        # Names are compared the way the text parser reads them
        name_key = normalize_text(name)
        if not name_key:
            violations.append("period name must be non-empty")
        elif name_key in seen_names:
            violations.append(f"duplicate period name {name_key!r}")
        seen_names.add(name_key)

        if not _CODE_PATTERN.fullmatch(code):
            violations.append(
                f"period code {definition.code!r} for {name!r} must be exactly 2 letters"
            )
        elif code.lower() in seen_codes:
            violations.append(f"duplicate period code {code.lower()!r}")
        seen_codes.add(code.lower())

        if not isinstance(definition.start_month, int) or not 1 <= definition.start_month <= 12:
            violations.append(
                f"start_month {definition.start_month!r} for {name!r} must be 1-12"
            )
        elif not _is_valid_day(definition.start_month, definition.start_day):
            violations.append(
                f"start_day {definition.start_day!r} is not a valid day of month "
                f"{definition.start_month} for {name!r}"
            )

    anchor_known = (
        isinstance(config.ay_start_period_name, str)
        and config.definition_by_name(config.ay_start_period_name) is not None
    )
    if not anchor_known:
        violations.append(
            f"ay_start_period_name {config.ay_start_period_name!r} does not name a defined period"
        )

    for month, period_name in config.month_mapping.items():
        if not isinstance(month, int) or not 1 <= month <= 12:
            violations.append(f"month mapping key {month!r} must be 1-12")
        if not isinstance(period_name, str) or config.definition_by_name(period_name) is None:
            violations.append(
                f"month mapping for {month!r} names unknown period {period_name!r}"
            )

    # Cycle checks need a sound period set and anchor
    if not violations:
        violations.extend(_cycle_violations(config))

    return violations


def prepare_calendar(config: CalendarConfig) -> CalendarConfig:
    """
    Validate a configuration and prime its derived views.

    Raises:
        InvalidCalendarConfigError: listing every violated rule
    """
    violations = structural_violations(config)
    if violations:
        raise InvalidCalendarConfigError(config.calendar_id, violations)

    # Touch cached views so readers never compute them concurrently
    config.cycle
    config.year_offsets
    config.month_index
    return config


def ambiguous_months(config: CalendarConfig) -> Dict[int, List[str]]:
    """
    Months shared by two or more periods without an explicit mapping.

    Examples:
        >>> ambiguous_months(cal_with_jterm)
        {1: ['J-Term', 'Spring']}
    """
    result = {}
    for month in sorted(config.month_index):
        candidates = config.month_index[month]
        if len(candidates) > 1 and month not in config.month_mapping:
            result[month] = [d.name for d in candidates]
    return result


# ---- Construction from plain data (YAML / dict) ----

def calendar_from_dict(data: Mapping, calendar_id: Optional[str] = None) -> CalendarConfig:
    """
    Build a CalendarConfig from a plain mapping.

    Expected shape (as stored in YAML files):
        calendar_id: state_u
        ay_start: Fall
        yyyym_strict: false
        periods:
          - {name: Fall, code: fa, start_month: 8, start_day: 23}
          - {name: Spring, code: sp, start_month: 1, start_day: 15}
        month_mapping: {1: Spring}

    Args:
        data: Mapping with the keys above
        calendar_id: Optional id overriding ``data['calendar_id']``

    Returns:
        Unvalidated CalendarConfig (pass it to ``register`` or ``prepare_calendar``)

    Raises:
        InvalidCalendarConfigError: if required keys are missing
    """
    cal_id = calendar_id or data.get("calendar_id")
    missing = [key for key in ("periods", "ay_start") if key not in data]
    if cal_id is None:
        missing.insert(0, "calendar_id")
    if missing:
        raise InvalidCalendarConfigError(
            cal_id, [f"missing required key {key!r}" for key in missing]
        )

    periods = []
    for entry in data["periods"] or []:
        periods.append(
            PeriodDefinition(
                name=entry.get("name"),
                code=entry.get("code"),
                start_month=entry.get("start_month"),
                start_day=entry.get("start_day", 1),
            )
        )

    # YAML keeps integer keys; JSON-style string keys are converted here
    mapping = {
        int(month) if str(month).isdigit() else month: name
        for month, name in (data.get("month_mapping") or {}).items()
    }

    return CalendarConfig(
        calendar_id=cal_id,
        periods=tuple(periods),
        ay_start_period_name=data["ay_start"],
        yyyym_strict=bool(data.get("yyyym_strict", False)),
        month_mapping=mapping,
    )


__all__ = [
    "REFERENCE_YEAR",
    "PeriodDefinition",
    "Diagnostic",
    "CalendarConfig",
    "structural_violations",
    "prepare_calendar",
    "ambiguous_months",
    "calendar_from_dict",
]
