"""Period Arithmetic and Sequencing
--------------------------------

Every period of a calendar with ``k`` periods per academic year maps to
an integer absolute index:

    absolute_index = ay_start * k + cycle_position

Adding ``n`` periods is integer addition on the index; ``divmod`` by ``k``
recovers the academic year and cycle position (floor division keeps
negative steps symmetric). The calendar is looked up by ``calendar_id``
at call time, so periods of a removed calendar fail here.

Examples:
    >>> fa26 = parse_period("fa26", "state_u")
    >>> str(add(fa26, 1))
    'Spring 2027'
    >>> difference(parse_period("fa27", "state_u"), fa26)
    3
    >>> [str(p) for p in sequence(fa26, parse_period("fa27", "state_u"))]
    ['Fall 2026', 'Spring 2027', 'Summer 2027', 'Fall 2027']
"""

from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import List, Optional, Tuple, Union

try:
    from dateutil import parser as dateutil_parser
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from academicperiods.calendars.calendarconfig import CalendarConfig
from academicperiods.calendars.calendarregistry import CalendarRegistry, resolve_registry
from academicperiods.exceptions import (
    IncompatibleCalendarError,
    InvalidStepError,
    PeriodOutOfRangeError,
    UnknownPeriodNameError,
)
from academicperiods.period.periodinstance import PeriodInstance, build_instance_at


def _config_for(period: PeriodInstance, registry: Optional[CalendarRegistry]) -> CalendarConfig:
    return resolve_registry(registry).get(period.calendar_id)


def _position(period: PeriodInstance, config: CalendarConfig) -> int:
    definition = config.definition_by_name(period.name)
    if definition is None:
        raise UnknownPeriodNameError(period.name, config.calendar_id)
    return config.cycle_position(definition)


def _check_count(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"period count must be an int, got {type(n).__name__}")


def cycle_position(period: PeriodInstance, *, registry: Optional[CalendarRegistry] = None) -> int:
    """Zero-based position of the period within its academic year."""
    return _position(period, _config_for(period, registry))


def period_term(period: PeriodInstance, *, registry: Optional[CalendarRegistry] = None) -> int:
    """One-based term number within the academic year (AY-start period is term 1)."""
    return cycle_position(period, registry=registry) + 1


def absolute_index(period: PeriodInstance, *, registry: Optional[CalendarRegistry] = None) -> int:
    config = _config_for(period, registry)
    return period.ay_start * config.period_count + _position(period, config)


def add(period: PeriodInstance, n: int, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    """
    Move ``n`` periods forward (negative ``n`` moves back).

    Raises:
        TypeError: if n is not an int
        PeriodOutOfRangeError: if the result would start outside years 1-9999

    Examples:
        >>> str(add(parse_period("su27", "state_u"), 1))
        'Fall 2027'
        >>> str(add(parse_period("fa26", "state_u"), -1))
        'Summer 2026'
    """
    _check_count(n)
    config = _config_for(period, registry)
    k = config.period_count
    index = period.ay_start * k + _position(period, config) + n
    ay_start, position = divmod(index, k)
    year = ay_start + config.year_offsets[position]
    if not MINYEAR <= year <= MAXYEAR:
        raise PeriodOutOfRangeError(year)
    return build_instance_at(config, ay_start, position)


def subtract(period: PeriodInstance, n: int, *, registry: Optional[CalendarRegistry] = None) -> PeriodInstance:
    _check_count(n)
    return add(period, -n, registry=registry)


def difference(
    a: PeriodInstance,
    b: PeriodInstance,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> int:
    """
    Signed number of periods from ``b`` to ``a``.

    Raises:
        IncompatibleCalendarError: if the periods come from different calendars
    """
    if a.calendar_id != b.calendar_id:
        raise IncompatibleCalendarError(a.calendar_id, b.calendar_id)
    return absolute_index(a, registry=registry) - absolute_index(b, registry=registry)


def sequence(
    start: PeriodInstance,
    end: PeriodInstance,
    step: int = 1,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> List[PeriodInstance]:
    """
    Periods from ``start`` to ``end`` inclusive, advancing ``step`` at a time.

    A step pointing away from ``end`` gives an empty list; pass a negative
    step to walk backwards. When ``end`` is not an exact multiple of
    ``step`` away, the sequence stops at the last period before passing it.

    Raises:
        InvalidStepError: if step is 0
        IncompatibleCalendarError: if the periods come from different calendars

    Examples:
        >>> [p.code for p in sequence(fa26, fa27, 1)]
        ['fa', 'sp', 'su', 'fa']
        >>> sequence(fa27, fa26, 1)
        []
    """
    _check_count(step)
    if step == 0:
        raise InvalidStepError(step)

    distance = difference(end, start, registry=registry)
    if distance != 0 and (distance > 0) != (step > 0):
        return []

    count = distance // step + 1
    return [add(start, i * step, registry=registry) for i in range(count)]


# ---- Date lookups ----

def _as_date(when: Union[date, datetime, str]) -> date:
    if isinstance(when, datetime):
        return when.date()
    if isinstance(when, date):
        return when
    if isinstance(when, str):
        return dateutil_parser.parse(when).date()
    raise TypeError(f"expected date, datetime or str, got {type(when).__name__}")


def period_for_date(
    when: Union[date, datetime, str],
    calendar_id: str,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> PeriodInstance:
    """
    The period in progress on ``when``: the latest one starting on or before it.

    Args:
        when: date, datetime, or date string (parsed with python-dateutil)
        calendar_id: Registered calendar id

    Examples:
        >>> str(period_for_date("2026-10-01", "state_u"))
        'Fall 2026'
        >>> str(period_for_date(date(2027, 1, 14), "state_u"))
        'Fall 2026'
    """
    day = _as_date(when)
    config = resolve_registry(registry).get(calendar_id)

    # The period in progress belongs to the AY starting this year or last year
    candidates: List[Tuple[date, PeriodInstance]] = []
    for ay_start in (day.year - 1, day.year):
        for position in range(config.period_count):
            if not MINYEAR <= ay_start + config.year_offsets[position] <= MAXYEAR:
                continue
            instance = build_instance_at(config, ay_start, position)
            if instance.start_date <= day:
                candidates.append((instance.start_date, instance))

    if not candidates:
        # Only possible early in year 1, before any period of the calendar starts
        raise PeriodOutOfRangeError(day.year - 1)
    return max(candidates, key=lambda pair: pair[0])[1]


def current_period(
    calendar_id: str,
    *,
    asof: Optional[Union[date, datetime, str]] = None,
    registry: Optional[CalendarRegistry] = None,
) -> PeriodInstance:
    """Period in progress today (or on ``asof``)."""
    return period_for_date(asof or date.today(), calendar_id, registry=registry)


__all__ = [
    "cycle_position",
    "period_term",
    "absolute_index",
    "add",
    "subtract",
    "difference",
    "sequence",
    "period_for_date",
    "current_period",
]
