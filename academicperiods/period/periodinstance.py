"""Period Instance
---------------

Immutable value object for one concrete occurrence of a period, e.g.
Fall 2026 in calendar ``state_u``.

Instances order by start date first, so instances from different calendars
can be sorted together; equal start dates fall back to calendar id, then
code. Arithmetic never mutates: ``p + 1`` builds a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import total_ordering

from academicperiods.calendars.calendarconfig import CalendarConfig, PeriodDefinition


@total_ordering
@dataclass(frozen=True)
class PeriodInstance:
    name: str
    code: str
    year: int
    start_date: date
    ay_start: int
    ay_end: int
    calendar_id: str

    @property
    def sort_key(self):
        return (self.start_date, self.calendar_id, self.code)

    @property
    def ay(self) -> str:
        """Academic year label, e.g. '2026-27'."""
        return f"{self.ay_start}-{self.ay_end % 100:02d}"

    def __lt__(self, other):
        if not isinstance(other, PeriodInstance):
            return NotImplemented
        return self.sort_key < other.sort_key

    # Operator sugar over the default registry; use periodalgebra directly
    # to pass an explicit registry.

    def __add__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        from academicperiods.period.periodalgebra import add
        return add(self, n)

    __radd__ = __add__

    def __sub__(self, other):
        from academicperiods.period.periodalgebra import difference, subtract
        if isinstance(other, PeriodInstance):
            return difference(self, other)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return subtract(self, other)

    def __str__(self):
        return f"{self.name} {self.year}"


def build_instance(config: CalendarConfig, definition: PeriodDefinition, year: int) -> PeriodInstance:
    """
    Build the instance of ``definition`` that starts in calendar year ``year``.

    Examples:
        >>> build_instance(cal, cal.definition_by_code("sp"), 2027)
        PeriodInstance(name='Spring', code='sp', year=2027,
                       start_date=datetime.date(2027, 1, 15),
                       ay_start=2026, ay_end=2027, calendar_id='state_u')
    """
    position = config.cycle_position(definition)
    ay_start = year - config.year_offsets[position]
    return PeriodInstance(
        name=definition.name,
        code=definition.code,
        year=year,
        start_date=date(year, definition.start_month, definition.start_day),
        ay_start=ay_start,
        ay_end=ay_start + 1,
        calendar_id=config.calendar_id,
    )


def build_instance_at(config: CalendarConfig, ay_start: int, position: int) -> PeriodInstance:
    """Build the instance at ``position`` of the academic year starting ``ay_start``."""
    definition = config.cycle[position]
    return build_instance(config, definition, ay_start + config.year_offsets[position])


__all__ = [
    "PeriodInstance",
    "build_instance",
    "build_instance_at",
]
