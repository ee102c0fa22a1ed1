"""Shared test fixtures for academicperiods tests."""

import pytest

from academicperiods.calendars.calendarconfig import CalendarConfig, PeriodDefinition
from academicperiods.calendars.calendarregistry import CalendarRegistry


FALL = PeriodDefinition("Fall", "fa", 8, 23)
SPRING = PeriodDefinition("Spring", "sp", 1, 15)
SUMMER = PeriodDefinition("Summer", "su", 6, 1)
JTERM = PeriodDefinition("J-Term", "jt", 1, 3)


def semester_config(calendar_id="state_u", **kwargs):
    """Fall / Spring / Summer, AY starts in Fall."""
    return CalendarConfig(calendar_id, (FALL, SPRING, SUMMER), "Fall", **kwargs)


def jterm_config(calendar_id="jterm_u", **kwargs):
    """Fall / J-Term / Spring / Summer; J-Term and Spring both start in January."""
    return CalendarConfig(calendar_id, (FALL, JTERM, SPRING, SUMMER), "Fall", **kwargs)


@pytest.fixture
def registry():
    """Empty, isolated registry."""
    return CalendarRegistry()


@pytest.fixture
def state_u(registry):
    """Registry holding the 'state_u' semester calendar."""
    registry.register(semester_config())
    return registry


@pytest.fixture
def calendars(registry):
    """Registry holding state_u plus strict and lenient J-Term calendars."""
    registry.register(semester_config())
    registry.register(jterm_config("jterm_strict", yyyym_strict=True))
    registry.register(jterm_config("jterm_lenient", yyyym_strict=False))
    return registry
