"""Tests for period formatting and display placeholders.

Run with: pytest tests/test_format.py -v
"""

import pytest

from academicperiods.calendars.calendarapi import load_preset
from academicperiods.calendars.calendarconfig import CalendarConfig, PeriodDefinition
from academicperiods.calendars.calendarregistry import CalendarRegistry
from academicperiods.period.periodalgebra import sequence
from academicperiods.period.periodapi import parse_code, parse_numeric, parse_text
from academicperiods.period.periodformat import (
    FORMAT_KINDS,
    accessor_values,
    format_period,
    render,
)


@pytest.fixture
def fa26(state_u):
    return parse_code("fa26", "state_u", registry=state_u)


# ============================================================================
# Fixed Formats
# ============================================================================

class TestFormatKinds:
    """Test every fixed output format"""

    @pytest.mark.parametrize("kind,expected", [
        ("key", "26-27_20268_Fall"),
        ("code", "fa26"),
        ("numeric", "20268"),
        ("text", "Fall 2026"),
        ("ay_term", "2026-27 T1"),
        ("iso_date", "2026-08-23"),
        ("year_month", "2026-08"),
    ])
    def test_fall_2026(self, state_u, fa26, kind, expected):
        assert format_period(fa26, kind, registry=state_u) == expected

    def test_default_kind_is_text(self, fa26):
        assert format_period(fa26) == "Fall 2026"

    def test_spring_second_term(self, state_u):
        sp27 = parse_code("sp27", "state_u", registry=state_u)
        assert format_period(sp27, "numeric") == "20271"
        assert format_period(sp27, "key", registry=state_u) == "26-27_20271_Spring"
        assert format_period(sp27, "ay_term", registry=state_u) == "2026-27 T2"

    def test_two_digit_month(self, registry):
        """Months 10-12 keep both digits in numeric output"""
        registry.register(CalendarConfig(
            "october_u",
            (PeriodDefinition("Autumn", "au", 10, 1), PeriodDefinition("Spring", "sp", 3, 1)),
            "Autumn",
        ))
        autumn = parse_code("au26", "october_u", registry=registry)
        assert format_period(autumn, "numeric") == "202610"
        assert format_period(autumn, "key", registry=registry) == "26-27_202610_Autumn"

    def test_century_boundary(self, state_u):
        """AY 1999-2000 is labelled 1999-00"""
        fall = parse_text("Fall 1999", "state_u", registry=state_u)
        assert fall.ay == "1999-00"
        assert format_period(fall, "code") == "fa99"
        assert format_period(fall, "key", registry=state_u) == "99-00_19998_Fall"

    def test_unknown_kind(self, fa26):
        with pytest.raises(ValueError, match="Unknown format kind"):
            format_period(fa26, "iso_week")

    def test_unknown_kind_checked_before_calendar_lookup(self, fa26):
        """An unknown kind is a ValueError even when the calendar is not registered"""
        with pytest.raises(ValueError, match="Unknown format kind"):
            format_period(fa26, "iso_week", registry=CalendarRegistry())

    def test_format_kinds_listed(self):
        assert FORMAT_KINDS == ("key", "code", "numeric", "text", "ay_term", "iso_date", "year_month")


# ============================================================================
# Accessors and Templates
# ============================================================================

class TestAccessors:
    """Test placeholder values and template rendering"""

    def test_accessor_values(self, state_u):
        sp27 = parse_code("sp27", "state_u", registry=state_u)
        assert accessor_values(sp27, registry=state_u) == {
            "ay": "2026-27",
            "ay_short": "26-27",
            "ay_long": "2026-2027",
            "ay_start": 2026,
            "ay_end": 2027,
            "name": "Spring",
            "code": "sp",
            "year": 2027,
            "term": 2,
            "month": 1,
            "month_pad": "01",
            "date": "2027-01-15",
            "year_month": "2027-01",
        }

    def test_render(self, state_u, fa26):
        assert render(fa26, "{name} term {term}, AY {ay_long}", registry=state_u) == (
            "Fall term 1, AY 2026-2027"
        )
        assert render(fa26, "{code}{year}-{month_pad}", registry=state_u) == "fa2026-08"

    def test_render_unknown_placeholder(self, state_u, fa26):
        with pytest.raises(KeyError):
            render(fa26, "{semester}", registry=state_u)


# ============================================================================
# Round Trips
# ============================================================================

class TestFormatRoundTrip:
    """Formatting then parsing returns the same period"""

    def test_code_and_numeric_semester(self, state_u):
        start = parse_code("fa24", "state_u", registry=state_u)
        end = parse_code("fa30", "state_u", registry=state_u)
        for period in sequence(start, end, registry=state_u):
            assert parse_code(format_period(period, "code"), "state_u", registry=state_u) == period
            assert parse_numeric(format_period(period, "numeric"), "state_u", registry=state_u) == period

    def test_code_and_numeric_quarter(self, registry):
        load_preset("quarter", registry=registry)
        start = parse_code("au24", "quarter", registry=registry)
        end = parse_code("su28", "quarter", registry=registry)
        for period in sequence(start, end, registry=registry):
            assert parse_code(format_period(period, "code"), "quarter", registry=registry) == period
            assert parse_numeric(format_period(period, "numeric"), "quarter", registry=registry) == period

    def test_numeric_not_reversible_for_shared_month(self, calendars):
        """Spring shares January with J-Term; its numeric form parses as J-Term"""
        sp27 = parse_code("sp27", "jterm_lenient", registry=calendars)
        assert format_period(sp27, "numeric") == "20271"
        assert parse_numeric("20271", "jterm_lenient", registry=calendars).name == "J-Term"
        assert parse_code(format_period(sp27, "code"), "jterm_lenient", registry=calendars) == sp27
