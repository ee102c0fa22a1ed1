"""Integration tests for the public API.

These tests verify that the main public API (academicperiods/__init__.py)
works correctly across presets, YAML calendars and period parsing.

Tests focus on:
- Preset calendars shipped with the package
- Loading calendars from YAML files (explicit path or environment variable)
- Calendar inspection helpers (list_periods, validate_calendar)
- Top-level exports

For unit tests of specific modules, see:
- test_calendars.py - Calendar validation and registry
- test_period.py - Parsing
- test_algebra.py - Arithmetic and sequencing

Run with: pytest tests/test_api.py
"""

from pathlib import Path

import pytest

import academicperiods
from academicperiods import (
    Diagnostic,
    InvalidCalendarConfigError,
    UnknownCalendarError,
    get_calendar,
    list_calendars,
    list_periods,
    list_presets,
    load_calendar_file,
    load_preset,
    parse_period,
    register_calendar,
    remove_calendar,
    set_month_mapping,
    validate_calendar,
)
from academicperiods.calendars import calendarapi
from academicperiods.calendars.calendarapi import CALENDARS_PATH_ENV
from academicperiods.calendars.calendarregistry import default_registry, resolve_registry
from academicperiods.utils.dataloader import find_data_file

from conftest import jterm_config, semester_config


SINGLE_CALENDAR_YAML = """\
calendar_id: yaml_u
ay_start: Fall
yyyym_strict: true
periods:
  - {name: Fall, code: fa, start_month: 8, start_day: 23}
  - {name: Spring, code: sp, start_month: 1, start_day: 15}
"""

MULTI_CALENDAR_YAML = """\
calendars:
  - calendar_id: state_u
    ay_start: Fall
    periods:
      - {name: Fall, code: fa, start_month: 8, start_day: 23}
      - {name: Spring, code: sp, start_month: 1, start_day: 15}
      - {name: Summer, code: su, start_month: 6, start_day: 1}
  - calendar_id: tech_quarters
    ay_start: Autumn
    periods:
      - {name: Autumn, code: au, start_month: 9, start_day: 25}
      - {name: Winter, code: wi, start_month: 1, start_day: 6}
"""


# ============================================================================
# Presets
# ============================================================================

class TestPresets:
    """Test preset calendars"""

    def test_list_presets(self):
        df = list_presets()
        assert list(df.columns) == ["preset", "description", "ay_start", "periods"]
        assert df["preset"].tolist() == ["semester", "quarter", "trimester", "semester_jterm"]
        quarter = df[df["preset"] == "quarter"].iloc[0]
        assert quarter["periods"] == 4
        assert quarter["ay_start"] == "Autumn"

    def test_load_preset_quarter(self, registry):
        """Winter 2027 belongs to the academic year starting Autumn 2026"""
        config = load_preset("quarter", calendar_id="tech", registry=registry)
        assert config.calendar_id == "tech"
        assert list_calendars(registry=registry) == ["tech"]
        winter = parse_period("wi27", "tech", registry=registry)
        assert winter.ay_start == 2026
        assert winter.ay == "2026-27"

    def test_load_preset_default_id(self, registry):
        load_preset("semester", registry=registry)
        assert parse_period("20268", "semester", registry=registry).name == "Fall"

    def test_semester_jterm_is_mapped(self, registry):
        """January resolves to Spring through the preset's month mapping"""
        load_preset("semester_jterm", registry=registry)
        assert validate_calendar("semester_jterm", registry=registry) == []
        assert parse_period("20271", "semester_jterm", registry=registry).name == "Spring"
        assert parse_period("jt27", "semester_jterm", registry=registry).name == "J-Term"

    @pytest.mark.parametrize("name", ["semester", "quarter", "trimester", "semester_jterm"])
    def test_every_preset_registers(self, registry, name):
        load_preset(name, registry=registry)
        assert name in registry

    def test_unknown_preset(self, registry):
        with pytest.raises(KeyError, match="Unknown preset"):
            load_preset("tetramester", registry=registry)


# ============================================================================
# YAML Calendar Files
# ============================================================================

class TestLoadCalendarFile:
    """Test loading calendars from YAML"""

    def test_single_calendar(self, registry, tmp_path):
        path = tmp_path / "calendar.yaml"
        path.write_text(SINGLE_CALENDAR_YAML)
        assert load_calendar_file(path, registry=registry) == ["yaml_u"]
        assert get_calendar("yaml_u", registry=registry).yyyym_strict is True

    def test_calendar_list(self, registry, tmp_path):
        path = tmp_path / "calendars.yaml"
        path.write_text(MULTI_CALENDAR_YAML)
        assert load_calendar_file(str(path), registry=registry) == ["state_u", "tech_quarters"]
        assert str(parse_period("Winter 2027", "tech_quarters", registry=registry)) == "Winter 2027"

    def test_invalid_calendar_in_file(self, registry, tmp_path):
        """Calendars before the invalid one stay registered"""
        path = tmp_path / "calendars.yaml"
        path.write_text(MULTI_CALENDAR_YAML.replace("code: wi", "code: winter"))
        with pytest.raises(InvalidCalendarConfigError):
            load_calendar_file(path, registry=registry)
        assert list_calendars(registry=registry) == ["state_u"]

    def test_env_var(self, registry, tmp_path, monkeypatch):
        path = tmp_path / "calendar.yaml"
        path.write_text(SINGLE_CALENDAR_YAML)
        monkeypatch.setenv(CALENDARS_PATH_ENV, str(path))
        assert load_calendar_file(registry=registry) == ["yaml_u"]

    def test_no_file(self, registry, monkeypatch):
        monkeypatch.delenv(CALENDARS_PATH_ENV, raising=False)
        with pytest.raises(FileNotFoundError) as exc_info:
            load_calendar_file(registry=registry)
        assert CALENDARS_PATH_ENV in str(exc_info.value)

    def test_missing_explicit_path(self, registry, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_calendar_file(tmp_path / "absent.yaml", registry=registry)


# ============================================================================
# Calendar Functions
# ============================================================================

class TestCalendarFunctions:
    """Test calendar registration and inspection helpers"""

    def test_list_periods(self, state_u):
        df = list_periods("state_u", registry=state_u)
        assert list(df.columns) == [
            "cycle_position", "term", "name", "code", "start_month", "start_day", "year_offset",
        ]
        assert df["name"].tolist() == ["Fall", "Spring", "Summer"]
        assert df["term"].tolist() == [1, 2, 3]
        assert df["year_offset"].tolist() == [0, 1, 1]

    def test_list_periods_unknown_calendar(self, registry):
        with pytest.raises(UnknownCalendarError):
            list_periods("nowhere", registry=registry)

    def test_register_get_remove(self, registry):
        stored = register_calendar(semester_config(), registry=registry)
        assert get_calendar("state_u", registry=registry) is stored
        remove_calendar("state_u", registry=registry)
        assert list_calendars(registry=registry) == []

    def test_validate_and_map(self, registry):
        register_calendar(jterm_config(), registry=registry)
        assert validate_calendar("jterm_u", registry=registry) == [
            Diagnostic(kind="ambiguous_month", month=1, alternatives=("J-Term", "Spring")),
        ]
        set_month_mapping("jterm_u", 1, "J-Term", registry=registry)
        assert validate_calendar("jterm_u", registry=registry) == []
        assert parse_period("20271", "jterm_u", registry=registry).name == "J-Term"


# ============================================================================
# Data Files
# ============================================================================

class TestFindDataFile:
    """Test data file discovery"""

    def test_finds_module_local_presets(self):
        path = find_data_file(calendarapi.__file__, ["presets.yaml"])
        assert path == Path(calendarapi.__file__).parent / "data" / "presets.yaml"

    def test_env_var_then_nothing(self, tmp_path, monkeypatch):
        """Only the environment variable and module-local data are searched"""
        monkeypatch.delenv(CALENDARS_PATH_ENV, raising=False)
        assert find_data_file(calendarapi.__file__, ["presets.yaml"],
                              env_var=CALENDARS_PATH_ENV, module_local_data=False) is None

        path = tmp_path / "calendar.yaml"
        path.write_text(SINGLE_CALENDAR_YAML)
        monkeypatch.setenv(CALENDARS_PATH_ENV, str(path))
        assert find_data_file(calendarapi.__file__, [], env_var=CALENDARS_PATH_ENV) == path


# ============================================================================
# Package Exports
# ============================================================================

class TestPackageExports:
    """Test top-level imports"""

    def test_all_exports_resolve(self):
        for name in academicperiods.__all__:
            assert hasattr(academicperiods, name), name

    def test_version(self):
        assert academicperiods.__version__ == "0.1.0"

    def test_default_registry(self):
        assert academicperiods.default_registry is default_registry
        assert resolve_registry() is default_registry
        assert resolve_registry(None) is default_registry
