"""Calendar Registry
-----------------

Injectable store mapping calendar ids to validated, immutable
CalendarConfig objects.

Writers (register, set_month_mapping, remove) hold a lock only while they
build a new snapshot dict and swap it in. Readers never lock: they read
whatever snapshot is current, so a reader sees either the whole old or the
whole new configuration for an id.

Tests should build their own ``CalendarRegistry()``; ``default_registry`` is
the process-wide instance used when no registry is passed to the API.
"""

import logging
import threading
from typing import Dict, List

from academicperiods.calendars.calendarconfig import (
    CalendarConfig,
    Diagnostic,
    ambiguous_months,
    structural_violations,
    prepare_calendar,
)
from academicperiods.exceptions import InvalidCalendarConfigError, UnknownCalendarError

logger = logging.getLogger(__name__)


class CalendarRegistry:
    """Process-lifetime store of calendar configurations."""

    def __init__(self):
        self._configs: Dict[str, CalendarConfig] = {}
        self._write_lock = threading.Lock()

    def register(self, config: CalendarConfig) -> CalendarConfig:
        """
        Validate ``config`` and store it, replacing any prior configuration.

        Raises:
            InvalidCalendarConfigError: listing every violated rule
        """
        config = prepare_calendar(config)
        with self._write_lock:
            replaced = config.calendar_id in self._configs
            snapshot = dict(self._configs)
            snapshot[config.calendar_id] = config
            self._configs = snapshot
        logger.info(
            f"{'Replaced' if replaced else 'Registered'} calendar {config.calendar_id!r} "
            f"with {config.period_count} periods"
        )
        return config

    def get(self, calendar_id: str) -> CalendarConfig:
        try:
            return self._configs[calendar_id]
        except (KeyError, TypeError):
            raise UnknownCalendarError(calendar_id) from None

    def validate(self, calendar_id: str) -> List[Diagnostic]:
        """
        Re-run structural checks and report ambiguous months.

        Ambiguous months are reported whatever ``yyyym_strict`` is set to,
        so configurations can be audited before any YYYYM input arrives.

        Returns:
            One ``Diagnostic(kind="ambiguous_month")`` per ambiguous month

        Raises:
            UnknownCalendarError: if the id is not registered
            InvalidCalendarConfigError: if structural checks fail
        """
        config = self.get(calendar_id)
        violations = structural_violations(config)
        if violations:
            raise InvalidCalendarConfigError(calendar_id, violations)
        return [
            Diagnostic(kind="ambiguous_month", month=month, alternatives=tuple(names))
            for month, names in ambiguous_months(config).items()
        ]

    def set_month_mapping(self, calendar_id: str, month: int, period_name: str) -> CalendarConfig:
        """Add or overwrite one explicit month -> period entry."""
        violations = []
        if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
            violations.append(f"month {month!r} must be 1-12")

        with self._write_lock:
            config = self.get(calendar_id)
            definition = (
                config.definition_by_name(period_name) if isinstance(period_name, str) else None
            )
            if definition is None:
                violations.append(f"unknown period name {period_name!r}")
            if violations:
                raise InvalidCalendarConfigError(calendar_id, violations)

            updated = prepare_calendar(config.with_month_mapping(month, definition.name))
            snapshot = dict(self._configs)
            snapshot[calendar_id] = updated
            self._configs = snapshot

        logger.info(f"Calendar {calendar_id!r}: month {month} now maps to {definition.name!r}")
        return updated

    def remove(self, calendar_id: str) -> None:
        with self._write_lock:
            if calendar_id not in self._configs:
                raise UnknownCalendarError(calendar_id)
            snapshot = dict(self._configs)
            del snapshot[calendar_id]
            self._configs = snapshot
        logger.info(f"Removed calendar {calendar_id!r}")

    def clear(self) -> None:
        with self._write_lock:
            self._configs = {}

    def list(self) -> List[str]:
        """Registered calendar ids in registration order."""
        return list(self._configs)

    def __contains__(self, calendar_id) -> bool:
        return calendar_id in self._configs

    def __len__(self) -> int:
        return len(self._configs)


default_registry = CalendarRegistry()


def resolve_registry(registry=None) -> CalendarRegistry:
    return default_registry if registry is None else registry


__all__ = [
    "CalendarRegistry",
    "default_registry",
    "resolve_registry",
]
