"""Month -> Period Ambiguity Resolution
------------------------------------

Used by the numeric (YYYYM) parser only. A month identifies a period when
exactly one period starts in it; otherwise the calendar's explicit month
mapping decides, then its strictness policy.

Resolution Strategy:
  1. Candidates = periods starting in the month (calendar insertion order)
  2. No candidates -> NoPeriodForMonthError
  3. One candidate -> it
  4. Explicit mapping for the month -> mapped period
  5. yyyym_strict -> AmbiguousYYYYMError
  6. Otherwise the first candidate, with an ``ambiguous_month_defaulted``
     Diagnostic for the caller to surface

The resolver reads nothing but its arguments, so the same calendar and
month always give the same answer, diagnostic included.
"""

from typing import Optional, Tuple

from academicperiods.calendars.calendarconfig import CalendarConfig, Diagnostic, PeriodDefinition
from academicperiods.exceptions import (
    AmbiguousYYYYMError,
    InvalidMonthError,
    NoPeriodForMonthError,
)


def resolve(config: CalendarConfig, month: int) -> Tuple[PeriodDefinition, Optional[Diagnostic]]:
    """
    Resolve a month to the period definition that starts in it.

    Args:
        config: Validated calendar configuration
        month: Month number 1-12

    Returns:
        (definition, diagnostic) where diagnostic is None unless an
        ambiguous month was defaulted

    Raises:
        InvalidMonthError: month outside 1-12
        NoPeriodForMonthError: no period starts in the month
        AmbiguousYYYYMError: several periods start in it, no mapping, strict calendar

    Examples:
        >>> resolve(state_u, 8)
        (PeriodDefinition(name='Fall', code='fa', start_month=8, start_day=23), None)

        >>> resolve(jterm_lenient, 1)
        (PeriodDefinition(name='J-Term', ...),
         Diagnostic(kind='ambiguous_month_defaulted', month=1,
                    chosen='J-Term', alternatives=('Spring',)))
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(month)

    candidates = config.candidates_for_month(month)
    if not candidates:
        raise NoPeriodForMonthError(month, config.calendar_id)

    if len(candidates) == 1:
        return candidates[0], None

    mapped_name = config.month_mapping.get(month)
    if mapped_name is not None:
        return config.definition_by_name(mapped_name), None

    if config.yyyym_strict:
        raise AmbiguousYYYYMError(month, [d.name for d in candidates])

    chosen = candidates[0]
    diagnostic = Diagnostic(
        kind="ambiguous_month_defaulted",
        month=month,
        chosen=chosen.name,
        alternatives=tuple(d.name for d in candidates[1:]),
    )
    return chosen, diagnostic


__all__ = [
    "resolve",
]
