"""
Service module for deriving the current menstrual cycle phase.

This module is the single place where cycle-day arithmetic lives. Every
handler that needs a phase (recommendations, grocery search, fridge scans,
meal plans, daily logs) calls into it with an explicit `today` so results are
deterministic for a given date.

Typical usage:
    >>> profile = CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=28)
    >>> cycle_day, phase = compute_phase(profile, date(2024, 1, 20))
    >>> cycle_day, phase
    (19, <CyclePhase.LUTEAL: 'luteal'>)
"""
from typing import List, Tuple
from datetime import date, timedelta

from src.models.phase import CyclePhase, PhaseSummary
from src.models.profile import CycleProfile, DateLike
from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_MENSTRUAL_DURATION,
    MIN_MENSTRUAL_DURATION,
    MAX_MENSTRUAL_DURATION,
    OVULATORY_START_DAY,
    LUTEAL_START_DAY,
    PHASE_GUIDANCE
)
from src.services.exceptions import InvalidProfileError
from src.services.utils import to_date, days_between

def resolve_cycle_length(profile: CycleProfile) -> int:
    """
    Validate the profile's cycle length, defaulting to 28 when unset.

    Raises:
        InvalidProfileError: If the length is not a positive whole number
    """
    value = profile.cycle_length
    if value is None:
        return DEFAULT_CYCLE_LENGTH
    if isinstance(value, bool):
        raise InvalidProfileError(f"cycle_length must be an integer, got {value!r}")
    try:
        length = int(value)
    except (TypeError, ValueError):
        raise InvalidProfileError(f"cycle_length must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidProfileError(f"cycle_length must be a whole number of days, got {value!r}")
    if length <= 0:
        raise InvalidProfileError(f"cycle_length must be positive, got {length}")
    return length

def menstrual_duration(profile: CycleProfile) -> int:
    """
    Length of the menstrual phase in days.

    Derived from the recorded period end when it gives 2 to 10 days
    (inclusive of both ends), otherwise the default of 5.

    Raises:
        InvalidProfileError: If either date cannot be parsed

    Example:
        >>> menstrual_duration(CycleProfile(date(2024, 1, 1), date(2024, 1, 7)))
        7
    """
    start = to_date(profile.last_period_start, "last_period_start")
    if profile.last_period_end is None:
        return DEFAULT_MENSTRUAL_DURATION

    end = to_date(profile.last_period_end, "last_period_end")
    derived = days_between(start, end) + 1
    if MIN_MENSTRUAL_DURATION <= derived <= MAX_MENSTRUAL_DURATION:
        return derived
    return DEFAULT_MENSTRUAL_DURATION

def classify_cycle_day(cycle_day: int, duration: int = DEFAULT_MENSTRUAL_DURATION) -> CyclePhase:
    """
    Map a 0-based cycle offset to its phase.

    Args:
        cycle_day: Offset within the current cycle (0-based)
        duration: Menstrual phase length in days

    Returns:
        The phase containing that offset
    """
    if cycle_day < duration:
        return CyclePhase.MENSTRUAL
    if cycle_day < OVULATORY_START_DAY:
        return CyclePhase.FOLLICULAR
    if cycle_day < LUTEAL_START_DAY:
        return CyclePhase.OVULATORY
    return CyclePhase.LUTEAL

def compute_phase(profile: CycleProfile, today: DateLike) -> Tuple[int, CyclePhase]:
    """
    Derive the current cycle day and phase.

    The returned cycle day is the raw 0-based offset from the start of the
    current cycle. Callers showing "Day N" add 1 themselves.

    Args:
        profile: Cycle data for the user
        today: Date to evaluate; never read from the clock here

    Returns:
        Tuple of (cycle_day, phase) with 0 <= cycle_day < cycle_length

    Raises:
        InvalidProfileError: If the cycle length is not positive, the period
            start is missing, or a date cannot be parsed

    Example:
        >>> compute_phase(CycleProfile(date(2024, 1, 1)), date(2024, 1, 1))
        (0, <CyclePhase.MENSTRUAL: 'menstrual'>)
    """
    cycle_length = resolve_cycle_length(profile)
    start = to_date(profile.last_period_start, "last_period_start")
    target = to_date(today, "today")

    # Python's % is floored: non-negative for dates before the period start
    cycle_day = days_between(start, target) % cycle_length
    phase = classify_cycle_day(cycle_day, menstrual_duration(profile))
    return cycle_day, phase

def phase_for_date(profile: CycleProfile, day: DateLike) -> CyclePhase:
    """Phase on an arbitrary date."""
    return compute_phase(profile, day)[1]

def project_phases(
    profile: CycleProfile,
    start: DateLike,
    days: int = 7
) -> List[Tuple[date, int, CyclePhase]]:
    """
    Project cycle day and phase for consecutive dates.

    Args:
        profile: Cycle data for the user
        start: First date of the projection
        days: Number of dates to project

    Returns:
        List of (date, cycle_day, phase) tuples in date order

    Example:
        >>> [p.value for _, _, p in project_phases(profile, date(2024, 1, 4), 3)]
        ['menstrual', 'follicular', 'follicular']
    """
    first = to_date(start, "start")
    projection = []
    for offset in range(days):
        day = first + timedelta(days=offset)
        cycle_day, phase = compute_phase(profile, day)
        projection.append((day, cycle_day, phase))
    return projection

def summarize_phase(profile: CycleProfile, today: DateLike) -> PhaseSummary:
    """
    Build the dashboard snapshot for a date.

    Args:
        profile: Cycle data for the user
        today: Date to evaluate

    Returns:
        PhaseSummary with display day, next period estimate and guidance
    """
    target = to_date(today, "today")
    cycle_day, phase = compute_phase(profile, target)
    cycle_length = resolve_cycle_length(profile)
    days_until_next = cycle_length - cycle_day

    return PhaseSummary(
        phase=phase,
        cycle_day=cycle_day,
        display_day=cycle_day + 1,
        cycle_length=cycle_length,
        menstrual_duration=menstrual_duration(profile),
        days_until_next_period=days_until_next,
        next_period_date=target + timedelta(days=days_until_next),
        guidance=PHASE_GUIDANCE[phase],
        as_of=target
    )
