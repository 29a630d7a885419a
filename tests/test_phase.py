"""
Tests for the cycle phase calculator.
"""
from datetime import date, datetime, timedelta

import pytest

from src.models.phase import CyclePhase
from src.models.profile import CycleProfile
from src.services.constants import PHASE_ORDER, PHASE_TRANSITIONS
from src.services.exceptions import InvalidProfileError
from src.services.phase import (
    classify_cycle_day,
    compute_phase,
    menstrual_duration,
    phase_for_date,
    project_phases,
    resolve_cycle_length,
    summarize_phase
)

def test_first_day_of_cycle_is_menstrual(cycle_profile):
    """Day of the period start is offset 0 and menstrual."""
    assert compute_phase(cycle_profile, date(2024, 1, 1)) == (0, CyclePhase.MENSTRUAL)

def test_day_nineteen_is_luteal(cycle_profile):
    assert compute_phase(cycle_profile, date(2024, 1, 20)) == (19, CyclePhase.LUTEAL)

def test_recorded_period_end_extends_menstrual_phase():
    """A 7-day recorded period keeps offset 5 in the menstrual phase."""
    profile = CycleProfile(
        last_period_start=date(2024, 1, 1),
        last_period_end=date(2024, 1, 7),
        cycle_length=28
    )
    assert menstrual_duration(profile) == 7
    assert compute_phase(profile, date(2024, 1, 6)) == (5, CyclePhase.MENSTRUAL)

    default = CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=28)
    assert compute_phase(default, date(2024, 1, 6)) == (5, CyclePhase.FOLLICULAR)

@pytest.mark.parametrize("end,expected", [
    (date(2024, 1, 2), 2),
    (date(2024, 1, 10), 10),
    (date(2024, 1, 1), 5),     # 1 day is too short
    (date(2024, 1, 11), 5),    # 11 days is too long
    (date(2023, 12, 25), 5),   # end before start
])
def test_menstrual_duration_bounds(end, expected):
    profile = CycleProfile(last_period_start=date(2024, 1, 1), last_period_end=end)
    assert menstrual_duration(profile) == expected

@pytest.mark.parametrize("cycle_day,expected", [
    (0, CyclePhase.MENSTRUAL),
    (4, CyclePhase.MENSTRUAL),
    (5, CyclePhase.FOLLICULAR),
    (13, CyclePhase.FOLLICULAR),
    (14, CyclePhase.OVULATORY),
    (16, CyclePhase.OVULATORY),
    (17, CyclePhase.LUTEAL),
    (27, CyclePhase.LUTEAL),
])
def test_classify_cycle_day_boundaries(cycle_day, expected):
    assert classify_cycle_day(cycle_day) == expected

def test_cycle_day_always_in_range():
    """Every date over several cycles, before and after the start, is in range."""
    for cycle_length in (1, 14, 21, 28, 35, 45):
        profile = CycleProfile(last_period_start=date(2024, 3, 15), cycle_length=cycle_length)
        for offset in range(-100, 100):
            today = date(2024, 3, 15) + timedelta(days=offset)
            cycle_day, phase = compute_phase(profile, today)
            assert 0 <= cycle_day < cycle_length
            assert phase in CyclePhase

def test_phase_repeats_every_cycle_length(cycle_profile):
    for offset in range(-40, 60):
        today = date(2024, 1, 1) + timedelta(days=offset)
        later = today + timedelta(days=28)
        assert compute_phase(cycle_profile, today) == compute_phase(cycle_profile, later)

def test_dates_before_period_start_wrap_into_previous_cycle(cycle_profile):
    """One day before the start is the last day of the previous cycle."""
    assert compute_phase(cycle_profile, date(2023, 12, 31)) == (27, CyclePhase.LUTEAL)
    assert compute_phase(cycle_profile, date(2023, 12, 4)) == (0, CyclePhase.MENSTRUAL)

def test_phases_advance_in_cycle_order(cycle_profile):
    """Consecutive days only stay in a phase or move to the next one."""
    previous = phase_for_date(cycle_profile, date(2024, 1, 1))
    seen = [previous]
    for offset in range(1, 28 * 3):
        current = phase_for_date(cycle_profile, date(2024, 1, 1) + timedelta(days=offset))
        assert current == previous or current == PHASE_TRANSITIONS[previous]
        if current != previous:
            seen.append(current)
        previous = current
    assert seen[:5] == PHASE_ORDER + [CyclePhase.MENSTRUAL]

def test_long_cycle_keeps_fixed_thresholds():
    profile = CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=40)
    assert compute_phase(profile, date(2024, 1, 15)) == (14, CyclePhase.OVULATORY)
    assert compute_phase(profile, date(2024, 2, 9)) == (39, CyclePhase.LUTEAL)

def test_short_cycle_never_reaches_ovulatory():
    profile = CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=10)
    phases = {phase_for_date(profile, date(2024, 1, 1) + timedelta(days=i)) for i in range(10)}
    assert phases == {CyclePhase.MENSTRUAL, CyclePhase.FOLLICULAR}

def test_cycle_length_defaults_to_28():
    profile = CycleProfile(last_period_start=date(2024, 1, 1))
    assert resolve_cycle_length(profile) == 28
    assert compute_phase(profile, date(2024, 1, 29)) == (0, CyclePhase.MENSTRUAL)

@pytest.mark.parametrize("cycle_length", [0, -5, 27.5, "abc", True])
def test_invalid_cycle_length_raises(cycle_length):
    profile = CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=cycle_length)
    with pytest.raises(InvalidProfileError):
        compute_phase(profile, date(2024, 1, 5))

def test_numeric_string_cycle_length_is_accepted():
    profile = CycleProfile(last_period_start="2024-01-01", cycle_length="30")
    assert resolve_cycle_length(profile) == 30

@pytest.mark.parametrize("start", [None, "", "not-a-date", "2024-13-01"])
def test_missing_or_unparseable_start_raises(start):
    profile = CycleProfile(last_period_start=start, cycle_length=28)
    with pytest.raises(InvalidProfileError):
        compute_phase(profile, date(2024, 1, 5))

def test_unparseable_period_end_raises():
    profile = CycleProfile(last_period_start=date(2024, 1, 1), last_period_end="soon")
    with pytest.raises(InvalidProfileError):
        compute_phase(profile, date(2024, 1, 5))

def test_time_of_day_is_ignored():
    """Timestamps reduce to calendar days on both sides."""
    profile = CycleProfile(last_period_start=datetime(2024, 1, 1, 23, 30), cycle_length=28)
    assert compute_phase(profile, datetime(2024, 1, 2, 0, 15)) == (1, CyclePhase.MENSTRUAL)
    assert compute_phase(profile, "2024-01-20T08:00:00Z") == (19, CyclePhase.LUTEAL)

def test_project_phases_covers_consecutive_days(cycle_profile):
    projection = project_phases(cycle_profile, date(2024, 1, 4), 7)

    assert [day for day, _, _ in projection] == [date(2024, 1, 4) + timedelta(days=i) for i in range(7)]
    assert [cycle_day for _, cycle_day, _ in projection] == [3, 4, 5, 6, 7, 8, 9]
    assert [phase for _, _, phase in projection][:3] == [
        CyclePhase.MENSTRUAL, CyclePhase.MENSTRUAL, CyclePhase.FOLLICULAR
    ]

def test_summarize_phase(cycle_profile):
    summary = summarize_phase(cycle_profile, date(2024, 1, 20))

    assert summary.phase == CyclePhase.LUTEAL
    assert summary.cycle_day == 19
    assert summary.display_day == 20
    assert summary.days_until_next_period == 9
    assert summary.next_period_date == date(2024, 1, 29)
    assert summary.menstrual_duration == 5
    assert summary.guidance
    assert not summary.is_menstruating
