from datetime import date, timedelta

import pytest

from growguide.modules.cultivation.domain.services.age_calculator import day_number, is_before_start


@pytest.mark.parametrize(
    "start_date",
    [date(2024, 1, 1), date(2024, 2, 29), date(2023, 12, 31), date(2000, 6, 15)],
)
def test_start_date_is_day_one(start_date):
    assert day_number(start_date, start_date) == 1


def test_greenhouse_plants_on_january_tenth():
    entry_date = date(2024, 1, 10)

    assert day_number(entry_date, date(2024, 1, 1)) == 10
    assert day_number(entry_date, date(2024, 1, 5)) == 6


def test_counts_across_leap_day():
    assert day_number(date(2024, 3, 1), date(2024, 2, 28)) == 3


def test_each_day_adds_one():
    start = date(2024, 1, 1)
    for offset in range(0, 120, 7):
        assert day_number(start + timedelta(days=offset), start) == offset + 1


def test_dates_before_start_flow_through_unchanged():
    start = date(2024, 1, 5)

    assert day_number(date(2024, 1, 4), start) == 0
    assert day_number(date(2024, 1, 1), start) == -3
    assert is_before_start(date(2024, 1, 4), start)
    assert not is_before_start(start, start)


def test_plant_without_start_date_has_no_day_number():
    assert day_number(date(2024, 1, 10), None) is None
    assert not is_before_start(date(2024, 1, 10), None)
