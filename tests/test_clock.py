from datetime import datetime, time

import pytest

from transit_hub.services.clock import add_minutes, coerce_time, format_hhmm, minutes_of_day, parse_hhmm


def test_add_minutes_wraps_past_midnight():
    assert add_minutes("23:40", 45) == "00:25"
    assert add_minutes("09:00", 55) == "09:55"
    assert add_minutes("00:00", 1440) == "00:00"


def test_format_hhmm_zero_pads_and_wraps():
    assert format_hhmm(5) == "00:05"
    assert format_hhmm(24 * 60 + 65) == "01:05"
    assert format_hhmm(-15) == "23:45"


def test_parse_hhmm_accepts_single_digit_hour():
    assert parse_hhmm("6:15") == time(6, 15)
    assert minutes_of_day(parse_hhmm("06:15")) == 375


@pytest.mark.parametrize("value", ["", "noon", "24:00", "12:60", "12-30", "1:2:3"])
def test_parse_hhmm_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_hhmm(value)


def test_coerce_time_from_datetime():
    assert coerce_time(datetime(2024, 5, 1, 14, 7, 33)) == time(14, 7, 33)
    assert coerce_time("14:07") == time(14, 7)
