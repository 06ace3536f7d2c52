import datetime as dt
import re

import pytest

from zerg import timeutil as tu


def test_weekdays_in_year_bounds():
    days = tu.weekdays_in_year(2018)
    assert days[0] == 20180101
    assert days[-1] == 20181231


def test_weekdays_in_year_only_weekdays_and_sorted():
    days = tu.weekdays_in_year(2020)
    assert days == sorted(days)
    for value in days:
        assert dt.date(value // 10000, (value // 100) % 100, value % 100).weekday() < 5
    assert 20200229 not in days  # Saturday
    assert 20200228 in days


@pytest.mark.parametrize(
    "text,expected",
    [
        ("100ms", 100),
        ("100milliseconds", 100),
        ("100millisecond", 100),
        (" 10 min ", 600000),
        (" 10 minutes ", 600000),
        (" 10 minute ", 600000),
    ],
)
def test_human_readable_millisecond(text, expected):
    assert tu.human_readable_millisecond(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        (" 10 us ", 10),
        (" 10 macroseconds ", 10),
        (" 10 macrosecond ", 10),
        (" 10 sec ", 10 * 1000 * 1000),
        (" 10 seconds ", 10 * 1000 * 1000),
        (" 10 second ", 10 * 1000 * 1000),
        (" 10 s ", 10 * 1000 * 1000),
    ],
)
def test_human_readable_microsecond(text, expected):
    assert tu.human_readable_microsecond(text) == expected


def test_human_readable_bare_number_is_milliseconds():
    assert tu.human_readable_millisecond("250") == 250
    assert tu.human_readable_microsecond("") == 0


def test_human_readable_units_are_case_insensitive():
    assert tu.human_readable_microsecond("10 MS") == tu.human_readable_microsecond("10ms")
    assert tu.human_readable_microsecond("1 hour") == 60 * tu.human_readable_microsecond("1 minute")
    assert tu.human_readable_microsecond("1 quarter") == 15 * tu.human_readable_microsecond("1 min")


def test_human_readable_without_number_raises():
    with pytest.raises(ValueError):
        tu.human_readable_microsecond("ms")
    with pytest.raises(ValueError):
        tu.human_readable_microsecond("abc")


def test_next_date():
    assert tu.next_date(20220929) == 20220930
    assert tu.next_date(20220930) == 20221001


def test_next_date_year_end():
    assert tu.next_date(20211231) == 20220101


def test_seconds_nanos_round_trip():
    assert tu.seconds_to_nanos(1.5) == 1_500_000_000
    assert tu.nanos_to_seconds(tu.seconds_to_nanos(12.25)) == 12.25
    assert tu.nanos_to_seconds(1_500_000_999) == 1.5


def test_nano_to_date_is_utc():
    assert tu.nano_to_date(86400 * tu.ONE_SECOND_NANO) == 19700102


def test_time_to_string_zero():
    assert tu.time_to_string(0) == "N/A"


def test_epoch_round_trip_through_local_strings():
    epoch = tu.epoch_from_ymdhms(20220115, 123456)
    assert tu.time_to_string(epoch) == "2022-01-15 12:34:56"
    assert tu.time_to_hms(epoch) == 123456
    assert tu.ntime_to_string(epoch * tu.ONE_SECOND_NANO) == "2022-01-15 12:34:56"


def test_fractional_strings():
    epoch = tu.epoch_from_ymdhms(20220115, 123456)
    assert tu.micros_to_string(epoch * 1_000_000 + 789_000) == "2022-01-15 12:34:56.789"
    assert tu.nanos_to_string(epoch * tu.ONE_SECOND_NANO + 5_000_000) == "2022-01-15 12:34:56.005"


def test_time_string_to_epoch_matches_ymdhms():
    assert tu.time_string_to_epoch("20171112 23:59:59") == tu.epoch_from_ymdhms(20171112, 235959)


def test_time_string_to_epoch_invalid():
    with pytest.raises(ValueError):
        tu.time_string_to_epoch("not a time")


def test_ntime_from_double_whole_day():
    assert tu.ntime_from_double(20220115.0) == tu.epoch_from_ymdhms(20220115, 0) * tu.ONE_SECOND_NANO


def test_split_hms():
    assert tu.split_hms(123456) == (12, 34, 56)


def test_cob_parts():
    assert tu.year_from_cob(20171112) == 2017
    assert tu.month_from_cob(20171112) == 11
    assert tu.day_from_cob(20171112) == 12


def test_fixed_width_parsers():
    assert tu.intraday_time_hms("23:59:59") == 235959
    assert tu.intraday_time_hm("23:59") == 2359
    assert tu.cob_from_string("20171112") == 20171112
    assert tu.cob_from_dash("2017-11-12") == 20171112


def test_usec_hms():
    assert tu.usec_hms("00:00:01", 5) == 1_005_000
    assert tu.usec_hms("01:00:00") == 3600 * 1_000_000


def test_short_input_raises():
    with pytest.raises(ValueError):
        tu.cob_from_string("2017")


def test_string_to_second_intraday():
    assert tu.string_to_second_intraday("0000", "HHMMSS") == 0
    assert tu.string_to_second_intraday("0130", "HHMMSS") == 90 * 60


def test_string_to_second_intraday_rejects():
    with pytest.raises(ValueError):
        tu.string_to_second_intraday("2500", "HHMMSS")
    with pytest.raises(ValueError):
        tu.string_to_second_intraday("0130", "HH:MM")
    with pytest.raises(ValueError):
        tu.string_to_second_intraday("01", "HHMMSS")


def test_string_to_millisecond_intraday():
    assert tu.string_to_millisecond_intraday("0130", "HHMMSS.MMM") == 90 * 60 * 1000
    base = tu.string_to_millisecond_intraday("010101", "HHMMSS.MMM")
    assert tu.string_to_millisecond_intraday("010101.250", "HHMMSS.MMM") == base + 250
    with pytest.raises(ValueError):
        tu.string_to_millisecond_intraday("0130", "HHMMSS")


def test_replace_time_placeholder_given_values():
    result = tu.replace_time_placeholder("${YYYY}-${MM}-${DD}-${HHMMSSmmm}.xml", 20180203, 82340000)
    assert result == "2018-02-03-082340000.xml"
    assert tu.replace_time_placeholder("${YYYYMMDD}_${HHMMSS}", 20180203, 82340000) == "20180203_082340"
    assert tu.replace_time_placeholder("${YYYYMM}/${MMDD}", 20180203, 0) == "201802/0203"


def test_replace_time_placeholder_defaults_to_now():
    result = tu.replace_time_placeholder("${YYYYMMDD}.${HHMMSSmmm}")
    assert re.fullmatch(r"\d{8}\.\d{9}", result)
    assert abs(int(result[:8]) - tu.now_cob()) <= 1 or result[:8] == str(tu.now_cob())


def test_now_functions_shapes():
    assert re.fullmatch(r"\d{8}\.\d{6}", tu.now_string())
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", tu.now_local_string())
    assert 0 <= tu.now_hms() <= 235959
    assert tu.now_cob() >= 20180718


def test_clock_sources_agree():
    micros = tu.micros_since_epoch()
    nanos = tu.nanos_since_epoch()
    assert nanos // 1000 >= micros
    assert nanos // 1000 - micros < 10_000_000