from datetime import datetime, timedelta, timezone

import pytest

from atlasutil.timeutil import format_iso8601, must_parse_iso8601, parse_iso8601


@pytest.mark.parametrize(
    "date_time",
    [
        "2020-11-02T20:04:05-0700",
        "2016-12-02T20:04:05-07",
        "2021-11-30T15:04:05+08:00",
        "2021-02-07T21:39:31Z",
        "2021-11-30T15:04:05",
        "2021-11-30",
    ],
)
def test_parse_correct_dates(date_time):
    parsed = parse_iso8601(date_time)
    assert parsed.tzinfo is not None
    assert parsed.year == int(date_time[:4])


@pytest.mark.parametrize(
    "date_time",
    ["2021/11/30T15:04:05", "2021-11-30T15-04:05", "2021-11-30T15:04:05-8"],
)
def test_parse_incorrect_dates(date_time):
    with pytest.raises(ValueError):
        parse_iso8601(date_time)


def test_parse_offsets():
    assert parse_iso8601("2021-11-30T15:04:05+08:00").utcoffset() == timedelta(hours=8)
    assert parse_iso8601("2016-12-02T20:04:05-07").utcoffset() == timedelta(hours=-7)
    assert parse_iso8601("2020-11-02T20:04:05-0700").utcoffset() == timedelta(hours=-7)


def test_parse_without_zone_is_utc():
    assert parse_iso8601("2021-11-30T15:04:05") == datetime(2021, 11, 30, 15, 4, 5, tzinfo=timezone.utc)
    assert parse_iso8601("2021-11-30") == datetime(2021, 11, 30, tzinfo=timezone.utc)


def test_parse_same_instant_in_different_zones():
    assert parse_iso8601("2020-11-02T20:04:05-0700") == parse_iso8601("2020-11-03T03:04:05Z")


def test_parse_fraction():
    parsed = parse_iso8601("2021-02-07T21:39:31.123Z")
    assert parsed.microsecond == 123000


def test_parse_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        parse_iso8601("2021-02-30T10:00:00Z")


def test_must_parse():
    assert must_parse_iso8601("2021-02-07T21:39:31Z") == datetime(2021, 2, 7, 21, 39, 31, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        must_parse_iso8601("2021/11/30")


def test_format_round_trip():
    assert format_iso8601(parse_iso8601("2021-02-07T21:39:31Z")) == "2021-02-07T21:39:31Z"
    assert format_iso8601(parse_iso8601("2021-02-07T21:39:31.123Z")) == "2021-02-07T21:39:31.123Z"


def test_format_trims_fraction():
    moment = datetime(2021, 2, 7, 21, 39, 31, 120999, tzinfo=timezone.utc)
    assert format_iso8601(moment) == "2021-02-07T21:39:31.12Z"
    assert format_iso8601(moment.replace(microsecond=999)) == "2021-02-07T21:39:31Z"