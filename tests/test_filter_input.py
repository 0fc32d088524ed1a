from datetime import datetime, timedelta, timezone

import pytest

from visualvault.filter_input import parse_date_range, parse_size, parse_size_range

NOW = datetime(2024, 3, 15, 12, 30, 0)


def test_today_covers_whole_day():
    start, end = parse_date_range("today", NOW)
    assert start == datetime(2024, 3, 15, 0, 0, 0)
    assert end == datetime(2024, 3, 15, 23, 59, 59)


def test_today_is_case_insensitive():
    assert parse_date_range("TODAY", NOW) == parse_date_range("today", NOW)


def test_yesterday_is_one_day_before_today():
    today = parse_date_range("today", NOW)
    yesterday = parse_date_range("yesterday", NOW)
    assert yesterday[0] == today[0] - timedelta(days=1)
    assert yesterday[1] == today[1] - timedelta(days=1)


@pytest.mark.parametrize(
    ("text", "days"),
    [
        ("last 7 days", 7),
        ("last week", 7),
        ("last 30 days", 30),
        ("last month", 30),
        ("last year", 365),
        ("last 365 days", 365),
    ],
)
def test_relative_spans_end_now(text, days):
    start, end = parse_date_range(text, NOW)
    assert end == NOW
    assert end - start == timedelta(days=days)


def test_explicit_range():
    start, end = parse_date_range("2024-01-01 to 2024-01-31", NOW)
    assert start == datetime(2024, 1, 1, 0, 0, 0)
    assert end == datetime(2024, 1, 31, 23, 59, 59)


def test_range_with_one_invalid_side_keeps_the_other():
    start, end = parse_date_range("2024-01-01 to nonsense", NOW)
    assert start == datetime(2024, 1, 1, 0, 0, 0)
    assert end is None


def test_range_with_both_sides_invalid_is_rejected():
    with pytest.raises(ValueError, match="Invalid date format"):
        parse_date_range("foo to bar", NOW)


def test_single_date():
    start, end = parse_date_range("2024-02-29", NOW)
    assert start == datetime(2024, 2, 29, 0, 0, 0)
    assert end == datetime(2024, 2, 29, 23, 59, 59)


@pytest.mark.parametrize("text", ["", "tomorrow", "2024-13-01", "not a date"])
def test_invalid_dates_are_rejected(text):
    with pytest.raises(ValueError):
        parse_date_range(text, NOW)


def test_aware_now_gives_aware_bounds():
    aware_now = NOW.replace(tzinfo=timezone.utc)
    start, end = parse_date_range("2024-01-01", aware_now)
    assert start.tzinfo is timezone.utc
    assert end.tzinfo is timezone.utc


def test_parse_size_megabytes():
    assert parse_size("10MB") == 10.0


def test_parse_size_bare_number_is_megabytes():
    assert parse_size("10") == parse_size("10mb")


def test_parse_size_unit_ratios():
    assert parse_size("1gb") == 1024.0
    assert parse_size("1tb") == 1024.0 * parse_size("1gb")
    assert parse_size("1000kb") == pytest.approx(parse_size("1mb"))
    assert parse_size("1000b") == pytest.approx(parse_size("1kb"))


def test_parse_size_ignores_space_before_unit():
    assert parse_size(" 2 gb ") == parse_size("2gb")


@pytest.mark.parametrize("text", ["", "abc", "mb", "1_000mb", "ten mb"])
def test_parse_size_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)


def test_size_range_minimum():
    assert parse_size_range(">10MB") == (10.0, None)


def test_size_range_maximum():
    assert parse_size_range("<1GB") == (None, 1024.0)


def test_size_range_both_bounds():
    assert parse_size_range("10MB-100MB") == (10.0, 100.0)


@pytest.mark.parametrize("text", ["10MB", "10-20-30", ">abc", "-5mb", "abc-def"])
def test_size_range_invalid(text):
    with pytest.raises(ValueError, match="Invalid size format"):
        parse_size_range(text)