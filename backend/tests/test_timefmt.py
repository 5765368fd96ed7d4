"""Unit tests covering date-time conversion helpers."""

from __future__ import annotations

import logging

import pytest

from services.meetings_service.errors import DateParseError
from services.meetings_service.timefmt import (
    parse_local_datetime,
    parse_zoned_datetime,
    to_display_format,
    to_provider_time_format,
    to_unix_timestamp,
)

EPOCH_2024_01_02_030405_UTC = 1704164645


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-01-02 03:04:05", "2024-01-02T03:04:05"),
        ("2024-01-02T03:04", "2024-01-02T03:04:00"),
        ("2024-01-02", "2024-01-02T00:00:00"),
        ("2024/01/02 03:04:05", "2024-01-02T03:04:05"),
        ("2024-01-02T03:04:05Z", "2024-01-02T03:04:05"),
    ],
)
def test_to_provider_time_format(raw, expected):
    assert to_provider_time_format(raw) == expected


def test_to_provider_time_format_logs_and_returns_empty(caplog):
    with caplog.at_level(logging.ERROR, logger="services.meetings_service.timefmt"):
        assert to_provider_time_format("not-a-date") == ""
    assert "to_provider_time_format" in caplog.text
    assert "'not-a-date'" in caplog.text


def test_to_unix_timestamp_utc():
    assert to_unix_timestamp("2024-01-02 03:04:05", "UTC") == EPOCH_2024_01_02_030405_UTC


def test_to_unix_timestamp_named_zone():
    # Bogota is UTC-5 with no DST.
    assert to_unix_timestamp("2024-01-02 03:04:05", "America/Bogota") == EPOCH_2024_01_02_030405_UTC + 5 * 3600


def test_to_unix_timestamp_keeps_explicit_offset():
    assert to_unix_timestamp("2024-01-02T03:04:05Z", "Asia/Tokyo") == EPOCH_2024_01_02_030405_UTC


@pytest.mark.parametrize("raw, zone", [("garbage", "UTC"), ("2024-01-02 03:04:05", "Mars/Olympus"), ("", "UTC")])
def test_to_unix_timestamp_failures_return_none(caplog, raw, zone):
    with caplog.at_level(logging.ERROR, logger="services.meetings_service.timefmt"):
        assert to_unix_timestamp(raw, zone) is None
    assert "to_unix_timestamp" in caplog.text


def test_parse_local_datetime_result_type():
    good = parse_local_datetime("2024-01-02 03:04:05")
    assert good.ok
    assert good.unwrap().hour == 3

    bad = parse_local_datetime("31/31/2024")
    assert not bad.ok
    assert isinstance(bad.error, DateParseError)
    assert bad.error.raw == "31/31/2024"
    with pytest.raises(DateParseError):
        bad.unwrap()


def test_parse_zoned_datetime_reports_unknown_zone():
    result = parse_zoned_datetime("2024-01-02 03:04:05", "Not/AZone")
    assert not result.ok
    assert "Not/AZone" in str(result.error)


def test_to_display_format():
    assert to_display_format("2024-01-02T03:04:05Z") == "2024/01/02 03:04:05"
    assert to_display_format("soon") == "soon"
    assert to_display_format(None) is None


def test_years_below_1000_keep_four_digits():
    assert to_provider_time_format("0999-01-02 03:04:05") == "0999-01-02T03:04:05"
    assert to_display_format("0999-01-02T03:04:05Z") == "0999/01/02 03:04:05"
