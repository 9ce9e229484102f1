from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from streamtoken.core.exceptions import (
    InvalidTimeWindowError,
    MalformedIntegerError,
    MissingExpirationError,
    MissingSecretError,
)
from streamtoken.services.timing import build_request, parse_int, parse_start_time, resolve_end_time, to_epoch

from conftest import DEMO_NOW

FIXED_NOW = datetime.fromtimestamp(DEMO_NOW, tz=timezone.utc)


def test_parse_int_accepts_decimal_strings():
    assert parse_int("lifetime", "3600") == 3600
    assert parse_int("lifetime", " 42 ") == 42
    assert parse_int("lifetime", "-5") == -5
    assert parse_int("lifetime", None) is None


@pytest.mark.parametrize("value", ["abc", "12abc", "1.5", "", "9" * 5000])
def test_parse_int_rejects_non_numeric(value):
    with pytest.raises(MalformedIntegerError) as exc_info:
        parse_int("end_time", value)
    assert exc_info.value.option == "end_time"
    assert "--end_time" in exc_info.value.detail


def test_parse_start_time_now_snapshots_utc():
    with patch("streamtoken.services.timing.utc_now", return_value=FIXED_NOW):
        value = parse_start_time("now")
    assert value == FIXED_NOW
    assert value.tzinfo is not None
    assert to_epoch(value) == DEMO_NOW


def test_parse_start_time_integer():
    assert parse_start_time("1578935505") == 1578935505
    assert parse_start_time(None) is None


def test_end_time_overrides_lifetime():
    assert resolve_end_time(None, 500, 3600, now=FIXED_NOW) == 500


def test_lifetime_from_now():
    assert resolve_end_time(None, None, 3600, now=FIXED_NOW) == DEMO_NOW + 3600


def test_lifetime_from_start_time():
    assert resolve_end_time(1000, None, 60, now=FIXED_NOW) == 1060


@pytest.mark.parametrize("start, end", [(100, 50), (100, 100)])
def test_start_not_before_end_is_rejected(start, end):
    with pytest.raises(InvalidTimeWindowError):
        resolve_end_time(start, end, None)


def test_missing_expiration_is_rejected():
    with pytest.raises(MissingExpirationError):
        resolve_end_time(100, None, None)


@pytest.mark.parametrize("secret", [None, "", "   ", "\t\n"])
def test_build_request_requires_secret(secret):
    with pytest.raises(MissingSecretError):
        build_request(stream_id="s", secret=secret, lifetime="60")


def test_build_request_resolves_lifetime_with_now_start():
    with patch("streamtoken.services.timing.utc_now", return_value=FIXED_NOW):
        request = build_request(stream_id="s", secret="k", start_time="now", lifetime="60")
    assert request.start_time == DEMO_NOW
    assert request.end_time == DEMO_NOW + 60


def test_build_request_keeps_vod_stream_id():
    request = build_request(stream_id="s", secret="k", end_time="10", vod_stream_id="vod-1")
    assert request.vod_stream_id == "vod-1"
    assert request.end_time == 10


def test_build_request_rejects_malformed_lifetime():
    with pytest.raises(MalformedIntegerError):
        build_request(stream_id="s", secret="k", lifetime="soon")


def test_build_request_accepts_empty_stream_id():
    request = build_request(stream_id="", secret="k", end_time="99")
    assert request.stream_id == ""
