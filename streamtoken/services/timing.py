"""Coercion of raw CLI values and resolution of the token validity window."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from streamtoken.core.exceptions import (
    InvalidTimeWindowError,
    MalformedIntegerError,
    MissingExpirationError,
    MissingSecretError,
)
from streamtoken.schemas.models import TokenRequest
from streamtoken.services.signer import strip_secret

logger = logging.getLogger(__name__)

NOW_KEYWORD = "now"
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch(value: datetime | int) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return value


def parse_int(option: str, value: str | int | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    text = value.strip()
    if not _INTEGER_RE.match(text):
        raise MalformedIntegerError(option, value)
    try:
        return int(text)
    except ValueError:
        # Digit strings past the interpreter's conversion limit.
        raise MalformedIntegerError(option, value) from None


def parse_start_time(value: str | None) -> datetime | int | None:
    """Parse --start_time, snapshotting the current UTC time for ``now``."""
    if value is None:
        return None
    if value.strip() == NOW_KEYWORD:
        return utc_now()
    return parse_int("start_time", value)


def resolve_end_time(
    start_time: int | None,
    end_time: int | None,
    lifetime: int | None,
    now: datetime | None = None,
) -> int:
    if end_time is not None:
        if start_time is not None and start_time >= end_time:
            raise InvalidTimeWindowError()
        logger.debug("Using explicit end_time=%s", end_time)
        return end_time

    if lifetime is not None:
        base = start_time if start_time is not None else to_epoch(now or utc_now())
        logger.debug("Derived end_time from lifetime=%s base=%s", lifetime, base)
        return base + lifetime

    raise MissingExpirationError()


def build_request(
    *,
    stream_id: str,
    secret: str | None,
    start_time: str | datetime | int | None = None,
    end_time: str | int | None = None,
    lifetime: str | int | None = None,
    ip: str | None = None,
    vod_stream_id: str | None = None,
    now: datetime | None = None,
) -> TokenRequest:
    """Validate raw parameters and return a fully resolved :class:`TokenRequest`.

    Raises:
        MissingSecretError: secret absent or only whitespace.
        MalformedIntegerError: a time or lifetime value is not a decimal integer.
        MissingExpirationError: neither end_time nor lifetime given.
        InvalidTimeWindowError: start_time is not before end_time.
    """
    if secret is None or not strip_secret(secret):
        raise MissingSecretError()

    if isinstance(start_time, str):
        start_time = parse_start_time(start_time)
    start_epoch = to_epoch(start_time) if start_time is not None else None
    end_epoch = parse_int("end_time", end_time)
    lifetime_seconds = parse_int("lifetime", lifetime)

    resolved_end = resolve_end_time(start_epoch, end_epoch, lifetime_seconds, now=now)

    if vod_stream_id is not None:
        logger.debug("VOD stream id %s is not part of the token", vod_stream_id)

    return TokenRequest(
        stream_id=stream_id,
        secret=secret,
        start_time=start_epoch,
        end_time=resolved_end,
        lifetime=lifetime_seconds,
        ip=ip,
        vod_stream_id=vod_stream_id,
    )
