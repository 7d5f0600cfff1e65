"""Publish date normalization for WeChat article date text."""
import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from src.errors import DateParseError
from src.log import ScraperLogger, resolve_logger


# WeChat renders publish times in Beijing time when no offset is given
BEIJING_TZ = timezone(timedelta(hours=8))

_LABELS = re.compile(
    r"(北京时间|发布时间|发布日期|发布于|发表于|更新于|"
    r"published\s+(?:at|on)|posted\s+(?:at|on)|published|posted)\s*[:：]?",
    re.IGNORECASE,
)

_MORNING_MARKERS = {"上午", "早上", "凌晨", "AM"}
_AFTERNOON_MARKERS = {"下午", "中午", "晚上", "PM"}
_MERIDIEM = r"(上午|早上|凌晨|下午|中午|晚上|AM|PM)"

_ISO_WITH_OFFSET = re.compile(
    r"(\d{4})-(\d{1,2})-(\d{1,2})[T ](\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?"
    r"\s*(Z|[+-]\d{2}:?\d{2})(?!\d)",
    re.IGNORECASE,
)

_CHINESE_DATE = re.compile(
    r"(?:(\d{4})\s*年\s*)?(\d{1,2})\s*月\s*(\d{1,2})\s*日"
    r"(?:\s*" + _MERIDIEM + r")?"
    r"(?:\s*(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?)?"
    r"(?:\s*" + _MERIDIEM + r")?",
    re.IGNORECASE,
)

_STANDARD_DATETIME = re.compile(
    r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})[T ](?:" + _MERIDIEM + r"\s*)?"
    r"(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s*" + _MERIDIEM + r")?",
    re.IGNORECASE,
)

_BARE_DATE = re.compile(
    r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})(?:[T ](\d{1,2}):(\d{2})(?::(\d{2}))?)?"
)


def normalize_publish_date(
    raw_text: str,
    now: datetime | None = None,
    logger: ScraperLogger | None = None,
) -> str:
    """
    Normalize publish date text to an ISO 8601 UTC timestamp.

    Grammars are tried in order and the first one producing a valid instant
    wins:
    1. ISO/RFC 3339 with explicit offset ("2025-10-29T16:21:00+0800", "...Z")
    2. Chinese calendar form ("2025年10月29日 下午 4:21", "10月29日 16:21")
    3. Standard date-time without offset ("2025-10-29 16:21"), Beijing time
    4. Bare date ("2025-10-29"), midnight Beijing time

    Args:
        raw_text: Date text as scraped from the page
        now: Reference time for year-less Chinese dates (default: current time)
        logger: Optional logger (default: loguru)

    Returns:
        Timestamp such as "2025-10-29T08:21:00.000Z", or "" if unparseable.
        Never raises.
    """
    log = resolve_logger(logger)
    try:
        instant = parse_publish_date(raw_text, now=now)
    except DateParseError as e:
        log.warning(f"Could not parse publish date: {e}")
        return ""
    return format_iso_utc(instant)


def parse_publish_date(raw_text: str, now: datetime | None = None) -> datetime:
    """
    Parse publish date text into a UTC datetime.

    A grammar that matches but names an instant outside the representable
    range ends parsing; later grammars would misread the same text.

    Raises:
        DateParseError: If no grammar yields a valid instant
    """
    text = clean_date_text(raw_text or "")
    if not text:
        raise DateParseError("empty date text")

    grammars: list[Callable[[str], datetime | None]] = [
        _parse_iso_with_offset,
        lambda t: _parse_chinese_date(t, now),
        _parse_standard_datetime,
        _parse_bare_date,
    ]
    for grammar in grammars:
        try:
            instant = grammar(text)
        except ValueError:
            # Matched but produced an impossible date (e.g. month 13)
            continue
        if instant is None:
            continue
        try:
            return instant.astimezone(timezone.utc)
        except OverflowError as e:
            # Valid local time whose UTC instant falls outside year 1..9999
            raise DateParseError(f"date out of range: {raw_text!r}") from e

    raise DateParseError(f"unrecognized date text: {raw_text!r}")


def clean_date_text(raw_text: str) -> str:
    """Strip boilerplate labels and collapse whitespace."""
    text = _LABELS.sub(" ", raw_text.strip())
    text = text.replace("：", ":")
    return " ".join(text.split())


def format_iso_utc(value: datetime) -> str:
    """Format an aware datetime as UTC with millisecond precision and a Z suffix."""
    utc_value = value.astimezone(timezone.utc)
    return (
        utc_value.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{utc_value.microsecond // 1000:03d}Z"
    )


def _parse_iso_with_offset(text: str) -> datetime | None:
    match = _ISO_WITH_OFFSET.search(text)
    if not match:
        return None
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int(fraction.ljust(6, "0")) if fraction else 0
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second or 0),
        microsecond,
        tzinfo=_parse_offset(offset),
    )


def _parse_chinese_date(text: str, now: datetime | None) -> datetime | None:
    match = _CHINESE_DATE.search(text)
    if not match:
        return None
    year, month, day, marker_before, hour, minute, second, marker_after = match.groups()
    if year is None:
        year = (now or datetime.now(BEIJING_TZ)).astimezone(BEIJING_TZ).year
    hour_value = int(hour or 0)
    if hour is not None:
        hour_value = _apply_meridiem(hour_value, marker_before or marker_after)
    return datetime(
        int(year),
        int(month),
        int(day),
        hour_value,
        int(minute or 0),
        int(second or 0),
        tzinfo=BEIJING_TZ,
    )


def _parse_standard_datetime(text: str) -> datetime | None:
    match = _STANDARD_DATETIME.search(text)
    if not match:
        return None
    year, month, day, marker_before, hour, minute, second, marker_after = match.groups()
    return datetime(
        int(year),
        int(month),
        int(day),
        _apply_meridiem(int(hour), marker_before or marker_after),
        int(minute),
        int(second or 0),
        tzinfo=BEIJING_TZ,
    )


def _parse_bare_date(text: str) -> datetime | None:
    match = _BARE_DATE.search(text)
    if not match:
        return None
    year, month, day, hour, minute, second = match.groups()
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        tzinfo=BEIJING_TZ,
    )


def _apply_meridiem(hour: int, marker: str | None) -> int:
    """12-hour fix-up: afternoon adds 12 below noon, morning 12 becomes 0."""
    if not marker:
        return hour
    marker = marker.upper()
    if marker in _AFTERNOON_MARKERS and hour < 12:
        return hour + 12
    if marker in _MORNING_MARKERS and hour == 12:
        return 0
    return hour


def _parse_offset(offset: str) -> timezone:
    if offset.upper() == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    digits = offset[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
    return timezone(sign * delta)
