"""Text codecs for individual ADIF values.

Every ``parse_*`` function returns ``(value, was_valid)`` and never raises:
text that cannot be read yields the type's default with ``was_valid`` False.
Empty text is valid and yields the default. Every ``format_*`` function
returns ``""`` for a default value, which callers treat as "omit the field".
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Tuple

from models.qso import EPOCH, Credit
from models.upload_status import UploadStatus, from_code, to_code

AFFIRMATIVE = "Y"

INT_RE = re.compile(r"[+-]?\d+")
UINT_RE = re.compile(r"\+?\d+")
FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
UINT32_MAX = 2**32 - 1
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1

DATE_RE = re.compile(r"\d{8}")
TIME_RE = re.compile(r"\d{6}")
LAT_LON_RE = re.compile(r"([NESW])(\d+) ([\d.]+)")

# Significant digits used when writing floats
FREQ_PRECISION = 6
POWER_PRECISION = 2


def _utc(date: datetime) -> datetime:
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


def _is_unset(value: Optional[datetime]) -> bool:
    return value is None or _utc(value) == EPOCH


# -- strings and booleans ---------------------------------------------------


def parse_string(text: str) -> Tuple[str, bool]:
    return text, True


def format_string(value: str) -> str:
    return value or ""


def parse_bool(text: str) -> Tuple[bool, bool]:
    return text == AFFIRMATIVE, text in ("", AFFIRMATIVE, "N")


def format_bool(value: bool) -> str:
    return AFFIRMATIVE if value else ""


# -- numbers ------------------------------------------------------------------


def parse_uint(text: str) -> Tuple[int, bool]:
    if not text:
        return 0, True
    if not UINT_RE.fullmatch(text):
        return 0, False
    value = int(text)
    if value > UINT32_MAX:
        return 0, False
    return value, True


def parse_int(text: str) -> Tuple[int, bool]:
    if not text:
        return 0, True
    if not INT_RE.fullmatch(text):
        return 0, False
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return 0, False
    return value, True


def format_int(value: int) -> str:
    if not value:
        return ""
    return str(int(value))


def parse_float(text: str) -> Tuple[float, bool]:
    if not text:
        return 0.0, True
    if not FLOAT_RE.fullmatch(text):
        return 0.0, False
    value = float(text)
    if not math.isfinite(value):
        return 0.0, False
    return value, True


def format_float(value: float, precision: int) -> str:
    if not value:
        return ""
    return f"{value:.{precision}g}"


# -- dates and times --------------------------------------------------------


def parse_date(text: str) -> Tuple[Optional[datetime], bool]:
    """Read ``YYYYMMDD`` as midnight UTC. Unreadable dates become EPOCH."""
    if not text:
        return None, True
    if not DATE_RE.fullmatch(text):
        return EPOCH, False
    try:
        return datetime.strptime(text, "%Y%m%d").replace(tzinfo=timezone.utc), True
    except ValueError:
        return EPOCH, False


def parse_timestamp(date_text: str, time_text: str) -> Tuple[Optional[datetime], bool]:
    """Combine a ``YYYYMMDD`` date and an ``HHMM``/``HHMMSS`` time into UTC.

    No date means no timestamp. A missing or unreadable time keeps the date
    at midnight.
    """
    date, ok = parse_date(date_text)
    if date is None or not ok:
        return date, ok
    if len(time_text) == 4:
        time_text += "00"
    if not TIME_RE.fullmatch(time_text):
        return date, False
    try:
        t = datetime.strptime(time_text, "%H%M%S")
    except ValueError:
        return date, False
    return date.replace(hour=t.hour, minute=t.minute, second=t.second), True


def format_date(value: Optional[datetime]) -> str:
    if _is_unset(value):
        return ""
    # YYYYMMDD
    return _utc(value).strftime("%Y%m%d")


def format_time(value: Optional[datetime]) -> str:
    if _is_unset(value):
        return ""
    # HHMMSS
    return _utc(value).strftime("%H%M%S")


# -- coordinates ------------------------------------------------------------


def parse_lat_lon(text: str) -> Tuple[float, bool]:
    """Read ``XDDD MM.MMM`` into signed decimal degrees, 4 decimal places."""
    if not text:
        return 0.0, True
    m = LAT_LON_RE.search(text)
    if not m:
        return 0.0, False
    cardinal = m.group(1)
    try:
        degrees = float(m.group(2))
        minutes = float(m.group(3))
    except ValueError:
        return 0.0, False
    value = degrees + minutes / 60.0
    if cardinal in ("S", "W"):
        value = -value
    return round(value, 4), True


def format_lat_lon(value: float, is_lat: bool) -> str:
    # 0 is indistinguishable from "not set"
    if not value:
        return ""
    if is_lat:
        cardinal = "N" if value >= 0 else "S"
    else:
        cardinal = "E" if value >= 0 else "W"
    degrees = math.floor(abs(value))
    minutes = round((abs(value) - degrees) * 60, 3)
    if minutes >= 60:
        degrees += 1
        minutes = 0.0
    return f"{cardinal}{int(degrees):03d} {minutes:06.3f}"


def format_lat(value: float) -> str:
    return format_lat_lon(value, True)


def format_lon(value: float) -> str:
    return format_lat_lon(value, False)


# -- enumerations and lists -------------------------------------------------


def parse_upload_status(text: str) -> Tuple[UploadStatus, bool]:
    status = from_code(text)
    return status, status is not UploadStatus.UNKNOWN or not text


def format_upload_status(value: UploadStatus) -> str:
    return to_code(value)


def parse_awards(text: str) -> Tuple[List[str], bool]:
    if not text:
        return [], True
    return text.split(","), True


def format_awards(value: List[str]) -> str:
    return ",".join(value or [])


def parse_credits(text: str) -> Tuple[List[Credit], bool]:
    """Split ``CQWAZ_MODE:CARD,DXCC`` into credits; the medium follows the first colon."""
    if not text:
        return [], True
    credits = []
    for element in text.split(","):
        name, _, medium = element.partition(":")
        credits.append(Credit(credit=name, qsl_medium=medium))
    return credits, True


def format_credits(value: List[Credit]) -> str:
    elements = []
    for c in value or []:
        e = c.credit
        if c.qsl_medium:
            e += ":" + c.qsl_medium
        elements.append(e)
    return ",".join(elements)


@dataclass(frozen=True)
class ScalarCodec:
    """A matched parse/format pair for one value type."""

    name: str
    parse: Callable[[str], Tuple[Any, bool]]
    format: Callable[[Any], str]


STRING = ScalarCodec("string", parse_string, format_string)
BOOL = ScalarCodec("boolean", parse_bool, format_bool)
UINT = ScalarCodec("unsigned integer", parse_uint, format_int)
INT = ScalarCodec("integer", parse_int, format_int)
FREQ = ScalarCodec("frequency", parse_float, lambda v: format_float(v, FREQ_PRECISION))
POWER = ScalarCodec("power", parse_float, lambda v: format_float(v, POWER_PRECISION))
LAT = ScalarCodec("latitude", parse_lat_lon, format_lat)
LON = ScalarCodec("longitude", parse_lat_lon, format_lon)
AWARDS = ScalarCodec("award list", parse_awards, format_awards)
CREDITS = ScalarCodec("credit list", parse_credits, format_credits)
