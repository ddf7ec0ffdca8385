"""Externalized note format: ``"yyyy-MM-dd HH:mm:ss.SSS;; text"``.

A note line carries an optional timestamp prefix separated from the text by
``FIELD_SEPARATOR``. Only the first separator splits; any later occurrence is
part of the text. A prefix that is not a strictly formatted timestamp is not
an error: the whole line is then the text.
"""

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";; "
TIMESTAMP_FORMAT = "yyyy-MM-dd HH:mm:ss.SSS"

_STRPTIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", re.ASCII)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a ``yyyy-MM-dd HH:mm:ss.SSS`` string; return None when it does not match."""
    if not _TIMESTAMP_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, _STRPTIME_FORMAT)
    except ValueError:
        # Right shape, impossible date such as month 13.
        return None


def format_timestamp(value: datetime) -> str:
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond // 1000:03d}"
    )


def parse_note_string(raw: str) -> Tuple[Optional[datetime], str]:
    """Split a note line into ``(timestamp, text)``.

    The timestamp is None when the line has no valid prefix, in which case
    the text is the entire input.
    """
    parts = raw.split(FIELD_SEPARATOR, 1)
    if len(parts) == 2:
        timestamp = parse_timestamp(parts[0])
        if timestamp is not None:
            return timestamp, parts[1]
        logger.debug("Note prefix %r is not a timestamp; keeping whole line as text", parts[0])
    return None, raw


def format_note(timestamp: datetime, text: str) -> str:
    return format_timestamp(timestamp) + FIELD_SEPARATOR + text
