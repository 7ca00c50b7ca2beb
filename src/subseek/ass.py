"""ASS/SSA dialogue timestamp handling and time shifting."""

import logging
import re
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DIALOGUE_PREFIX = "Dialogue:"

_TIMESTAMP_RE = re.compile(r"(\d+):(\d{1,2}):(\d{1,2})\.(\d{1,3})")


def parse_timestamp(timestamp: str) -> float:
    """Parse an ASS timestamp ("H:MM:SS.cc") to seconds."""
    match = _TIMESTAMP_RE.fullmatch(timestamp.strip())
    if not match:
        raise ValueError(f"Invalid timestamp format: {timestamp}")

    hours, minutes, seconds, fraction = match.groups()
    # Same float as the decimal literal, e.g. 3601.239
    whole = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    return float(f"{whole}.{fraction}")


def format_timestamp(seconds: float) -> str:
    """Format seconds as ASS timestamp (H:MM:SS.cc)."""
    total_centis = max(0, round(seconds * 100))
    hours, rest = divmod(total_centis, 360_000)
    minutes, rest = divmod(rest, 6000)
    secs, centis = divmod(rest, 100)
    return f"{hours:d}:{minutes:02d}:{secs:02d}.{centis:02d}"


def shift_ass_lines(lines: Iterable[str], offset: float) -> Iterator[str]:
    """Shift ASS dialogue events so that ``offset`` becomes time zero.

    Non-dialogue lines pass through untouched. Dialogue events starting
    before the offset are dropped.

    Args:
        lines: Input lines without line terminators
        offset: Seek offset in seconds

    Yields:
        Output lines without line terminators
    """
    for line in lines:
        if not line.startswith(DIALOGUE_PREFIX):
            yield line
            continue

        fields = line.split(",")
        try:
            start = parse_timestamp(fields[1])
            end = parse_timestamp(fields[2])
        except (ValueError, IndexError):
            logger.warning("Skipping dialogue with malformed timing: %r", line)
            continue

        if start < offset:
            continue

        fields[1] = format_timestamp(start - offset)
        fields[2] = format_timestamp(end - offset)
        yield ",".join(fields)
