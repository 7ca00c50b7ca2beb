"""SubRip timestamp handling and time shifting."""

import logging
import re
from typing import Iterable, Iterator

from .models import SubtitleEntry

logger = logging.getLogger(__name__)

ARROW = "-->"

_TIMESTAMP_RE = re.compile(r"(\d+):(\d{1,2}):(\d{1,2})[,.](\d{1,3})")


def parse_timestamp(timestamp: str) -> float:
    """Parse SRT timestamp to seconds.

    Args:
        timestamp: SRT timestamp format "HH:MM:SS,mmm"

    Returns:
        Time in seconds
    """
    match = _TIMESTAMP_RE.match(timestamp.strip())
    if not match:
        raise ValueError(f"Invalid timestamp format: {timestamp}")

    hours, minutes, seconds, fraction = match.groups()
    # Same float as the decimal literal, e.g. 3601.239
    whole = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    return float(f"{whole}.{fraction}")


def format_timestamp(seconds: float) -> str:
    """Format seconds as SRT timestamp (HH:MM:SS,mmm)."""
    total_millis = max(0, round(seconds * 1000))
    hours, rest = divmod(total_millis, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def to_srt_block(entry: SubtitleEntry, index: int) -> list[str]:
    """Render an entry as SRT lines, including the trailing blank line."""
    timing = f"{format_timestamp(entry.start)} {ARROW} {format_timestamp(entry.end)}"
    return [str(index), timing, *entry.lines, ""]


def shift_srt_lines(lines: Iterable[str], offset: float) -> Iterator[str]:
    """Shift SubRip cues so that ``offset`` becomes time zero.

    Cues starting before the offset are dropped together with their text.
    Surviving cues are renumbered from 1 in order of appearance.

    Args:
        lines: Input lines without line terminators
        offset: Seek offset in seconds

    Yields:
        Output lines without line terminators
    """
    lines = iter(lines)
    index = 1

    for line in lines:
        if ARROW not in line:
            continue

        start_text, _, end_text = line.partition(ARROW)
        try:
            start = parse_timestamp(start_text)
            end = parse_timestamp(end_text)
        except ValueError:
            logger.warning("Skipping cue with malformed timing: %r", line)
            continue

        if start < offset:
            continue

        text = []
        for text_line in lines:
            if not text_line.strip():
                break
            text.append(text_line)

        entry = SubtitleEntry(start=start, end=end, lines=text)
        yield from to_srt_block(entry.shifted(offset), index)
        index += 1
