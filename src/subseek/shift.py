"""Charset normalization and seek alignment of external subtitle files."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Iterator

from .ass import shift_ass_lines
from .charset import OUTPUT_ENCODING, select_decoding_charset
from .config import Config
from .models import SubtitleFormat, SubtitleTrack
from .srt import shift_srt_lines

logger = logging.getLogger(__name__)

LineShifter = Callable[[Iterable[str], float], Iterator[str]]

SHIFTERS: dict[SubtitleFormat, LineShifter] = {
    SubtitleFormat.ASS: shift_ass_lines,
    SubtitleFormat.SUBRIP: shift_srt_lines,
}


def _create_output_file(source: Path, temp_dir: Path) -> Path:
    """Create an empty, uniquely named scratch file for ``source``."""
    temp_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(prefix=f"{source.stem}_", suffix=".tmp", dir=temp_dir)
    os.close(fd)
    return Path(name)


def shift_subtitles(
    track: SubtitleTrack | None,
    offset: float,
    config: Config | None = None,
) -> Path | None:
    """Rewrite a subtitle file as UTF-8 with timestamps rebased to ``offset``.

    The source file is never modified. The rewritten copy is placed in the
    configured temp directory and belongs to the caller.

    Args:
        track: External subtitle track to convert
        offset: Seek offset in seconds
        config: Configuration supplying the forced codepage and temp directory

    Returns:
        Path to the rewritten file, or None if the format can't be shifted
    """
    if track is None:
        raise ValueError("Subtitle track is required")
    if offset < 0:
        raise ValueError(f"Seek offset must not be negative: {offset}")

    shifter = SHIFTERS.get(track.format)
    if shifter is None:
        logger.info("Not shifting %s subtitles: %s", track.format.value, track.path)
        return None

    config = config or Config.from_env()
    forced = config.subtitles_codepage if config.has_forced_codepage() else None
    charset = select_decoding_charset(track.charset, forced, track.is_utf)

    with open(track.path, encoding=charset, errors="replace") as reader:
        output_path = _create_output_file(track.path, config.temp_dir)
        with open(output_path, "w", encoding=OUTPUT_ENCODING, newline="\n") as writer:
            lines = (line.rstrip("\r\n") for line in reader)
            for line in shifter(lines, offset):
                writer.write(line + "\n")

    logger.info(
        "Shifted %s by %.3fs into %s (decoded as %s)",
        track.path,
        offset,
        output_path,
        charset,
    )
    return output_path
