"""Data models for subseek."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class SubtitleFormat(str, Enum):
    """Subtitle file formats known to the media server."""

    ASS = "ass"
    SUBRIP = "srt"
    MICRODVD = "sub"
    SAMI = "smi"
    WEBVTT = "vtt"
    VOBSUB = "idx"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_path(cls, path: str | Path) -> "SubtitleFormat":
        """Classify a subtitle file by its extension."""
        suffix = Path(path).suffix.lower().lstrip(".")
        if suffix == "ssa":
            return cls.ASS
        try:
            return cls(suffix)
        except ValueError:
            return cls.UNSUPPORTED


class SubtitleEntry(BaseModel):
    """A single subtitle cue with timing and text."""

    start: float  # seconds
    end: float  # seconds
    lines: list[str]

    def shifted(self, offset: float) -> "SubtitleEntry":
        return SubtitleEntry(
            start=self.start - offset, end=self.end - offset, lines=self.lines
        )


class SubtitleTrack(BaseModel):
    """An external subtitle file as described by media identification."""

    path: Path
    format: SubtitleFormat = SubtitleFormat.UNSUPPORTED
    charset: str | None = None
    is_utf: bool = False

    @classmethod
    def from_file(cls, path: str | Path, detect: bool = True) -> "SubtitleTrack":
        """Build a track for a file, detecting its charset if requested."""
        from .charset import detect_charset, is_utf_charset

        path = Path(path)
        charset = detect_charset(path) if detect else None
        return cls(
            path=path,
            format=SubtitleFormat.from_path(path),
            charset=charset,
            is_utf=is_utf_charset(charset),
        )
