"""Configuration management via environment variables."""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration loaded from environment."""

    subtitles_codepage: str | None = None
    temp_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        load_dotenv()
        temp_dir = os.getenv("SUBSEEK_TEMP_DIR")
        log_level = os.getenv("SUBSEEK_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SUBSEEK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )
        return cls(
            subtitles_codepage=os.getenv("SUBSEEK_SUBTITLES_CODEPAGE") or None,
            temp_dir=Path(temp_dir) if temp_dir else Path(tempfile.gettempdir()),
            log_level=log_level,
        )

    def has_forced_codepage(self) -> bool:
        """Check if a subtitle codepage is forced in configuration."""
        return bool(self.subtitles_codepage and self.subtitles_codepage.strip())
