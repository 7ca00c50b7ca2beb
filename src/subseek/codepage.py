"""Transcoder codepage lookup for external subtitle charsets."""

import logging
from types import MappingProxyType

from .models import SubtitleTrack

logger = logging.getLogger(__name__)

_RUSSIAN = "enca:ru:cp1251"
_CHINESE = "enca:zh:big5"

# Detected charset -> value for the transcoder's subtitle codepage option
CODEPAGE_MAP = MappingProxyType(
    {
        # Cyrillic / Russian
        "IBM855": _RUSSIAN,
        "ISO-8859-5": _RUSSIAN,
        "KOI8-R": _RUSSIAN,
        "MacCyrillic": _RUSSIAN,
        "Windows-1251": _RUSSIAN,
        "IBM866": _RUSSIAN,
        # Greek
        "Windows-1253": "cp1253",
        "ISO-8859-7": "ISO-8859-7",
        # Western Europe
        "Windows-1252": "cp1252",
        # Hebrew
        "Windows-1255": "cp1255",
        "ISO-8859-8": "ISO-8859-8",
        # Chinese
        "ISO-2022-CN": "ISO-2022-CN",
        "Big5": _CHINESE,
        "GB18030": _CHINESE,
        "EUC-TW": _CHINESE,
        "HZ-GB-2312": _CHINESE,
        # Korean
        "ISO-2022-KR": "cp949",
        "EUC-KR": "euc-kr",
        # Japanese
        "ISO-2022-JP": "ISO-2022-JP",
        "EUC-JP": "euc-jp",
        "Shift_JIS": "shift-jis",
    }
)


def resolve_codepage(charset: str | None) -> str | None:
    """Return the transcoder codepage token for a detected charset.

    Args:
        charset: Charset name as produced by detection, may be blank or None

    Returns:
        Codepage token, or None when the charset is blank or unknown
    """
    if not charset or not charset.strip():
        return None
    token = CODEPAGE_MAP.get(charset)
    if token is None:
        logger.debug("No transcoder codepage for charset %s", charset)
    return token


def codepage_for_track(track: SubtitleTrack | None) -> str | None:
    """Return the transcoder codepage token for an external subtitle track."""
    if track is None:
        raise ValueError("Subtitle track is required")
    return resolve_codepage(track.charset)
