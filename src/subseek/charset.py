"""Charset detection and decoding charset selection."""

import codecs
import locale
import logging
from pathlib import Path

import chardet

from .codepage import CODEPAGE_MAP

logger = logging.getLogger(__name__)

# Universal encoding for every rewritten subtitle file
OUTPUT_ENCODING = "utf-8"

UTF_CHARSETS = ("UTF-8", "UTF-16", "UTF-16BE", "UTF-16LE", "UTF-32", "UTF-32BE", "UTF-32LE")

# Lowercased detector spelling -> canonical charset name
_CANONICAL_NAMES = {name.lower(): name for name in (*CODEPAGE_MAP, *UTF_CHARSETS)}
_CANONICAL_NAMES.update(
    {
        "utf-8-sig": "UTF-8",
        "ascii": "US-ASCII",
        "gb2312": "GB18030",
    }
)


def canonical_charset(name: str | None) -> str | None:
    """Normalize a detector charset name to its canonical spelling."""
    if not name or not name.strip():
        return None
    name = name.strip()
    return _CANONICAL_NAMES.get(name.lower(), name)


def detect_charset(path: str | Path) -> str | None:
    """Detect the charset of a subtitle file.

    Args:
        path: Path to the subtitle file

    Returns:
        Canonical charset name, or None if nothing could be detected
    """
    with open(path, "rb") as f:
        result = chardet.detect(f.read())
    charset = canonical_charset(result.get("encoding"))
    logger.debug(
        "Detected charset %s (confidence %s) for %s",
        charset,
        result.get("confidence"),
        path,
    )
    return charset


def is_utf_charset(charset: str | None) -> bool:
    return bool(charset) and charset.upper().startswith("UTF-")


def is_supported(charset: str | None) -> bool:
    """Check whether Python can decode text in the given charset."""
    if not charset or not charset.strip():
        return False
    try:
        codecs.lookup(charset.strip())
    except LookupError:
        return False
    return True


def select_decoding_charset(
    detected: str | None, forced: str | None = None, is_utf: bool = False
) -> str:
    """Pick the charset used to read an external subtitle file.

    A forced codepage wins unless the file is already known to be UTF
    encoded, then the detected charset, then the platform default.
    """
    if is_supported(forced) and not is_utf:
        charset = forced.strip()
        source = "forced"
    elif is_supported(detected):
        charset = detected.strip()
        source = "detected"
    else:
        charset = locale.getpreferredencoding(False)
        source = "platform default"

    # Python's utf-8 codec keeps the BOM as text
    if codecs.lookup(charset).name == "utf-8":
        charset = "utf-8-sig"

    logger.debug("Decoding subtitles as %s (%s)", charset, source)
    return charset
