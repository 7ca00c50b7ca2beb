"""
Tests for transcoder codepage resolution.
"""

import pytest

from subseek.codepage import CODEPAGE_MAP, codepage_for_track, resolve_codepage
from subseek.models import SubtitleTrack

EXPECTED = {
    "IBM855": "enca:ru:cp1251",
    "ISO-8859-5": "enca:ru:cp1251",
    "KOI8-R": "enca:ru:cp1251",
    "MacCyrillic": "enca:ru:cp1251",
    "Windows-1251": "enca:ru:cp1251",
    "IBM866": "enca:ru:cp1251",
    "Windows-1253": "cp1253",
    "ISO-8859-7": "ISO-8859-7",
    "Windows-1252": "cp1252",
    "Windows-1255": "cp1255",
    "ISO-8859-8": "ISO-8859-8",
    "ISO-2022-CN": "ISO-2022-CN",
    "Big5": "enca:zh:big5",
    "GB18030": "enca:zh:big5",
    "EUC-TW": "enca:zh:big5",
    "HZ-GB-2312": "enca:zh:big5",
    "ISO-2022-KR": "cp949",
    "EUC-KR": "euc-kr",
    "ISO-2022-JP": "ISO-2022-JP",
    "EUC-JP": "euc-jp",
    "Shift_JIS": "shift-jis",
}


class TestResolveCodepage:
    """Test charset to codepage token lookup."""

    @pytest.mark.parametrize("charset,token", sorted(EXPECTED.items()))
    def test_known_charsets(self, charset, token):
        assert resolve_codepage(charset) == token

    def test_map_has_no_extra_entries(self):
        assert dict(CODEPAGE_MAP) == EXPECTED

    def test_koi8r(self):
        assert resolve_codepage("KOI8-R") == "enca:ru:cp1251"

    @pytest.mark.parametrize("charset", [None, "", "   "])
    def test_blank_is_unresolved(self, charset):
        assert resolve_codepage(charset) is None

    @pytest.mark.parametrize("charset", ["UTF-8", "US-ASCII", "koi8-r", "nonsense"])
    def test_unknown_is_unresolved(self, charset):
        assert resolve_codepage(charset) is None

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            CODEPAGE_MAP["UTF-8"] = "utf8"


class TestCodepageForTrack:
    """Test track-level codepage lookup."""

    def test_track_charset(self, tmp_path):
        track = SubtitleTrack(path=tmp_path / "a.srt", charset="EUC-KR")
        assert codepage_for_track(track) == "euc-kr"

    def test_track_without_charset(self, tmp_path):
        track = SubtitleTrack(path=tmp_path / "a.srt")
        assert codepage_for_track(track) is None

    def test_missing_track(self):
        with pytest.raises(ValueError):
            codepage_for_track(None)
