"""
Unit tests for trim range parsing and -ss / -to flag generation.
"""
import pytest

from ffmpeg_batch.common import flatten_groups
from ffmpeg_batch.common_filters import parse_trim, trim_flag_groups

from tests.fixtures.ffmpeg_factories import create_option_set


def _trim_args(trim: str):
    return flatten_groups(trim_flag_groups(create_option_set(trim=trim)))


class TestParseTrim:

    def test_start_and_end(self):
        assert parse_trim("10,20") == ("10", "20")

    def test_keeps_empty_sides(self):
        assert parse_trim("10,") == ("10", "")
        assert parse_trim(",20") == ("", "20")

    @pytest.mark.parametrize("trim", ["bad", "a,b,c", "1,2,3,4"])
    def test_wrong_part_count(self, trim):
        assert parse_trim(trim) is None


class TestTrimFlags:

    def test_start_and_end(self):
        assert _trim_args("10,20") == ["-ss", "10", "-to", "20"]

    def test_only_start(self):
        assert _trim_args("10,") == ["-ss", "10"]

    def test_only_end(self):
        assert _trim_args(",20") == ["-to", "20"]

    def test_timestamps_pass_through(self):
        assert _trim_args("00:01:00,00:02:30.5") == ["-ss", "00:01:00", "-to", "00:02:30.5"]

    @pytest.mark.parametrize("trim", ["bad", "a,b,c", ",", ""])
    def test_malformed_or_empty_yields_nothing(self, trim):
        """Malformed trim ranges are ignored rather than reported."""
        assert _trim_args(trim) == []
