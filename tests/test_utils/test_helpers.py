import pytest

from loganizer.utils.helpers import (
    ConfigError,
    ExportError,
    LoganizerError,
    format_duration,
    merge_dicts,
)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "0.000ms"),
            (0.1234567, "123.457ms"),
            (0.05, "50.000ms"),
            (1.25, "1.250s"),
            (59.5, "59.500s"),
            (125, "2m5.000s"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_negative(self):
        with pytest.raises(ValueError):
            format_duration(-1)


class TestMergeDicts:
    def test_deep_merge(self):
        base = {"analysis": {"seed": None, "failure_rate": 0.1}, "output": {"indent": 2}}

        merged = merge_dicts(base, {"analysis": {"seed": 4}, "extra": True})

        assert merged == {
            "analysis": {"seed": 4, "failure_rate": 0.1},
            "output": {"indent": 2},
            "extra": True,
        }
        assert base["analysis"]["seed"] is None


def test_error_hierarchy():
    assert issubclass(ConfigError, LoganizerError)
    assert issubclass(ExportError, LoganizerError)
