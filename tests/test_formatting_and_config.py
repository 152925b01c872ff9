"""格式化输出和配置校验"""
import math

import pytest

from config import config
from core import ErrorKind, error_message
from utils import format_result


class TestFormatResult:

    @pytest.mark.parametrize("value,expected", [
        (14.0, "14"),
        (0.5, "0.5"),
        (2 / 3, "0.666666666666667"),
        (1e20, "1E+20"),
        (1.5e-7, "1.5E-07"),
        (123456789012345678.0, "1.23456789012346E+17"),
        (math.pi, "3.14159265358979"),
        (math.inf, "INF"),
        (-math.inf, "-INF"),
        (math.nan, "NAN"),
    ])
    def test_default_precision(self, value, expected):
        assert format_result(value) == expected

    def test_custom_precision(self):
        assert format_result(math.pi, 4) == "3.142"
        assert format_result(0.1 + 0.2, 17) == "0.30000000000000004"

    @pytest.mark.parametrize("precision", [0, 18, -1])
    def test_precision_out_of_range(self, precision):
        with pytest.raises(ValueError):
            format_result(1.0, precision)


class TestConfig:

    def test_default_config_is_valid(self):
        config.validate_config()

    def test_invalid_precision(self, monkeypatch):
        monkeypatch.setitem(config.CALC_CONFIG, "precision", 40)
        with pytest.raises(AssertionError):
            config.validate_config()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setitem(config.LOGGING_CONFIG, "level", "LOUD")
        with pytest.raises(AssertionError):
            config.validate_config()


class TestErrorMessages:

    def test_every_kind_has_a_message(self):
        assert len(ErrorKind) == 16
        for kind in ErrorKind:
            assert error_message(kind)

    def test_messages(self):
        assert error_message(ErrorKind.STACK_UNDERFLOW) == "stack underflow"
        assert error_message(ErrorKind.MISSING_LEFT_PARENTHESIS) == "missing ( after function name"
