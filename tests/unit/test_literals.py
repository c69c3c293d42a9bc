"""
Тесты для разбора числовых литералов

Проверяет:
1. Целые литералы (dec/hex/bin/oct) и разделители разрядов
2. Вещественные литералы (decimal и hex-float)
3. Ведущий минус как унарное отрицание
4. Отказ для некорректного текста и целых больше 64 бит
"""

import numpy as np
import pytest

from valconst import (
    U64_MAX,
    IntegerConstant,
    RealConstant,
    ValuePreservingCastError,
    literal,
)
from valconst.core.literals import ParsedLiteral, parse_literal


class TestIntegerLiterals:
    """Тесты целых литералов"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123", 123),
            ("0", 0),
            ("0x7fff", 0x7FFF),
            ("0XFF", 0xFF),
            ("0b1011", 0b1011),
            ("0755", 0o755),
            ("02", 2),
            ("0x100'0001", 0x1000001),
            ("1_000_000", 1_000_000),
            ("0xa'b", 0xAB),
            ("0xE'E", 0xEE),
            ("0b1'0", 0b10),
            ("18446744073709551615", U64_MAX),
        ],
    )
    def test_values(self, text, expected) -> None:
        assert parse_literal(text) == ParsedLiteral(expected, False)

    def test_leading_minus(self) -> None:
        assert parse_literal("-0x8000") == ParsedLiteral(0x8000, True)
        assert parse_literal(" - 5 ") == ParsedLiteral(5, True)

    def test_beyond_u64_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds 64 bits"):
            parse_literal("18446744073709551616")

    def test_literal_builds_integer_constant(self) -> None:
        c = literal("-0x8000")
        assert isinstance(c, IntegerConstant)
        assert c.convert_to(np.int16) == -32768


class TestRealLiterals:
    """Тесты вещественных литералов"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            (".5", 0.5),
            ("2.", 2.0),
            ("1.25", 1.25),
            ("1'000.25", 1000.25),
            ("1e1'0", 1e10),
            ("1e3", 1000.0),
            (".2e1", 2.0),
            ("0x1.8p3", 12.0),
            ("0x.8p1", 1.0),
            ("0x10p-4", 1.0),
        ],
    )
    def test_values(self, text, expected) -> None:
        parsed = parse_literal(text)
        assert isinstance(parsed.value, np.longdouble)
        assert parsed.value == expected
        assert parsed.negative is False

    def test_literal_builds_real_constant(self) -> None:
        c = literal("-.5")
        assert isinstance(c, RealConstant)
        assert c.convert_to(float) == -0.5

    def test_point_one_not_float32(self) -> None:
        with pytest.raises(ValuePreservingCastError):
            literal("0.1").convert_to(np.float32)


class TestInvalidLiterals:
    """Некорректный текст"""

    @pytest.mark.parametrize(
        "text",
        [
            "", "-", "abc", "08", "0x", "1''0", "'1", "1'", "1.2.3", "0x1.8", "1e",
            # разделитель рядом с показателем степени
            "1'e5", "1e'5", "1_e5", "2.5'e1",
        ],
    )
    def test_rejected(self, text) -> None:
        with pytest.raises(ValueError):
            parse_literal(text)
