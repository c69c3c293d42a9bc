"""
Тесты для ValuePreservingCastError и места конверсии

Проверяет:
1. Фиксированное сообщение и иерархию исключения
2. Место конверсии указывает на код вызывающего, а не на библиотеку
3. SourceLocation как immutable модель
4. DEBUG-лог с внутренним исходом проверки
"""

import inspect
import logging
import os

import numpy as np
import pytest
from pydantic import ValidationError

from valconst import (
    VALUE_PRESERVING_MESSAGE,
    SourceLocation,
    ValuePreservingCastError,
    lift_real,
    lift_unsigned,
    val,
)
from valconst.core.errors import capture_site

CONVERSION_LOGGER = "valconst.core.conversion"


class TestErrorPayload:
    """Тесты содержимого ошибки"""

    def test_fixed_message(self) -> None:
        with pytest.raises(ValuePreservingCastError) as excinfo:
            lift_unsigned(0x8000).convert_to(np.int16)
        assert str(excinfo.value) == VALUE_PRESERVING_MESSAGE
        assert excinfo.value.message == "conversion is not value preserving"

    def test_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            lift_real(0.1).convert_to(np.float32)

    def test_explicit_location(self) -> None:
        where = SourceLocation(file="model.py", line=3, column=7, function="step")
        error = ValuePreservingCastError(where)
        assert error.where is where
        assert str(error) == VALUE_PRESERVING_MESSAGE


class TestConversionSite:
    """Место конверсии в коде вызывающего"""

    def test_explicit_conversion_site(self) -> None:
        expected_line = inspect.currentframe().f_lineno + 2
        with pytest.raises(ValuePreservingCastError) as excinfo:
            lift_unsigned(0x8000).convert_to(np.int16)
        where = excinfo.value.where
        assert os.path.basename(where.file) == os.path.basename(__file__)
        assert where.line == expected_line
        assert where.function == "test_explicit_conversion_site"

    def test_operator_site(self) -> None:
        expected_line = inspect.currentframe().f_lineno + 2
        with pytest.raises(ValuePreservingCastError) as excinfo:
            np.int16(1) + val(0x8000)
        where = excinfo.value.where
        assert where.line == expected_line
        assert where.function == "test_operator_site"

    def test_column_when_available(self) -> None:
        with pytest.raises(ValuePreservingCastError) as excinfo:
            lift_real(0.5).convert_to(int)
        column = excinfo.value.where.column
        assert column is None or column >= 1

    def test_capture_site_outside_library(self) -> None:
        where = capture_site()
        assert where.function == "test_capture_site_outside_library"
        assert where.line > 0


class TestSourceLocation:
    """Тесты SourceLocation"""

    def test_str_without_column(self) -> None:
        assert str(SourceLocation(file="a.py", line=10)) == "a.py:10"

    def test_str_with_column(self) -> None:
        assert str(SourceLocation(file="a.py", line=10, column=5)) == "a.py:10:5"

    def test_frozen(self) -> None:
        where = SourceLocation(file="a.py", line=10)
        with pytest.raises(ValidationError):
            where.line = 11

    def test_invalid_column(self) -> None:
        with pytest.raises(ValidationError):
            SourceLocation(file="a.py", line=1, column=0)


class TestRejectionLogging:
    """DEBUG-лог различает причины отказа"""

    def test_out_of_range_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=CONVERSION_LOGGER)
        with pytest.raises(ValuePreservingCastError):
            lift_unsigned(0x8000).convert_to(np.int16)
        assert "out_of_range" in caplog.text
        assert "int16" in caplog.text

    def test_precision_loss_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=CONVERSION_LOGGER)
        with pytest.raises(ValuePreservingCastError):
            lift_unsigned(0x1000001).convert_to(np.float32)
        assert "precision_loss" in caplog.text
        assert "0x1000001" in caplog.text

    def test_success_not_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=CONVERSION_LOGGER)
        lift_unsigned(0x7FFF).convert_to(np.int16)
        assert caplog.records == []
