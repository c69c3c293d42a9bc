"""
Untyped Constants - IntegerConstant и RealConstant

Immutable value objects для числовых литералов, которые ещё не привязаны
к конкретному типу фиксированной ширины. Привязка происходит в момент
потребления (convert_to, арифметика, сравнение) и только если значение
сохраняется точно.

Создание (lifting):
- lift_unsigned(x): модуль = x, знак положительный
- lift_signed(x): знак и модуль (модуль считается в неограниченных int,
  поэтому самое отрицательное значение представимо)
- lift_real(x): значение в расширенной точности (numpy.longdouble)
- val(x): выбор одного из вышеперечисленных по типу аргумента

Неявных __int__/__float__ нет: конструктор numpy.float32(c) иначе сузил бы
значение без проверки. Единственная явная конверсия - convert_to(T).
"""

from typing import Any, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from valconst.core.conversion import convert_integer, convert_real
from valconst.core.limits import (
    COMPLEMENT_INTEGER_MESSAGE,
    COMPLEMENT_REAL_MESSAGE,
    LOGICAL_NOT_MESSAGE,
    U64_MAX,
)
from valconst.core.literals import parse_literal
from valconst.core.overlay import ConstantOperators
from valconst.core.targets import NumericTarget, resolve_target


# =============================================================================
# INTEGER CONSTANT
# =============================================================================


class IntegerConstant(ConstantOperators, BaseModel):
    """
    Untyped целочисленная константа: знак + 64-битный модуль.

    Immutable модель (frozen=True). "Отрицательный ноль" (magnitude=0,
    negative=True) допустим и ведёт себя как ноль при любой конверсии.
    """

    magnitude: int = Field(..., ge=0, le=U64_MAX, description="Модуль значения (u64)")
    negative: bool = Field(default=False, description="Знак")

    model_config = ConfigDict(frozen=True, strict=True)

    def __neg__(self) -> "IntegerConstant":
        return IntegerConstant(magnitude=self.magnitude, negative=not self.negative)

    def __pos__(self) -> "IntegerConstant":
        return self

    def __invert__(self):
        raise TypeError(COMPLEMENT_INTEGER_MESSAGE)

    def __bool__(self):
        raise TypeError(LOGICAL_NOT_MESSAGE)

    def _value_key(self) -> int:
        # -0 и 0 дают один и тот же int
        return -self.magnitude if self.negative else self.magnitude

    def _convert_for(self, target: NumericTarget) -> Any:
        return convert_integer(self.magnitude, self.negative, target)

    def convert_to(self, target: Any) -> Any:
        """
        Конверсия в конкретный тип с проверкой сохранения значения.

        Args:
            target: numpy.int8 ... numpy.longdouble, int, float или dtype

        Returns:
            Значение типа target, равное константе

        Raises:
            ValuePreservingCastError: Если значение не представимо точно
            TypeError: Если target не арифметический тип
        """
        return self._convert_for(resolve_target(target))


# =============================================================================
# REAL CONSTANT
# =============================================================================


class RealConstant(ConstantOperators, BaseModel):
    """
    Untyped вещественная константа в расширенной точности.

    Immutable модель (frozen=True). Знак хранится в самом значении.
    """

    value: np.longdouble = Field(..., description="Значение (long double)")

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_extended(cls, v: Any) -> np.longdouble:
        """Приведение к numpy.longdouble без потери точности источника."""
        if isinstance(v, (bool, np.bool_)):
            raise ValueError("bool is not a real value")
        if not isinstance(v, (int, float, np.integer, np.floating)):
            raise ValueError(f"expected a real number, got {type(v).__name__}")
        return np.longdouble(v)

    def __neg__(self) -> "RealConstant":
        return RealConstant(value=-self.value)

    def __pos__(self) -> "RealConstant":
        return self

    def __invert__(self):
        raise TypeError(COMPLEMENT_REAL_MESSAGE)

    def __bool__(self):
        raise TypeError(LOGICAL_NOT_MESSAGE)

    def _value_key(self) -> np.longdouble:
        return self.value

    def _convert_for(self, target: NumericTarget) -> Any:
        return convert_real(self.value, target)

    def convert_to(self, target: Any) -> Any:
        """
        Конверсия в конкретный тип с проверкой сохранения значения.

        Raises:
            ValuePreservingCastError: Если значение вне диапазона target или
                не представимо точно (например, 0.1 в float32)
            TypeError: Если target не арифметический тип
        """
        return self._convert_for(resolve_target(target))


Constant = Union[IntegerConstant, RealConstant]


# =============================================================================
# LIFTING
# =============================================================================


def _as_integral(x: Any, name: str) -> int:
    if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)):
        raise TypeError(f"{name} requires an integral value, got {type(x).__name__}")
    return int(x)


def lift_unsigned(x: Any) -> IntegerConstant:
    """
    IntegerConstant из беззнакового значения.

    Args:
        x: int >= 0 или numpy.unsignedinteger

    Raises:
        TypeError: Если x не целое
        ValueError: Если x отрицательное или больше U64_MAX
    """
    n = _as_integral(x, "lift_unsigned")
    if n < 0:
        raise ValueError(f"lift_unsigned requires a non-negative value, got {n}")
    return IntegerConstant(magnitude=n)


def lift_signed(x: Any) -> IntegerConstant:
    """
    IntegerConstant из знакового значения.

    Модуль отрицательного значения считается в неограниченных int, поэтому
    numpy.int32(-2**31) даёт magnitude=2**31.

    Examples:
        >>> lift_signed(-5)
        IntegerConstant(magnitude=5, negative=True)
    """
    n = _as_integral(x, "lift_signed")
    if n >= 0:
        return IntegerConstant(magnitude=n)
    return IntegerConstant(magnitude=-n, negative=True)


def lift_real(x: Any) -> RealConstant:
    """RealConstant из вещественного значения (сохраняется как есть)."""
    return RealConstant(value=x)


def val(x: Any) -> Constant:
    """
    Выбор lifting-функции по типу аргумента.

    - str: разбор литерала (literal)
    - numpy.unsignedinteger: lift_unsigned
    - int, numpy.signedinteger: lift_signed
    - float, numpy.floating: lift_real

    Raises:
        TypeError: Для bool и нечисловых аргументов
    """
    if isinstance(x, str):
        return literal(x)
    if isinstance(x, (bool, np.bool_)):
        raise TypeError(LOGICAL_NOT_MESSAGE)
    if isinstance(x, np.unsignedinteger):
        return lift_unsigned(x)
    if isinstance(x, (int, np.integer)):
        return lift_signed(x)
    if isinstance(x, (float, np.floating)):
        return lift_real(x)
    raise TypeError(f"cannot make a numeric constant from {type(x).__name__}")


def convert_to(constant: Constant, target: Any) -> Any:
    """Функциональная форма constant.convert_to(target)."""
    return constant.convert_to(target)


def literal(text: str) -> Constant:
    """
    Константа из текста числового литерала.

    Examples:
        >>> literal("0x100'0001")
        IntegerConstant(magnitude=16777217, negative=False)
        >>> literal("-.5").convert_to(float)
        -0.5

    Raises:
        ValueError: Если текст не является литералом или целое больше U64_MAX
    """
    parsed = parse_literal(text)
    if isinstance(parsed.value, int):
        constant: Constant = lift_unsigned(parsed.value)
    else:
        constant = lift_real(parsed.value)
    return -constant if parsed.negative else constant
