"""
Targets - описание конкретных арифметических типов

Конкретный тип (NumPy scalar, builtin int/float) описывается через
NumericTarget: вид (integral/floating), представимый диапазон
[lowest, max] и тип результата. Это единственная информация о типе,
которая нужна ConversionCheck.

Поддерживаемые типы:
- numpy.int8 ... numpy.uint64 (и любые dtype с целым видом)
- numpy.float16, float32, float64, longdouble
- builtin float (binary64, результат - float)
- builtin int (неограниченный, любая целочисленная константа точна)

bool и numpy.bool_ не являются арифметическими целями.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Union

import numpy as np

Bound = Optional[Union[int, np.longdouble]]


class TargetKind(str, Enum):
    """Вид конкретного типа"""

    INTEGRAL = "integral"
    FLOATING = "floating"


@dataclass(frozen=True)
class NumericTarget:
    """
    Представимый диапазон и представление конкретного типа.

    Для integral-типов lowest/max - Python int; для floating -
    numpy.longdouble (сравнение в расширенной точности). Для builtin int
    обе границы None.
    """

    name: str
    kind: TargetKind
    scalar_type: type
    numpy_type: Optional[type]
    lowest: Bound
    max: Bound

    @property
    def is_integral(self) -> bool:
        return self.kind is TargetKind.INTEGRAL

    @property
    def is_floating(self) -> bool:
        return self.kind is TargetKind.FLOATING

    @property
    def is_bounded(self) -> bool:
        return self.lowest is not None


_PYTHON_INT = NumericTarget(
    name="int",
    kind=TargetKind.INTEGRAL,
    scalar_type=int,
    numpy_type=None,
    lowest=None,
    max=None,
)


def _floating_target(numpy_type: type, scalar_type: type, name: str) -> NumericTarget:
    info = np.finfo(numpy_type)
    return NumericTarget(
        name=name,
        kind=TargetKind.FLOATING,
        scalar_type=scalar_type,
        numpy_type=numpy_type,
        lowest=np.longdouble(info.min),
        max=np.longdouble(info.max),
    )


@lru_cache(maxsize=None)
def resolve_target(target: Any) -> NumericTarget:
    """
    NumericTarget для конкретного типа.

    Args:
        target: Тип (numpy.int16, float, int, ...), numpy.dtype или
            dtype-строка ('int16', 'float32')

    Returns:
        Описание диапазона и представления типа

    Raises:
        TypeError: Если target не является арифметическим типом

    Examples:
        >>> resolve_target(np.int16).max
        32767
        >>> resolve_target(int).is_bounded
        False
    """
    if target is int:
        return _PYTHON_INT
    if target is float:
        return _floating_target(np.float64, float, "float")

    if target is None:
        raise TypeError("None is not an arithmetic type")

    try:
        dtype = np.dtype(target)
    except (TypeError, ValueError):
        raise TypeError(f"{target!r} is not an arithmetic type")

    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        return NumericTarget(
            name=dtype.name,
            kind=TargetKind.INTEGRAL,
            scalar_type=dtype.type,
            numpy_type=dtype.type,
            lowest=int(info.min),
            max=int(info.max),
        )
    if dtype.kind == "f":
        return _floating_target(dtype.type, dtype.type, dtype.name)

    raise TypeError(f"{target!r} is not an arithmetic type")


def target_of(operand: Any) -> Optional[NumericTarget]:
    """
    NumericTarget конкретного операнда арифметического выражения.

    Args:
        operand: Значение на другой стороне оператора

    Returns:
        Описание типа операнда или None, если операнд не является
        конкретным арифметическим значением (тогда оператор не определён)
    """
    if isinstance(operand, (bool, np.bool_)):
        return None
    if isinstance(operand, (np.integer, np.floating)):
        try:
            return resolve_target(type(operand))
        except TypeError:
            # numpy.timedelta64 наследует signedinteger
            return None
    if isinstance(operand, int):
        return _PYTHON_INT
    if isinstance(operand, float):
        return resolve_target(float)
    return None
