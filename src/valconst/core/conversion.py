"""
ConversionCheck - проверка сохранения значения при конверсии

Общий алгоритм для IntegerConstant и RealConstant: решает, можно ли
преобразовать untyped-константу в конкретный тип без изменения значения,
и возвращает преобразованное значение.

Исходы проверки:
- EXACT: значение не меняется при round-trip через целевой тип
- OUT_OF_RANGE: целевой тип не может представить величину/порядок
- PRECISION_LOSS: мантисса/ширина целевого типа не вмещает точное значение

Наружу все неточные исходы выходят одной ошибкой ValuePreservingCastError;
различие видно только в DEBUG-логе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Суженное значение никогда не возвращается вызывающему коду
2. Проверка детерминирована и не имеет побочных эффектов
3. magnitude == -lowest допустим (например, -2**31 в int32)
"""

import logging
from enum import Enum
from typing import Any, NoReturn

import numpy as np

from valconst.core.errors import ValuePreservingCastError
from valconst.core.targets import NumericTarget

logger = logging.getLogger(__name__)


class ConversionOutcome(str, Enum):
    """Исход попытки конверсии"""

    EXACT = "exact"
    OUT_OF_RANGE = "out_of_range"
    PRECISION_LOSS = "precision_loss"


# =============================================================================
# INTEGER -> T
# =============================================================================


def check_integer(
    magnitude: int, negative: bool, target: NumericTarget
) -> tuple[ConversionOutcome, Any]:
    """
    Проверка конверсии целочисленной константы (знак + модуль) в target.

    Алгоритм:
        floating: r = T(magnitude); int(r) == magnitude, затем знак
        integral: negative и magnitude > -lowest -> OUT_OF_RANGE
                  не negative и magnitude > max  -> OUT_OF_RANGE

    Args:
        magnitude: Модуль значения (0 <= magnitude <= U64_MAX)
        negative: Знак
        target: Описание целевого типа

    Returns:
        (исход, значение); значение равно None, если исход не EXACT
    """
    if target.is_floating:
        with np.errstate(over="ignore", invalid="ignore"):
            r = target.numpy_type(magnitude)
        if not np.isfinite(r):
            return ConversionOutcome.OUT_OF_RANGE, None
        # 2**24 + 1 -> float32 округляется до 2**24
        if int(r) != magnitude:
            return ConversionOutcome.PRECISION_LOSS, None
        return ConversionOutcome.EXACT, target.scalar_type(-r if negative else r)

    if not target.is_bounded:
        return ConversionOutcome.EXACT, -magnitude if negative else magnitude

    if negative and magnitude > -target.lowest:
        return ConversionOutcome.OUT_OF_RANGE, None
    if not negative and magnitude > target.max:
        return ConversionOutcome.OUT_OF_RANGE, None
    return ConversionOutcome.EXACT, target.scalar_type(-magnitude if negative else magnitude)


# =============================================================================
# REAL -> T
# =============================================================================


def check_real(value: np.longdouble, target: NumericTarget) -> tuple[ConversionOutcome, Any]:
    """
    Проверка конверсии вещественной константы в target.

    Алгоритм:
        floating: value вне [lowest, max] -> OUT_OF_RANGE;
                  longdouble(T(value)) != value -> PRECISION_LOSS (в т.ч. NaN)
        integral: не конечное -> OUT_OF_RANGE; дробная часть -> PRECISION_LOSS;
                  int(value) вне [lowest, max] -> OUT_OF_RANGE

    Args:
        value: Значение в расширенной точности
        target: Описание целевого типа

    Returns:
        (исход, значение); значение равно None, если исход не EXACT

    Examples:
        >>> check_real(np.longdouble(0.5), resolve_target(np.float32))[0]
        <ConversionOutcome.EXACT: 'exact'>
        >>> check_real(np.longdouble(0.1), resolve_target(np.float32))[0]
        <ConversionOutcome.PRECISION_LOSS: 'precision_loss'>
    """
    if target.is_integral:
        if not np.isfinite(value):
            return ConversionOutcome.OUT_OF_RANGE, None
        if not value.is_integer():
            return ConversionOutcome.PRECISION_LOSS, None
        n = int(value)
        if target.is_bounded and not (target.lowest <= n <= target.max):
            return ConversionOutcome.OUT_OF_RANGE, None
        return ConversionOutcome.EXACT, target.scalar_type(n)

    if value > target.max or value < target.lowest:
        return ConversionOutcome.OUT_OF_RANGE, None
    with np.errstate(over="ignore", invalid="ignore", under="ignore"):
        r = target.numpy_type(value)
    if np.longdouble(r) != value:
        return ConversionOutcome.PRECISION_LOSS, None
    return ConversionOutcome.EXACT, target.scalar_type(r)


# =============================================================================
# RAISING ENTRY POINTS
# =============================================================================


def _reject(outcome: ConversionOutcome, source: str, target: NumericTarget) -> NoReturn:
    logger.debug("rejected conversion %s -> %s: %s", source, target.name, outcome.value)
    raise ValuePreservingCastError()


def convert_integer(magnitude: int, negative: bool, target: NumericTarget) -> Any:
    """
    Конверсия целочисленной константы с проверкой.

    Raises:
        ValuePreservingCastError: Если конверсия изменила бы значение
    """
    outcome, result = check_integer(magnitude, negative, target)
    if outcome is not ConversionOutcome.EXACT:
        _reject(outcome, f"{'-' if negative else ''}{magnitude:#x}", target)
    return result


def convert_real(value: np.longdouble, target: NumericTarget) -> Any:
    """
    Конверсия вещественной константы с проверкой.

    Raises:
        ValuePreservingCastError: Если конверсия изменила бы значение
    """
    outcome, result = check_real(value, target)
    if outcome is not ConversionOutcome.EXACT:
        _reject(outcome, repr(value), target)
    return result
