"""
valconst - value-preserving untyped numeric constants

Целочисленные и вещественные константы без фиксированного типа. Конверсия
в конкретный тип (NumPy scalar, int, float) происходит в момент
потребления и только если значение сохраняется точно; иначе
ValuePreservingCastError с местом конверсии.

    >>> import numpy as np
    >>> from valconst import val
    >>> np.int16(100) + val(0x7000)
    np.int16(28772)
"""

from valconst.core import (
    U64_MAX,
    VALUE_PRESERVING_MESSAGE,
    Constant,
    IntegerConstant,
    NumericTarget,
    RealConstant,
    SourceLocation,
    ValuePreservingCastError,
    convert_to,
    lift_real,
    lift_signed,
    lift_unsigned,
    literal,
    resolve_target,
    val,
)

__all__ = [
    "U64_MAX",
    "VALUE_PRESERVING_MESSAGE",
    "Constant",
    "IntegerConstant",
    "NumericTarget",
    "RealConstant",
    "SourceLocation",
    "ValuePreservingCastError",
    "convert_to",
    "lift_real",
    "lift_signed",
    "lift_unsigned",
    "literal",
    "resolve_target",
    "val",
]
