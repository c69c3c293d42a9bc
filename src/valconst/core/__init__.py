"""
Core modules для valconst

Untyped-константы, проверка сохранения значения и операторы.
"""

# Limits
from valconst.core.limits import (
    MAGNITUDE_BITS,
    U64_MAX,
    VALUE_PRESERVING_MESSAGE,
)

# Errors
from valconst.core.errors import (
    SourceLocation,
    ValuePreservingCastError,
    capture_site,
)

# Targets
from valconst.core.targets import (
    NumericTarget,
    TargetKind,
    resolve_target,
    target_of,
)

# ConversionCheck
from valconst.core.conversion import (
    ConversionOutcome,
    check_integer,
    check_real,
    convert_integer,
    convert_real,
)

# Literals
from valconst.core.literals import ParsedLiteral, parse_literal

# Constants
from valconst.core.constants import (
    Constant,
    IntegerConstant,
    RealConstant,
    convert_to,
    lift_real,
    lift_signed,
    lift_unsigned,
    literal,
    val,
)

__all__ = [
    # Limits
    "MAGNITUDE_BITS",
    "U64_MAX",
    "VALUE_PRESERVING_MESSAGE",
    # Errors
    "SourceLocation",
    "ValuePreservingCastError",
    "capture_site",
    # Targets
    "NumericTarget",
    "TargetKind",
    "resolve_target",
    "target_of",
    # ConversionCheck
    "ConversionOutcome",
    "check_integer",
    "check_real",
    "convert_integer",
    "convert_real",
    # Literals
    "ParsedLiteral",
    "parse_literal",
    # Constants
    "Constant",
    "IntegerConstant",
    "RealConstant",
    "convert_to",
    "lift_real",
    "lift_signed",
    "lift_unsigned",
    "literal",
    "val",
]
