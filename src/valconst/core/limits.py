"""
Limits - границы представления и фиксированные сообщения

Единственное место, где объявлены числовые границы untyped-констант и
тексты ошибок. Остальные модули импортируют их отсюда.
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина модуля целочисленной константы (unsigned long long)
MAGNITUDE_BITS: Final[int] = 64

# Максимальный модуль IntegerConstant
U64_MAX: Final[int] = (1 << MAGNITUDE_BITS) - 1


# =============================================================================
# СООБЩЕНИЯ
# =============================================================================

# Фиксированный текст ValuePreservingCastError (без значения и типа)
VALUE_PRESERVING_MESSAGE: Final[str] = "conversion is not value preserving"

# ~c для IntegerConstant: ширина не определена
COMPLEMENT_INTEGER_MESSAGE: Final[str] = (
    "complement cannot be applied to value of unspecified width"
)

# ~c для RealConstant
COMPLEMENT_REAL_MESSAGE: Final[str] = "complement cannot be applied to a real value"

# not c / bool(c)
LOGICAL_NOT_MESSAGE: Final[str] = "explicitly write 1 or 0 instead"


# =============================================================================
# ИДЕНТИЧНОСТЬ ПАКЕТА
# =============================================================================

# Фреймы модулей с этим префиксом пропускаются при поиске места конверсии
PACKAGE_NAME: Final[str] = "valconst"
