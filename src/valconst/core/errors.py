"""
Errors - ValuePreservingCastError и место конверсии

Единственный вид ошибки библиотеки: конверсия, которая изменила бы
значение. Ошибка несёт только фиксированное сообщение и место вызова
(файл/строка/колонка/функция) в коде пользователя.
"""

import inspect
import sys
from types import FrameType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from valconst.core.limits import PACKAGE_NAME, VALUE_PRESERVING_MESSAGE


class SourceLocation(BaseModel):
    """
    Место в исходном коде, где произошла конверсия.

    Attributes:
        file: Путь к файлу
        line: Номер строки (1-indexed)
        column: Номер колонки (1-indexed), если интерпретатор его знает
        function: Имя функции
    """

    file: str = Field(..., description="Путь к файлу")
    line: int = Field(..., ge=0, description="Номер строки")
    column: Optional[int] = Field(default=None, ge=1, description="Номер колонки")
    function: str = Field(default="<module>", description="Имя функции")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"


def _is_library_frame(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == PACKAGE_NAME or module.startswith(PACKAGE_NAME + ".")


def _frame_column(frame: FrameType) -> Optional[int]:
    # positions есть только с Python 3.11
    positions = getattr(inspect.getframeinfo(frame, context=0), "positions", None)
    if positions is None or positions.col_offset is None:
        return None
    return positions.col_offset + 1


def capture_site() -> SourceLocation:
    """
    Определение места конверсии: первый фрейм стека вне пакета valconst.

    Returns:
        SourceLocation вызывающего кода (или самого внешнего фрейма, если
        весь стек принадлежит пакету)
    """
    frame: Optional[FrameType] = sys._getframe(1)
    outermost = frame
    while frame is not None and _is_library_frame(frame):
        outermost = frame
        frame = frame.f_back
    if frame is None:
        frame = outermost

    return SourceLocation(
        file=frame.f_code.co_filename,
        line=frame.f_lineno or 0,
        column=_frame_column(frame),
        function=frame.f_code.co_name,
    )


class ValuePreservingCastError(ArithmeticError):
    """
    Конверсия untyped-константы в конкретный тип изменила бы значение.

    Причины (переполнение, потеря знака, потеря точности мантиссы) не
    различаются: все они сводятся к одной ошибке. Ошибка не несёт ни
    значения, ни целевого типа, только место конверсии.

    Восстановления внутри библиотеки нет: вызывающий код либо избегает
    конверсии, либо выбирает более широкий тип.
    """

    def __init__(self, where: Optional[SourceLocation] = None):
        super().__init__(VALUE_PRESERVING_MESSAGE)
        self._where = where if where is not None else capture_site()

    @property
    def where(self) -> SourceLocation:
        """Место конверсии в коде пользователя."""
        return self._where

    @property
    def message(self) -> str:
        return VALUE_PRESERVING_MESSAGE
