"""
OperatorOverlay - операторы между untyped-константой и конкретным типом

Один адаптер "convert-then-apply" порождает все бинарные операторы и
сравнения для обоих порядков операндов:

    t op c  ->  op(t, c.convert_to(type(t)))   (reflected dunder)
    c op t  ->  op(c.convert_to(type(t)), t)   (forward dunder)

Составное присваивание t op= c работает через обычный fallback Python на
бинарный оператор: NumPy scalars, int и float неизменяемы, поэтому имя
перепривязывается только после успешной проверки.

Арифметика (+ - * /) и сравнения определены для integral и floating;
% // & | ^ только для integral. Во всех остальных случаях оператор
возвращает NotImplemented, и Python сообщает TypeError.

NumPy уступает операцию константе благодаря __array_ufunc__ = None.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable

from valconst.core.targets import NumericTarget, target_of

NativeOperator = Callable[[Any, Any], Any]


def _convert_then_apply(
    native_op: NativeOperator, integral_only: bool, reflected: bool
) -> Callable[[Any, Any], Any]:
    def method(self, other):
        target = target_of(other)
        if target is None or (integral_only and not target.is_integral):
            return NotImplemented
        converted = self._convert_for(target)
        if reflected:
            return native_op(other, converted)
        return native_op(converted, other)

    prefix = "__r" if reflected else "__"
    method.__name__ = f"{prefix}{native_op.__name__.strip('_')}__"
    return method


def _binary(native_op: NativeOperator, integral_only: bool = False):
    """Пара (forward, reflected) для одного символа оператора."""
    return (
        _convert_then_apply(native_op, integral_only, reflected=False),
        _convert_then_apply(native_op, integral_only, reflected=True),
    )


def _comparison(native_op: NativeOperator) -> Callable[[Any, Any], Any]:
    # Отражённый вызов (t < c -> c.__gt__(t)) даёт тот же результат,
    # поэтому отдельная reflected-версия не нужна
    return _convert_then_apply(native_op, integral_only=False, reflected=False)


class ConstantOperators(ABC):
    """
    Mixin с операторами для IntegerConstant и RealConstant.

    Подкласс обязан реализовать _convert_for(target) и _value_key().
    _value_key возвращает числовое значение константы: hash константы
    совпадает с hash равного ей int/float.
    """

    __array_ufunc__ = None

    @abstractmethod
    def _convert_for(self, target: NumericTarget) -> Any:
        """Проверенная конверсия в target."""

    @abstractmethod
    def _value_key(self) -> Any:
        """Числовое значение для равенства и hash."""

    # Арифметика
    __add__, __radd__ = _binary(operator.add)
    __sub__, __rsub__ = _binary(operator.sub)
    __mul__, __rmul__ = _binary(operator.mul)
    __truediv__, __rtruediv__ = _binary(operator.truediv)

    # Только integral
    __floordiv__, __rfloordiv__ = _binary(operator.floordiv, integral_only=True)
    __mod__, __rmod__ = _binary(operator.mod, integral_only=True)
    __and__, __rand__ = _binary(operator.and_, integral_only=True)
    __or__, __ror__ = _binary(operator.or_, integral_only=True)
    __xor__, __rxor__ = _binary(operator.xor, integral_only=True)

    # Сравнения
    __lt__ = _comparison(operator.lt)
    __le__ = _comparison(operator.le)
    __gt__ = _comparison(operator.gt)
    __ge__ = _comparison(operator.ge)
    _compare_eq = _comparison(operator.eq)
    _compare_ne = _comparison(operator.ne)

    def __eq__(self, other):
        if type(other) is type(self):
            return bool(self._value_key() == other._value_key())
        return self._compare_eq(other)

    def __ne__(self, other):
        if type(other) is type(self):
            return bool(self._value_key() != other._value_key())
        return self._compare_ne(other)

    def __hash__(self) -> int:
        return hash(self._value_key())
