"""
Literals - разбор текста числового литерала

Тонкий front door: превращает текст литерала в сырое значение (модуль
целого или long double) и знак. Создание константы из результата делает
valconst.core.constants.literal.

Поддерживаемый синтаксис:
- целые: 123, 0x7fff, 0b1011, 0755 (ведущий 0 = восьмеричное)
- вещественные: 1.5, .5, 2., 1e10, .2e1, 0x1.8p3 (шестнадцатеричные)
- разделители разрядов ' и _ (только между цифрами)
- необязательный ведущий '-' (унарное отрицание константы)
"""

import re
from typing import NamedTuple, Union

import numpy as np

from valconst.core.limits import U64_MAX

# Разделитель разрядов только между цифрами; e/E - цифра лишь в hex
_DEC_SEPARATOR = re.compile(r"(?<=[0-9])['_](?=[0-9])")
_HEX_SEPARATOR = re.compile(r"(?<=[0-9a-fA-F])['_](?=[0-9a-fA-F])")

_HEX_INT = re.compile(r"0[xX]([0-9a-fA-F]+)")
_BIN_INT = re.compile(r"0[bB]([01]+)")
_OCT_INT = re.compile(r"0([0-7]*)")
_DEC_INT = re.compile(r"[1-9][0-9]*")

_DEC_REAL = re.compile(r"(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+")
_HEX_REAL = re.compile(
    r"0[xX](?P<whole>[0-9a-fA-F]*)(?:\.(?P<frac>[0-9a-fA-F]*))?[pP](?P<exp>[+-]?[0-9]+)"
)


class ParsedLiteral(NamedTuple):
    """Результат разбора: сырое значение и знак."""

    value: Union[int, np.longdouble]
    negative: bool


def _strip_separators(body: str) -> str:
    separator = _HEX_SEPARATOR if body[:2] in ("0x", "0X") else _DEC_SEPARATOR
    cleaned = separator.sub("", body)
    if "'" in cleaned or "_" in cleaned:
        raise ValueError(f"misplaced digit separator in literal {body!r}")
    return cleaned


def _parse_integer(body: str) -> Union[int, None]:
    for pattern, base in ((_HEX_INT, 16), (_BIN_INT, 2), (_DEC_INT, 10), (_OCT_INT, 8)):
        match = pattern.fullmatch(body)
        if match is None:
            continue
        digits = match.group(1) if pattern.groups else match.group(0)
        return int(digits, base) if digits else 0
    return None


def _parse_hex_real(body: str) -> Union[np.longdouble, None]:
    match = _HEX_REAL.fullmatch(body)
    if match is None:
        return None
    whole = match.group("whole")
    frac = match.group("frac") or ""
    if not whole and not frac:
        return None
    mantissa = int(whole + frac, 16)
    exponent = int(match.group("exp")) - 4 * len(frac)
    return np.ldexp(np.longdouble(mantissa), exponent)


def parse_literal(text: str) -> ParsedLiteral:
    """
    Разбор текста числового литерала.

    Args:
        text: Текст литерала, например "0x100'0001" или "-.2e1"

    Returns:
        ParsedLiteral(value, negative): value - int для целых литералов,
        numpy.longdouble для вещественных

    Raises:
        ValueError: Если текст не является литералом или целое больше U64_MAX

    Examples:
        >>> parse_literal("0b11")
        ParsedLiteral(value=3, negative=False)
        >>> parse_literal("-0x8000")
        ParsedLiteral(value=32768, negative=True)
    """
    body = text.strip()
    negative = body.startswith("-")
    if negative:
        body = body[1:].lstrip()
    if not body:
        raise ValueError(f"empty numeric literal {text!r}")

    body = _strip_separators(body)

    integer = _parse_integer(body)
    if integer is not None:
        if integer > U64_MAX:
            raise ValueError(f"integer literal {text!r} exceeds 64 bits")
        return ParsedLiteral(integer, negative)

    if _DEC_REAL.fullmatch(body):
        return ParsedLiteral(np.longdouble(body), negative)

    real = _parse_hex_real(body)
    if real is not None:
        return ParsedLiteral(real, negative)

    raise ValueError(f"not a numeric literal: {text!r}")
