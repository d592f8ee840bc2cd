"""
Decimal Formatting — текстовые представления мантиссы и экспоненты

Форматы:
- Десятичный ('f', 's'): 1234.56, 0.00123, 1230000
- Научный ('e', 'v'): <digits>e<exp>, например 123456e-2; ноль — "0"
- Float (JSON float mode): кратчайшее десятичное представление float64 без экспоненты

Длинные серии нулей в десятичном формате обрезаются до MAX_ZERO_RUN,
остаток записывается суффиксом e<n> (e-<n> для дробной части).

Длины строк для compact JSON оцениваются формулами, без построения строк.
"""

from decimal import Decimal
from typing import Final

from src.core.math.decimal_kernel import decimal_digits, int_decimal_len

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DELIMITER: Final[str] = "."

# Максимальная длина серии нулей в десятичном формате
MAX_ZERO_RUN: Final[int] = 255

DECIMAL_FORMATS: Final[frozenset[str]] = frozenset({"f", "s"})
SCIENTIFIC_FORMATS: Final[frozenset[str]] = frozenset({"e", "v"})

# Обрамление объекта {"m":<int>,"e":<int>}
_MANT_EXP_PARTS: Final[tuple[str, str, str]] = ('{"m":', ',"e":', "}")
MANT_EXP_JSON_OVERHEAD: Final[int] = sum(len(p) for p in _MANT_EXP_PARTS)


# =============================================================================
# ДЕСЯТИЧНЫЙ И НАУЧНЫЙ ФОРМАТЫ
# =============================================================================


def format_decimal(mantissa: int, exponent: int, negative: bool = False) -> str:
    """
    Десятичная запись mantissa * 10^exponent.

    Ожидает нормализованную пару (без хвостовых нулей), иначе хвостовые
    нули дробной части попадут в результат.

    Examples:
        >>> format_decimal(123456, -3)
        '123.456'
        >>> format_decimal(123, -5)
        '0.00123'
        >>> format_decimal(123, 4)
        '1230000'
        >>> format_decimal(0, 5)
        '0'
    """
    if mantissa == 0:
        return "0"
    sign = "-" if negative else ""
    digits = str(mantissa)

    if exponent == 0:
        return sign + digits

    if exponent > 0:
        zeros = min(exponent, MAX_ZERO_RUN)
        suffix = f"e{exponent - zeros}" if exponent > zeros else ""
        return sign + digits + "0" * zeros + suffix

    diff = len(digits) + exponent
    if diff > 0:
        return sign + digits[:diff] + DELIMITER + digits[diff:]

    # ведущие нули после "0."
    zeros = min(-diff, MAX_ZERO_RUN)
    suffix = f"e-{-diff - zeros}" if -diff > zeros else ""
    return sign + "0" + DELIMITER + "0" * zeros + digits + suffix


def format_scientific(mantissa: int, exponent: int, negative: bool = False) -> str:
    """
    Научная запись <digits>e<exp>.

    Examples:
        >>> format_scientific(123456, -2)
        '123456e-2'
        >>> format_scientific(1, -8, negative=True)
        '-1e-8'
        >>> format_scientific(0, 3)
        '0'
    """
    if mantissa == 0:
        return "0"
    sign = "-" if negative else ""
    return f"{sign}{mantissa}e{exponent}"


def format_mant_exp(mantissa: int, exponent: int, fmt: str, negative: bool = False) -> str:
    """
    Форматирование по символу формата.

    Args:
        mantissa: Нормализованная мантисса (>= 0)
        exponent: Экспонента
        fmt: 'f'/'s' — десятичный, 'e'/'v' — научный; '' трактуется как 'f'
        negative: Добавить знак '-'

    Raises:
        ValueError: Неизвестный символ формата
    """
    if fmt in DECIMAL_FORMATS or fmt == "":
        return format_decimal(mantissa, exponent, negative)
    if fmt in SCIENTIFIC_FORMATS:
        return format_scientific(mantissa, exponent, negative)
    raise ValueError(f"unknown format {fmt!r}, expected one of 'f', 's', 'e', 'v'")


def format_float(value: float) -> str:
    """
    Кратчайшая десятичная запись float без экспоненты (JSON float mode).

    Examples:
        >>> format_float(0.0)
        '0'
        >>> format_float(1234.5)
        '1234.5'
        >>> format_float(1e22)
        '10000000000000000000000'
    """
    return format(Decimal(repr(value)).normalize(), "f")


# =============================================================================
# ОЦЕНКА ДЛИН (COMPACT JSON)
# =============================================================================


def decimal_json_len(mantissa: int, exponent: int, negative: bool = False) -> int:
    """
    Длина строки '"<десятичная запись>"' (с кавычками) для нормализованной пары.

    Examples:
        >>> decimal_json_len(0, 0)
        3
        >>> decimal_json_len(123456, -1)
        9
        >>> decimal_json_len(123456, -18)
        22
    """
    if mantissa == 0:
        return 3
    mant_len = decimal_digits(mantissa)
    length = 2 + mant_len + (1 if negative else 0)
    if exponent > 0:
        length += exponent
    elif exponent < 0:
        diff = mant_len + exponent
        if diff > 0:
            length += 1  # точка
        else:
            length += 2 + -diff  # "0." и ведущие нули
    return length


def mant_exp_json_len(mantissa: int, exponent: int, negative: bool = False) -> int:
    """
    Длина объекта {"m":<int>,"e":<int>}.

    Examples:
        >>> mant_exp_json_len(0, 0)
        13
        >>> mant_exp_json_len(123456, 18)
        19
    """
    sign_len = 1 if negative and mantissa != 0 else 0
    return MANT_EXP_JSON_OVERHEAD + sign_len + decimal_digits(mantissa) + int_decimal_len(exponent)


def format_mant_exp_json(mantissa: int, exponent: int, negative: bool = False) -> str:
    """
    Объектная форма {"m":<int>,"e":<int>}; для отрицательных m со знаком.

    Examples:
        >>> format_mant_exp_json(123456, -3)
        '{"m":123456,"e":-3}'
    """
    m = -mantissa if negative else mantissa
    head, middle, tail = _MANT_EXP_PARTS
    return f"{head}{m}{middle}{exponent}{tail}"
