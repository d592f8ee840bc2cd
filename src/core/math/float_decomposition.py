"""
Float Decomposition — разложение float64 на десятичные мантиссу и экспоненту

Модуль переводит двоичный float64 в пару (mantissa, exponent), такую что
|mantissa * 10^exponent - f| < epsilon в нормированном масштабе:
- Нормировка f к интервалу [1, 10] через log10
- Поиск минимального числа дополнительных цифр i, при котором дробный остаток < epsilon
- Безопасное масштабирование float на 10^n без OverflowError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в мантиссу (проверяются вызывающим кодом через is_valid_float)
2. Количество дополнительных цифр ограничено max_precision
3. Масштабирование float никогда не бросает исключение (переполнение даёт inf, underflow даёт 0)
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допустимый дробный остаток при подборе мантиссы
EPS_FLOAT_MANTISSA: Final[float] = 1e-10

# Максимум дополнительных цифр для decimal-значений (Value)
MAX_FLOAT_PRECISION: Final[int] = 16

# Максимум дополнительных цифр для fixed-point значений
MAX_FLOAT_PRECISION_FIXED: Final[int] = 19

# Максимальная степень десяти за один шаг масштабирования (10.0**308 на грани overflow)
_MAX_SCALE_STEP: Final[int] = 300


# =============================================================================
# ВАЛИДАЦИЯ И МАСШТАБИРОВАНИЕ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка что значение является валидным float (не NaN, не Inf).

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float('nan'))
        False
    """
    return math.isfinite(value)


def scale_float(value: float, exponent: int) -> float:
    """
    value * 10^exponent без OverflowError для больших |exponent|.

    Отрицательные степени применяются делением: 123456 / 1e5 точнее,
    чем 123456 * 1e-5.

    Examples:
        >>> scale_float(123456.0, -5)
        1.23456
        >>> scale_float(1.0, 400)
        inf
    """
    while exponent > _MAX_SCALE_STEP:
        value *= 10.0**_MAX_SCALE_STEP
        exponent -= _MAX_SCALE_STEP
    while exponent < -_MAX_SCALE_STEP:
        value /= 10.0**_MAX_SCALE_STEP
        exponent += _MAX_SCALE_STEP
    if exponent >= 0:
        return value * 10.0**exponent
    return value / 10.0**-exponent


# =============================================================================
# НОРМИРОВКА И МАНТИССА
# =============================================================================


def norm_float64(value: float) -> int:
    """
    Экспонента e, такая что 1 <= |value| * 10^e <= 10.

    Для нуля, NaN и Inf возвращает 0.

    Examples:
        >>> norm_float64(123.456)
        -2
        >>> norm_float64(0.05)
        2
        >>> norm_float64(5.0)
        0
    """
    if value == 0 or not is_valid_float(value):
        return 0
    value = abs(value)
    if value < 1:
        return int(-math.log10(value)) + 1
    if value > 10:
        return -(int(math.log10(value / 10)) + 1)
    return 0


def float_mantissa(
    value: float,
    epsilon: float = EPS_FLOAT_MANTISSA,
    max_precision: int = MAX_FLOAT_PRECISION,
) -> tuple[int, int]:
    """
    Десятичная мантисса и экспонента для |value|.

    Перебирает i = 0..max_precision и останавливается на первом i,
    при котором дробная часть |value| * 10^(e+i) меньше epsilon.

    Args:
        value: Конечный float (знак игнорируется)
        epsilon: Допустимый дробный остаток
        max_precision: Максимум дополнительных цифр

    Returns:
        (mantissa, exponent): |value| ~ mantissa * 10^exponent

    Examples:
        >>> float_mantissa(1.23456)
        (123456, -5)
        >>> float_mantissa(0.5)
        (5, -1)
    """
    value = abs(value)
    e = norm_float64(value)
    i = 0
    while True:
        frac, integ = math.modf(scale_float(value, e + i))
        if frac < epsilon or i >= max_precision:
            break
        i += 1
    return int(integ), -(e + i)
