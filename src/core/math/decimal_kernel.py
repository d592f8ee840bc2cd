"""
Decimal Kernel — целочисленные примитивы для упакованных decimal-значений

Модуль содержит чистые функции без состояния, на которых построены все
decimal-типы (Value, Signed, Fixed):
- Подсчёт десятичных цифр за O(1) (bit_length + таблица коррекции)
- Таблица степеней десяти 10^0..10^19 с sentinel 0 за пределами диапазона
- Умножение 64x64 -> 128 бит с перемасштабированием обратно в 64 бита
- Деление 128/64 с предварительным сдвигом делимого (best-effort точность)
- Выравнивание и обрезка мантиссы, знаковые helpers

Python int не переполняется, поэтому 64-битная семантика эмулируется явно:
все результаты, которые в исходной модели занимают одно машинное слово,
ограничены UINT64_MAX.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pow10(n) возвращает 0 для n вне [0, 19] (sentinel, не исключение)
2. mul64 всегда возвращает значение <= UINT64_MAX
3. div_with_rescale никогда не сдвигает делимое за пределы UINT64_MAX
4. Все функции детерминированы и не имеют побочных эффектов
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина машинного слова
WORD_BITS: Final[int] = 64

# Максимальное значение 64-битного беззнакового слова
UINT64_MAX: Final[int] = (1 << WORD_BITS) - 1

# Максимальная степень десяти, помещающаяся в uint64 (10^19)
MAX_POW10: Final[int] = 19

_POW10_TABLE: Final[tuple[int, ...]] = tuple(10**i for i in range(MAX_POW10 + 1))

# Таблица для decimal_digits: покрывает значения до 2^128 (результат mul64 до сдвига)
_DIGITS_TABLE: Final[tuple[int, ...]] = tuple(10**i for i in range(40))


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ И ЦИФРЫ
# =============================================================================


def pow10(n: int) -> int:
    """
    10^n для n в [0, 19].

    Args:
        n: Показатель степени

    Returns:
        10^n, либо 0 (sentinel) если n вне [0, 19]

    Examples:
        >>> pow10(3)
        1000
        >>> pow10(20)
        0
        >>> pow10(-1)
        0
    """
    if n < 0 or n > MAX_POW10:
        return 0
    return _POW10_TABLE[n]


def decimal_digits(x: int) -> int:
    """
    Количество десятичных цифр в неотрицательном целом.

    Оценка через bit_length: floor(bits * log10(2)) ~ (bits * 1233) >> 12,
    затем одна коррекция по таблице степеней десяти. Для нуля возвращает 1.

    Args:
        x: Неотрицательное целое < 2^128

    Returns:
        Количество цифр (>= 1)

    Examples:
        >>> decimal_digits(0)
        1
        >>> decimal_digits(99)
        2
        >>> decimal_digits(100)
        3
    """
    if x == 0:
        return 1
    digits = (x.bit_length() * 1233) >> 12
    if x >= _DIGITS_TABLE[digits]:
        digits += 1
    return digits


def log10(x: int) -> int:
    """floor(log10(x)) для x > 0."""
    return decimal_digits(x) - 1


def trailing_zeros(x: int) -> int:
    """Количество хвостовых нулей в десятичной записи x (1 для нуля)."""
    if x == 0:
        return 1
    count = 0
    while x % 10 == 0:
        x //= 10
        count += 1
    return count


def int_decimal_len(x: int) -> int:
    """Длина десятичной записи целого со знаком (включая '-')."""
    if x < 0:
        return 1 + decimal_digits(-x)
    return decimal_digits(x)


# =============================================================================
# 128-БИТНЫЕ ОПЕРАЦИИ
# =============================================================================


def mul64(a: int, b: int) -> tuple[int, int]:
    """
    Умножение 64x64 -> 128 бит с возвратом в 64 бита.

    Если старшее слово произведения ненулевое, произведение делится на
    минимальную степень десяти 10^k, при которой результат снова помещается
    в 64 бита. k возвращается как сдвиг, который нужно прибавить к экспоненте.

    Args:
        a: Множитель (<= UINT64_MAX)
        b: Множитель (<= UINT64_MAX)

    Returns:
        (value, shift): a * b == value * 10^shift с точностью до отброшенных цифр

    Examples:
        >>> mul64(3, 4)
        (12, 0)
        >>> mul64(UINT64_MAX, 10)
        (18446744073709551615, 1)
    """
    product = a * b
    hi = product >> WORD_BITS
    if hi == 0:
        return product, 0
    # hi >= 10^(k-1) => product / 10^(k-1) >= 2^64, поэтому k минимально
    shift = decimal_digits(hi)
    return product // _DIGITS_TABLE[shift], shift


def div_with_rescale(m1: int, e1: int, m2: int, e2: int) -> tuple[int, int, int]:
    """
    Деление m1*10^e1 на m2*10^e2 с best-effort точностью.

    Если деление точное, возвращает (m1 // m2, 0, e1 - e2). Иначе делимое
    умножается на максимальную степень десяти, при которой оно остаётся
    в пределах UINT64_MAX, и экспонента уменьшается соответственно.

    Args:
        m1: Мантисса делимого (> 0)
        e1: Экспонента делимого
        m2: Мантисса делителя (> 0)
        e2: Экспонента делителя

    Returns:
        (quotient, remainder, exponent)

    Raises:
        ZeroDivisionError: Если m2 == 0 (проверяется вызывающим кодом)

    Examples:
        >>> div_with_rescale(15, 0, 5, 0)
        (3, 0, 0)
        >>> div_with_rescale(1, 0, 4, 0)
        (2500000000000000000, 0, -19)
    """
    e = e1 - e2
    if m1 % m2 == 0:
        return m1 // m2, 0, e

    to_mult = log10(UINT64_MAX // m1)
    m1 *= pow10(to_mult)
    e -= to_mult
    return m1 // m2, m1 % m2, e


# =============================================================================
# МАСШТАБИРОВАНИЕ МАНТИССЫ
# =============================================================================


def trim_zeros(m: int, e: int, max_e: int) -> tuple[int, int]:
    """
    Убирает хвостовые нули мантиссы, увеличивая экспоненту (не выше max_e).

    Examples:
        >>> trim_zeros(12300, 0, 127)
        (123, 2)
        >>> trim_zeros(12300, 0, 1)
        (1230, 1)
    """
    if m == 0:
        return m, e
    while e < max_e and m % 10 == 0:
        m //= 10
        e += 1
    return m, e


def scale_mantissa(m: int, e: int, target_e: int, limit: int) -> tuple[int, bool]:
    """
    Пересчёт мантиссы m*10^e к экспоненте target_e.

    Огрубление (target_e > e) отбрасывает младшие цифры; уточнение
    (target_e < e) умножает мантиссу и насыщается до limit при переполнении.

    Args:
        m: Мантисса
        e: Текущая экспонента
        target_e: Целевая экспонента
        limit: Максимально допустимая мантисса

    Returns:
        (mantissa, exact): exact=False если были потеряны цифры или произошло насыщение

    Examples:
        >>> scale_mantissa(123456, -10, -12, 2**56 - 1)
        (12345600, True)
        >>> scale_mantissa(123456, 0, 2, 2**56 - 1)
        (1234, False)
    """
    if m == 0:
        return 0, True
    diff = e - target_e
    if diff == 0:
        return m, True
    p = pow10(abs(diff))
    if p == 0:
        if diff > 0:
            return limit, False
        return 0, False
    if diff > 0:
        if limit // m < p:
            return limit, False
        return m * p, True
    return m // p, m % p == 0


# =============================================================================
# ЗНАКОВЫЕ HELPERS
# =============================================================================


def int_sign(x: int) -> int:
    """Знак числа: -1, 0 или 1 (без ветвлений)."""
    return (x > 0) - (x < 0)


def same_sign(a: int, b: int) -> bool:
    """True если a и b одного знака (ноль считается положительным)."""
    return (a < 0) == (b < 0)


def abs_int(x: int) -> int:
    """Модуль целого числа."""
    return -x if x < 0 else x
