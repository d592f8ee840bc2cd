"""
Value — упакованное беззнаковое decimal-значение

Значение = mantissa * 10^exponent, упакованное в одно 64-битное слово.
Раскладка битов задаётся параметром класса (см. DecimalLayout):

    class Value(DecimalValue, exponent_bits=8):         # 8/56
    class PreciseValue(DecimalValue, exponent_bits=6):  # 6/58

Политика диапазона (saturating):
- Лишние младшие цифры мантиссы отбрасываются (усечение, не округление)
- Экспонента ниже MIN_EXP схлопывается в ZERO
- Экспонента выше MAX_EXP насыщается до MAX
- Strict-конструкторы (*_strict) вместо этого бросают RangeError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Мантисса 0 => значение равно ZERO при любой сохранённой экспоненте
2. Мантисса никогда не превышает MAX_MANTISSA
3. Экспонента всегда в [MIN_EXP, MAX_EXP]
4. a == b  <=>  normalized слова a и b совпадают
5. Значения неизменяемы и безопасны для конкурентного чтения
"""

import logging
from enum import Enum
from typing import Any, ClassVar

from src.core.conversion.formatting import format_decimal, format_mant_exp
from src.core.conversion.parsing import digits_to_mantissa, parse_decimal
from src.core.domain.layout import DecimalLayout
from src.core.errors import BadFloatError, DivisionByZero, ParseError, RangeError
from src.core.math.decimal_kernel import (
    UINT64_MAX,
    WORD_BITS,
    decimal_digits,
    div_with_rescale,
    log10,
    mul64,
    pow10,
    scale_mantissa,
    trim_zeros,
)
from src.core.math.float_decomposition import (
    EPS_FLOAT_MANTISSA,
    MAX_FLOAT_PRECISION,
    float_mantissa,
    is_valid_float,
    scale_float,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим отбрасывания младших цифр"""

    FLOOR = "floor"
    ROUND = "round"
    CEIL = "ceil"


# =============================================================================
# ВНУТРЕННИЕ АЛГОРИТМЫ
# =============================================================================


def _do_to_equal_exp(
    m1: int, e1: int, m2: int, e2: int, max_mantissa: int
) -> tuple[int, int, int]:
    # предполагается e1 >= e2
    if e1 == e2:
        return m1, m2, e1

    # 1. хвостовые нули m2 поднимают e2
    m2, e2 = trim_zeros(m2, e2, e1)
    if e1 == e2:
        return m1, m2, e1

    # 2. рост m1 в пределах свободных разрядов
    to_mult = min(log10(max_mantissa // m1), e1 - e2)
    m1 *= 10**to_mult
    e1 -= to_mult
    if e1 == e2:
        return m1, m2, e1

    # 3. потеря младших цифр m2
    p = pow10(e1 - e2)
    m2 = m2 // p if p else 0
    return m1, m2, e1


def to_equal_exp(
    m1: int, e1: int, m2: int, e2: int, max_mantissa: int
) -> tuple[int, int, int]:
    """
    Приводит два ненулевых операнда к общей экспоненте.

    Порядок фиксирован: сначала обрезаются хвостовые нули операнда с меньшей
    экспонентой, затем растёт мантисса операнда с большей экспонентой,
    и только потом усекается операнд с меньшей экспонентой.

    Returns:
        (m1', m2', e): m1' и m2' в общей экспоненте e
    """
    if e1 >= e2:
        return _do_to_equal_exp(m1, e1, m2, e2, max_mantissa)
    r2, r1, e = _do_to_equal_exp(m2, e2, m1, e1, max_mantissa)
    return r1, r2, e


def round_mant_exp(n: int, e: int, prec: int, mode: RoundingMode) -> tuple[int, int]:
    """
    Отбрасывает младшие цифры n*10^e так, чтобы осталось prec знаков после точки.

    prec может быть отрицательным (округление до десятков, сотен, ...).
    Если отбрасываются все цифры, CEIL материализует единицу в разряде -prec.

    Args:
        n: Мантисса (>= 0, может превышать MAX_MANTISSA)
        e: Экспонента
        prec: Количество знаков после точки
        mode: FLOOR / ROUND (строго больше половины) / CEIL

    Returns:
        (mantissa, exponent) без канонизации

    Examples:
        >>> round_mant_exp(123456, -3, 2, RoundingMode.ROUND)
        (12346, -2)
        >>> round_mant_exp(123, -7, 0, RoundingMode.CEIL)
        (1, 0)
    """
    if n == 0:
        return 0, 0
    to_cut = -e - prec
    if to_cut <= 0:
        return n, e
    if to_cut > decimal_digits(n):
        if mode is RoundingMode.CEIL:
            return 1, -prec
        return 0, 0

    p = 10**to_cut
    n, r = divmod(n, p)
    if mode is RoundingMode.ROUND:
        if 2 * r > p:
            n += 1
    elif mode is RoundingMode.CEIL:
        if r != 0:
            n += 1
    return n, -prec


# =============================================================================
# DECIMAL VALUE
# =============================================================================


class DecimalValue:
    """
    Базовый класс упакованных decimal-значений.

    Конкретная раскладка задаётся при наследовании:

        class Value(DecimalValue, exponent_bits=8):
            __slots__ = ()

    Value(mantissa, exponent) эквивалентно from_mant_exp(mantissa, exponent).
    """

    __slots__ = ("_word",)

    LAYOUT: ClassVar[DecimalLayout]
    ZERO: ClassVar["DecimalValue"]
    MAX: ClassVar["DecimalValue"]
    MIN: ClassVar["DecimalValue"]

    # Имя JSON Schema для объектной формы {"m","e"}
    JSON_SCHEMA: ClassVar[str] = "mant_exp"

    _word: int

    def __init_subclass__(cls, exponent_bits: int | None = None, word_bits: int = WORD_BITS, **kwargs):
        super().__init_subclass__(**kwargs)
        if exponent_bits is None:
            return
        layout = DecimalLayout(exponent_bits=exponent_bits, word_bits=word_bits)
        cls.LAYOUT = layout
        cls.ZERO = cls._combine(0, 0)
        cls.MAX = cls._combine(layout.max_mantissa, layout.max_exp)
        cls.MIN = cls._combine(1, layout.min_exp)

    def __init__(self, mantissa: int = 0, exponent: int = 0):
        _check_mantissa(mantissa)
        m, e = _adjust_mant_exp(self.LAYOUT, mantissa, exponent)
        object.__setattr__(self, "_word", self.LAYOUT.pack(m, e))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self)._from_word, (self._word,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # =========================================================================
    # ВНУТРЕННИЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_word(cls, word: int):
        value = object.__new__(cls)
        object.__setattr__(value, "_word", word)
        return value

    @classmethod
    def _combine(cls, mantissa: int, exponent: int):
        """Упаковка без проверок: вызывающий код гарантирует диапазоны."""
        return cls._from_word(cls.LAYOUT.pack(mantissa, exponent))

    @classmethod
    def _adjust(cls, mantissa: int, exponent: int):
        """Канонизирующий конструктор (насыщение, никогда не падает)."""
        return cls._combine(*_adjust_mant_exp(cls.LAYOUT, mantissa, exponent))

    # =========================================================================
    # ПУБЛИЧНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_uint64(cls, value: int):
        """
        Значение из целого числа.

        Raises:
            RangeError: Если value < 0
        """
        _check_mantissa(value)
        return cls._adjust(value, 0)

    @classmethod
    def from_int(cls, value: int):
        """Синоним from_uint64 (используется при валидации pydantic)."""
        return cls.from_uint64(value)

    @classmethod
    def from_mant_exp(cls, mantissa: int, exponent: int):
        """
        Значение из мантиссы и экспоненты с насыщением.

        Лишние младшие цифры отбрасываются, экспонента вне диапазона
        даёт ZERO или MAX.

        Raises:
            RangeError: Если mantissa < 0

        Examples:
            >>> Value.from_mant_exp(1, 128).split()
            (10, 127)
        """
        _check_mantissa(mantissa)
        return cls._adjust(mantissa, exponent)

    @classmethod
    def from_mant_exp_strict(cls, mantissa: int, exponent: int):
        """
        Значение из мантиссы и экспоненты без потерь.

        Допускаются только точно представимые пары: хвостовые нули мантиссы
        и запас разрядов используются для сдвига экспоненты в диапазон.

        Raises:
            RangeError: Если значение не представимо точно
        """
        _check_mantissa(mantissa)
        if mantissa == 0:
            return cls.ZERO

        layout = cls.LAYOUT
        m, e = trim_zeros(mantissa, exponent, layout.max_exp)
        while e > layout.max_exp and m * 10 <= layout.max_mantissa:
            m *= 10
            e -= 1

        if m > layout.max_mantissa:
            raise RangeError(
                f"mantissa {mantissa} does not fit {layout.mant_bits} bits"
            )
        if not layout.min_exp <= e <= layout.max_exp:
            raise RangeError(
                f"exponent {exponent} is out of range [{layout.min_exp}, {layout.max_exp}]"
            )
        return cls._combine(m, e)

    @classmethod
    def from_float64(cls, value: float):
        """
        Значение из float64.

        Подбирает минимальное число знаков, при котором дробный остаток
        меньше EPS_FLOAT_MANTISSA (не более MAX_FLOAT_PRECISION знаков).

        Raises:
            BadFloatError: Отрицательное значение, Inf или NaN

        Examples:
            >>> Value.from_float64(1.23456).split()
            (123456, -5)
        """
        if not is_valid_float(value) or value < 0:
            raise BadFloatError()
        if value == 0:
            return cls.ZERO
        m, e = float_mantissa(value, EPS_FLOAT_MANTISSA, MAX_FLOAT_PRECISION)
        return cls._adjust(m, e).normalized()

    @classmethod
    def must_from_float64(cls, value: float):
        """from_float64, ошибка превращается в RuntimeError (для констант)."""
        try:
            return cls.from_float64(value)
        except BadFloatError as err:
            raise RuntimeError(f"cannot convert {value!r}: {err}") from err

    @classmethod
    def from_string(cls, text: str):
        """
        Разбор десятичной строки с насыщением.

        Допускаются кавычки, пробелы, ведущий '+', одна точка и суффикс e<int>.
        Если строгая грамматика не подходит, используется float().

        Raises:
            ParseError: Синтаксическая ошибка или отрицательное значение
            BadFloatError: float-fallback дал Inf/NaN

        Examples:
            >>> Value.from_string("1.23456").split()
            (123456, -5)
        """
        parsed = parse_decimal(text)
        if parsed.negative:
            raise ParseError("negative value")
        if parsed.approx is not None:
            return cls.from_float64(parsed.approx)
        return cls._adjust(*digits_to_mantissa(parsed.digits, parsed.exponent, cls.LAYOUT.mantissa_digits))

    @classmethod
    def from_string_saturating(cls, text: str):
        """Явное имя для from_string: выход за диапазон насыщается."""
        return cls.from_string(text)

    @classmethod
    def from_string_strict(cls, text: str):
        """
        Разбор строки без потерь и без float-fallback.

        Raises:
            ParseError: Синтаксическая ошибка или отрицательное значение
            RangeError: Слишком много значащих цифр или экспонента вне диапазона
        """
        parsed = parse_decimal(text, float_fallback=False)
        if parsed.negative:
            raise ParseError("negative value")
        if len(parsed.digits) > cls.LAYOUT.mantissa_digits:
            raise RangeError(
                f"{len(parsed.digits)} significant digits exceed {cls.LAYOUT.mantissa_digits}"
            )
        mantissa = int(parsed.digits) if parsed.digits else 0
        return cls.from_mant_exp_strict(mantissa, parsed.exponent)

    @classmethod
    def must_from_string(cls, text: str):
        """from_string, ошибка превращается в RuntimeError (для констант)."""
        try:
            return cls.from_string(text)
        except (ParseError, BadFloatError) as err:
            raise RuntimeError(f"cannot parse {text!r}: {err}") from err

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    @property
    def word(self) -> int:
        """Упакованное слово."""
        return self._word

    @property
    def mantissa(self) -> int:
        return self.LAYOUT.unpack(self._word)[0]

    @property
    def exponent(self) -> int:
        return self.LAYOUT.unpack(self._word)[1]

    def split(self) -> tuple[int, int]:
        """(mantissa, exponent) как есть, без нормализации."""
        return self.LAYOUT.unpack(self._word)

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def to_float64(self) -> float:
        m, e = self.split()
        return scale_float(float(m), e)

    def to_uint64(self) -> tuple[int, bool]:
        """
        Целая часть значения как uint64.

        Returns:
            (value, exact): exact=False если отброшена дробная часть или
            значение не помещается в 64 бита (тогда value = MAX_MANTISSA)
        """
        m, e = self.normalized().split()
        if m == 0:
            return 0, True
        if e == 0:
            return m, True
        if e < 0:
            p = pow10(-e)
            if p == 0:
                return 0, False
            return m // p, m % p == 0
        result = m * 10**e
        if result > UINT64_MAX:
            return self.LAYOUT.max_mantissa, False
        return result, True

    # =========================================================================
    # НОРМАЛИЗАЦИЯ И МАСШТАБ
    # =========================================================================

    def normalized(self):
        """
        Каноническая форма: без хвостовых нулей мантиссы.

        Сдвиг экспоненты останавливается на MAX_EXP, поэтому у значений
        рядом с MAX хвостовые нули могут остаться.
        """
        m, e = self.split()
        if m == 0:
            return self.ZERO
        return self._combine(*trim_zeros(m, e, self.LAYOUT.max_exp))

    def to_exponent(self, exponent: int):
        """
        Пересчёт к заданной экспоненте.

        Выше MAX_EXP => MAX, ниже MIN_EXP => ZERO. Мантисса может потерять
        младшие цифры или насытиться до MAX_MANTISSA.
        """
        layout = self.LAYOUT
        if exponent > layout.max_exp:
            return self.MAX
        if exponent < layout.min_exp:
            return self.ZERO
        return self.scale_mantissa(exponent)[0]

    def scale_mantissa(self, exponent: int):
        """
        Пересчёт к заданной экспоненте с признаком точности.

        Returns:
            (value, exact): exact=False если потеряны цифры, мантисса
            насыщена или экспонента была вне диапазона

        Examples:
            >>> Value(123456, -10).scale_mantissa(-12)[0].split()
            (12345600, -12)
        """
        layout = self.LAYOUT
        exact = True
        if exponent > layout.max_exp:
            exponent, exact = layout.max_exp, False
        elif exponent < layout.min_exp:
            exponent, exact = layout.min_exp, False

        m, e = self.split()
        m, scaled_exact = scale_mantissa(m, e, exponent, layout.max_mantissa)
        if m == 0:
            return self.ZERO, exact and scaled_exact
        return self._combine(m, exponent), exact and scaled_exact

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def cmp(self, other: "DecimalValue") -> int:
        """
        Сравнение: -1 если self < other, 0 если равны, 1 если больше.

        Сначала сравнивается позиция старшей цифры (exponent + digits),
        затем мантиссы в общей экспоненте.
        """
        m1, e1 = self.split()
        m2, e2 = other.split()
        ediff = e1 - e2

        if ediff == 0 or m1 == 0 or m2 == 0:
            return (m1 > m2) - (m1 < m2)

        top1 = e1 + decimal_digits(m1)
        top2 = e2 + decimal_digits(m2)
        if top1 != top2:
            return 1 if top1 > top2 else -1

        if ediff > 0:
            m1 *= 10**ediff
        else:
            m2 *= 10**-ediff
        return (m1 > m2) - (m1 < m2)

    def eq(self, other: "DecimalValue") -> bool:
        """Числовое равенство (разные представления одного числа равны)."""
        if self.LAYOUT != other.LAYOUT:
            return self.cmp(other) == 0
        return self._word == other._word or self.normalized()._word == other.normalized()._word

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "DecimalValue"):
        """
        Сумма.

        При переполнении мантиссы младшие цифры отбрасываются,
        при переполнении MAX возвращается MAX.
        """
        m1, e1 = self.split()
        m2, e2 = other.split()
        if m1 == 0:
            return self.ZERO if m2 == 0 else self._adjust(m2, e2)
        if m2 == 0:
            return self

        layout = self.LAYOUT
        m1, m2, e = to_equal_exp(m1, e1, m2, e2, layout.max_mantissa)
        result = m1 + m2
        if result > layout.max_mantissa:
            if e >= layout.max_exp:
                return self.MAX
            result //= 10
            e += 1
        return self._adjust(result, e)

    def sub(self, other: "DecimalValue") -> tuple["DecimalValue", bool]:
        """
        Модуль разности и признак отрицательного результата.

        Returns:
            (|self - other|, other > self)
        """
        m1, e1 = self.split()
        m2, e2 = other.split()
        if m2 == 0:
            return (self.ZERO if m1 == 0 else self), False
        if m1 == 0:
            return self._adjust(m2, e2), True

        m1, m2, e = to_equal_exp(m1, e1, m2, e2, self.LAYOUT.max_mantissa)
        if m1 >= m2:
            return self._adjust(m1 - m2, e), False
        return self._adjust(m2 - m1, e), True

    def mul(self, other: "DecimalValue"):
        """
        Произведение через 128-битное умножение мантисс.

        Переполнение MAX => MAX, выход ниже MIN_EXP => ZERO.
        """
        m1, e1 = self.normalized().split()
        m2, e2 = other.normalized().split()
        if m1 == 0 or m2 == 0:
            return self.ZERO
        product, shift = mul64(m1, m2)
        return self._adjust(product, e1 + e2 + shift)

    def div(self, other: "DecimalValue"):
        """
        Частное.

        Сначала пробуется точное целочисленное деление; если остаток
        ненулевой, результат приближается через float64 (с потерей точности
        для бесконечных дробей).

        Raises:
            DivisionByZero: Мантисса делителя равна нулю
        """
        m1, e1 = self.normalized().split()
        m2, e2 = other.normalized().split()
        if m2 == 0:
            raise DivisionByZero()
        if m1 == 0:
            return self.ZERO

        quo, rem, e = div_with_rescale(m1, e1, m2, e2)
        if rem == 0:
            return self._adjust(quo, e).normalized()
        return self._float_div(m1, e1, m2, e2)

    def _float_div(self, m1: int, e1: int, m2: int, e2: int):
        approx = scale_float(m1 / m2, e1 - e2)
        if not is_valid_float(approx):
            logger.debug(f"Float division overflow for {m1}e{e1} / {m2}e{e2}, saturating to MAX")
            return self.MAX
        logger.debug(f"Inexact division {m1}e{e1} / {m2}e{e2}, using float64 approximation")
        return self.from_float64(approx)

    def div_mod(self, other: "DecimalValue", prec: int):
        """
        Частное, округлённое вниз до prec знаков, и остаток.

        self == other * quo + rem; остаток вычисляется как self - other * quo,
        поэтому равенство не зависит от float-приближения div().

        Args:
            other: Делитель
            prec: Знаков после точки в частном (может быть отрицательным)

        Returns:
            (quo, rem)

        Raises:
            DivisionByZero: Мантисса делителя равна нулю

        Examples:
            >>> q, r = Value(15, 0).div_mod(Value(7, 0), 3)
            >>> str(q), str(r)
            ('2.142', '0.006')
        """
        a, b = self.normalized(), other.normalized()
        m1, e1 = a.split()
        m2, e2 = b.split()
        if m2 == 0:
            raise DivisionByZero()
        if m1 == 0:
            return self.ZERO, self.ZERO

        max_exp = self.LAYOUT.max_exp
        quo, rem, e = div_with_rescale(m1, e1, m2, e2)
        if e < max_exp:
            quo, e = trim_zeros(quo, e, max_exp)

        rounded = round_mant_exp(quo, e, prec, RoundingMode.FLOOR)
        if rem == 0 and rounded == (quo, e):
            return self._adjust(quo, e).normalized(), self.ZERO

        q = self._adjust(*rounded)
        r, _ = a.sub(b.mul(q))
        return q, r

    def _rounded(self, prec: int, mode: RoundingMode):
        m, e = self.split()
        return self._adjust(*round_mant_exp(m, e, prec, mode))

    def floor(self, prec: int):
        """Ближайшее значение <= self с prec знаками после точки."""
        return self._rounded(prec, RoundingMode.FLOOR)

    def round(self, prec: int):
        """Округление до prec знаков (вверх только если остаток строго больше половины)."""
        return self._rounded(prec, RoundingMode.ROUND)

    def ceil(self, prec: int):
        """Ближайшее значение >= self с prec знаками после точки."""
        return self._rounded(prec, RoundingMode.CEIL)

    # =========================================================================
    # ТЕКСТ И JSON
    # =========================================================================

    def to_string(self) -> str:
        return format_decimal(*self.normalized().split())

    def format(self, fmt: str) -> str:
        """
        Текст по символу формата: 'f'/'s' — десятичный, 'e'/'v' — научный.

        Raises:
            ValueError: Неизвестный символ формата
        """
        m, e = self.normalized().split()
        return format_mant_exp(m, e, fmt)

    def marshal(self, config=None) -> bytes:
        """JSON-представление (режим из JsonCodecConfig, по умолчанию compact)."""
        from src.core.contracts.json_codec import JsonCodec

        return JsonCodec(config).marshal(self)

    @classmethod
    def unmarshal(cls, data: bytes | str):
        """Разбор JSON: объект {"m","e"}, строка или число."""
        from src.core.contracts.json_codec import JsonCodec

        return JsonCodec().unmarshal(data, cls)

    @classmethod
    def _from_json_object(cls, obj: dict[str, Any]):
        return cls.from_mant_exp(int(obj["m"]), int(obj["e"]))

    def _json_parts(self) -> tuple[int, int, bool]:
        m, e = self.normalized().split()
        return m, e, False

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        from src.core.contracts.pydantic_support import decimal_core_schema

        return decimal_core_schema(cls)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        m, e = self.split()
        return f"{type(self).__name__}(mantissa={m}, exponent={e})"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __float__(self) -> float:
        return self.to_float64()

    def __int__(self) -> int:
        m, e = self.split()
        if e >= 0:
            return m * 10**e
        return m // 10**-e

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        m, e = self.split()
        if m == 0:
            return hash((0, 0))
        return hash(trim_zeros(m, e, e + decimal_digits(m)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) >= 0

    def __add__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.div(other)

    def __floordiv__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.div_mod(other, 0)[0]

    def __mod__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.div_mod(other, 0)[1]

    def __divmod__(self, other: object):
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.div_mod(other, 0)


# =============================================================================
# HELPERS
# =============================================================================


def _check_mantissa(mantissa: int) -> None:
    if mantissa < 0:
        raise RangeError(f"mantissa must be non-negative, got {mantissa}")


def _adjust_mant_exp(layout: DecimalLayout, m: int, e: int) -> tuple[int, int]:
    """
    Канонизация пары (m, e) под раскладку.

    1. Пока мантисса велика или экспонента ниже MIN_EXP: m //= 10, e += 1
    2. Пока экспонента выше MAX_EXP и есть запас: m *= 10, e -= 1
    3. m == 0 или e < MIN_EXP => ноль; e > MAX_EXP или m > MAX_MANTISSA => MAX
    """
    max_m, max_e, min_e = layout.max_mantissa, layout.max_exp, layout.min_exp

    while (m > max_m or e < min_e) and m > 0 and e < max_e:
        m //= 10
        e += 1

    while e > max_e and m * 10 <= max_m:
        m *= 10
        e -= 1

    if m == 0 or e < min_e:
        return 0, 0
    if e > max_e or m > max_m:
        return max_m, max_e
    return m, e


# =============================================================================
# КОНКРЕТНЫЕ РАСКЛАДКИ
# =============================================================================


class Value(DecimalValue, exponent_bits=8):
    """
    Decimal-значение 8/56: до 17 значащих цифр, экспонента [-127, 127].

    Основной тип для цен и курсов.
    """

    __slots__ = ()


class PreciseValue(DecimalValue, exponent_bits=6):
    """
    Decimal-значение 6/58: до 18 значащих цифр, экспонента [-31, 31].

    Больше точность мантиссы ценой узкого диапазона экспоненты.
    """

    __slots__ = ()


ZERO = Value.ZERO
MAX = Value.MAX
MIN = Value.MIN
