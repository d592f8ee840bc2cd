"""
Fixed — decimal fixed-point со знаком

Значение хранится как целое со знаком raw с постоянной неявной экспонентой:

    value = raw * 10^(-fraction_digits)

Для Fixed (fraction_digits=8): 1.5 хранится как raw = 150000000.
|raw| <= 10^18 - 1, т.е. 10 знаков целой части и 8 дробных.

Fixed разделяет с Value ядро (decimal_kernel), сканер строк и форматтер,
но это отдельный тип: экспонента не хранится и не меняется.

Политика диапазона: все результаты насыщаются до [MIN, MAX].
Деление на ноль — DivisionByZero.
"""

from typing import Any, ClassVar

from src.core.conversion.formatting import format_decimal, format_mant_exp
from src.core.conversion.parsing import digits_to_mantissa, parse_decimal
from src.core.errors import BadFloatError, DivisionByZero, ParseError
from src.core.math.decimal_kernel import (
    abs_int,
    div_with_rescale,
    int_sign,
    same_sign,
    scale_mantissa,
    trim_zeros,
)
from src.core.math.float_decomposition import (
    EPS_FLOAT_MANTISSA,
    MAX_FLOAT_PRECISION_FIXED,
    float_mantissa,
    is_valid_float,
)


class FixedPoint:
    """
    Базовый fixed-point тип; масштаб задаётся при наследовании:

        class Fixed(FixedPoint, fraction_digits=8):
            __slots__ = ()

    FixedPoint(raw) принимает уже масштабированное целое и насыщает его.
    Immutable; сравнение и равенство только между экземплярами одного типа.
    """

    __slots__ = ("raw",)

    raw: int

    FRACTION_DIGITS: ClassVar[int]
    TOTAL_DIGITS: ClassVar[int]
    SCALE: ClassVar[int]
    MAX_RAW: ClassVar[int]

    ZERO: ClassVar["FixedPoint"]
    MAX: ClassVar["FixedPoint"]
    MIN: ClassVar["FixedPoint"]
    SMALLEST_POSITIVE: ClassVar["FixedPoint"]
    SMALLEST_NEGATIVE: ClassVar["FixedPoint"]

    JSON_SCHEMA: ClassVar[str] = "signed_mant_exp"

    def __init_subclass__(cls, fraction_digits: int | None = None, total_digits: int = 18, **kwargs):
        super().__init_subclass__(**kwargs)
        if fraction_digits is None:
            return
        if not 0 <= fraction_digits <= total_digits:
            raise ValueError(
                f"fraction_digits must be in [0, {total_digits}], got {fraction_digits}"
            )
        cls.FRACTION_DIGITS = fraction_digits
        cls.TOTAL_DIGITS = total_digits
        cls.SCALE = 10**fraction_digits
        cls.MAX_RAW = 10**total_digits - 1

        cls.ZERO = cls(0)
        cls.MAX = cls(cls.MAX_RAW)
        cls.MIN = cls(-cls.MAX_RAW)
        cls.SMALLEST_POSITIVE = cls(1)
        cls.SMALLEST_NEGATIVE = cls(-1)

    def __init__(self, raw: int = 0):
        if abs_int(raw) > self.MAX_RAW:
            raw = self.MAX_RAW if raw > 0 else -self.MAX_RAW
        object.__setattr__(self, "raw", raw)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.raw,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_raw(cls, raw: int):
        return cls(raw)

    @classmethod
    def from_int(cls, value: int):
        return cls.from_mant_exp(value, 0)

    @classmethod
    def from_int_and_frac(cls, integer: int, fraction: int):
        """
        Значение из целой части и цифр дробной части.

        Дробная часть читается как цифры после точки: (123, 456) => 123.456.

        Examples:
            >>> Fixed.from_int_and_frac(-123, 456).to_string()
            '-123.456'
        """
        digits = str(fraction)
        diff = cls.FRACTION_DIGITS - len(digits)
        if diff >= 0:
            fraction *= 10**diff
        else:
            fraction //= 10**-diff
        raw = abs_int(integer) * cls.SCALE + fraction
        return cls(-raw if integer < 0 else raw)

    @classmethod
    def from_mant_exp(cls, mantissa: int, exponent: int):
        """
        Значение mantissa * 10^exponent (mantissa со знаком).

        Лишние дробные цифры отбрасываются, переполнение насыщается до MAX/MIN.

        Examples:
            >>> Fixed.from_mant_exp(123456, -3).raw
            12345600000
            >>> Fixed.from_mant_exp(1, -9).raw
            0
        """
        m, _ = scale_mantissa(abs_int(mantissa), exponent, -cls.FRACTION_DIGITS, cls.MAX_RAW)
        return cls(-m if mantissa < 0 else m)

    @classmethod
    def from_string(cls, text: str):
        """
        Разбор строки со знаком.

        Raises:
            ParseError: Синтаксическая ошибка
            BadFloatError: float-fallback дал Inf/NaN
        """
        parsed = parse_decimal(text)
        if parsed.approx is not None:
            return cls.from_float64(-parsed.approx if parsed.negative else parsed.approx)
        m, e = digits_to_mantissa(parsed.digits, parsed.exponent, cls.TOTAL_DIGITS)
        return cls.from_mant_exp(-m if parsed.negative else m, e)

    @classmethod
    def must_from_string(cls, text: str):
        try:
            return cls.from_string(text)
        except (ParseError, BadFloatError) as err:
            raise RuntimeError(f"cannot parse {text!r}: {err}") from err

    @classmethod
    def from_float64(cls, value: float):
        """
        Значение из float64 (допускаются отрицательные).

        Raises:
            BadFloatError: Inf или NaN
        """
        if not is_valid_float(value):
            raise BadFloatError()
        if value == 0:
            return cls.ZERO
        m, e = float_mantissa(value, EPS_FLOAT_MANTISSA, MAX_FLOAT_PRECISION_FIXED)
        return cls.from_mant_exp(-m if value < 0 else m, e)

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    def sign(self) -> int:
        return int_sign(self.raw)

    def abs(self):
        return type(self)(abs_int(self.raw))

    def neg(self):
        return type(self)(-self.raw)

    def is_zero(self) -> bool:
        return self.raw == 0

    def cmp(self, other: "FixedPoint") -> int:
        return int_sign(self.raw - other.raw)

    def eq(self, other: "FixedPoint") -> bool:
        return self.raw == other.raw

    def to_float64(self) -> float:
        return self.raw / self.SCALE

    def _trimmed(self) -> tuple[int, int]:
        return trim_zeros(abs_int(self.raw), -self.FRACTION_DIGITS, self.TOTAL_DIGITS)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "FixedPoint"):
        return type(self)(self.raw + other.raw)

    def sub(self, other: "FixedPoint"):
        return type(self)(self.raw - other.raw)

    def mul(self, other: "FixedPoint"):
        """Произведение, лишние дробные цифры усекаются к нулю."""
        product = self.raw * other.raw
        raw = abs_int(product) // self.SCALE
        return type(self)(raw if product >= 0 else -raw)

    def div(self, other: "FixedPoint"):
        """
        Частное: точное целочисленное деление, иначе приближение через float64.

        Raises:
            DivisionByZero: Делитель равен нулю
        """
        if other.raw == 0:
            raise DivisionByZero()
        if self.raw == 0:
            return self.ZERO

        dot = -self.FRACTION_DIGITS
        quo, rem, e = div_with_rescale(abs_int(self.raw), dot, abs_int(other.raw), dot)
        if rem == 0:
            return self.from_mant_exp(quo if same_sign(self.raw, other.raw) else -quo, e)
        return self.from_float64(self.raw / other.raw)

    # =========================================================================
    # ТЕКСТ И JSON
    # =========================================================================

    def to_string(self) -> str:
        m, e = self._trimmed()
        return format_decimal(m, e, self.raw < 0)

    def format(self, fmt: str) -> str:
        m, e = self._trimmed()
        return format_mant_exp(m, e, fmt, self.raw < 0)

    def marshal(self) -> bytes:
        """JSON: научная запись в кавычках, например "123456e-3"."""
        return f'"{self.format("e")}"'.encode()

    @classmethod
    def unmarshal(cls, data: bytes | str):
        """Разбор JSON: строка, число или объект {"m","e"} с мантиссой со знаком."""
        from src.core.contracts.json_codec import JsonCodec

        return JsonCodec().unmarshal(data, cls)

    @classmethod
    def _from_json_object(cls, obj: dict[str, Any]):
        return cls.from_mant_exp(int(obj["m"]), int(obj["e"]))

    def _json_parts(self) -> tuple[int, int, bool]:
        m, e = self._trimmed()
        return m, e, self.raw < 0

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
        return f"{type(self).__name__}(raw={self.raw})"

    def __hash__(self) -> int:
        return hash((type(self), self.raw))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw == other.raw

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw < other.raw

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw <= other.raw

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw > other.raw

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw >= other.raw

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __float__(self) -> float:
        return self.to_float64()

    def __bool__(self) -> bool:
        return self.raw != 0

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()

    def __add__(self, other: object):
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object):
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object):
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.div(other)


class Fixed(FixedPoint, fraction_digits=8):
    """Fixed-point с 8 знаками после точки (диапазон ±9999999999.99999999)."""

    __slots__ = ()
