"""
Signed — decimal-значение со знаком

Тонкая обёртка над беззнаковым Value: {negative, magnitude}.
Каждый оператор сводится к беззнаковым операциям разбором знаков:
- Одинаковые знаки: сложение модулей, знак сохраняется
- Разные знаки: разность модулей (Value.sub), знак большего по модулю
- Умножение/деление: знак = XOR знаков
- DivMod: знак частного = XOR, знак остатка = знак делимого

Каноничный ноль: Signed(negative=False, magnitude=ZERO). Конструктор
приводит к нему любой ноль, поэтому "-0" не существует.
"""

from typing import Any, ClassVar

from src.core.conversion.formatting import format_decimal, format_mant_exp
from src.core.conversion.parsing import digits_to_mantissa, parse_decimal
from src.core.domain.value import DecimalValue, RoundingMode, Value
from src.core.errors import BadFloatError, ParseError
from src.core.math.decimal_kernel import int_sign
from src.core.math.float_decomposition import is_valid_float


class Signed:
    """
    Decimal-значение со знаком.

    Immutable: атрибуты задаются только в конструкторе, все операции
    возвращают новый экземпляр.

    Examples:
        >>> str(Signed.from_string("12.34") + Signed.from_string("-4.56"))
        '7.78'
    """

    __slots__ = ("negative", "magnitude")

    JSON_SCHEMA: ClassVar[str] = "signed_mant_exp"

    negative: bool
    magnitude: DecimalValue

    def __init__(self, negative: bool = False, magnitude: DecimalValue = Value.ZERO):
        if magnitude.is_zero():
            # каноничный ноль
            negative, magnitude = False, type(magnitude).ZERO
        object.__setattr__(self, "negative", bool(negative))
        object.__setattr__(self, "magnitude", magnitude)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.negative, self.magnitude))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def positive(cls, value: DecimalValue) -> "Signed":
        return cls(False, value)

    @classmethod
    def negated(cls, value: DecimalValue) -> "Signed":
        """-value для беззнакового value."""
        return cls(True, value)

    @classmethod
    def from_int(cls, value: int, value_type: type[DecimalValue] = Value) -> "Signed":
        return cls(value < 0, value_type.from_uint64(abs(value)))

    @classmethod
    def from_mant_exp(
        cls, mantissa: int, exponent: int, value_type: type[DecimalValue] = Value
    ) -> "Signed":
        """Мантисса со знаком и экспонента (насыщение как у Value)."""
        return cls(mantissa < 0, value_type.from_mant_exp(abs(mantissa), exponent))

    @classmethod
    def from_float64(cls, value: float, value_type: type[DecimalValue] = Value) -> "Signed":
        """
        Значение из float64 (допускаются отрицательные).

        Raises:
            BadFloatError: Inf или NaN
        """
        if not is_valid_float(value):
            raise BadFloatError()
        return cls(value < 0, value_type.from_float64(abs(value)))

    @classmethod
    def from_string(cls, text: str, value_type: type[DecimalValue] = Value) -> "Signed":
        """
        Разбор строки с необязательным знаком.

        Raises:
            ParseError: Синтаксическая ошибка
            BadFloatError: float-fallback дал Inf/NaN

        Examples:
            >>> Signed.from_string("-1.5")
            Signed(negative=True, magnitude=Value(mantissa=15, exponent=-1))
        """
        parsed = parse_decimal(text)
        if parsed.approx is not None:
            return cls(parsed.negative, value_type.from_float64(parsed.approx))
        m, e = digits_to_mantissa(parsed.digits, parsed.exponent, value_type.LAYOUT.mantissa_digits)
        return cls(parsed.negative, value_type.from_mant_exp(m, e))

    @classmethod
    def must_from_string(cls, text: str, value_type: type[DecimalValue] = Value) -> "Signed":
        try:
            return cls.from_string(text, value_type)
        except (ParseError, BadFloatError) as err:
            raise RuntimeError(f"cannot parse {text!r}: {err}") from err

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    def sign(self) -> int:
        """-1 если < 0, 0 если == 0, 1 если > 0."""
        if self.magnitude.is_zero():
            return 0
        return -1 if self.negative else 1

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def to_float64(self) -> float:
        f = self.magnitude.to_float64()
        return -f if self.negative else f

    def normalized(self) -> "Signed":
        return Signed(self.negative, self.magnitude.normalized())

    def neg(self) -> "Signed":
        return Signed(not self.negative, self.magnitude)

    def abs(self) -> "Signed":
        return Signed(False, self.magnitude)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def eq(self, other: "Signed") -> bool:
        if self.negative != other.negative:
            return self.magnitude.is_zero() and other.magnitude.is_zero()
        return self.magnitude.eq(other.magnitude)

    def cmp(self, other: "Signed") -> int:
        s1, s2 = self.sign(), other.sign()
        if s1 != s2:
            return int_sign(s1 - s2)
        return self.magnitude.cmp(other.magnitude) * s1

    def eq_value(self, other: DecimalValue) -> bool:
        if self.negative:
            return self.magnitude.is_zero() and other.is_zero()
        return self.magnitude.eq(other)

    def cmp_value(self, other: DecimalValue) -> int:
        if self.negative:
            # отрицательный модуль всегда ненулевой (каноничный ноль положителен)
            return -1
        return self.magnitude.cmp(other)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Signed") -> "Signed":
        if self.negative == other.negative:
            # v1+v2 или -v1+(-v2) = -(v1+v2)
            return Signed(self.negative, self.magnitude.add(other.magnitude))
        if not self.negative:
            # v1+(-v2) = v1-v2
            diff, neg = self.magnitude.sub(other.magnitude)
            return Signed(neg, diff)
        # -v1+v2 = v2-v1
        diff, neg = other.magnitude.sub(self.magnitude)
        return Signed(neg, diff)

    def sub(self, other: "Signed") -> "Signed":
        return self.add(other.neg())

    def mul(self, other: "Signed") -> "Signed":
        return Signed(self.negative != other.negative, self.magnitude.mul(other.magnitude))

    def div(self, other: "Signed") -> "Signed":
        """
        Raises:
            DivisionByZero: Делитель равен нулю
        """
        return Signed(self.negative != other.negative, self.magnitude.div(other.magnitude))

    def div_mod(self, other: "Signed", prec: int) -> tuple["Signed", "Signed"]:
        """
        Частное (усечённое к нулю до prec знаков) и остаток со знаком делимого.

        self == other * quo + rem.

        Raises:
            DivisionByZero: Делитель равен нулю
        """
        q, r = self.magnitude.div_mod(other.magnitude, prec)
        return Signed(self.negative != other.negative, q), Signed(self.negative, r)

    def add_value(self, other: DecimalValue) -> "Signed":
        if not self.negative:
            return Signed(False, self.magnitude.add(other))
        diff, neg = other.sub(self.magnitude)
        return Signed(neg, diff)

    def sub_value(self, other: DecimalValue) -> "Signed":
        if self.negative:
            return Signed(True, self.magnitude.add(other))
        diff, neg = self.magnitude.sub(other)
        return Signed(neg, diff)

    def mul_value(self, other: DecimalValue) -> "Signed":
        return Signed(self.negative, self.magnitude.mul(other))

    def div_value(self, other: DecimalValue) -> "Signed":
        return Signed(self.negative, self.magnitude.div(other))

    def div_mod_value(self, other: DecimalValue, prec: int) -> tuple["Signed", "Signed"]:
        return self.div_mod(Signed(False, other), prec)

    def _rounded(self, prec: int, mode: RoundingMode) -> "Signed":
        # floor отрицательного числа — это ceil его модуля, и наоборот
        if self.negative and mode is not RoundingMode.ROUND:
            mode = RoundingMode.CEIL if mode is RoundingMode.FLOOR else RoundingMode.FLOOR
        return Signed(self.negative, self.magnitude._rounded(prec, mode))

    def floor(self, prec: int) -> "Signed":
        return self._rounded(prec, RoundingMode.FLOOR)

    def round(self, prec: int) -> "Signed":
        return self._rounded(prec, RoundingMode.ROUND)

    def ceil(self, prec: int) -> "Signed":
        return self._rounded(prec, RoundingMode.CEIL)

    # =========================================================================
    # ТЕКСТ И JSON
    # =========================================================================

    def to_string(self) -> str:
        m, e = self.magnitude.normalized().split()
        return format_decimal(m, e, self.negative)

    def format(self, fmt: str) -> str:
        m, e = self.magnitude.normalized().split()
        return format_mant_exp(m, e, fmt, self.negative)

    def marshal(self, config=None) -> bytes:
        from src.core.contracts.json_codec import JsonCodec

        return JsonCodec(config).marshal(self)

    @classmethod
    def unmarshal(cls, data: bytes | str) -> "Signed":
        from src.core.contracts.json_codec import JsonCodec

        return JsonCodec().unmarshal(data, cls)

    @classmethod
    def _from_json_object(cls, obj: dict[str, Any]) -> "Signed":
        return cls.from_mant_exp(int(obj["m"]), int(obj["e"]))

    def _json_parts(self) -> tuple[int, int, bool]:
        m, e = self.magnitude.normalized().split()
        return m, e, self.negative

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
        return f"{type(self).__name__}(negative={self.negative}, magnitude={self.magnitude!r})"

    def __hash__(self) -> int:
        # неотрицательный Signed равен своему модулю
        if not self.negative:
            return hash(self.magnitude)
        return hash((True, self.magnitude))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.eq_value(other)
        if not isinstance(other, Signed):
            return NotImplemented
        return self.eq(other)

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __float__(self) -> float:
        return self.to_float64()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "Signed":
        return self.neg()

    def __abs__(self) -> "Signed":
        return self.abs()

    def __lt__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.cmp_value(other) < 0
        if not isinstance(other, Signed):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.cmp_value(other) <= 0
        if not isinstance(other, Signed):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.cmp_value(other) > 0
        if not isinstance(other, Signed):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.cmp_value(other) >= 0
        if not isinstance(other, Signed):
            return NotImplemented
        return self.cmp(other) >= 0

    def __add__(self, other: object) -> "Signed":
        if isinstance(other, DecimalValue):
            return self.add_value(other)
        if not isinstance(other, Signed):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Signed":
        if isinstance(other, DecimalValue):
            return self.sub_value(other)
        if not isinstance(other, Signed):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Signed":
        if isinstance(other, DecimalValue):
            return self.mul_value(other)
        if not isinstance(other, Signed):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "Signed":
        if isinstance(other, DecimalValue):
            return self.div_value(other)
        if not isinstance(other, Signed):
            return NotImplemented
        return self.div(other)


ZERO = Signed()
