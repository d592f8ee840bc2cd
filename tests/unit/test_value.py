"""
Юнит-тесты для Value и PreciseValue

Проверяет:
1. Константы и канонизацию конструкторов (насыщение, схлопывание в ноль)
2. Strict-конструкторы
3. Разбор строк и float64
4. Сравнение и равенство разных представлений
5. Арифметику: add, sub, mul, div, div_mod
6. floor / round / ceil с положительной и отрицательной точностью
7. Текст, протоколы Python, неизменяемость
8. Раскладку 6/58
"""

import copy
import pickle

import pytest

from src.core.domain.value import (
    MAX,
    MIN,
    ZERO,
    PreciseValue,
    RoundingMode,
    Value,
    round_mant_exp,
    to_equal_exp,
)
from src.core.errors import (
    BadFloatError,
    DecimalError,
    DivisionByZero,
    ParseError,
    RangeError,
)
from src.core.math.decimal_kernel import UINT64_MAX

MAX_M = 72057594037927935


def v(text: str) -> Value:
    return Value.from_string(text)


# =============================================================================
# КОНСТАНТЫ И КОНСТРУКТОРЫ
# =============================================================================


class TestConstants:
    """Константы раскладки 8/56"""

    def test_extremes(self) -> None:
        assert MAX.split() == (MAX_M, 127)
        assert MIN.split() == (1, -127)
        assert ZERO.split() == (0, 0)

    def test_module_aliases(self) -> None:
        assert ZERO is Value.ZERO
        assert MAX is Value.MAX
        assert MIN is Value.MIN

    def test_word(self) -> None:
        assert Value(1, 0).word == (127 << 56) | 1
        assert MIN.word == 1


class TestFromMantExp:
    """Канонизирующий конструктор"""

    def test_keeps_representation(self) -> None:
        """Конструктор не нормализует хвостовые нули"""
        assert Value(12300, -3).split() == (12300, -3)

    def test_zero_mantissa_is_zero(self) -> None:
        assert Value(0, 50).split() == (0, 0)
        assert Value.from_mant_exp(0, -300).split() == (0, 0)

    def test_large_mantissa_loses_low_digits(self) -> None:
        assert Value.from_mant_exp(MAX_M + 1, 0).split() == (7205759403792793, 1)

    def test_exponent_above_max_shifts_into_mantissa(self) -> None:
        assert Value.from_mant_exp(1, 128).split() == (10, 127)

    def test_exponent_overflow_saturates(self) -> None:
        assert Value.from_mant_exp(1, 200) == MAX
        assert Value.from_mant_exp(123, 147) == MAX

    def test_exponent_below_min(self) -> None:
        assert Value.from_mant_exp(1234, -128).split() == (123, -127)
        assert Value.from_mant_exp(1, -128) == ZERO

    def test_negative_mantissa(self) -> None:
        with pytest.raises(RangeError):
            Value.from_mant_exp(-1, 0)
        with pytest.raises(RangeError):
            Value(-5)

    def test_from_uint64(self) -> None:
        assert Value.from_uint64(42).split() == (42, 0)
        assert Value.from_uint64(UINT64_MAX).split() == (18446744073709551, 3)
        assert Value.from_int(7) == Value(7, 0)

    def test_from_int_negative(self) -> None:
        with pytest.raises(RangeError):
            Value.from_int(-5)

    def test_invariants_hold(self) -> None:
        """Мантисса и экспонента всегда в диапазоне"""
        for m, e in [(UINT64_MAX, 300), (UINT64_MAX, -300), (10**30, 0), (1, 127), (5, -127)]:
            value = Value.from_mant_exp(m, e)
            mantissa, exponent = value.split()
            assert mantissa <= MAX_M
            assert -127 <= exponent <= 127
            if mantissa == 0:
                assert exponent == 0


class TestFromMantExpStrict:
    """Конструктор без потерь"""

    def test_exact(self) -> None:
        assert Value.from_mant_exp_strict(123, -2).split() == (123, -2)

    def test_shift_into_range(self) -> None:
        assert Value.from_mant_exp_strict(12300, 130).split() == (12300000, 127)
        assert Value.from_mant_exp_strict(100, -128).split() == (1, -126)
        assert Value.from_mant_exp_strict(10**20, 0).split() == (1, 20)

    def test_zero(self) -> None:
        assert Value.from_mant_exp_strict(0, 999) == ZERO

    def test_not_representable(self) -> None:
        with pytest.raises(RangeError):
            Value.from_mant_exp_strict(1, 200)
        with pytest.raises(RangeError):
            Value.from_mant_exp_strict(MAX_M + 1, 0)
        with pytest.raises(RangeError):
            Value.from_mant_exp_strict(1, -128)


class TestFromFloat64:
    """Конструктор из float64"""

    def test_values(self) -> None:
        assert Value.from_float64(1.5).split() == (15, -1)
        assert Value.from_float64(1.23456).split() == (123456, -5)
        assert Value.from_float64(100.0).split() == (1, 2)
        assert Value.from_float64(0.0) == ZERO

    @pytest.mark.parametrize("bad", [-1.0, float("inf"), float("-inf"), float("nan")])
    def test_bad_float(self, bad: float) -> None:
        with pytest.raises(BadFloatError, match="bad float number"):
            Value.from_float64(bad)

    def test_must_from_float64(self) -> None:
        assert Value.must_from_float64(0.5) == Value(5, -1)
        with pytest.raises(RuntimeError):
            Value.must_from_float64(-1.0)


class TestFromString:
    """Разбор строк"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.23456", (123456, -5)),
            ("+12.5", (125, -1)),
            ('"42"', (42, 0)),
            (" 7 ", (7, 0)),
            ("00001.10000", (11, -1)),
            ("0.01234500", (12345, -6)),
            ("123450000", (12345, 4)),
            ("1e128", (10, 127)),
            ("12345678901234567890", (12345678901234567, 3)),
            ("0.000", (0, 0)),
            ("1e-200", (0, 0)),
        ],
    )
    def test_values(self, text: str, expected: tuple[int, int]) -> None:
        assert Value.from_string(text).split() == expected

    def test_saturates(self) -> None:
        assert Value.from_string("123e147") == MAX
        assert Value.from_string_saturating("123e147") == MAX

    def test_float_fallback(self) -> None:
        assert Value.from_string("1E5").split() == (1, 5)

    def test_float_fallback_infinity(self) -> None:
        with pytest.raises(BadFloatError):
            Value.from_string("inf")

    def test_negative_rejected(self) -> None:
        with pytest.raises(ParseError, match="negative value"):
            Value.from_string("-1")

    @pytest.mark.parametrize(
        "text, message",
        [
            ("   --", "at pos 5"),
            ("abc", "unexpected symbol 'a' at pos 1"),
            ('  ""  ', "at pos 3"),
            ("   0.00.  ", "unexpected delimiter at pos 8"),
            ("", "empty input"),
            ('"', "empty input"),
            ("123e", "at pos 5"),
            ("+-1", "unexpected symbol '-' at pos 2"),
            ("1_000", "unexpected symbol '_' at pos 2"),
        ],
    )
    def test_errors(self, text: str, message: str) -> None:
        with pytest.raises(ParseError, match=message):
            Value.from_string(text)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Value.from_string("abc")
        with pytest.raises(DecimalError):
            Value.from_string("abc")

    def test_to_float64_after_parse(self) -> None:
        assert Value.from_string("1.23456").to_float64() == 1.23456

    def test_strict(self) -> None:
        assert Value.from_string_strict("1.5").split() == (15, -1)
        assert Value.from_string_strict("1e130").split() == (1000, 127)

    def test_strict_rejects_lossy_input(self) -> None:
        with pytest.raises(RangeError):
            Value.from_string_strict("12345678901234567890")
        with pytest.raises(RangeError):
            Value.from_string_strict("1e200")
        with pytest.raises(ParseError):
            Value.from_string_strict("1E5")
        with pytest.raises(ParseError, match="negative value"):
            Value.from_string_strict("-1")

    def test_must_from_string(self) -> None:
        assert Value.must_from_string("2.5") == Value(25, -1)
        with pytest.raises(RuntimeError, match="cannot parse"):
            Value.must_from_string("abc")


# =============================================================================
# ЗАПРОСЫ И МАСШТАБ
# =============================================================================


class TestQueries:
    """Запросы и нормализация"""

    def test_accessors(self) -> None:
        value = Value(123456, -3)
        assert value.mantissa == 123456
        assert value.exponent == -3
        assert not value.is_zero()
        assert ZERO.is_zero()

    def test_to_float64(self) -> None:
        assert Value(123456, -3).to_float64() == 123.456
        assert ZERO.to_float64() == 0.0
        assert MAX.to_float64() == pytest.approx(7.2057594037927935e143, rel=1e-15)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Value(123, 2), (12300, True)),
            (Value(12345, -2), (123, False)),
            (Value(12300, -2), (123, True)),
            (Value(0, 0), (0, True)),
            (Value(1, -25), (0, False)),
            (Value(18446744073709551, 3), (18446744073709551000, True)),
            (MAX, (MAX_M, False)),
        ],
    )
    def test_to_uint64(self, value: Value, expected: tuple[int, bool]) -> None:
        assert value.to_uint64() == expected

    def test_normalized(self) -> None:
        assert Value(12300, 0).normalized().split() == (123, 2)
        assert Value(100, 126).normalized().split() == (10, 127)
        assert Value(0, 0).normalized() is ZERO

    def test_to_exponent(self) -> None:
        assert Value(123456, -10).to_exponent(-12).split() == (12345600, -12)
        assert Value(123456, 0).to_exponent(2).split() == (1234, 2)
        assert Value(5, 0).to_exponent(3) == ZERO
        assert Value(5, 0).to_exponent(200) == MAX
        assert Value(5, 0).to_exponent(-200) == ZERO

    def test_scale_mantissa(self) -> None:
        value, exact = Value(123456, 0).scale_mantissa(2)
        assert value.split() == (1234, 2)
        assert not exact

        value, exact = Value(123456, -10).scale_mantissa(-12)
        assert value.split() == (12345600, -12)
        assert exact

    def test_scale_mantissa_saturates(self) -> None:
        value, exact = Value(1, 0).scale_mantissa(-20)
        assert value.split() == (MAX_M, -20)
        assert not exact


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Сравнение и равенство"""

    def test_equal_representations(self) -> None:
        assert Value(1, 0) == Value(10, -1)
        assert Value(1, 0).cmp(Value(10, -1)) == 0
        assert hash(Value(1, 0)) == hash(Value(10, -1))
        assert len({Value(1, 0), Value(10, -1), Value(100, -2)}) == 1

    def test_zero_representations(self) -> None:
        assert ZERO == Value(0, 5)

    def test_cmp(self) -> None:
        assert Value(1, 1).cmp(Value(9, 0)) == 1
        assert Value(15, -1).cmp(Value(2, 0)) == -1
        assert ZERO.cmp(MIN) == -1
        assert MAX.cmp(MIN) == 1
        assert MIN.cmp(ZERO) == 1

    def test_operators(self) -> None:
        assert Value(25, -1) < Value(3, 0)
        assert Value(3, 0) <= Value(30, -1)
        assert Value(1, 1) > Value(9, 0)
        assert Value(1, 1) >= Value(10, 0)
        assert Value(1, 0) != Value(2, 0)

    def test_sorting(self) -> None:
        values = [Value(3, 0), Value(1, 1), Value(25, -1)]
        assert [str(x) for x in sorted(values)] == ["2.5", "3", "10"]

    def test_not_equal_to_int(self) -> None:
        assert Value(1, 0) != 1

    def test_equal_across_layouts(self) -> None:
        assert Value(1, 0) == PreciseValue(10, -1)
        assert hash(Value(1, 0)) == hash(PreciseValue(10, -1))


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestToEqualExp:
    """Приведение к общей экспоненте"""

    def test_grow_larger_exponent(self) -> None:
        assert to_equal_exp(1234560, 0, 123456, -5, MAX_M) == (123456000000, 123456, -5)

    def test_trim_before_grow(self) -> None:
        assert to_equal_exp(5, 0, 1200, -2, MAX_M) == (5, 12, 0)

    def test_truncate_smaller_when_no_room(self) -> None:
        assert to_equal_exp(MAX_M, 0, 123, -3, MAX_M) == (MAX_M, 0, 0)
        assert to_equal_exp(123, -3, MAX_M, 0, MAX_M) == (0, MAX_M, 0)


class TestAdd:
    """Сложение"""

    def test_mixed_exponents(self) -> None:
        assert str(Value(1234560, 0) + Value(123456, -5)) == "1234561.23456"

    def test_simple(self) -> None:
        assert str(v("12.34") + v("4.56")) == "16.9"

    def test_zero_operands(self) -> None:
        assert (ZERO + Value(5, 3)).split() == (5, 3)
        assert (Value(5, 3) + ZERO).split() == (5, 3)
        assert ZERO + ZERO == ZERO

    def test_mantissa_overflow_drops_digit(self) -> None:
        assert Value(MAX_M, 0).add(Value(MAX_M, 0)).split() == ((2 * MAX_M) // 10, 1)

    def test_overflow_at_max_exponent(self) -> None:
        assert Value(MAX_M - 1, 127) + Value(MAX_M, 127) == MAX
        assert MAX + Value(1, 127) == MAX

    def test_commutative(self) -> None:
        pairs = [(v("1.5"), v("2.25")), (v("123e10"), v("0.001")), (MIN, Value(1, 0))]
        for a, b in pairs:
            assert a + b == b + a


class TestSub:
    """Вычитание (модуль и признак знака)"""

    def test_positive_result(self) -> None:
        diff, negative = Value(5, 0).sub(Value(3, 0))
        assert diff == Value(2, 0)
        assert not negative

    def test_negative_result(self) -> None:
        diff, negative = Value(3, 0).sub(Value(5, 0))
        assert diff == Value(2, 0)
        assert negative

    def test_zero_operands(self) -> None:
        assert ZERO.sub(Value(5, 0)) == (Value(5, 0), True)
        assert Value(5, 0).sub(ZERO) == (Value(5, 0), False)

    def test_equal_operands(self) -> None:
        diff, negative = Value(5, 0).sub(Value(50, -1))
        assert diff == ZERO
        assert not negative

    def test_add_then_sub(self) -> None:
        a, b = v("1234.5678"), v("0.0042")
        diff, negative = (a + b).sub(b)
        assert diff == a
        assert not negative


class TestMul:
    """Умножение"""

    def test_simple(self) -> None:
        assert Value(15, -1) * Value(2, 0) == Value(3, 0)
        assert str(v("1.5") * v("1.5")) == "2.25"

    def test_zero(self) -> None:
        assert ZERO * MAX == ZERO
        assert MAX * ZERO == ZERO

    def test_underflow_truncates(self) -> None:
        assert (MIN * Value(123456, -3)).split() == (123, -127)

    def test_exponent_overflow_shifts_into_mantissa(self) -> None:
        assert (MAX.normalized() * Value(1, 4)) == MAX
        assert (Value(1, 127) * Value(1, 4)).split() == (10000, 127)

    def test_wide_product(self) -> None:
        assert (Value(MAX_M, 0) * Value(10**9, 0)).split() == (MAX_M, 9)

    def test_saturation(self) -> None:
        assert MAX * MAX == MAX
        assert MIN * MIN == ZERO


class TestDiv:
    """Деление"""

    def test_exact(self) -> None:
        assert Value(15, 0) / Value(5, 0) == Value(3, 0)
        assert str(Value(1, 0) / Value(4, 0)) == "0.25"

    def test_inexact_uses_float(self) -> None:
        result = Value(1, 0) / Value(3, 0)
        assert result.to_float64() == pytest.approx(1 / 3, rel=1e-12)

    def test_zero_dividend(self) -> None:
        assert ZERO / Value(7, 0) == ZERO

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            Value(1, 0) / ZERO
        with pytest.raises(ZeroDivisionError):
            Value(1, 0).div(Value(0, 5))

    def test_saturates(self) -> None:
        assert MAX / MIN == MAX
        assert MAX / Value(7, -127) == MAX


class TestDivMod:
    """Частное с точностью и остаток"""

    def test_fraction_digits(self) -> None:
        quo, rem = Value(15, 0).div_mod(Value(7, 0), 3)
        assert str(quo) == "2.142"
        assert str(rem) == "0.006"

    def test_exact(self) -> None:
        quo, rem = Value(15, 0).div_mod(Value(5, 0), 2)
        assert quo == Value(3, 0)
        assert rem == ZERO

    def test_exact_quotient_cut_by_precision(self) -> None:
        """Остаток считается даже если деление с перемасштабированием точное"""
        quo, rem = Value(7, 0).div_mod(Value(2, 0), 0)
        assert quo == Value(3, 0)
        assert rem == Value(1, 0)

    def test_python_operators(self) -> None:
        assert Value(7, 0) // Value(2, 0) == Value(3, 0)
        assert Value(7, 0) % Value(2, 0) == Value(1, 0)
        assert divmod(Value(7, 0), Value(2, 0)) == (Value(3, 0), Value(1, 0))

    def test_zero_dividend(self) -> None:
        assert ZERO.div_mod(Value(3, 0), 2) == (ZERO, ZERO)

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            Value(1, 0).div_mod(ZERO, 2)

    @pytest.mark.parametrize(
        "a, b, prec",
        [
            ("15", "7", 3),
            ("100", "3", 5),
            ("1234.5678", "0.3", 2),
            ("7", "2", 0),
            ("98765", "12", -1),
        ],
    )
    def test_reconstruction(self, a: str, b: str, prec: int) -> None:
        """a == b * quo + rem"""
        quo, rem = v(a).div_mod(v(b), prec)
        assert v(b) * quo + rem == v(a)
        assert rem < v(b)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class TestRounding:
    """floor / round / ceil"""

    @pytest.mark.parametrize(
        "method, prec, expected",
        [
            ("floor", 2, "123.45"),
            ("round", 2, "123.46"),
            ("ceil", 2, "123.46"),
            ("floor", 0, "123"),
            ("round", 1, "123.5"),
            ("ceil", 0, "124"),
            ("floor", -1, "120"),
            ("ceil", -1, "130"),
            ("ceil", -2, "200"),
            ("ceil", -3, "1000"),
            ("floor", -3, "0"),
            ("floor", 5, "123.456"),
        ],
    )
    def test_123_456(self, method: str, prec: int, expected: str) -> None:
        value = Value(123456, -3)
        assert str(getattr(value, method)(prec)) == expected

    def test_ceil_materializes_unit(self) -> None:
        assert Value.from_string("0.0000123").ceil(0) == Value(1, 0)

    def test_round_half_goes_down(self) -> None:
        """Вверх только если остаток строго больше половины"""
        assert str(Value(125, -2).round(1)) == "1.2"
        assert str(Value(126, -2).round(1)) == "1.3"
        assert Value(5, -1).round(0) == ZERO

    def test_round_mant_exp(self) -> None:
        assert round_mant_exp(123456, -3, 2, RoundingMode.ROUND) == (12346, -2)
        assert round_mant_exp(123, -7, 0, RoundingMode.CEIL) == (1, 0)
        assert round_mant_exp(123, -7, 0, RoundingMode.FLOOR) == (0, 0)
        assert round_mant_exp(0, 5, 2, RoundingMode.CEIL) == (0, 0)

    def test_ordering(self) -> None:
        """floor <= value <= ceil"""
        for text in ("123.456", "0.0000123", "99.995", "7"):
            value = v(text)
            for prec in (-2, 0, 2):
                assert value.floor(prec) <= value <= value.ceil(prec)


# =============================================================================
# ТЕКСТ И ПРОТОКОЛЫ
# =============================================================================


class TestText:
    """Текстовые представления"""

    @pytest.mark.parametrize(
        "value, decimal, scientific",
        [
            (Value(1, 3), "1000", "1e3"),
            (Value(1234560, -3), "1234.56", "123456e-2"),
            (Value(123, 10), "1230000000000", "123e10"),
            (ZERO, "0", "0"),
        ],
    )
    def test_formats(self, value: Value, decimal: str, scientific: str) -> None:
        assert value.to_string() == decimal
        assert str(value) == decimal
        assert value.format("f") == decimal
        assert value.format("s") == decimal
        assert value.format("e") == scientific
        assert value.format("v") == scientific
        assert f"{value:e}" == scientific
        assert f"{value}" == decimal

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            Value(1, 0).format("x")

    def test_repr_is_unnormalized(self) -> None:
        assert repr(Value(15, -1)) == "Value(mantissa=15, exponent=-1)"
        assert repr(Value(1500, -3)) == "Value(mantissa=1500, exponent=-3)"

    def test_string_round_trip(self) -> None:
        for value in (Value(123456, -3), Value(1, 127), MIN, MAX, Value(5, 0)):
            assert Value.from_string(value.to_string()) == value
            assert Value.from_string(value.format("e")) == value


class TestProtocols:
    """Протоколы Python"""

    def test_numeric_conversions(self) -> None:
        assert int(Value(12345, -2)) == 123
        assert int(Value(12, 3)) == 12000
        assert float(Value(15, -1)) == 1.5
        assert not ZERO
        assert Value(1, 0)

    def test_immutable(self) -> None:
        value = Value(1, 0)
        with pytest.raises(AttributeError):
            value.foo = 1  # type: ignore
        with pytest.raises(AttributeError):
            value._word = 5  # type: ignore

    def test_copy_and_pickle(self) -> None:
        value = Value(123456, -3)
        assert copy.copy(value) is value
        assert copy.deepcopy(value) is value
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert restored.split() == value.split()
        assert type(restored) is Value

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Value(1, 0) + 1  # type: ignore


# =============================================================================
# РАСКЛАДКА 6/58
# =============================================================================


class TestPreciseValue:
    """Decimal-значение 6/58"""

    def test_constants(self) -> None:
        assert PreciseValue.MAX.split() == (288230376151711743, 31)
        assert PreciseValue.MIN.split() == (1, -31)
        assert PreciseValue.ZERO.is_zero()
        assert PreciseValue.LAYOUT.mantissa_digits == 18

    def test_more_digits_than_value(self) -> None:
        text = "123456789012345678"
        assert PreciseValue.from_string(text).split() == (123456789012345678, 0)
        assert Value.from_string(text).split() == (12345678901234567, 1)

    def test_narrow_exponent(self) -> None:
        assert PreciseValue.from_mant_exp(1, -32) == PreciseValue.ZERO
        assert PreciseValue.from_mant_exp(1, 32).split() == (10, 31)

    def test_arithmetic_keeps_type(self) -> None:
        result = PreciseValue(1, 0) + PreciseValue(2, 0)
        assert type(result) is PreciseValue
        assert str(result) == "3"
        assert repr(PreciseValue(15, -1)) == "PreciseValue(mantissa=15, exponent=-1)"


# =============================================================================
# СВОЙСТВА НА ТАБЛИЦЕ ЗНАЧЕНИЙ
# =============================================================================

SAMPLES = [
    "0",
    "1",
    "0.5",
    "123.456",
    "1234560",
    "0.0000123",
    "99.995",
    "72057594037927935",
    "1e100",
    "1e-100",
]


class TestProperties:
    """Свойства на фиксированной таблице значений"""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_normalized_idempotent(self, text: str) -> None:
        value = v(text)
        assert value.normalized().word == value.normalized().normalized().word

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", ["1", "0.3", "123.456", "1e-100"])
    def test_cmp_antisymmetric(self, a: str, b: str) -> None:
        x, y = v(a), v(b)
        assert x.cmp(y) == -y.cmp(x)
        assert x.eq(y) == (x.cmp(y) == 0)

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", ["1", "0.3", "123.456"])
    def test_mul_commutative(self, a: str, b: str) -> None:
        assert v(a) * v(b) == v(b) * v(a)

    @pytest.mark.parametrize("text", ["1", "1.5", "123.456", "1e100"])
    def test_max_times_at_least_one_stays_max(self, text: str) -> None:
        assert MAX * v(text) == MAX

    def test_tiny_float_is_zero(self) -> None:
        assert Value.from_float64(1e-130) == ZERO
