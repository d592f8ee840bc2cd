"""
Decimal Layout — параметры упаковки мантиссы и экспоненты в машинное слово

Слово шириной word_bits делится на поле экспоненты (старшие exponent_bits бит)
и поле мантиссы (младшие биты). Экспонента хранится со смещением (bias):

    word = (exponent + bias) << mant_bits | mantissa

    63      55                                                     0
    ________|_______________________________________________________
    eeeeeeeemmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmmm

Для раскладки 8/56:
- MAX_MANTISSA = 2^56 - 1 = 72057594037927935 (17 цифр)
- MAX_EXP = 127, MIN_EXP = -127, BIAS = 127
"""

from dataclasses import dataclass, field

from src.core.math.decimal_kernel import WORD_BITS, decimal_digits


@dataclass(frozen=True)
class DecimalLayout:
    """
    Раскладка битов decimal-значения.

    Все производные константы вычисляются один раз при создании.
    """

    exponent_bits: int
    word_bits: int = WORD_BITS

    mant_bits: int = field(init=False)
    max_mantissa: int = field(init=False)
    max_exp: int = field(init=False)
    min_exp: int = field(init=False)
    bias: int = field(init=False)
    mantissa_digits: int = field(init=False)

    def __post_init__(self):
        if not 2 <= self.exponent_bits < self.word_bits:
            raise ValueError(
                f"exponent_bits must be in [2, {self.word_bits}), got {self.exponent_bits}"
            )
        mant_bits = self.word_bits - self.exponent_bits
        max_exp = (1 << (self.exponent_bits - 1)) - 1
        max_mantissa = (1 << mant_bits) - 1

        # frozen dataclass: производные поля через object.__setattr__
        object.__setattr__(self, "mant_bits", mant_bits)
        object.__setattr__(self, "max_mantissa", max_mantissa)
        object.__setattr__(self, "max_exp", max_exp)
        object.__setattr__(self, "min_exp", -max_exp)
        object.__setattr__(self, "bias", max_exp)
        object.__setattr__(self, "mantissa_digits", decimal_digits(max_mantissa))

    def pack(self, mantissa: int, exponent: int) -> int:
        """Упаковка без проверок (вызывающий код гарантирует диапазоны)."""
        return (exponent + self.bias) << self.mant_bits | mantissa

    def unpack(self, word: int) -> tuple[int, int]:
        """Распаковка слова в (mantissa, exponent)."""
        return word & self.max_mantissa, (word >> self.mant_bits) - self.bias
