"""
Core math modules

Целочисленные примитивы и разложение float64 для decimal-типов.
"""

# Decimal Kernel
from src.core.math.decimal_kernel import (
    # Constants
    MAX_POW10,
    UINT64_MAX,
    WORD_BITS,
    # Digits and powers
    decimal_digits,
    int_decimal_len,
    log10,
    pow10,
    trailing_zeros,
    # 128-bit operations
    div_with_rescale,
    mul64,
    # Mantissa scaling
    scale_mantissa,
    trim_zeros,
    # Sign helpers
    abs_int,
    int_sign,
    same_sign,
)

# Float Decomposition
from src.core.math.float_decomposition import (
    EPS_FLOAT_MANTISSA,
    MAX_FLOAT_PRECISION,
    MAX_FLOAT_PRECISION_FIXED,
    float_mantissa,
    is_valid_float,
    norm_float64,
    scale_float,
)

__all__ = [
    # Decimal Kernel — Constants
    "MAX_POW10",
    "UINT64_MAX",
    "WORD_BITS",
    # Decimal Kernel — Digits and powers
    "decimal_digits",
    "int_decimal_len",
    "log10",
    "pow10",
    "trailing_zeros",
    # Decimal Kernel — 128-bit operations
    "div_with_rescale",
    "mul64",
    # Decimal Kernel — Mantissa scaling
    "scale_mantissa",
    "trim_zeros",
    # Decimal Kernel — Sign helpers
    "abs_int",
    "int_sign",
    "same_sign",
    # Float Decomposition — Constants
    "EPS_FLOAT_MANTISSA",
    "MAX_FLOAT_PRECISION",
    "MAX_FLOAT_PRECISION_FIXED",
    # Float Decomposition — Functions
    "float_mantissa",
    "is_valid_float",
    "norm_float64",
    "scale_float",
]
