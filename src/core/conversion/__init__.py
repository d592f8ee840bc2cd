"""
Conversion modules

Разбор и форматирование десятичных строк, общие для Value, Signed и Fixed.
"""

from src.core.conversion.formatting import (
    MAX_ZERO_RUN,
    decimal_json_len,
    format_decimal,
    format_float,
    format_mant_exp,
    format_mant_exp_json,
    format_scientific,
    mant_exp_json_len,
)
from src.core.conversion.parsing import (
    ParsedDecimal,
    digits_to_mantissa,
    parse_decimal,
    prepare,
    scan,
)

__all__ = [
    # Formatting
    "MAX_ZERO_RUN",
    "decimal_json_len",
    "format_decimal",
    "format_float",
    "format_mant_exp",
    "format_mant_exp_json",
    "format_scientific",
    "mant_exp_json_len",
    # Parsing
    "ParsedDecimal",
    "digits_to_mantissa",
    "parse_decimal",
    "prepare",
    "scan",
]
