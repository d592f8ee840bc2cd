"""
Domain value types.

Contains the packed decimal Value (and its layouts), the Signed wrapper
and the Fixed fixed-point type.
"""

from src.core.domain.fixed import Fixed, FixedPoint
from src.core.domain.layout import DecimalLayout
from src.core.domain.signed import Signed
from src.core.domain.value import (
    MAX,
    MIN,
    ZERO,
    DecimalValue,
    PreciseValue,
    RoundingMode,
    Value,
)

__all__ = [
    # Layout
    "DecimalLayout",
    # Value
    "DecimalValue",
    "Value",
    "PreciseValue",
    "RoundingMode",
    "ZERO",
    "MIN",
    "MAX",
    # Signed
    "Signed",
    # Fixed
    "FixedPoint",
    "Fixed",
]
