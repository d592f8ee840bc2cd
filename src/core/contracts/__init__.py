"""
Contract Validation and Serialization Module

JSON-кодирование decimal-значений, JSON Schema контракты объектной формы
и интеграция с pydantic.
"""

from .json_codec import (
    JsonCodec,
    JsonCodecConfig,
    JsonMode,
    decode_object,
    marshal,
    unmarshal,
)
from .pydantic_support import decimal_core_schema
from .validators import (
    ContractValidator,
    MantExpValidator,
    SchemaLoader,
    SignedMantExpValidator,
    get_validator,
    validate_mant_exp,
    validate_signed_mant_exp,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MantExpValidator",
    "SignedMantExpValidator",
    "JsonCodec",
    "JsonCodecConfig",
    "JsonMode",
    # Functions
    "get_validator",
    "validate_mant_exp",
    "validate_signed_mant_exp",
    "decode_object",
    "marshal",
    "unmarshal",
    "decimal_core_schema",
]
