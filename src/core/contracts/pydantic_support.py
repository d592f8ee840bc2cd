"""
Pydantic Support — decimal-типы как поля pydantic моделей

Value, Signed и Fixed реализуют __get_pydantic_core_schema__ через
decimal_core_schema(), поэтому их можно использовать в frozen BaseModel:

    class Quote(BaseModel):
        bid: Value
        ask: Value

        model_config = {"frozen": True}

Валидация принимает экземпляр типа, str, int, float и объектную форму
{"m": ..., "e": ...}. В JSON-режиме сериализации значение пишется
десятичной строкой (to_string), в python-режиме остаётся экземпляром.
"""

from typing import Any, Callable

from pydantic_core import core_schema

from src.core.contracts.json_codec import decode_object


def _validator_for(cls: Any) -> Callable[[Any], Any]:
    def validate(raw: Any) -> Any:
        if isinstance(raw, cls):
            return raw
        # bool — подкласс int, но не число в смысле домена
        if isinstance(raw, bool):
            raise ValueError(f"cannot convert bool to {cls.__name__}")
        if isinstance(raw, str):
            return cls.from_string(raw)
        if isinstance(raw, int):
            return cls.from_int(raw)
        if isinstance(raw, float):
            return cls.from_float64(raw)
        if isinstance(raw, dict):
            return decode_object(raw, cls)
        raise ValueError(f"cannot convert {type(raw).__name__} to {cls.__name__}")

    return validate


def _serialize(value: Any, info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return value.to_string()
    return value


def decimal_core_schema(cls: Any) -> core_schema.CoreSchema:
    """Core schema для decimal-типа cls."""
    return core_schema.no_info_plain_validator_function(
        _validator_for(cls),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize, info_arg=True, when_used="always"
        ),
    )
