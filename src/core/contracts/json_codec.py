"""
JSON Codec — JSON-кодирование decimal-значений

Режимы (JsonMode):
- STRING: строка в кавычках, "1234.56"
- FLOAT: число float64, 1234.56 (с потерей точности)
- MANT_EXP: объект {"m":123456,"e":-2}
- COMPACT: короче из STRING и MANT_EXP (оценка по формулам длины)

Режим передаётся явно через JsonCodecConfig; глобального изменяемого
состояния нет, поэтому кодек безопасен при конкурентном использовании.

Декодирование выбирает форму по первому непробельному символу:
'{' — объектная форма (проверяется JSON Schema), иначе — строковый парсер
(голые числовые JSON-токены удовлетворяют десятичной грамматике).
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.contracts.validators import get_validator
from src.core.conversion.formatting import (
    decimal_json_len,
    format_decimal,
    format_float,
    format_mant_exp_json,
    mant_exp_json_len,
)
from src.core.domain.value import Value
from src.core.errors import ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class JsonMode(str, Enum):
    """Способ кодирования значения в JSON"""

    STRING = "string"
    FLOAT = "float"
    MANT_EXP = "mant_exp"
    COMPACT = "compact"


@dataclass(frozen=True)
class JsonCodecConfig:
    """Конфигурация JSON-кодека."""

    mode: JsonMode = JsonMode.COMPACT


# =============================================================================
# CODEC
# =============================================================================


class JsonCodec:
    """
    Кодирование/декодирование Value и Signed.

    Значение должно предоставлять _json_parts() -> (mantissa, exponent, negative)
    в нормализованной форме и to_float64().

    Examples:
        >>> JsonCodec(JsonCodecConfig(JsonMode.MANT_EXP)).marshal(Value(0, 0))
        b'{"m":0,"e":0}'
    """

    def __init__(self, config: JsonCodecConfig | None = None):
        self.config = config or JsonCodecConfig()

    def encode(self, value: Any) -> str:
        """JSON-текст для значения в режиме из конфигурации."""
        mode = JsonMode(self.config.mode)
        m, e, negative = value._json_parts()

        if mode is JsonMode.FLOAT:
            return format_float(value.to_float64())
        if mode is JsonMode.MANT_EXP:
            return format_mant_exp_json(m, e, negative)
        if mode is JsonMode.COMPACT:
            if decimal_json_len(m, e, negative) > mant_exp_json_len(m, e, negative):
                return format_mant_exp_json(m, e, negative)
        return f'"{format_decimal(m, e, negative)}"'

    def marshal(self, value: Any) -> bytes:
        return self.encode(value).encode("utf-8")

    def unmarshal(self, data: bytes | str, target: Any = Value) -> Any:
        """
        Разбор JSON в значение типа target.

        Args:
            data: JSON-текст (bytes или str)
            target: Класс результата (Value, Signed, Fixed, ...)

        Raises:
            ParseError: Пустой вход, невалидный UTF-8 или JSON, объект не по схеме,
                или строка не по десятичной грамматике
        """
        if isinstance(data, (bytes, bytearray)):
            try:
                text = bytes(data).decode("utf-8")
            except UnicodeDecodeError as err:
                raise ParseError(f"invalid utf-8: {err.reason}", err.start + 1) from err
        else:
            text = data

        stripped = text.strip()
        if not stripped:
            raise ParseError("empty json")
        # позиции ошибок считаются от исходного текста
        skipped = len(text) - len(text.lstrip())

        if stripped[0] == "{":
            try:
                obj = json.loads(stripped)
            except json.JSONDecodeError as err:
                raise ParseError(f"invalid json object: {err.msg}", skipped + err.pos + 1) from err
            return decode_object(obj, target)

        try:
            return target.from_string(stripped)
        except ParseError as err:
            if err.position is None or skipped == 0:
                raise
            raise ParseError(err.message, err.position + skipped) from err


def decode_object(obj: Any, target: Any = Value) -> Any:
    """
    Значение из объектной формы {"m": ..., "e": ...}.

    Raises:
        ParseError: Объект не соответствует JSON Schema типа target
    """
    validator = get_validator(target.JSON_SCHEMA)
    if not validator.is_valid(obj):
        reason = "; ".join(validator.error_messages(obj))
        logger.debug(f"{target.__name__} object rejected by schema {target.JSON_SCHEMA}: {reason}")
        raise ParseError(f"invalid {target.__name__} object: {reason}")
    return target._from_json_object(obj)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def marshal(value: Any, config: JsonCodecConfig | None = None) -> bytes:
    """JSON-кодирование значения (по умолчанию compact)."""
    return JsonCodec(config).marshal(value)


def unmarshal(data: bytes | str, target: Any = Value) -> Any:
    """JSON-декодирование в значение типа target."""
    return JsonCodec().unmarshal(data, target)
