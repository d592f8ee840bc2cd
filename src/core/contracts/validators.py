"""
JSON Schema Contract Validators

Объектная JSON-форма decimal-значений {"m": <int>, "e": <int>} описана
формальными JSON Schema контрактами (draft 2020-12) и проверяется
библиотекой jsonschema до построения значения.

Схемы поставляются вместе с пакетом (src/core/contracts/schema/):
- mant_exp.json: беззнаковая мантисса uint64 (Value, PreciseValue)
- signed_mant_exp.json: мантисса со знаком int64 (Signed, Fixed)
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    Каждая схема проходит meta-валидацию при первой загрузке.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> List[str]:
        """Имена схем в каталоге (без расширения), отсортированные."""
        return sorted(p.stem for p in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (из кэша, если уже загружена).

        Args:
            schema_name: Имя файла без расширения, например 'mant_exp'

        Raises:
            FileNotFoundError: Файла схемы нет в каталоге
            ValueError: Файл не является корректной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Подклассы задают SCHEMA_NAME; базовый класс можно создать и напрямую
    с явным именем схемы.
    """

    SCHEMA_NAME: ClassVar[str] = ""

    def __init__(self, schema_name: str | None = None, loader: SchemaLoader | None = None):
        self.schema_name = schema_name or self.SCHEMA_NAME
        if not self.schema_name:
            raise ValueError("schema_name is required")
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме (первая ошибка)
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Any) -> List[str]:
        """Сообщения всех ошибок, упорядоченные по пути в документе."""
        errors = sorted(self.iter_errors(data), key=lambda err: [str(p) for p in err.absolute_path])
        return [err.message for err in errors]


class MantExpValidator(ContractValidator):
    """{"m": <uint64>, "e": <int32>}"""

    SCHEMA_NAME = "mant_exp"


class SignedMantExpValidator(ContractValidator):
    """{"m": <int64>, "e": <int32>}"""

    SCHEMA_NAME = "signed_mant_exp"


_VALIDATOR_TYPES: Dict[str, type[ContractValidator]] = {
    cls.SCHEMA_NAME: cls for cls in (MantExpValidator, SignedMantExpValidator)
}

_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """
    Общий экземпляр валидатора по имени схемы.

    Raises:
        KeyError: Неизвестное имя схемы
    """
    if schema_name not in _VALIDATORS:
        _VALIDATORS[schema_name] = _VALIDATOR_TYPES[schema_name]()
    return _VALIDATORS[schema_name]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_mant_exp(data: Any) -> None:
    """Проверка объектной формы беззнакового значения (ValidationError при нарушении)."""
    get_validator(MantExpValidator.SCHEMA_NAME).validate(data)


def validate_signed_mant_exp(data: Any) -> None:
    """Проверка объектной формы значения со знаком (ValidationError при нарушении)."""
    get_validator(SignedMantExpValidator.SCHEMA_NAME).validate(data)
