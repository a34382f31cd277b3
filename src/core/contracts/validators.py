"""
JSON Schema Contract Validators

Модуль для валидации числовых строк согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- integer_literal.json — входной литерал BigInteger.from_string
- float_literal.json — входной литерал BigFloat.from_string
- canonical_integer.json — каноническое представление BigInteger.to_string
- canonical_float.json — каноническое представление BigFloat.to_string
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# =============================================================================
# ИМЕНА СХЕМ
# =============================================================================

INTEGER_LITERAL_SCHEMA: Final[str] = "integer_literal"
FLOAT_LITERAL_SCHEMA: Final[str] = "float_literal"
CANONICAL_INTEGER_SCHEMA: Final[str] = "canonical_integer"
CANONICAL_FLOAT_SCHEMA: Final[str] = "canonical_float"

ALL_SCHEMAS: Final[tuple[str, ...]] = (
    INTEGER_LITERAL_SCHEMA,
    FLOAT_LITERAL_SCHEMA,
    CANONICAL_INTEGER_SCHEMA,
    CANONICAL_FLOAT_SCHEMA,
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'integer_literal')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class IntegerLiteralValidator(ContractValidator):
    """Валидатор входного литерала BigInteger."""

    def __init__(self):
        super().__init__(INTEGER_LITERAL_SCHEMA)


class FloatLiteralValidator(ContractValidator):
    """Валидатор входного литерала BigFloat."""

    def __init__(self):
        super().__init__(FLOAT_LITERAL_SCHEMA)


class CanonicalIntegerValidator(ContractValidator):
    """Валидатор канонической строки BigInteger."""

    def __init__(self):
        super().__init__(CANONICAL_INTEGER_SCHEMA)


class CanonicalFloatValidator(ContractValidator):
    """Валидатор канонической строки BigFloat."""

    def __init__(self):
        super().__init__(CANONICAL_FLOAT_SCHEMA)


# Валидаторы литералов вызываются на каждом from_string — держим по одному экземпляру
_INTEGER_LITERAL_VALIDATOR = IntegerLiteralValidator()
_FLOAT_LITERAL_VALIDATOR = FloatLiteralValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_integer_literal(text: str) -> None:
    """
    Валидация литерала целого числа.

    Args:
        text: Исходная строка (например, '-00123')

    Raises:
        ValidationError: Если строка не соответствует схеме
    """
    _INTEGER_LITERAL_VALIDATOR.validate(text)


def validate_float_literal(text: str) -> None:
    """
    Валидация литерала десятичной дроби.

    Args:
        text: Исходная строка (например, '-.5', '3.', '12.0400')

    Raises:
        ValidationError: Если строка не соответствует схеме
    """
    _FLOAT_LITERAL_VALIDATOR.validate(text)


def validate_canonical_integer(text: str) -> None:
    """
    Проверка, что строка является каноническим представлением BigInteger.

    Raises:
        ValidationError: Если строка не каноническая
    """
    CanonicalIntegerValidator().validate(text)


def validate_canonical_float(text: str) -> None:
    """
    Проверка, что строка является каноническим представлением BigFloat.

    Raises:
        ValidationError: Если строка не каноническая
    """
    CanonicalFloatValidator().validate(text)
