"""
Contract Validation Module

Модуль для валидации числовых строк по JSON Schema контрактам.
"""

from .validators import (
    ALL_SCHEMAS,
    CANONICAL_FLOAT_SCHEMA,
    CANONICAL_INTEGER_SCHEMA,
    FLOAT_LITERAL_SCHEMA,
    INTEGER_LITERAL_SCHEMA,
    CanonicalFloatValidator,
    CanonicalIntegerValidator,
    ContractValidator,
    FloatLiteralValidator,
    IntegerLiteralValidator,
    SchemaLoader,
    validate_canonical_float,
    validate_canonical_integer,
    validate_float_literal,
    validate_integer_literal,
)

__all__ = [
    # Schema names
    "ALL_SCHEMAS",
    "INTEGER_LITERAL_SCHEMA",
    "FLOAT_LITERAL_SCHEMA",
    "CANONICAL_INTEGER_SCHEMA",
    "CANONICAL_FLOAT_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegerLiteralValidator",
    "FloatLiteralValidator",
    "CanonicalIntegerValidator",
    "CanonicalFloatValidator",
    # Functions
    "validate_integer_literal",
    "validate_float_literal",
    "validate_canonical_integer",
    "validate_canonical_float",
]
