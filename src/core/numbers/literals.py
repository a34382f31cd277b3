"""
Literals — Модели разобранных числовых литералов

Immutable Pydantic модели, представляющие десятичную строку после разбора:
знак + цифровые части. Являются единственным входом для
BigInteger.from_string и BigFloat.from_string.

Порядок разбора:
1. JSON Schema контракт литерала (src/core/contracts)
2. Отделение знака и (для float) разбиение по первой '.'
3. Pydantic валидация частей (только ASCII цифры)

Любая ошибка на шагах 1-3 превращается в InvalidFormatError.
"""

import logging
from typing import Final

from jsonschema import ValidationError as ContractValidationError
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.core.contracts import validate_float_literal, validate_integer_literal
from src.core.numbers.errors import InvalidFormatError

logger = logging.getLogger(__name__)

ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
DECIMAL_POINT: Final[str] = "."


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() пропускает '²' и цифры других письменностей
    return all(ch in ASCII_DIGITS for ch in value)


def _split_sign(text: str) -> tuple[bool, str]:
    """Отделение ведущего '+'/'-'. Возвращает (is_negative, остаток)."""
    if text[:1] == "-":
        return True, text[1:]
    if text[:1] == "+":
        return False, text[1:]
    return False, text


# =============================================================================
# MODELS
# =============================================================================


class IntegerLiteral(BaseModel):
    """
    Разобранный литерал целого числа.

    digits хранится как в исходной строке (старший разряд первым, ведущие
    нули допустимы) — канонизация выполняется движком.
    """

    is_negative: bool = Field(False, description="Был ли указан знак '-'")
    digits: str = Field(..., min_length=1, description="Цифры, старший разряд первым")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: str) -> str:
        if not _is_ascii_digits(v):
            raise ValueError(f"digits must contain only ASCII digits, got {v!r}")
        return v


class FloatLiteral(BaseModel):
    """
    Разобранный литерал десятичной дроби.

    integer_part и fractional_part могут быть пустыми по отдельности
    ('.5', '5.'), но не одновременно.
    """

    is_negative: bool = Field(False, description="Был ли указан знак '-'")
    integer_part: str = Field("", description="Цифры до точки")
    fractional_part: str = Field("", description="Цифры после точки")

    model_config = {"frozen": True}

    @field_validator("integer_part", "fractional_part")
    @classmethod
    def validate_part(cls, v: str) -> str:
        if not _is_ascii_digits(v):
            raise ValueError(f"number part must contain only ASCII digits, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_not_empty(self) -> "FloatLiteral":
        if not self.integer_part and not self.fractional_part:
            raise ValueError("integer and fractional parts cannot both be empty")
        return self

    @property
    def scale(self) -> int:
        """Количество цифр после точки (= -exponent до канонизации)."""
        return len(self.fractional_part)


# =============================================================================
# PARSING
# =============================================================================


def parse_integer_literal(text: str) -> IntegerLiteral:
    """
    Разбор строки целого числа.

    Args:
        text: Например '42', '-007', '+15'

    Returns:
        IntegerLiteral

    Raises:
        InvalidFormatError: Пустая строка, только знак, посторонние символы

    Examples:
        >>> parse_integer_literal("-007")
        IntegerLiteral(is_negative=True, digits='007')
    """
    try:
        validate_integer_literal(text)
        is_negative, digits = _split_sign(text)
        return IntegerLiteral(is_negative=is_negative, digits=digits)
    except (ContractValidationError, ValidationError) as e:
        logger.debug("Rejected integer literal %r", text)
        raise InvalidFormatError(f"Invalid number format: {text!r}") from e


def parse_float_literal(text: str) -> FloatLiteral:
    """
    Разбор строки десятичной дроби.

    Разбиение выполняется по первой точке; вторая точка попадает в дробную
    часть и отклоняется как посторонний символ.

    Args:
        text: Например '3.14', '-.5', '7.', '+0012.3400'

    Returns:
        FloatLiteral

    Raises:
        InvalidFormatError: Пустая строка, '.', посторонние символы

    Examples:
        >>> parse_float_literal("-.5")
        FloatLiteral(is_negative=True, integer_part='', fractional_part='5')
    """
    try:
        validate_float_literal(text)
        is_negative, body = _split_sign(text)
        integer_part, _, fractional_part = body.partition(DECIMAL_POINT)
        return FloatLiteral(
            is_negative=is_negative,
            integer_part=integer_part,
            fractional_part=fractional_part,
        )
    except (ContractValidationError, ValidationError) as e:
        logger.debug("Rejected float literal %r", text)
        raise InvalidFormatError(f"Invalid number format: {text!r}") from e
