"""
Тесты для Pydantic моделей числовых литералов

Покрывает:
- Разбор знака и цифровых частей
- Валидацию полей (только ASCII цифры)
- Immutability (frozen=True)
- Трансляцию ошибок jsonschema/pydantic в InvalidFormatError
"""

import pytest
from jsonschema import ValidationError as ContractValidationError
from pydantic import ValidationError

from src.core.numbers import (
    FloatLiteral,
    IntegerLiteral,
    InvalidFormatError,
    parse_float_literal,
    parse_integer_literal,
)


# =============================================================================
# INTEGER LITERAL
# =============================================================================


class TestIntegerLiteral:
    """Тесты IntegerLiteral / parse_integer_literal"""

    @pytest.mark.parametrize(
        "text, is_negative, digits",
        [
            ("42", False, "42"),
            ("-007", True, "007"),
            ("+15", False, "15"),
            ("-0", True, "0"),
        ],
    )
    def test_parse(self, text: str, is_negative: bool, digits: str) -> None:
        """Разбор знака и цифр"""
        literal = parse_integer_literal(text)
        assert literal.is_negative is is_negative
        assert literal.digits == digits

    def test_model_rejects_non_digits(self) -> None:
        """Посторонние символы отклоняются"""
        with pytest.raises(ValidationError, match="ASCII digits"):
            IntegerLiteral(digits="12a")

    def test_model_rejects_empty_digits(self) -> None:
        """Пустая строка цифр отклоняется"""
        with pytest.raises(ValidationError):
            IntegerLiteral(digits="")

    def test_model_rejects_unicode_digits(self) -> None:
        """'²' проходит str.isdigit(), но не является ASCII цифрой"""
        with pytest.raises(ValidationError):
            IntegerLiteral(digits="1²")

    def test_frozen(self) -> None:
        """IntegerLiteral неизменяем"""
        literal = parse_integer_literal("5")
        with pytest.raises(ValidationError):
            literal.digits = "6"

    def test_contract_error_is_chained(self) -> None:
        """Исходная ошибка контракта доступна через __cause__"""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_integer_literal("12a")
        assert isinstance(exc_info.value.__cause__, ContractValidationError)

    def test_non_string_rejected(self) -> None:
        """Не-строка → InvalidFormatError"""
        with pytest.raises(InvalidFormatError):
            parse_integer_literal(12)  # type: ignore[arg-type]


# =============================================================================
# FLOAT LITERAL
# =============================================================================


class TestFloatLiteral:
    """Тесты FloatLiteral / parse_float_literal"""

    @pytest.mark.parametrize(
        "text, is_negative, integer_part, fractional_part",
        [
            ("3.14", False, "3", "14"),
            ("-.5", True, "", "5"),
            ("7.", False, "7", ""),
            ("+0012.3400", False, "0012", "3400"),
            ("42", False, "42", ""),
        ],
    )
    def test_parse(
        self, text: str, is_negative: bool, integer_part: str, fractional_part: str
    ) -> None:
        """Разбор знака, целой и дробной части"""
        literal = parse_float_literal(text)
        assert literal.is_negative is is_negative
        assert literal.integer_part == integer_part
        assert literal.fractional_part == fractional_part

    def test_scale(self) -> None:
        """scale — количество цифр после точки"""
        assert parse_float_literal("1.2500").scale == 4
        assert parse_float_literal("12").scale == 0

    def test_model_rejects_both_parts_empty(self) -> None:
        """Обе части пустые → ValidationError"""
        with pytest.raises(ValidationError, match="cannot both be empty"):
            FloatLiteral(integer_part="", fractional_part="")

    def test_model_rejects_second_point(self) -> None:
        """Вторая точка попадает в дробную часть и отклоняется"""
        with pytest.raises(ValidationError, match="ASCII digits"):
            FloatLiteral(integer_part="1", fractional_part="2.3")

    @pytest.mark.parametrize("text", ["", ".", "-.", "1.2.3", "1e5", "--1.0"])
    def test_parse_rejects(self, text: str) -> None:
        """Некорректные литералы → InvalidFormatError"""
        with pytest.raises(InvalidFormatError, match="Invalid number format"):
            parse_float_literal(text)

    def test_frozen(self) -> None:
        """FloatLiteral неизменяем"""
        literal = parse_float_literal("1.5")
        with pytest.raises(ValidationError):
            literal.is_negative = True
