"""
Core numbers для pwrnum

Десятичная арифметика произвольной точности: BigInteger и BigFloat.
"""

# Errors
from src.core.numbers.errors import (
    BigNumberError,
    DivisionByZeroError,
    InvalidFormatError,
    NegativeExponentError,
    NegativeOperandError,
)

# Literals
from src.core.numbers.literals import (
    FloatLiteral,
    IntegerLiteral,
    parse_float_literal,
    parse_integer_literal,
)

# Decimal Integer Engine
from src.core.numbers.big_integer import BASE, MAX_DIGIT, BigInteger

# Decimal Float Engine
from src.core.numbers.big_float import DIVISION_MIN_EXPONENT, BigFloat

__all__ = [
    # Errors
    "BigNumberError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "NegativeExponentError",
    "NegativeOperandError",
    # Literals
    "IntegerLiteral",
    "FloatLiteral",
    "parse_integer_literal",
    "parse_float_literal",
    # Decimal Integer Engine
    "BASE",
    "MAX_DIGIT",
    "BigInteger",
    # Decimal Float Engine
    "DIVISION_MIN_EXPONENT",
    "BigFloat",
]
