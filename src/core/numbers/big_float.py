"""
BigFloat — Знаковая десятичная дробь произвольной точности

Представление: value = (-1)^is_negative × mantissa × 10^exponent
- mantissa: BigInteger, всегда неотрицательный модуль (знак хранится только
  во флаге _is_negative самого BigFloat)
- exponent: BigInteger, может быть отрицательным

Арифметика сводится к BigInteger:
- add/subtract/compare: приведение к общему показателю (normalize), затем
  операция над знаковыми мантиссами
- multiply: мантиссы перемножаются, показатели складываются
- divide: усекающее деление мантисс на шкале min(e_lhs, e_rhs, 0)
- pow/sqr/sqrt/abs: те же алгоритмы, что у BigInteger, на значениях BigFloat

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После каждой операции — канонизация: у мантиссы нет ни старших, ни
   младших нулей (младшие переносятся в показатель)
2. Нулевое значение: mantissa = 0, exponent = 0, is_negative = False
3. Каноническая форма единственна, поэтому равные значения имеют равные
   представления и равные hash
4. Никакого округления: деление и корень усекают
"""

import logging
from typing import Final

from src.core.numbers.big_integer import BigInteger
from src.core.numbers.errors import (
    DivisionByZeroError,
    NegativeExponentError,
    NegativeOperandError,
)
from src.core.numbers.literals import parse_float_literal

logger = logging.getLogger(__name__)

# Наибольший показатель, на котором вычисляется частное: результат деления
# никогда не грубее единиц
DIVISION_MIN_EXPONENT: Final[int] = 0


class BigFloat:
    """
    Десятичная дробь произвольной точности (mantissa × 10^exponent).

    Examples:
        >>> BigFloat("0.1").add(BigFloat("0.2")).to_string()
        '0.3'
        >>> BigFloat("3.1400").to_string()
        '3.14'
        >>> BigFloat("-.5").multiply(BigFloat("4")).to_string()
        '-2'
    """

    __slots__ = ("_mantissa", "_exponent", "_is_negative")

    def __init__(self, text: str | None = None):
        """
        Args:
            text: Строка вида '[+-][int][.frac]'; None → ноль

        Raises:
            InvalidFormatError: Пустая строка, '.', посторонние символы
        """
        self._mantissa = BigInteger()
        self._exponent = BigInteger()
        self._is_negative = False
        if text is None:
            return

        literal = parse_float_literal(text)
        mantissa = BigInteger(literal.integer_part) if literal.integer_part else BigInteger()
        if literal.fractional_part:
            # int_part × 10^len(frac) + frac
            mantissa = mantissa.shift_left(literal.scale).add(
                BigInteger(literal.fractional_part)
            )
            self._exponent = BigInteger.from_int(-literal.scale)
        self._mantissa = mantissa
        self._is_negative = literal.is_negative
        self._canonicalize()

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def _from_parts(
        cls, mantissa: BigInteger, exponent: BigInteger, is_negative: bool
    ) -> "BigFloat":
        result = cls()
        result._mantissa = mantissa.abs()
        result._exponent = exponent
        result._is_negative = is_negative
        result._canonicalize()
        return result

    @classmethod
    def _from_signed(cls, mantissa: BigInteger, exponent: BigInteger) -> "BigFloat":
        """Сборка из знаковой мантиссы: знак берётся из результата BigInteger."""
        return cls._from_parts(mantissa, exponent, mantissa.is_negative())

    @classmethod
    def from_string(cls, text: str) -> "BigFloat":
        return cls(text)

    @classmethod
    def from_integer(cls, value: BigInteger) -> "BigFloat":
        return cls._from_signed(value, BigInteger())

    @classmethod
    def zero(cls) -> "BigFloat":
        return cls()

    @classmethod
    def one(cls) -> "BigFloat":
        return cls._from_parts(BigInteger.one(), BigInteger(), False)

    # -------------------------------------------------------------------------
    # Канонизация и нормализация
    # -------------------------------------------------------------------------

    def _canonicalize(self) -> None:
        """Применяется только к свежесозданному значению."""
        if self._mantissa.is_zero():
            self._mantissa = BigInteger()
            self._exponent = BigInteger()
            self._is_negative = False
            return

        trailing_zeros = 0
        for digit in self._mantissa.digits:
            if digit != 0:
                break
            trailing_zeros += 1
        if trailing_zeros:
            self._mantissa = self._mantissa.shift_right(trailing_zeros)
            self._exponent = self._exponent.add(BigInteger.from_int(trailing_zeros))

    def _signed_mantissa(self) -> BigInteger:
        return self._mantissa.negate() if self._is_negative else self._mantissa

    @staticmethod
    def _normalize(
        lhs: "BigFloat", rhs: "BigFloat"
    ) -> tuple[BigInteger, BigInteger, BigInteger]:
        """
        Приведение к общему показателю E = min(e_lhs, e_rhs).

        Мантисса операнда с большим показателем сдвигается влево на разницу:
        m × 10^e = (m × 10^(e - E)) × 10^E.

        Returns:
            (знаковая мантисса lhs, знаковая мантисса rhs, общий показатель)
        """
        lhs_mantissa = lhs._signed_mantissa()
        rhs_mantissa = rhs._signed_mantissa()
        order = lhs._exponent.compare(rhs._exponent)
        if order > 0:
            shift = int(lhs._exponent.subtract(rhs._exponent))
            return lhs_mantissa.shift_left(shift), rhs_mantissa, rhs._exponent
        if order < 0:
            shift = int(rhs._exponent.subtract(lhs._exponent))
            return lhs_mantissa, rhs_mantissa.shift_left(shift), lhs._exponent
        return lhs_mantissa, rhs_mantissa, lhs._exponent

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def mantissa(self) -> BigInteger:
        """Модуль мантиссы (неотрицательный)."""
        return self._mantissa

    @property
    def exponent(self) -> BigInteger:
        return self._exponent

    def is_negative(self) -> bool:
        return self._is_negative

    def is_positive(self) -> bool:
        return not self._is_negative and not self._mantissa.is_zero()

    def is_zero(self) -> bool:
        return self._mantissa.is_zero()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigFloat") -> int:
        lhs_mantissa, rhs_mantissa, _ = BigFloat._normalize(self, other)
        return lhs_mantissa.compare(rhs_mantissa)

    def less_than(self, other: "BigFloat") -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: "BigFloat") -> bool:
        return self.compare(other) > 0

    def equal(self, other: "BigFloat") -> bool:
        return self.compare(other) == 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def abs(self) -> "BigFloat":
        return BigFloat._from_parts(self._mantissa, self._exponent, False)

    def negate(self) -> "BigFloat":
        return BigFloat._from_parts(self._mantissa, self._exponent, not self._is_negative)

    def add(self, other: "BigFloat") -> "BigFloat":
        lhs_mantissa, rhs_mantissa, exponent = BigFloat._normalize(self, other)
        return BigFloat._from_signed(lhs_mantissa.add(rhs_mantissa), exponent)

    def subtract(self, other: "BigFloat") -> "BigFloat":
        lhs_mantissa, rhs_mantissa, exponent = BigFloat._normalize(self, other)
        return BigFloat._from_signed(lhs_mantissa.subtract(rhs_mantissa), exponent)

    def multiply(self, other: "BigFloat") -> "BigFloat":
        return BigFloat._from_parts(
            self._mantissa.multiply(other._mantissa),
            self._exponent.add(other._exponent),
            self._is_negative != other._is_negative,
        )

    def divide(self, other: "BigFloat") -> "BigFloat":
        """
        Усекающее деление.

        Частное вычисляется на показателе E = min(e_lhs, e_rhs, 0):
            q = trunc(m_lhs × 10^(e_lhs - e_rhs - E) / m_rhs)
        т.е. результат имеет столько дробных знаков, сколько у более точного
        операнда, и никогда не грубее единиц.

        Raises:
            DivisionByZeroError: Если делитель равен нулю

        Examples:
            >>> BigFloat("1").divide(BigFloat("0.3")).to_string()
            '3.3'
            >>> BigFloat("1").divide(BigFloat("3")).to_string()
            '0'
        """
        if other.is_zero():
            raise DivisionByZeroError(f"Division by zero: {self.to_string()} / 0")

        exponent = min(
            self._exponent,
            other._exponent,
            BigInteger.from_int(DIVISION_MIN_EXPONENT),
        )
        shift = int(self._exponent.subtract(other._exponent).subtract(exponent))
        numerator, denominator = self._mantissa, other._mantissa
        if shift >= 0:
            numerator = numerator.shift_left(shift)
        else:
            denominator = denominator.shift_left(-shift)

        return BigFloat._from_parts(
            numerator.divide(denominator),
            exponent,
            self._is_negative != other._is_negative,
        )

    def pow(self, exponent: int) -> "BigFloat":
        """
        Возведение в неотрицательную целую степень (square-and-multiply).

        Raises:
            NegativeExponentError: Если exponent < 0
        """
        if exponent < 0:
            raise NegativeExponentError(
                f"Negative exponent not supported: {exponent}"
            )
        result = BigFloat.one()
        base = self
        while exponent > 0:
            if exponent % 2 == 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent //= 2
        return result

    def sqr(self) -> "BigFloat":
        return self.multiply(self)

    def sqrt(self) -> "BigFloat":
        """
        Квадратный корень, усечённый до целого (floor).

        Бинарный поиск на [1, trunc(value)] средствами BigFloat
        (add/subtract/divide/compare). Для 0 < value < 1 возвращает 0.

        Raises:
            NegativeOperandError: Если значение отрицательное
        """
        if self._is_negative:
            raise NegativeOperandError(
                f"Square root of negative number: {self.to_string()}"
            )
        one = BigFloat.one()
        if self.is_zero() or self.equal(one):
            return self

        two = BigFloat.from_integer(BigInteger.from_int(2))
        low, high = one, self.truncate()
        iterations = 0
        while low.compare(high) <= 0:
            iterations += 1
            mid = low.add(high).divide(two)
            order = mid.sqr().compare(self)
            if order == 0:
                logger.debug("Exact float sqrt found after %d iterations", iterations)
                return mid
            if order < 0:
                low = mid.add(one)
            else:
                high = mid.subtract(one)

        logger.debug("Float sqrt search finished after %d iterations", iterations)
        return high

    def truncate(self) -> "BigFloat":
        """Отбрасывание дробной части (к нулю)."""
        if not self._exponent.is_negative():
            return self
        return BigFloat._from_parts(
            self._mantissa.shift_right(-int(self._exponent)),
            BigInteger(),
            self._is_negative,
        )

    def to_integer(self) -> BigInteger:
        """Целая часть (усечение к нулю) как BigInteger."""
        truncated = self.truncate()
        magnitude = truncated._mantissa.shift_left(int(truncated._exponent))
        return magnitude.negate() if truncated._is_negative else magnitude

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Десятичная запись без экспоненты.

        Отрицательный показатель ставит точку |exponent| знаков справа
        (с ведущими нулями после '0.' при необходимости), неотрицательный
        дописывает exponent нулей.
        """
        sign = "-" if self._is_negative and not self._mantissa.is_zero() else ""
        mantissa_str = self._mantissa.to_string()
        exp_val = int(self._exponent)

        if exp_val >= 0:
            return sign + mantissa_str + "0" * exp_val

        point_pos = len(mantissa_str) + exp_val
        if point_pos <= 0:
            return sign + "0." + "0" * (-point_pos) + mantissa_str
        return sign + mantissa_str[:point_pos] + "." + mantissa_str[point_pos:]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigFloat('{self.to_string()}')"

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        return hash((self._mantissa, self._exponent, self._is_negative))

    # -------------------------------------------------------------------------
    # Python operator protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: "BigFloat") -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: "BigFloat") -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "BigFloat") -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: "BigFloat") -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.compare(other) >= 0

    def __neg__(self) -> "BigFloat":
        return self.negate()

    def __abs__(self) -> "BigFloat":
        return self.abs()

    def __add__(self, other: "BigFloat") -> "BigFloat":
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "BigFloat") -> "BigFloat":
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "BigFloat") -> "BigFloat":
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "BigFloat") -> "BigFloat":
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: int) -> "BigFloat":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)
