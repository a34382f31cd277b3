"""
BigInteger — Знаковое целое произвольной точности (основание 10)

Представление:
- _digits: список десятичных цифр 0-9, МЛАДШИЙ разряд первым
  (little-endian); ноль — пустой список
- _is_negative: флаг знака

Алгоритмы:
- Сложение/вычитание поразрядно с переносом/заёмом
- Умножение «в столбик» (schoolbook), буфер len(a) + len(b)
- Деление «уголком» от старшего разряда с бинарным поиском цифры частного 0-9
- Остаток через усекающее деление: a - (a / b) * b
- Возведение в степень двоичным методом (square-and-multiply)
- Целочисленный корень бинарным поиском на [1, value]
- Сдвиги — умножение/усекающее деление на 10^n

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В _digits нет старших нулей; ноль — пустой список
2. Ноль никогда не бывает отрицательным
3. Операции чистые: операнды не изменяются, результат — новый объект
4. Мутирующие помощники (_invert, _remove_leading_zeros) применяются только
   к свежесозданным промежуточным значениям
5. Деление усекающее (к нулю), знак частного — XOR знаков
"""

import logging
from typing import Final, Iterable

from src.core.numbers.errors import (
    DivisionByZeroError,
    NegativeExponentError,
    NegativeOperandError,
)
from src.core.numbers.literals import parse_integer_literal

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (фиксировано)
BASE: Final[int] = 10

# Максимальная цифра разряда; верхняя граница бинарного поиска цифры частного
MAX_DIGIT: Final[int] = BASE - 1


# =============================================================================
# ОПЕРАЦИИ НАД СПИСКАМИ ЦИФР (little-endian)
# =============================================================================


def _strip(digits: list[int]) -> list[int]:
    """Удаление старших нулей на месте. Возвращает тот же список."""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def _compare_magnitudes(a: list[int], b: list[int]) -> int:
    """Сравнение модулей: -1, 0, +1. Оба списка без старших нулей."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


def _add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result = [0] * (max(len(a), len(b)) + 1)
    carry = 0
    for i in range(len(result)):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result[i] = total % BASE
        carry = total // BASE
    return _strip(result)


def _subtract_magnitudes(larger: list[int], smaller: list[int]) -> list[int]:
    """|larger| - |smaller|, требуется |larger| >= |smaller|."""
    result = [0] * len(larger)
    borrow = 0
    for i in range(len(larger)):
        diff = larger[i] - borrow
        if i < len(smaller):
            diff -= smaller[i]
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = diff
    return _strip(result)


def _multiply_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result = [0] * (len(a) + len(b))
    for i, a_digit in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            total = result[i + j] + carry
            if j < len(b):
                total += a_digit * b[j]
            result[i + j] = total % BASE
            carry = total // BASE
            j += 1
    return _strip(result)


def _multiply_by_digit(a: list[int], digit: int) -> list[int]:
    if digit == 0:
        return []
    return _multiply_magnitudes(a, [digit])


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструируется из десятичной строки (опциональный '+'/'-', затем одна
    или более ASCII цифр) либо без аргументов как ноль.

    Examples:
        >>> BigInteger("123").add(BigInteger("-23")).to_string()
        '100'
        >>> BigInteger("7").divide(BigInteger("2")).to_string()
        '3'
        >>> BigInteger("-0042")
        BigInteger('-42')
    """

    __slots__ = ("_digits", "_is_negative")

    def __init__(self, text: str | None = None):
        """
        Args:
            text: Десятичная строка; None → ноль

        Raises:
            InvalidFormatError: Пустая строка, только знак, посторонние символы
        """
        self._digits: list[int] = []
        self._is_negative: bool = False
        if text is not None:
            literal = parse_integer_literal(text)
            self._digits = [ord(ch) - ord("0") for ch in reversed(literal.digits)]
            self._is_negative = literal.is_negative
            self._remove_leading_zeros()

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def _from_digits(cls, digits: Iterable[int], is_negative: bool) -> "BigInteger":
        """Сборка из little-endian цифр без разбора строки (с канонизацией)."""
        result = cls()
        result._digits = list(digits)
        result._is_negative = is_negative
        result._remove_leading_zeros()
        return result

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        return cls(text)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Конверсия из встроенного int (только для интеропа).

        Цифры извлекаются через divmod, без str(int): длина не ограничена
        лимитом sys.set_int_max_str_digits.
        """
        magnitude = abs(value)
        digits: list[int] = []
        while magnitude:
            magnitude, digit = divmod(magnitude, BASE)
            digits.append(digit)
        return cls._from_digits(digits, value < 0)

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls()

    @classmethod
    def one(cls) -> "BigInteger":
        return cls._from_digits([1], False)

    def _copy(self) -> "BigInteger":
        return BigInteger._from_digits(self._digits, self._is_negative)

    # -------------------------------------------------------------------------
    # Мутирующие помощники (только для свежих промежуточных значений)
    # -------------------------------------------------------------------------

    def _remove_leading_zeros(self) -> None:
        """Канонизация: снять старшие нули; пустое значение — неотрицательно."""
        _strip(self._digits)
        if not self._digits:
            self._is_negative = False

    def _invert(self) -> None:
        if self._digits:
            self._is_negative = not self._is_negative

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля, младший разряд первым. Ноль → ()."""
        return tuple(self._digits)

    def is_negative(self) -> bool:
        return self._is_negative

    def is_positive(self) -> bool:
        return not self._is_negative and bool(self._digits)

    def is_zero(self) -> bool:
        return not self._digits

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger") -> int:
        """
        Полный порядок: -1 если self < other, 0 если равны, +1 если больше.

        Разные знаки решают сразу; при одинаковых знаках сравниваются модули,
        для отрицательных результат инвертируется.
        """
        if self._is_negative != other._is_negative:
            return -1 if self._is_negative else 1
        result = _compare_magnitudes(self._digits, other._digits)
        return -result if self._is_negative else result

    def less_than(self, other: "BigInteger") -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: "BigInteger") -> bool:
        return self.compare(other) > 0

    def equal(self, other: "BigInteger") -> bool:
        return self.compare(other) == 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def abs(self) -> "BigInteger":
        return BigInteger._from_digits(self._digits, False)

    def negate(self) -> "BigInteger":
        result = self._copy()
        result._invert()
        return result

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Сложение.

        Одинаковые знаки: поразрядное сложение модулей, знак сохраняется.
        Разные знаки: из большего модуля вычитается меньший, знак — у
        операнда с большим модулем.
        """
        if self._is_negative == other._is_negative:
            return BigInteger._from_digits(
                _add_magnitudes(self._digits, other._digits), self._is_negative
            )

        order = _compare_magnitudes(self._digits, other._digits)
        if order == 0:
            return BigInteger.zero()
        if order > 0:
            return BigInteger._from_digits(
                _subtract_magnitudes(self._digits, other._digits), self._is_negative
            )
        return BigInteger._from_digits(
            _subtract_magnitudes(other._digits, self._digits), other._is_negative
        )

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """
        Вычитание.

        Разные знаки: сложение модулей со знаком левого операнда.
        Одинаковые знаки: из большего модуля вычитается меньший; результат
        отрицателен тогда и только тогда, когда левый операнд меньше правого.
        """
        if self._is_negative != other._is_negative:
            return BigInteger._from_digits(
                _add_magnitudes(self._digits, other._digits), self._is_negative
            )
        if self.equal(other):
            return BigInteger.zero()

        result_is_negative = self.less_than(other)
        if _compare_magnitudes(self._digits, other._digits) > 0:
            larger, smaller = self._digits, other._digits
        else:
            larger, smaller = other._digits, self._digits
        return BigInteger._from_digits(
            _subtract_magnitudes(larger, smaller), result_is_negative
        )

    def multiply(self, other: "BigInteger") -> "BigInteger":
        return BigInteger._from_digits(
            _multiply_magnitudes(self._digits, other._digits),
            self._is_negative != other._is_negative,
        )

    def divide(self, other: "BigInteger") -> "BigInteger":
        """
        Усекающее деление (к нулю по модулю).

        Деление «уголком»: цифры делимого сносятся от старшего разряда в
        текущий остаток, очередная цифра частного — наибольшее x в 0..9,
        для которого divisor * x <= current (бинарный поиск).

        Raises:
            DivisionByZeroError: Если делитель равен нулю

        Examples:
            >>> BigInteger("-7").divide(BigInteger("2")).to_string()
            '-3'
        """
        if other.is_zero():
            raise DivisionByZeroError(f"Division by zero: {self.to_string()} / 0")

        divisor = other._digits
        quotient: list[int] = []  # старший разряд первым
        current: list[int] = []

        for digit in reversed(self._digits):
            current.insert(0, digit)
            _strip(current)

            x, low, high = 0, 0, MAX_DIGIT
            while low <= high:
                mid = (low + high) // 2
                if _compare_magnitudes(_multiply_by_digit(divisor, mid), current) <= 0:
                    x = mid
                    low = mid + 1
                else:
                    high = mid - 1

            quotient.append(x)
            current = _subtract_magnitudes(current, _multiply_by_digit(divisor, x))

        quotient.reverse()
        return BigInteger._from_digits(quotient, self._is_negative != other._is_negative)

    def modulo(self, other: "BigInteger") -> "BigInteger":
        """
        Остаток: self - (self / other) * other, знак принудительно равен знаку
        делимого (ноль остаётся неотрицательным).

        Raises:
            DivisionByZeroError: Если делитель равен нулю

        Examples:
            >>> BigInteger("-7").modulo(BigInteger("2")).to_string()
            '-1'
            >>> BigInteger("7").modulo(BigInteger("-2")).to_string()
            '1'
        """
        result = self.subtract(self.divide(other).multiply(other))
        result._is_negative = self._is_negative
        result._remove_leading_zeros()
        return result

    def pow(self, exponent: int) -> "BigInteger":
        """
        Возведение в неотрицательную целую степень (square-and-multiply).

        Raises:
            NegativeExponentError: Если exponent < 0
        """
        if exponent < 0:
            raise NegativeExponentError(
                f"Negative exponent not supported: {exponent}"
            )
        result = BigInteger.one()
        base = self
        while exponent > 0:
            if exponent % 2 == 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent //= 2
        return result

    def sqr(self) -> "BigInteger":
        return self.multiply(self)

    def sqrt(self) -> "BigInteger":
        """
        Целочисленный квадратный корень (floor).

        Бинарный поиск на [1, value]: точное совпадение mid^2 == value
        возвращает mid, иначе результат — high (наибольшее целое, квадрат
        которого не превосходит value).

        Raises:
            NegativeOperandError: Если значение отрицательное
        """
        if self._is_negative:
            raise NegativeOperandError(
                f"Square root of negative number: {self.to_string()}"
            )
        one = BigInteger.one()
        if self.is_zero() or self.equal(one):
            return self._copy()

        two = BigInteger.from_int(2)
        low, high = one, self
        iterations = 0
        while low.compare(high) <= 0:
            iterations += 1
            mid = low.add(high).divide(two)
            order = mid.sqr().compare(self)
            if order == 0:
                logger.debug("Exact integer sqrt found after %d iterations", iterations)
                return mid
            if order < 0:
                low = mid.add(one)
            else:
                high = mid.subtract(one)

        logger.debug("Integer sqrt search finished after %d iterations", iterations)
        return high

    # -------------------------------------------------------------------------
    # Сдвиги (по десятичным разрядам)
    # -------------------------------------------------------------------------

    def shift_left(self, positions: int) -> "BigInteger":
        """Умножение на 10^positions. Отрицательный сдвиг — вправо."""
        if positions < 0:
            return self.shift_right(-positions)
        return BigInteger._from_digits([0] * positions + self._digits, self._is_negative)

    def shift_right(self, positions: int) -> "BigInteger":
        """Усекающее деление на 10^positions. Отрицательный сдвиг — влево."""
        if positions < 0:
            return self.shift_left(-positions)
        if positions >= len(self._digits):
            return BigInteger.zero()
        return BigInteger._from_digits(self._digits[positions:], self._is_negative)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        if not self._digits:
            return "0"
        sign = "-" if self._is_negative else ""
        return sign + "".join(chr(ord("0") + d) for d in reversed(self._digits))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        # Свёртка от старшего разряда; int(str) ограничен 4300 цифрами
        result = 0
        for digit in reversed(self._digits):
            result = result * BASE + digit
        return -result if self._is_negative else result

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        return hash((tuple(self._digits), self._is_negative))

    # -------------------------------------------------------------------------
    # Python operator protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) >= 0

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __add__(self, other: "BigInteger") -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "BigInteger") -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "BigInteger") -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.multiply(other)

    # Усекающая семантика, не floor как у int
    def __floordiv__(self, other: "BigInteger") -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: "BigInteger") -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.modulo(other)

    def __pow__(self, exponent: int) -> "BigInteger":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __lshift__(self, positions: int) -> "BigInteger":
        if not isinstance(positions, int):
            return NotImplemented
        return self.shift_left(positions)

    def __rshift__(self, positions: int) -> "BigInteger":
        if not isinstance(positions, int):
            return NotImplemented
        return self.shift_right(positions)
