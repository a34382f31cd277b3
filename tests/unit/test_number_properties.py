"""
Тесты алгебраических свойств BigInteger / BigFloat

Проверяемые инварианты:
1. Коммутативность сложения и умножения
2. Аддитивный обратный: a - a == 0
3. Тождество деления: a == b * (a / b) + a % b
4. a / a == 1
5. Корень — floor истинного корня
6. pow(0) == 1, pow(1) == a, pow(2) == sqr()
7. Сверка с встроенным int на детерминированной случайной выборке
"""

import math
import random

import pytest

from src.core.numbers import BigFloat, BigInteger

INTEGER_SAMPLES = [
    "0",
    "1",
    "-1",
    "7",
    "-7",
    "10",
    "999",
    "-1000",
    "123456789",
    "-987654321012345678",
    "100000000000000000000",
]

FLOAT_SAMPLES = [
    "0",
    "1",
    "-1",
    "0.1",
    "-0.25",
    "3.14",
    "100",
    "-12.005",
    "0.0007",
    "98765.4321",
]

SQRT_SAMPLES = ["2", "3", "8", "9", "10", "24", "25", "26", "1000001", "123456789123456789"]

# Детерминированная выборка для сверки с int
_RNG = random.Random(20241019)
ORACLE_PAIRS = [
    (_RNG.randint(-(10**40), 10**40), _RNG.randint(-(10**25), 10**25)) for _ in range(40)
] + [(10**30, 1), (-(10**30), 3), (5, 10**20), (0, -17)]


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


# =============================================================================
# BIG INTEGER
# =============================================================================


class TestIntegerProperties:
    """Свойства целочисленного движка"""

    @pytest.mark.parametrize("a", INTEGER_SAMPLES)
    @pytest.mark.parametrize("b", INTEGER_SAMPLES)
    def test_commutativity(self, a: str, b: str) -> None:
        """a + b == b + a, a × b == b × a"""
        x, y = BigInteger(a), BigInteger(b)
        assert x.add(y).equal(y.add(x))
        assert x.multiply(y).equal(y.multiply(x))

    @pytest.mark.parametrize("a", INTEGER_SAMPLES)
    def test_additive_inverse(self, a: str) -> None:
        """a - a == 0 и a + (-a) == 0"""
        x = BigInteger(a)
        assert x.subtract(x).equal(BigInteger.zero())
        assert x.add(x.negate()).equal(BigInteger.zero())

    @pytest.mark.parametrize("a", INTEGER_SAMPLES)
    @pytest.mark.parametrize("b", [s for s in INTEGER_SAMPLES if s != "0"])
    def test_division_identity(self, a: str, b: str) -> None:
        """a == b × (a / b) + a % b"""
        x, y = BigInteger(a), BigInteger(b)
        assert x.equal(y.multiply(x.divide(y)).add(x.modulo(y)))

    @pytest.mark.parametrize("a", [s for s in INTEGER_SAMPLES if s != "0"])
    def test_divide_self(self, a: str) -> None:
        """a / a == 1"""
        x = BigInteger(a)
        assert x.divide(x).equal(BigInteger.one())

    @pytest.mark.parametrize("a", SQRT_SAMPLES)
    def test_sqrt_is_floor(self, a: str) -> None:
        """Корень — floor истинного корня"""
        x = BigInteger(a)
        root = x.sqrt()
        assert root.sqr().less_than(x) or root.sqr().equal(x)
        assert root.add(BigInteger.one()).sqr().greater_than(x)

    @pytest.mark.parametrize("a", INTEGER_SAMPLES)
    def test_pow_identities(self, a: str) -> None:
        """pow(0) == 1, pow(1) == a, pow(2) == sqr()"""
        x = BigInteger(a)
        assert x.pow(0).equal(BigInteger.one())
        assert x.pow(1).equal(x)
        assert x.pow(2).equal(x.sqr())

    @pytest.mark.parametrize("a, b", ORACLE_PAIRS)
    def test_matches_builtin_int(self, a: int, b: int) -> None:
        """Сверка add/subtract/multiply/divide/modulo/compare с int"""
        x, y = BigInteger(str(a)), BigInteger(str(b))
        assert x.add(y).to_string() == str(a + b)
        assert x.subtract(y).to_string() == str(a - b)
        assert x.multiply(y).to_string() == str(a * b)
        assert x.compare(y) == (a > b) - (a < b)
        if b != 0:
            quotient, remainder = _truncating_divmod(a, b)
            assert x.divide(y).to_string() == str(quotient)
            assert x.modulo(y).to_string() == str(remainder)

    @pytest.mark.parametrize("a", [a for a, _ in ORACLE_PAIRS[:5]])
    def test_sqrt_matches_isqrt(self, a: int) -> None:
        """sqrt совпадает с math.isqrt"""
        value = abs(a)
        assert BigInteger(str(value)).sqrt().to_string() == str(math.isqrt(value))

    @pytest.mark.parametrize("base, exponent", [(3, 41), (-7, 13), (12345, 6), (-1, 1001)])
    def test_pow_matches_builtin_int(self, base: int, exponent: int) -> None:
        """pow совпадает с ** для int"""
        assert BigInteger(str(base)).pow(exponent).to_string() == str(base**exponent)


# =============================================================================
# BIG FLOAT
# =============================================================================


class TestFloatProperties:
    """Свойства движка десятичных дробей"""

    @pytest.mark.parametrize("a", FLOAT_SAMPLES)
    @pytest.mark.parametrize("b", FLOAT_SAMPLES)
    def test_commutativity(self, a: str, b: str) -> None:
        """a + b == b + a, a × b == b × a"""
        x, y = BigFloat(a), BigFloat(b)
        assert x.add(y).equal(y.add(x))
        assert x.multiply(y).equal(y.multiply(x))

    @pytest.mark.parametrize("a", FLOAT_SAMPLES)
    @pytest.mark.parametrize("b", FLOAT_SAMPLES)
    def test_add_subtract_round_trip(self, a: str, b: str) -> None:
        """(a + b) - b == a: сложение и вычитание точные"""
        x, y = BigFloat(a), BigFloat(b)
        assert x.add(y).subtract(y).equal(x)

    @pytest.mark.parametrize("a", FLOAT_SAMPLES)
    def test_additive_inverse(self, a: str) -> None:
        """a - a == 0"""
        x = BigFloat(a)
        assert x.subtract(x).equal(BigFloat.zero())

    @pytest.mark.parametrize("a", [s for s in FLOAT_SAMPLES if s != "0"])
    def test_divide_self(self, a: str) -> None:
        """a / a == 1"""
        x = BigFloat(a)
        assert x.divide(x).equal(BigFloat.one())

    @pytest.mark.parametrize("a", SQRT_SAMPLES + ["0.5", "2.25", "99.99", "1.44"])
    def test_sqrt_is_floor(self, a: str) -> None:
        """Корень BigFloat — floor истинного корня"""
        x = BigFloat(a)
        root = x.sqrt()
        assert root.sqr().less_than(x) or root.sqr().equal(x)
        assert root.add(BigFloat.one()).sqr().greater_than(x)

    @pytest.mark.parametrize("a", FLOAT_SAMPLES)
    def test_pow_identities(self, a: str) -> None:
        """pow(0) == 1, pow(1) == a, pow(2) == sqr()"""
        x = BigFloat(a)
        assert x.pow(0).equal(BigFloat.one())
        assert x.pow(1).equal(x)
        assert x.pow(2).equal(x.sqr())

    @pytest.mark.parametrize("a", FLOAT_SAMPLES)
    def test_round_trip_is_stable(self, a: str) -> None:
        """Повторный разбор канонической строки даёт то же значение"""
        rendered = BigFloat(a).to_string()
        assert BigFloat(rendered).to_string() == rendered
        assert BigFloat(rendered) == BigFloat(a)
