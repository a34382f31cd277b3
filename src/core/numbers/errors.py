"""
Errors — Таксономия ошибок десятичной арифметики

Все ошибки поднимаются синхронно в точке обнаружения и никогда не
подавляются внутри движка. Каждый класс дополнительно наследует ближайшее
встроенное исключение, чтобы вызывающий код мог ловить их идиоматично
(ValueError / ZeroDivisionError).

Таксономия:
- InvalidFormatError: некорректная десятичная строка при конструировании
- DivisionByZeroError: делитель (integer или float) равен нулю
- NegativeExponentError: pow() с отрицательным показателем
- NegativeOperandError: sqrt() от отрицательного значения
"""


class BigNumberError(Exception):
    """Базовый класс всех ошибок BigInteger / BigFloat."""

    pass


class InvalidFormatError(BigNumberError, ValueError):
    """
    Некорректный формат числовой строки.

    Возникает при пустой строке, строке только из знака, посторонних
    символах или строке float, где пусты и целая, и дробная части (".").
    """

    pass


class DivisionByZeroError(BigNumberError, ZeroDivisionError):
    """Деление (или взятие остатка) на ноль."""

    pass


class NegativeExponentError(BigNumberError, ValueError):
    """pow() поддерживает только неотрицательные целые показатели."""

    pass


class NegativeOperandError(BigNumberError, ValueError):
    """Квадратный корень из отрицательного значения не определён."""

    pass
