"""
Decimal Errors — иерархия исключений

Все ошибки библиотеки наследуются от DecimalError (подкласс ValueError),
поэтому вызывающий код может ловить их одним except.

Политика:
- ParseError / BadFloatError — штатные ошибки входных данных, возвращаются явно
- RangeError — только для strict-конструкторов (saturating-конструкторы не падают)
- DivisionByZero — ошибка программиста (делитель с нулевой мантиссой)
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalError(ValueError):
    """Базовое исключение для всех ошибок decimal-типов."""


class ParseError(DecimalError):
    """
    Ошибка разбора строки.

    Позиция 1-based и отсчитывается от исходной (необрезанной) строки.
    position=None означает ошибку без привязки к символу (например, "empty input").

    Examples:
        >>> str(ParseError("unexpected symbol 'a'", 1))
        "unexpected symbol 'a' at pos 1"
        >>> str(ParseError("empty input"))
        'empty input'
    """

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at pos {position}")


class BadFloatError(DecimalError):
    """Отрицательный, бесконечный или NaN float на входе."""

    def __init__(self, message: str = "bad float number"):
        super().__init__(message)


class RangeError(DecimalError):
    """Значение не представимо без потери точности или выхода за диапазон (strict-режим)."""


class DivisionByZero(DecimalError, ZeroDivisionError):
    """
    Деление на значение с нулевой мантиссой.

    Считается ошибкой программиста, а не штатной ситуацией: вызывающий код
    должен проверять делитель заранее. Наследуется от ZeroDivisionError,
    поэтому стандартные обработчики Python его тоже ловят.
    """

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)
