"""
Decimal Parsing — разбор десятичных строк

Грамматика (после снятия кавычек и пробелов):

    [+|-] digits [ "." digits ] [ "e" [+|-] digits ]

Разбор выполняется за один проход:
- Ведущие нули до первой значащей цифры пропускаются
- Позиция десятичной точки учитывается в экспоненте
- Хвостовые нули убираются, каждый увеличивает экспоненту
- Суффикс экспоненты разбирается отдельно

Результат: значащие цифры + экспонента, digits * 10^exponent == вход.

Позиции ошибок 1-based и считаются от исходной (необрезанной) строки.
Если строгая грамматика отвергает вход, разбор может откатиться на float()
для обрезанной строки (например, "1E5" или "Infinity").
"""

import logging
import re
from typing import Final, NamedTuple

from src.core.errors import ParseError

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DELIMITER: Final[str] = "."

_EXPONENT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# Экспонента хранится как int64 в wire-форматах
_EXPONENT_LIMIT: Final[int] = 1 << 63
_EXPONENT_MAX_CHARS: Final[int] = 20


# =============================================================================
# РЕЗУЛЬТАТ РАЗБОРА
# =============================================================================


class ParsedDecimal(NamedTuple):
    """
    Результат разбора строки.

    digits: значащие цифры без ведущих и хвостовых нулей ("" для нуля)
    exponent: экспонента, digits * 10^exponent == модуль входа
    negative: был ли ведущий '-'
    approx: значение float-fallback, если строгая грамматика не подошла
    """

    digits: str
    exponent: int
    negative: bool
    approx: float | None = None


# =============================================================================
# ПОДГОТОВКА СТРОКИ
# =============================================================================


def prepare(text: str) -> tuple[str, int, bool]:
    """
    Снимает кавычки, пробелы и знак.

    Args:
        text: Исходная строка

    Returns:
        (body, offset, negative): body без обрамления, offset — сколько символов
        отрезано слева (для пересчёта позиций ошибок), negative — был ли '-'

    Raises:
        ParseError: "empty input" если после очистки ничего не осталось

    Examples:
        >>> prepare('"  +12.5 "')
        ('12.5', 4, False)
        >>> prepare("   --")
        ('-', 4, True)
    """
    s, offset = text, 0
    if s.startswith('"'):
        s = s[1:]
        offset += 1
    if s.endswith('"'):
        s = s[:-1]
    trimmed = s.lstrip()
    offset += len(s) - len(trimmed)
    s = trimmed.rstrip()

    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
        offset += 1
    if not s:
        raise ParseError("empty input")
    return s, offset, negative


# =============================================================================
# СКАНЕР
# =============================================================================


def _parse_exponent(text: str, position: int) -> int:
    if len(text) > _EXPONENT_MAX_CHARS or not _EXPONENT_RE.fullmatch(text):
        raise ParseError(f"error parsing exponent: invalid syntax {text!r}", position)
    exponent = int(text)
    if not -_EXPONENT_LIMIT <= exponent < _EXPONENT_LIMIT:
        raise ParseError(f"error parsing exponent: value out of range {text!r}", position)
    return exponent


def scan(body: str, offset: int = 0) -> tuple[str, int]:
    """
    Однопроходный разбор тела числа без знака.

    Args:
        body: Строка после prepare()
        offset: Смещение body относительно исходной строки

    Returns:
        (digits, exponent): значащие цифры и экспонента; ("", 0) для нуля

    Raises:
        ParseError: Недопустимый символ, повторная точка или плохая экспонента

    Examples:
        >>> scan("00001.10000")
        ('11', -1)
        >>> scan("0.01234500")
        ('12345', -6)
        >>> scan("123450000")
        ('12345', 4)
    """
    digits: list[str] = []
    seen_delimiter = False
    int_len = 0
    frac_leading_zeros = 0
    exponent = 0

    for i, ch in enumerate(body):
        if "0" <= ch <= "9":
            if not digits and ch == "0":
                if seen_delimiter:
                    frac_leading_zeros += 1
                continue
            digits.append(ch)
            if not seen_delimiter:
                int_len += 1
        elif ch == "e":
            exponent = _parse_exponent(body[i + 1 :], offset + i + 2)
            break
        elif ch == DELIMITER:
            if seen_delimiter:
                raise ParseError("unexpected delimiter", offset + i + 1)
            seen_delimiter = True
        else:
            raise ParseError(f"unexpected symbol {ch!r}", offset + i + 1)

    if not digits:
        return "", 0

    significant = "".join(digits).rstrip("0")
    exponent += int_len - len(digits) - frac_leading_zeros
    exponent += len(digits) - len(significant)
    return significant, exponent


def _fallback_allowed(body: str) -> bool:
    # второй знак, "_" и не-ASCII цифры float() принимает, грамматика нет
    return body.isascii() and "_" not in body and body[:1] not in ("-", "+")


def parse_decimal(text: str, float_fallback: bool = True) -> ParsedDecimal:
    """
    Полный разбор строки: prepare + scan + опциональный float-fallback.

    Args:
        text: Исходная строка (допускаются кавычки и пробелы)
        float_fallback: Пробовать float() если строгая грамматика не подошла

    Returns:
        ParsedDecimal; при fallback заполнено поле approx (модуль float)

    Raises:
        ParseError: Если строка не разбирается ни строго, ни как float
    """
    body, offset, negative = prepare(text)
    try:
        digits, exponent = scan(body, offset)
    except ParseError as err:
        if not float_fallback or not _fallback_allowed(body):
            raise
        signed_body = f"-{body}" if negative else body
        try:
            approx = float(signed_body)
        except ValueError:
            raise err from None
        logger.debug(f"Strict decimal grammar rejected {text!r}, using float fallback {approx!r}")
        return ParsedDecimal("", 0, approx < 0 or negative, abs(approx))
    return ParsedDecimal(digits, exponent, negative)


def digits_to_mantissa(digits: str, exponent: int, max_digits: int) -> tuple[int, int]:
    """
    Переводит значащие цифры в целую мантиссу не длиннее max_digits.

    Лишние младшие цифры отбрасываются, экспонента увеличивается на их количество.

    Examples:
        >>> digits_to_mantissa("123456", -5, 17)
        (123456, -5)
        >>> digits_to_mantissa("1234567890123456789", 0, 17)
        (12345678901234567, 2)
        >>> digits_to_mantissa("", 0, 17)
        (0, 0)
    """
    if not digits:
        return 0, 0
    to_cut = len(digits) - max_digits
    if to_cut > 0:
        digits = digits[:max_digits]
        exponent += to_cut
    return int(digits), exponent
