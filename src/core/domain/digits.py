"""
Digits — типизированное представление цифр системы счисления

Цифра может быть любым hashable значением (не обязательно символом).
Модуль задаёт единственную точку канонизации цифр на границе системы:
- DigitKind: тег вида цифры (символ / строка / байты / целое / opaque)
- digit_text: текстовая форма цифры (None для opaque цифр)
- default_alphabet: канонический алфавит для целочисленного radix

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Текстовая форма детерминирована и не зависит от окружения
2. Opaque цифры не имеют текстовой формы (строковое представление невозможно)
3. bool не считается целым числом (True/False — opaque цифры)
"""

from enum import Enum
from typing import Final, Hashable, Optional

# =============================================================================
# КАНОНИЧЕСКИЕ АЛФАВИТЫ
# =============================================================================

# Цифры для radix <= 62 (префикс этого ряда)
INTEGER_BASE_DIGITS: Final[str] = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

# Цифры для radix == 64 (алфавит base64)
BASE64_DIGITS: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)

# Максимальный radix, представимый одиночными байтовыми символами
BYTE_BASE_MAX_RADIX: Final[int] = 256

# Префикс меток цифр для radix > 256 ("#000", "#001", ...)
LABEL_DIGIT_PREFIX: Final[str] = "#"


# =============================================================================
# DIGIT KIND
# =============================================================================


class DigitKind(str, Enum):
    """Вид цифры"""

    CHARACTER = "character"
    STRING = "string"
    BYTES = "bytes"
    INTEGER = "integer"
    OPAQUE = "opaque"


def digit_kind(digit: Hashable) -> DigitKind:
    """
    Определение вида цифры.

    Args:
        digit: Произвольная hashable цифра

    Returns:
        DigitKind для цифры

    Examples:
        >>> digit_kind("A")
        <DigitKind.CHARACTER: 'character'>
        >>> digit_kind("#01")
        <DigitKind.STRING: 'string'>
        >>> digit_kind(7)
        <DigitKind.INTEGER: 'integer'>
    """
    if isinstance(digit, str):
        return DigitKind.CHARACTER if len(digit) == 1 else DigitKind.STRING
    if isinstance(digit, bytes):
        return DigitKind.BYTES
    if isinstance(digit, int) and not isinstance(digit, bool):
        return DigitKind.INTEGER
    return DigitKind.OPAQUE


def digit_text(digit: Hashable) -> Optional[str]:
    """
    Текстовая форма цифры.

    Байты декодируются как latin-1 (каждый байт — один символ), целые
    числа записываются в десятичной форме.

    Args:
        digit: Произвольная hashable цифра

    Returns:
        Строка или None для opaque цифр
    """
    kind = digit_kind(digit)

    if kind in (DigitKind.CHARACTER, DigitKind.STRING):
        return digit
    if kind == DigitKind.BYTES:
        return digit.decode("latin-1")
    if kind == DigitKind.INTEGER:
        return str(digit)
    return None


def default_alphabet(radix: int) -> list[str]:
    """
    Канонический алфавит для системы счисления, заданной только radix.

    Правила:
    - radix <= 62: префикс 0-9A-Za-z
    - radix == 64: алфавит base64 (A-Za-z0-9+/)
    - radix <= 256: символы с кодами 0..radix-1
    - radix > 256: метки "#N" с дополнением нулями до ширины radix-1

    Args:
        radix: Основание системы счисления (>= 2)

    Returns:
        Список цифр, индекс = значение цифры

    Examples:
        >>> default_alphabet(4)
        ['0', '1', '2', '3']
        >>> default_alphabet(1000)[7]
        '#007'
    """
    if radix <= len(INTEGER_BASE_DIGITS):
        return list(INTEGER_BASE_DIGITS[:radix])
    if radix == 64:
        return list(BASE64_DIGITS)
    if radix <= BYTE_BASE_MAX_RADIX:
        return [chr(i) for i in range(radix)]

    width = len(str(radix - 1))
    return [f"{LABEL_DIGIT_PREFIX}{i:0{width}d}" for i in range(radix)]
