"""
Bignum — арифметика произвольной точности над десятичными строками

Чистая реализация целочисленной арифметики без внешних зависимостей.
Неотрицательное целое представлено десятичной строкой без ведущих нулей
(кроме самого значения "0").

Операции:
- add: поразрядное сложение чанками по 9 цифр с переносом
- subtract: вычитание меньшего из большего чанками по 9 цифр с заёмом
- multiply: умножение в столбик (чанки множимого по 8 цифр × цифра множителя)
- power: бинарное возведение в степень (O(log n) умножений)
- divide: деление в столбик с остатком
- compare: сравнение по длине, затем лексикографически

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые: аргументы не изменяются, результат — новая строка
2. Результат всегда нормализован (без ведущих нулей)
3. Нативная арифметика применяется только к значениям < 10^9 (или < 10^10 для
   коротких операндов), что соответствует безопасному 32/64-битному диапазону
4. Знак не поддерживается: обработка знака — задача вызывающего кода
"""

import re
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ ЧАНКОВ
# =============================================================================

# Максимальное число десятичных цифр операнда для нативного shortcut
NATIVE_SAFE_DIGITS: Final[int] = 9

# Размер чанка при сложении/вычитании (сумма двух чанков < 2 * 10^9)
ADD_CHUNK_DIGITS: Final[int] = 9
ADD_CHUNK_MASK: Final[int] = 10 ** ADD_CHUNK_DIGITS

# Размер чанка при умножении (чанк × цифра + перенос < 10^9)
MUL_CHUNK_DIGITS: Final[int] = 8
MUL_CHUNK_MASK: Final[int] = 10 ** MUL_CHUNK_DIGITS

# Делитель, ниже которого частичный остаток делится нативно
NATIVE_DIVISOR_LIMIT: Final[str] = "100000000"

_WELL_FORMED = re.compile(r"0|[1-9][0-9]*")

BignumLike = Union[str, int]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_well_formed(value: str) -> bool:
    """
    Проверка, что строка — каноническое неотрицательное десятичное целое.

    Examples:
        >>> is_well_formed("120")
        True
        >>> is_well_formed("0120")
        False
        >>> is_well_formed("-1")
        False
    """
    return isinstance(value, str) and _WELL_FORMED.fullmatch(value) is not None


def normalize(value: BignumLike) -> str:
    """
    Приведение значения к канонической десятичной строке.

    Args:
        value: Неотрицательное int или десятичная строка (допускаются ведущие нули)

    Returns:
        Десятичная строка без ведущих нулей

    Raises:
        ValueError: Если значение отрицательное или не является десятичным числом
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a non-negative integer, got {value!r}")

    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Expected a non-negative integer, got {value}")
        return str(value)

    if is_well_formed(value):
        return value

    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise ValueError(f"Expected a non-negative decimal string, got {value!r}")

    return value.lstrip("0") or "0"


def split_from_right(value: str, size: int) -> list[str]:
    """
    Разбиение строки на чанки с выравниванием по правому краю.

    Examples:
        >>> split_from_right("1234567", 3)
        ['1', '234', '567']
    """
    head = len(value) % size
    chunks = [value[head + i:head + i + size] for i in range(0, len(value) - head, size)]
    return [value[:head]] + chunks if head else chunks


def _chunks_lsf(value: str, size: int) -> list[int]:
    """Чанки числа как int, младший чанк первым."""
    return [int(chunk) for chunk in reversed(split_from_right(value, size))]


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(a: str, b: str) -> int:
    """
    Сравнение двух неотрицательных целых.

    Сначала по длине (после отбрасывания ведущих нулей), затем
    лексикографически.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    a = a.lstrip("0") or "0"
    b = b.lstrip("0") or "0"

    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    if a == b:
        return 0
    return 1 if a > b else -1


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(a: str, b: str) -> str:
    """
    Сложение в столбик чанками по 9 цифр от младших к старшим.

    Examples:
        >>> add("999999999999", "1")
        '1000000000000'
    """
    if len(a) <= NATIVE_SAFE_DIGITS and len(b) <= NATIVE_SAFE_DIGITS:
        return str(int(a) + int(b))
    if a == "0":
        return b
    if b == "0":
        return a

    x = _chunks_lsf(a, ADD_CHUNK_DIGITS)
    y = _chunks_lsf(b, ADD_CHUNK_DIGITS)
    if len(x) < len(y):
        x, y = y, x

    carry = 0
    chunks = []

    for i, chunk in enumerate(x):
        total = chunk + (y[i] if i < len(y) else 0) + carry
        carry, total = divmod(total, ADD_CHUNK_MASK)
        chunks.append(f"{total:0{ADD_CHUNK_DIGITS}d}")

    if carry:
        chunks.append(str(carry))

    return "".join(reversed(chunks)).lstrip("0") or "0"


def subtract(a: str, b: str) -> str:
    """
    Вычитание меньшего неотрицательного целого из большего (a >= b).

    Raises:
        ValueError: Если a < b (результат был бы отрицательным)
    """
    if compare(a, b) < 0:
        raise ValueError(f"Cannot subtract a larger number from a smaller one: {a} - {b}")
    if len(a) <= NATIVE_SAFE_DIGITS and len(b) <= NATIVE_SAFE_DIGITS:
        return str(int(a) - int(b))

    x = _chunks_lsf(a, ADD_CHUNK_DIGITS)
    y = _chunks_lsf(b, ADD_CHUNK_DIGITS)

    borrow = 0
    chunks = []

    for i, chunk in enumerate(x):
        diff = chunk - (y[i] if i < len(y) else 0) - borrow
        borrow = 1 if diff < 0 else 0
        chunks.append(f"{diff + borrow * ADD_CHUNK_MASK:0{ADD_CHUNK_DIGITS}d}")

    return "".join(reversed(chunks)).lstrip("0") or "0"


# =============================================================================
# УМНОЖЕНИЕ / СТЕПЕНЬ
# =============================================================================


def multiply(a: str, b: str) -> str:
    """
    Умножение в столбик.

    Для каждой ненулевой цифры множителя вычисляется сдвинутое частичное
    произведение (чанки множимого по 8 цифр), затем частичные произведения
    суммируются через add.

    Examples:
        >>> multiply("123456789", "987654321")
        '121932631112635269'
    """
    if len(a) + len(b) <= NATIVE_SAFE_DIGITS:
        return str(int(a) * int(b))
    if a == "0" or b == "0":
        return "0"
    if a == "1":
        return b
    if b == "1":
        return a

    multiplicand = _chunks_lsf(a, MUL_CHUNK_DIGITS)
    partials = []

    for zeros, digit in enumerate(reversed(b)):
        multiplier = int(digit)
        if multiplier == 0:
            continue

        carry = 0
        chunks = []
        for chunk in multiplicand:
            carry, product = divmod(chunk * multiplier + carry, MUL_CHUNK_MASK)
            chunks.append(f"{product:0{MUL_CHUNK_DIGITS}d}")

        partial = (str(carry) + "".join(reversed(chunks))).lstrip("0")
        partials.append(partial + "0" * zeros)

    result = partials[0]
    for partial in partials[1:]:
        result = add(result, partial)

    return result


def power(a: str, exponent: BignumLike) -> str:
    """
    Бинарное возведение в степень (repeated squaring).

    Args:
        a: Основание (десятичная строка)
        exponent: Неотрицательный показатель (int или десятичная строка)

    Examples:
        >>> power("2", 100)
        '1267650600228229401496703205376'
        >>> power("12345", "0")
        '1'
    """
    n = int(normalize(exponent))

    if n == 0 or a == "1":
        return "1"
    if a == "0":
        return "0"

    result = "1"
    base = a

    while n:
        if n & 1:
            result = multiply(result, base)
        n >>= 1
        if n:
            base = multiply(base, base)

    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(a: str, b: str) -> tuple[str, str]:
    """
    Целочисленное деление в столбик с остатком.

    Частичный остаток набирается по одной цифре делимого, пока он меньше
    делителя. Если делитель < 10^8, частичный остаток делится нативно,
    иначе очередная цифра частного находится повторным вычитанием.

    Args:
        a: Делимое
        b: Делитель (не "0")

    Returns:
        (quotient, remainder)

    Raises:
        ZeroDivisionError: Если b == "0"

    Examples:
        >>> divide("1000000000000", "7")
        ('142857142857', '1')
    """
    if compare(b, "0") == 0:
        raise ZeroDivisionError("Division by zero")
    if len(a) <= NATIVE_SAFE_DIGITS and len(b) <= NATIVE_SAFE_DIGITS:
        quotient, remainder = divmod(int(a), int(b))
        return str(quotient), str(remainder)
    if compare(a, b) < 0:
        return "0", a

    native = compare(b, NATIVE_DIVISOR_LIMIT) < 0
    quotient = []
    remainder = a[:len(b)]
    position = len(b)
    pending_zero = False

    while True:
        while compare(remainder, b) < 0:
            if pending_zero:
                quotient.append("0")
            if position >= len(a):
                return "".join(quotient) or "0", remainder

            remainder = ("" if remainder == "0" else remainder) + a[position]
            position += 1
            pending_zero = True

        if native:
            count, rest = divmod(int(remainder), int(b))
            remainder = str(rest)
        else:
            remainder = subtract(remainder, b)
            count = 1
            while compare(remainder, b) >= 0:
                remainder = subtract(remainder, b)
                count += 1

        quotient.append(str(count))
        pending_zero = False
