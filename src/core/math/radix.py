"""
Radix — целочисленные соотношения между основаниями систем счисления

Модуль содержит точную (без float) арифметику оснований:
- Целые корни radix (все r >= 2, для которых radix = r^k)
- Точный целочисленный логарифм (k такое, что base^k == value)
- Бюджет цифр дробной части с учётом precision
- Округление дробной части с переносом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления целочисленные и точные (float не используется)
2. Округление никогда не увеличивает количество цифр
3. Общий корень ищется только среди точных степеней (5 и 20 общего корня не имеют)
"""

from typing import Optional, Sequence


# =============================================================================
# ЦЕЛЫЕ КОРНИ
# =============================================================================


def integer_nth_root(value: int, n: int) -> int:
    """
    Целая часть корня n-й степени из неотрицательного целого.

    Метод Ньютона в целых числах, без потери точности для больших value.

    Args:
        value: Подкоренное значение (>= 0)
        n: Степень корня (>= 1)

    Returns:
        floor(value ** (1/n))

    Examples:
        >>> integer_nth_root(1000, 3)
        10
        >>> integer_nth_root(999, 3)
        9
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if value < 2 or n == 1:
        return value

    # Начальное приближение сверху: 2^ceil(bits/n) >= корня
    x = 1 << -(-value.bit_length() // n)
    while True:
        y = ((n - 1) * x + value // x ** (n - 1)) // n
        if y >= x:
            return x
        x = y


def radix_roots(radix: int) -> list[int]:
    """
    Все целые корни radix, включая сам radix (тривиальный корень).

    Корень r >= 2 включается, если radix является точной степенью r.

    Args:
        radix: Основание (>= 2)

    Returns:
        Список корней, начиная с самого radix

    Examples:
        >>> radix_roots(16)
        [16, 4, 2]
        >>> radix_roots(20)
        [20]
    """
    roots = [radix]

    for exponent in range(2, radix.bit_length() + 1):
        root = integer_nth_root(radix, exponent)
        if root < 2:
            break
        if root ** exponent == radix:
            roots.append(root)

    return roots


def find_common_root(radix_a: int, radix_b: int) -> Optional[int]:
    """
    Наибольший общий целый корень двух оснований.

    Args:
        radix_a: Первое основание
        radix_b: Второе основание

    Returns:
        max(radix_roots(a) ∩ radix_roots(b)) или None, если пересечение пусто
    """
    common = set(radix_roots(radix_a)) & set(radix_roots(radix_b))
    return max(common) if common else None


def exact_log(value: int, base: int) -> Optional[int]:
    """
    Точный целочисленный логарифм.

    Args:
        value: Значение (>= 1)
        base: Основание логарифма (>= 2)

    Returns:
        k такое, что base ** k == value, или None если такого k нет

    Examples:
        >>> exact_log(256, 4)
        4
        >>> exact_log(20, 5) is None
        True
    """
    if value < 1 or base < 2:
        return None

    exponent = 0
    power = 1
    while power < value:
        power *= base
        exponent += 1

    return exponent if power == value else None


# =============================================================================
# ДРОБНАЯ ЧАСТЬ: ОКРУГЛЕНИЕ
# =============================================================================


def round_fraction_digits(values: Sequence[int], radix: int) -> list[int]:
    """
    Округление дробной части отбрасыванием последней (лишней) цифры.

    Если отброшенная цифра >= radix / 2, последняя сохранённая цифра
    увеличивается на 1 с переносом влево. При переносе за старший разряд
    результат не растёт: возвращается максимальное значение той же длины
    (все цифры radix - 1).

    Args:
        values: Значения цифр, старшая первой; последняя цифра — лишняя
        radix: Основание цифр

    Returns:
        Округлённый список значений на одну цифру короче входного

    Examples:
        >>> round_fraction_digits([0, 0, 1, 0, 0, 0, 1, 1, 1, 1], 2)
        [0, 0, 1, 0, 0, 1, 0, 0, 0]
        >>> round_fraction_digits([1, 1, 1], 2)
        [1, 1]
    """
    if len(values) < 2:
        raise ValueError(f"at least 2 digits are required for rounding, got {len(values)}")

    number = list(values[:-1])

    if values[-1] * 2 < radix:
        return number

    i = len(number) - 1
    number[i] += 1

    while number[i] == radix:
        number[i] = 0

        # Перенос за старший разряд: не округляем, а зажимаем
        if i == 0:
            return [radix - 1] * len(number)

        i -= 1
        number[i] += 1

    return number
