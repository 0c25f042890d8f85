"""
Тесты для модуля radix

Проверяет:
1. Точные целые корни (без float) для больших значений
2. Корни оснований и общий корень
3. Точный целочисленный логарифм
4. Округление дробной части с переносом и зажимом
"""

import pytest

from src.core.math.radix import (
    exact_log,
    find_common_root,
    integer_nth_root,
    radix_roots,
    round_fraction_digits,
)


class TestIntegerNthRoot:
    """Тесты integer_nth_root"""

    @pytest.mark.parametrize(
        "value,n,expected",
        [
            (0, 3, 0),
            (1, 5, 1),
            (1000, 3, 10),
            (999, 3, 9),
            (17, 1, 17),
            (2 ** 200, 100, 4),
            (3 ** 300 - 1, 300, 2),
        ],
    )
    def test_floor_root(self, value, n, expected) -> None:
        assert integer_nth_root(value, n) == expected

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            integer_nth_root(-8, 3)
        with pytest.raises(ValueError, match="n must be >= 1"):
            integer_nth_root(8, 0)


class TestRadixRoots:
    """Тесты radix_roots / find_common_root"""

    @pytest.mark.parametrize(
        "radix,roots",
        [
            (2, [2]),
            (16, [16, 4, 2]),
            (64, [64, 8, 4, 2]),
            (27, [27, 3]),
            (20, [20]),
        ],
    )
    def test_roots(self, radix, roots) -> None:
        assert radix_roots(radix) == roots

    def test_largest_common_root(self) -> None:
        assert find_common_root(64, 512) == 8
        assert find_common_root(16, 64) == 4
        assert find_common_root(8, 32) == 2

    def test_no_common_root(self) -> None:
        assert find_common_root(5, 20) is None
        assert find_common_root(6, 36 * 36 + 1) is None


class TestExactLog:
    """Тесты exact_log"""

    def test_exact_powers(self) -> None:
        assert exact_log(256, 4) == 4
        assert exact_log(1, 5) == 0
        assert exact_log(3 ** 40, 3) == 40

    def test_non_powers(self) -> None:
        assert exact_log(20, 5) is None
        assert exact_log(0, 2) is None
        assert exact_log(8, 1) is None


class TestRoundFractionDigits:
    """Тесты round_fraction_digits"""

    def test_round_down(self) -> None:
        assert round_fraction_digits([0, 0, 1, 0, 0], 2) == [0, 0, 1, 0]
        assert round_fraction_digits([5, 4], 10) == [5]

    def test_round_up_half(self) -> None:
        assert round_fraction_digits([5, 5], 10) == [6]
        assert round_fraction_digits([1, 3], 6) == [2]

    def test_carry_propagation(self) -> None:
        assert round_fraction_digits([0, 0, 1, 0, 0, 0, 1, 1, 1, 1], 2) == [
            0, 0, 1, 0, 0, 1, 0, 0, 0,
        ]

    def test_carry_past_first_digit_is_clamped(self) -> None:
        """Перенос за старший разряд не увеличивает длину"""
        assert round_fraction_digits([1, 1, 1], 2) == [1, 1]
        assert round_fraction_digits([9, 9, 5], 10) == [9, 9]

    def test_input_not_modified(self) -> None:
        values = [1, 0, 1]
        round_fraction_digits(values, 2)
        assert values == [1, 0, 1]

    def test_requires_two_digits(self) -> None:
        with pytest.raises(ValueError, match="at least 2 digits"):
            round_fraction_digits([1], 2)
