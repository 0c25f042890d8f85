"""
Тесты для движка bignum (десятичные строки произвольной длины)

Проверяет:
1. Нормализацию и валидацию десятичных строк
2. Сложение / вычитание / умножение / степень / деление
3. Тождества: divide(multiply(a, b), b) == (a, "0"), power(a, 0) == "1"
4. Согласие с встроенной арифметикой int на больших значениях
"""

import pytest

from src.core.math import bignum

LARGE_VALUES = [
    "0",
    "1",
    "7",
    "99999999",
    "100000000",
    "999999999",
    "1000000000",
    "123456789012345678901234567890",
    "987654321987654321",
    "100000000000000000000000000000000000000001",
    str(2 ** 255 - 19),
]


class TestNormalization:
    """Тесты normalize / is_well_formed / split_from_right"""

    def test_normalize(self) -> None:
        assert bignum.normalize("007") == "7"
        assert bignum.normalize("000") == "0"
        assert bignum.normalize(42) == "42"
        assert bignum.normalize("120") == "120"
        assert bignum.normalize("0") == "0"

    @pytest.mark.parametrize("value", [-1, "-1", "1a", "", " 1", True, 1.5, "١٢"])
    def test_normalize_rejects_invalid(self, value) -> None:
        with pytest.raises(ValueError):
            bignum.normalize(value)

    def test_is_well_formed(self) -> None:
        assert bignum.is_well_formed("0")
        assert bignum.is_well_formed("120")
        assert not bignum.is_well_formed("0120")
        assert not bignum.is_well_formed("")
        assert not bignum.is_well_formed(120)

    def test_split_from_right(self) -> None:
        assert bignum.split_from_right("1234567", 3) == ["1", "234", "567"]
        assert bignum.split_from_right("123456", 3) == ["123", "456"]


class TestCompare:
    """Тесты compare"""

    def test_compare_by_length_then_lexicographic(self) -> None:
        assert bignum.compare("10", "9") == 1
        assert bignum.compare("9", "10") == -1
        assert bignum.compare("123", "124") == -1
        assert bignum.compare("010", "10") == 0

    @pytest.mark.parametrize("value", LARGE_VALUES)
    def test_compare_reflexive(self, value) -> None:
        assert bignum.compare(value, value) == 0


class TestArithmetic:
    """Тесты арифметических операций"""

    def test_add_with_carry_across_chunks(self) -> None:
        assert bignum.add("999999999999", "1") == "1000000000000"
        assert bignum.add("0", "123456789012") == "123456789012"

    def test_subtract_with_borrow_across_chunks(self) -> None:
        assert bignum.subtract("1000000000000", "1") == "999999999999"
        assert bignum.subtract("123456789012345", "123456789012345") == "0"

    def test_subtract_negative_result_rejected(self) -> None:
        with pytest.raises(ValueError, match="larger number"):
            bignum.subtract("1", "2")

    def test_multiply(self) -> None:
        assert bignum.multiply("123456789", "987654321") == "121932631112635269"
        assert bignum.multiply("0", "123456789012") == "0"
        assert bignum.multiply("1", "123456789012") == "123456789012"

    def test_power(self) -> None:
        assert bignum.power("2", 100) == "1267650600228229401496703205376"
        assert bignum.power("10", "30") == "1" + "0" * 30
        assert bignum.power("0", 5) == "0"

    @pytest.mark.parametrize("value", LARGE_VALUES)
    def test_power_of_zero_is_one(self, value) -> None:
        assert bignum.power(value, "0") == "1"

    def test_divide(self) -> None:
        assert bignum.divide("1000000000000", "7") == ("142857142857", "1")
        assert bignum.divide("1400000000000", "7") == ("200000000000", "0")
        assert bignum.divide("5", "123456789012") == ("0", "5")

    def test_divide_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            bignum.divide("123", "0")


class TestAgreementWithBuiltinInt:
    """Сверка с встроенной арифметикой int"""

    @pytest.mark.parametrize("a", LARGE_VALUES)
    @pytest.mark.parametrize("b", LARGE_VALUES)
    def test_add_and_multiply(self, a, b) -> None:
        assert bignum.add(a, b) == str(int(a) + int(b))
        assert bignum.multiply(a, b) == str(int(a) * int(b))

    @pytest.mark.parametrize("a", LARGE_VALUES)
    @pytest.mark.parametrize("b", LARGE_VALUES[1:])
    def test_divide(self, a, b) -> None:
        quotient, remainder = divmod(int(a), int(b))
        assert bignum.divide(a, b) == (str(quotient), str(remainder))

    @pytest.mark.parametrize("a", LARGE_VALUES)
    @pytest.mark.parametrize("b", LARGE_VALUES[1:])
    def test_divide_product_is_exact(self, a, b) -> None:
        assert bignum.divide(bignum.multiply(a, b), b) == (a, "0")

    def test_power_matches_builtin(self) -> None:
        assert bignum.power("12345", 17) == str(12345 ** 17)
