"""
Тесты для ReplaceConverter

Проверяет:
1. Замену блоков при large = small^k в обе стороны
2. Конвертацию через промежуточную систему (8 <-> 32 через 2)
3. Обрезку ведущих (целые) и хвостовых (дроби) нулей
4. Отказ при отсутствии общего корня
5. Ленивое потокобезопасное построение таблицы
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.converters import ConversionTable, ReplaceConverter
from src.core.domain.errors import StrategyInapplicable
from src.core.domain.numeral_system import NumeralSystem


def make_converter(source, target) -> ReplaceConverter:
    return ReplaceConverter(NumeralSystem(source), NumeralSystem(target))


class TestConversionTable:
    """Тесты ConversionTable"""

    def test_blocks_for_binary_to_hex(self) -> None:
        table = ConversionTable(2, 16)
        assert table.block_size == 4
        assert len(table) == 16
        assert table.to_block(10) == (1, 0, 1, 0)
        assert table.to_value((1, 1, 1, 1)) == 15
        assert table.to_value([0, 0, 0, 0]) == 0

    def test_blocks_enumerate_in_order(self) -> None:
        table = ConversionTable(3, 27)
        for value in range(27):
            assert table.to_block(value) == (value // 9, value // 3 % 3, value % 3)

    def test_not_a_power_rejected(self) -> None:
        with pytest.raises(ValueError, match="not an exact integer power"):
            ConversionTable(3, 10)


class TestIntegerReplacement:
    """Тесты конвертации целой части"""

    def test_hex_to_binary(self) -> None:
        converter = make_converter(16, 2)
        assert converter.convert_integer(list("A09FF")) == list("10100000100111111111")

    def test_binary_to_hex(self) -> None:
        converter = make_converter(2, 16)
        assert converter.convert_integer(list("10100000100111111111")) == list("A09FF")

    def test_leading_zeros_trimmed(self) -> None:
        assert make_converter(2, 16).convert_integer(list("00001111")) == ["F"]
        assert make_converter(16, 2).convert_integer(list("0F")) == list("1111")
        assert make_converter(16, 2).convert_integer(["0", "0"]) == ["0"]

    def test_conversion_through_intermediate_root(self) -> None:
        converter = make_converter(8, 32)
        assert converter.root == 2
        assert converter.convert_integer(list("777")) == list("FV")
        assert make_converter(32, 8).convert_integer(list("FV")) == list("777")

    def test_equal_radix_redigitizes(self) -> None:
        converter = ReplaceConverter(NumeralSystem("01"), NumeralSystem(".-"))
        assert converter.convert_integer(list("11001")) == list("--..-")
        assert converter.convert_integer(list("0011")) == list("--")
        assert converter.convert_fractions(list("0100")) == list(".-")
        assert converter.convert_integer(list("000")) == ["."]

    def test_equal_radix_trims_zeros(self) -> None:
        converter = make_converter(10, 10)
        assert converter.convert_integer(list("007")) == ["7"]
        assert converter.convert_fractions(list("500")) == ["5"]

    def test_empty_input_is_zero(self) -> None:
        assert make_converter(16, 2).convert_integer([]) == ["0"]


class TestFractionReplacement:
    """Тесты конвертации дробной части"""

    def test_binary_fraction_padded_on_right(self) -> None:
        assert make_converter(2, 16).convert_fractions(["1"]) == ["8"]

    def test_trailing_zeros_trimmed(self) -> None:
        assert make_converter(16, 2).convert_fractions(["8"]) == ["1"]
        assert make_converter(16, 2).convert_fractions(["0"]) == ["0"]

    def test_base27_to_base9(self) -> None:
        converter = make_converter(27, 9)
        assert converter.convert_integer(["K"]) == list("22")
        assert converter.convert_fractions(list("NH6CG2363")) == list("7782135321061")

    def test_precision_is_ignored(self) -> None:
        converter = make_converter(2, 16)
        converter.set_precision(1)
        assert converter.convert_fractions(list("00000001")) == list("01")


class TestApplicability:
    """Тесты отказа стратегии"""

    def test_declines_without_common_root(self) -> None:
        converter = make_converter(5, 20)
        assert converter.root is None
        assert not converter.can_convert_integer(["1"])
        assert not converter.can_convert_fractions(["1"])

        with pytest.raises(StrategyInapplicable, match="no common radix root") as exc_info:
            converter.convert_integer(["1"])
        assert exc_info.value.strategy == "replace"

    def test_accepts_related_radices(self) -> None:
        converter = make_converter(4, 8)
        assert converter.can_convert_integer(["1"])
        assert converter.can_convert_fractions(["1"])


class TestLazyTable:
    """Тесты ленивого построения таблицы"""

    def test_table_built_once_under_concurrency(self) -> None:
        converter = make_converter(2, 256)

        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: converter.conversion_table, range(32)))

        assert all(table is tables[0] for table in tables)
        assert tables[0].block_size == 8

    def test_concurrent_conversions_agree(self) -> None:
        converter = make_converter(16, 4)
        number = list("DEADBEEF")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: converter.convert_integer(number), range(32)))

        assert all(result == results[0] for result in results)
        assert "".join(results[0]) == "3132223123323233"
