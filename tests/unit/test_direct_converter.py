"""
Тесты для DirectConverter

Проверяет:
1. Деление в столбик прямо в source системе
2. Отказ для дробной части
3. Отказ при возможном переполнении нативного аккумулятора
4. Конфигурацию потолка (DirectConverterConfig)
"""

import pytest

from src.converters import DirectConverter, DirectConverterConfig, can_overflow
from src.core.domain.errors import StrategyInapplicable
from src.core.domain.numeral_system import NumeralSystem


def make_converter(source, target, config=None) -> DirectConverter:
    return DirectConverter(NumeralSystem(source), NumeralSystem(target), config)


class TestIntegerConversion:
    """Тесты конвертации целой части"""

    @pytest.mark.parametrize(
        "source,target,number,expected",
        [
            (16, 2, "A09FF", "10100000100111111111"),
            (10, 16, "255", "FF"),
            (8, 10, "111", "73"),
            (10, 16, "0073", "49"),
            (13, 23, "1337331", "LDE2D"),
            (2, 10, "1" * 64, str(2 ** 64 - 1)),
        ],
    )
    def test_convert(self, source, target, number, expected) -> None:
        converter = make_converter(source, target)
        assert converter.convert_integer(list(number)) == list(expected)

    def test_zero(self) -> None:
        assert make_converter(10, 2).convert_integer(["0"]) == ["0"]
        assert make_converter(10, 2).convert_integer([]) == ["0"]


class TestApplicability:
    """Тесты отказа стратегии"""

    def test_declines_fractions(self) -> None:
        converter = make_converter(10, 2)
        assert converter.can_convert_integer(["1"])
        assert not converter.can_convert_fractions(["1"])

        with pytest.raises(StrategyInapplicable, match="fractions are not supported"):
            converter.convert_fractions(["1"])

    def test_fraction_hook_follows_strategy_contract(self) -> None:
        """Прямой вызов реализации дробей тоже отказывает через StrategyInapplicable"""
        converter = make_converter(10, 2)
        with pytest.raises(StrategyInapplicable) as exc_info:
            converter._convert_fractions(["1"])
        assert exc_info.value.strategy == "direct"

    def test_declines_possible_overflow(self) -> None:
        converter = make_converter(131072, 131073)
        assert not converter.can_convert_integer(["#000001"])

        with pytest.raises(StrategyInapplicable, match="overflow"):
            converter.convert_integer(["#000001"])

    @pytest.mark.parametrize(
        "source,target,ceiling,expected",
        [
            (16, 2, 2 ** 31, False),
            (10, 16, 2 ** 31, False),
            (131072, 131073, 2 ** 31, True),
            (131072, 131073, 2 ** 63, False),
            (16, 2, 10, True),
        ],
    )
    def test_can_overflow(self, source, target, ceiling, expected) -> None:
        assert can_overflow(source, target, ceiling) is expected

    def test_configurable_ceiling(self) -> None:
        config = DirectConverterConfig(native_int_ceiling=2 ** 63)
        converter = make_converter(131072, 131073, config)
        assert converter.can_convert_integer(["#000001"])
        assert converter.convert_integer(["#131071"]) == ["#131071"]

    def test_invalid_ceiling_rejected(self) -> None:
        with pytest.raises(ValueError, match="native_int_ceiling must be positive"):
            DirectConverterConfig(native_int_ceiling=0)
