"""BaseConverter — dispatcher цепочки стратегий конвертации

Полная конвертация числа со знаком и дробной частью:
1. Знак: ведущий "+"/"-" отделяется, только если сам не является цифрой source
2. Разделитель дробной части: "." отделяется по тому же правилу
3. Целая часть и дробная часть (если есть) независимо проходят цепочку
   стратегий: первая не отказавшаяся стратегия выполняет конвертацию
4. Результат: знак + целая часть + разделитель + дробная часть

Порядок стратегий по умолчанию:
1. ReplaceConverter (самая быстрая, точная, без арифметики)
2. DecimalConverter на первом доступном бэкенде (встроенный int)
3. DirectConverter (нативные целые, только целые числа)
4. DecimalConverter на остальных бэкендах (чистый движок bignum)

Если все стратегии отказались → ExhaustedStrategies (ошибка конфигурации:
в цепочке нет универсально применимой стратегии).
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence, Union

from src.converters import (
    AbstractConverter,
    DecimalConverter,
    DirectConverter,
    ReplaceConverter,
)
from src.converters.base import DEFAULT_PRECISION
from src.core.domain.errors import ExhaustedStrategies, StrategyInapplicable
from src.core.domain.numeral_system import NumberBaseSpec, NumeralSystem
from src.core.math.integer_backends import DEFAULT_BACKENDS

logger = logging.getLogger(__name__)

StrategyFactory = Callable[[NumeralSystem, NumeralSystem], AbstractConverter]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BaseConverterConfig:
    """Конфигурация dispatcher'а."""

    precision: int = DEFAULT_PRECISION
    sign_glyphs: tuple[str, ...] = ("+", "-")
    fraction_separator: str = "."

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer, got {self.precision!r}")
        if any(not glyph for glyph in self.sign_glyphs):
            raise ValueError("sign glyphs must be non-empty strings")
        if not self.fraction_separator:
            raise ValueError("fraction_separator must be a non-empty string")
        if self.fraction_separator in self.sign_glyphs:
            raise ValueError(
                f"fraction_separator {self.fraction_separator!r} clashes with a sign glyph"
            )


def default_strategies() -> tuple[StrategyFactory, ...]:
    """Фабрики стратегий в порядке приоритета по умолчанию."""
    preferred, *fallbacks = DEFAULT_BACKENDS

    return (
        ReplaceConverter,
        partial(DecimalConverter, backend=preferred),
        DirectConverter,
        *(partial(DecimalConverter, backend=backend) for backend in fallbacks),
    )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionTrace:
    """Результат конвертации с указанием сработавших стратегий."""

    result: Union[str, list]
    integer_strategy: str
    fraction_strategy: Optional[str]


@dataclass(frozen=True)
class _ParsedNumber:
    sign: Optional[object]
    integer: list
    fractions: Optional[list]


# =============================================================================
# DISPATCHER
# =============================================================================


class BaseConverter:
    """Конвертер чисел произвольного размера между системами счисления.

    Examples:
        >>> BaseConverter(16, 2).convert("A09FF")
        '10100000100111111111'
        >>> BaseConverter(10, 2).convert("-87")
        '-1010111'
    """

    def __init__(
        self,
        source: Union[NumeralSystem, NumberBaseSpec],
        target: Union[NumeralSystem, NumberBaseSpec],
        strategies: Optional[Sequence[StrategyFactory]] = None,
        config: Optional[BaseConverterConfig] = None,
    ):
        """
        Args:
            source: система счисления входных чисел (или аргумент NumeralSystem)
            target: система счисления результата (или аргумент NumeralSystem)
            strategies: фабрики стратегий в порядке приоритета
                (по умолчанию default_strategies())
            config: конфигурация знака, разделителя и precision
        """
        self.source = source if isinstance(source, NumeralSystem) else NumeralSystem(source)
        self.target = target if isinstance(target, NumeralSystem) else NumeralSystem(target)
        self.config = config or BaseConverterConfig()

        factories = default_strategies() if strategies is None else tuple(strategies)
        self._strategies: tuple[AbstractConverter, ...] = tuple(
            factory(self.source, self.target) for factory in factories
        )
        self.set_precision(self.config.precision)

    @property
    def strategies(self) -> tuple[AbstractConverter, ...]:
        return self._strategies

    @property
    def precision(self) -> int:
        return self._precision

    def set_precision(self, precision: int) -> None:
        """Точность дробной части (см. AbstractConverter.set_precision)."""
        for strategy in self._strategies:
            strategy.set_precision(precision)
        self._precision = precision

    # =========================================================================
    # PARTS
    # =========================================================================

    def convert_integer(self, digits: Sequence) -> list:
        """Конвертация целой части (цифры старшая первой)."""
        return self._run_chain(digits, fractions=False)[0]

    def convert_fractions(self, digits: Sequence) -> list:
        """Конвертация дробной части (цифры после разделителя)."""
        return self._run_chain(digits, fractions=True)[0]

    def _run_chain(self, digits: Sequence, fractions: bool) -> tuple[list, str]:
        part = "fraction" if fractions else "integer"
        attempted = []

        for strategy in self._strategies:
            attempted.append(strategy.name)
            reason = strategy.decline_reason(digits, fractions)

            if reason is not None:
                logger.debug("%s declined the %s part: %s", strategy.name, part, reason)
                continue

            try:
                if fractions:
                    result = strategy.convert_fractions(digits)
                else:
                    result = strategy.convert_integer(digits)
            except StrategyInapplicable as exc:
                logger.debug("%s declined the %s part: %s", strategy.name, part, exc.reason)
                continue

            logger.debug("%s converted the %s part", strategy.name, part)
            return result, strategy.name

        logger.error(
            "No strategy converted the %s part from base %d to base %d",
            part, self.source.radix, self.target.radix,
        )
        raise ExhaustedStrategies(part, attempted)

    # =========================================================================
    # FULL NUMBER
    # =========================================================================

    def convert(self, number: Union[str, Sequence]) -> Union[str, list]:
        """Конвертация числа со знаком и дробной частью.

        Строка на входе → строка на выходе (требует отсутствия string
        conflict у обеих систем); последовательность цифр → список.

        Raises:
            InvalidDigitError: число содержит чужую цифру
            StringRepresentationError: алфавит не допускает строк
            ExhaustedStrategies: ни одна стратегия не подошла
        """
        return self.convert_traced(number).result

    def convert_traced(self, number: Union[str, Sequence]) -> ConversionTrace:
        """То же, что convert, плюс имена сработавших стратегий."""
        if isinstance(number, str):
            parsed = self._parse_text(number)
        else:
            parsed = self._parse_sequence(list(number))

        integer, integer_strategy = self._run_chain(parsed.integer, fractions=False)
        fractions, fraction_strategy = None, None
        if parsed.fractions is not None:
            fractions, fraction_strategy = self._run_chain(parsed.fractions, fractions=True)

        if isinstance(number, str):
            result = self._format_text(parsed.sign, integer, fractions)
        else:
            result = self._format_sequence(parsed.sign, integer, fractions)

        return ConversionTrace(
            result=result,
            integer_strategy=integer_strategy,
            fraction_strategy=fraction_strategy,
        )

    def _parse_text(self, number: str) -> _ParsedNumber:
        sign = None
        for glyph in self.config.sign_glyphs:
            if number.startswith(glyph) and not self.source.has_digit(glyph):
                sign = glyph
                number = number[len(glyph):]
                break

        separator = self.config.fraction_separator
        fractions = None
        if separator in number and not self.source.has_digit(separator):
            number, fraction_text = number.split(separator, 1)
            fractions = self.source.split_string(fraction_text)

        return _ParsedNumber(sign, self.source.split_string(number), fractions)

    def _parse_sequence(self, items: list) -> _ParsedNumber:
        sign = None
        if items and self._is_glyph(items[0], self.config.sign_glyphs):
            sign = items[0]
            items = items[1:]

        separator = self.config.fraction_separator
        for position, item in enumerate(items):
            if self._is_glyph(item, (separator,)):
                return _ParsedNumber(sign, items[:position], items[position + 1:])

        return _ParsedNumber(sign, items, None)

    def _is_glyph(self, item: object, glyphs: tuple[str, ...]) -> bool:
        return isinstance(item, str) and item in glyphs and not self.source.has_digit(item)

    def _format_text(self, sign: Optional[str], integer: list, fractions: Optional[list]) -> str:
        text = (sign or "") + self.target.join_digits(integer)
        if fractions is not None:
            text += self.config.fraction_separator + self.target.join_digits(fractions)
        return text

    def _format_sequence(self, sign: Optional[object], integer: list, fractions: Optional[list]) -> list:
        result = [sign] if sign is not None else []
        result.extend(integer)
        if fractions is not None:
            result.append(self.config.fraction_separator)
            result.extend(fractions)
        return result

    def __repr__(self) -> str:
        names = ", ".join(strategy.name for strategy in self._strategies)
        return f"BaseConverter({self.source!r} -> {self.target!r}, strategies=[{names}])"


# =============================================================================
# CONVENIENCE
# =============================================================================


def base_convert(
    number: Union[str, Sequence],
    from_base: Union[NumeralSystem, NumberBaseSpec],
    to_base: Union[NumeralSystem, NumberBaseSpec],
    precision: int = DEFAULT_PRECISION,
) -> Union[str, list]:
    """Однократная конвертация числа между системами счисления.

    Examples:
        >>> base_convert("ff", 16, 10)
        '255'
        >>> base_convert("3.14", 10, 2, precision=9)
        '11.001001000'
    """
    converter = BaseConverter(from_base, to_base)
    converter.set_precision(precision)
    return converter.convert(number)
