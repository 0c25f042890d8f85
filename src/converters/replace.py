"""ReplaceConverter — структурная конвертация заменой блоков цифр

Если одно основание — точная целая степень другого (large = small^k), то
каждый блок из k цифр меньшей системы однозначно соответствует одной цифре
большей системы. Конвертация сводится к замене блоков по таблице без
арифметики:
- Целые: дополнение нулями слева до кратности k, замена, обрезка ведущих нулей
- Дроби: дополнение нулями справа до кратности k, замена, обрезка хвостовых нулей

Если общий корень r меньше обоих оснований (например, 8 и 32, r = 2),
конвертация идёт через промежуточную систему с основанием r: две замены
блоков, по-прежнему O(n).

Стратегия неприменима, если общего целого корня нет (5 и 20).

Таблицы строятся лениво при первом использовании и кэшируются на экземпляре
стратегии. Первое построение сериализовано блокировкой, после публикации
таблица только читается.
"""

import logging
import threading
from typing import Optional, Sequence

from src.converters.base import AbstractConverter
from src.core.domain.numeral_system import NumeralSystem
from src.core.math.radix import exact_log

logger = logging.getLogger(__name__)


# =============================================================================
# CONVERSION TABLE
# =============================================================================


class ConversionTable:
    """Биекция между блоками из k цифр малой системы и цифрами большой.

    Значения хранятся как значения цифр (int), блок — кортеж значений,
    старшая цифра первой.
    """

    def __init__(self, small_radix: int, large_radix: int):
        block_size = exact_log(large_radix, small_radix)
        if block_size is None:
            raise ValueError(
                f"{large_radix} is not an exact integer power of {small_radix}"
            )

        self.small_radix = small_radix
        self.large_radix = large_radix
        self.block_size = block_size
        self._blocks = self._build_blocks()
        self._values = {block: value for value, block in enumerate(self._blocks)}

    def _build_blocks(self) -> tuple[tuple[int, ...], ...]:
        # Перебор блоков "одометром": инкремент младшего разряда с переносом
        last = self.small_radix - 1
        block = [0] * self.block_size
        blocks = [tuple(block)]

        for _ in range(1, self.large_radix):
            j = self.block_size - 1
            while block[j] == last:
                block[j] = 0
                j -= 1
            block[j] += 1
            blocks.append(tuple(block))

        return tuple(blocks)

    def to_block(self, value: int) -> tuple[int, ...]:
        """Цифра большой системы → блок цифр малой системы."""
        return self._blocks[value]

    def to_value(self, block: Sequence[int]) -> int:
        """Блок цифр малой системы → цифра большой системы."""
        return self._values[tuple(block)]

    def __len__(self) -> int:
        return self.large_radix


# =============================================================================
# REPLACE CONVERTER
# =============================================================================


class ReplaceConverter(AbstractConverter):
    """Конвертация заменой блоков цифр через общий корень оснований."""

    name = "replace"

    def __init__(self, source: NumeralSystem, target: NumeralSystem):
        super().__init__(source, target)
        self.root: Optional[int] = source.find_common_radix_root(target)

        self._lock = threading.Lock()
        self._table: Optional[ConversionTable] = None
        self._via: Optional[tuple["ReplaceConverter", "ReplaceConverter"]] = None

    def decline_reason(self, digits: Sequence, fractions: bool) -> Optional[str]:
        if self.root is None:
            return (
                f"no common radix root between base {self.source.radix} "
                f"and base {self.target.radix}"
            )
        return None

    # =========================================================================
    # LAZY STATE
    # =========================================================================

    @property
    def conversion_table(self) -> ConversionTable:
        """Таблица замены для пары (source, target), строится один раз.

        Доступна только если одно основание — степень другого.
        """
        if self._table is None:
            with self._lock:
                if self._table is None:
                    small = min(self.source.radix, self.target.radix)
                    large = max(self.source.radix, self.target.radix)
                    logger.debug("Building conversion table %d <-> %d", small, large)
                    self._table = ConversionTable(small, large)
        return self._table

    def _intermediate(self) -> tuple["ReplaceConverter", "ReplaceConverter"]:
        if self._via is None:
            with self._lock:
                if self._via is None:
                    proxy = NumeralSystem(self.root)
                    self._via = (
                        ReplaceConverter(self.source, proxy),
                        ReplaceConverter(proxy, self.target),
                    )
        return self._via

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def _convert_integer(self, digits: list) -> list:
        return self._convert(digits, fractions=False)

    def _convert_fractions(self, digits: list) -> list:
        return self._convert(digits, fractions=True)

    def _convert(self, digits: list, fractions: bool) -> list:
        if not digits:
            return [self.target.get_digit(0)]

        values = self.source.get_values(digits)

        if self.source.radix == self.target.radix:
            return self.target.get_digits(_trim_zeros(values, trailing=fractions))

        if self.root == min(self.source.radix, self.target.radix):
            return self.target.get_digits(self._replace(values, fractions))

        to_root, from_root = self._intermediate()
        return self.target.get_digits(
            from_root._replace(to_root._replace(values, fractions), fractions)
        )

    def _replace(self, values: list[int], fractions: bool) -> list[int]:
        """Замена блоков значений (старшая цифра первой) с обрезкой нулей."""
        table = self.conversion_table
        size = table.block_size

        if self.source.radix < self.target.radix:
            if len(values) % size:
                padding = [0] * (size - len(values) % size)
                values = values + padding if fractions else padding + values

            result = [
                table.to_value(values[i:i + size])
                for i in range(0, len(values), size)
            ]
        else:
            result = []
            for value in values:
                result.extend(table.to_block(value))

        return _trim_zeros(result, trailing=fractions)


def _trim_zeros(values: list[int], trailing: bool) -> list[int]:
    """Обрезка незначащих нулей: хвостовых (дроби) или ведущих (целые)."""
    if trailing:
        end = len(values)
        while end > 0 and values[end - 1] == 0:
            end -= 1
        trimmed = values[:end]
    else:
        start = 0
        while start < len(values) and values[start] == 0:
            start += 1
        trimmed = values[start:]

    return trimmed if trimmed else [0]
