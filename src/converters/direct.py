"""DirectConverter — прямое деление в столбик без десятичного промежуточного числа

Число делится на target radix "в столбик" прямо в source системе: каждый
проход даёт одну младшую цифру результата, частное переходит в следующий
проход. Все промежуточные значения — обычные машинные целые, поэтому
стратегия отказывается заранее, если аккумулятор может превысить
нативный потолок (по умолчанию 2^31, знаковое 32-битное целое).

Проверка переполнения:
    digits = min d: source^d >= target  (цифр на одну цифру результата)
    tops = Σ source^i, i < digits
    переполнение возможно, если tops * (source - 1) > ceiling

Только целые числа: дробная часть не поддерживается (отказ).
"""

from dataclasses import dataclass
from typing import Final, Optional, Sequence

from src.converters.base import AbstractConverter
from src.core.domain.errors import StrategyInapplicable
from src.core.domain.numeral_system import NumeralSystem

# Знаковое 32-битное целое: потолок безопасного нативного аккумулятора
NATIVE_INT_CEILING_DEFAULT: Final[int] = 2 ** 31


@dataclass(frozen=True)
class DirectConverterConfig:
    """Конфигурация DirectConverter."""

    native_int_ceiling: int = NATIVE_INT_CEILING_DEFAULT

    def __post_init__(self) -> None:
        if self.native_int_ceiling < 1:
            raise ValueError(
                f"native_int_ceiling must be positive, got {self.native_int_ceiling}"
            )


def can_overflow(source_radix: int, target_radix: int, ceiling: int) -> bool:
    """Возможно ли переполнение нативного аккумулятора при делении в столбик.

    Args:
        source_radix: основание делимого
        target_radix: делитель (основание результата)
        ceiling: нативный потолок целых

    Returns:
        True если переполнение возможно

    Examples:
        >>> can_overflow(16, 2, 2 ** 31)
        False
        >>> can_overflow(131072, 131073, 2 ** 31)
        True
    """
    digits = 1
    power = source_radix
    while power < target_radix:
        power *= source_radix
        digits += 1

    tops = 0
    for i in range(digits):
        tops += source_radix ** i
        if tops * (source_radix - 1) > ceiling:
            return True

    return False


class DirectConverter(AbstractConverter):
    """Деление в столбик в нативных целых (только целая часть)."""

    name = "direct"

    def __init__(
        self,
        source: NumeralSystem,
        target: NumeralSystem,
        config: Optional[DirectConverterConfig] = None,
    ):
        super().__init__(source, target)
        self.config = config or DirectConverterConfig()
        self._overflow = can_overflow(
            source.radix, target.radix, self.config.native_int_ceiling
        )

    def decline_reason(self, digits: Sequence, fractions: bool) -> Optional[str]:
        if fractions:
            return "fractions are not supported by direct conversion"
        if self._overflow:
            return (
                f"possible native integer overflow converting base "
                f"{self.source.radix} to base {self.target.radix}"
            )
        return None

    def _convert_integer(self, digits: list) -> list:
        number = self.source.get_values(digits)
        source_radix = self.source.radix
        target_radix = self.target.radix
        result = []

        while True:
            remainder = 0
            quotient = []

            for value in number:
                remainder = value + remainder * source_radix

                if remainder >= target_radix:
                    digit, remainder = divmod(remainder, target_radix)
                    quotient.append(digit)
                elif quotient:
                    quotient.append(0)

            result.append(remainder)
            number = quotient

            if not number:
                break

        return self.target.get_digits(result[::-1])

    def _convert_fractions(self, digits: list) -> list:
        raise StrategyInapplicable(self.name, "fractions are not supported by direct conversion")
