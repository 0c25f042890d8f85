"""DecimalConverter — конвертация через целое произвольной точности

Универсальная стратегия (применима всегда):
- Целые: число переводится в целое бэкенда (взвешенная сумма цифр),
  затем повторным делением на target radix извлекаются цифры результата
- Дроби: дробь = dividend / source^n; на каждом шаге dividend * target
  делится на divisor, частное — очередная цифра, остаток — новый dividend

Количество цифр дробной части (бюджет):
- precision > 0: ровно precision
- precision <= 0: min d: target^d > source^n, плюс |precision|

Генерируется не более budget + 1 цифр; если остаток обнулился раньше,
результат точный и не округляется. Иначе последняя (лишняя) цифра
отбрасывается с округлением (см. radix.round_fraction_digits).

Арифметика выполняется через подключаемый IntegerBackend
(NativeIntegerBackend по умолчанию, DecimalStringBackend — чистый движок).
"""

from typing import Any, Optional

from src.converters.base import AbstractConverter
from src.core.domain.numeral_system import NumeralSystem
from src.core.math.integer_backends import IntegerBackend, NativeIntegerBackend
from src.core.math.radix import round_fraction_digits

DECIMAL_RADIX = 10


class DecimalConverter(AbstractConverter):
    """Конвертация через промежуточное целое произвольной точности."""

    def __init__(
        self,
        source: NumeralSystem,
        target: NumeralSystem,
        backend: Optional[IntegerBackend] = None,
    ):
        super().__init__(source, target)
        self.backend = backend or NativeIntegerBackend()

    @property
    def name(self) -> str:
        return f"decimal[{self.backend.name}]"

    # =========================================================================
    # INTEGER
    # =========================================================================

    def _convert_integer(self, digits: list) -> list:
        decimal = self._to_decimal(self.source.get_values(digits))
        return self.target.get_digits(self._to_base(decimal))

    def _to_decimal(self, values: list[int]) -> Any:
        """Значения цифр (старшая первой) → целое бэкенда."""
        backend = self.backend

        if self.source.radix == DECIMAL_RADIX:
            return backend.init("".join(map(str, values)) or "0")

        radix = backend.init(self.source.radix)
        decimal = backend.init(0)
        weight = backend.init(1)

        for value in reversed(values):
            if value:
                decimal = backend.add(decimal, backend.mul(backend.init(value), weight))
            weight = backend.mul(weight, radix)

        return decimal

    def _to_base(self, decimal: Any) -> list[int]:
        """Целое бэкенда → значения цифр target системы (старшая первой)."""
        backend = self.backend

        if self.target.radix == DECIMAL_RADIX:
            return [int(char) for char in backend.to_str(decimal)]

        zero = backend.init(0)
        radix = backend.init(self.target.radix)
        result = []

        while backend.cmp(decimal, zero) > 0:
            decimal, modulo = backend.divmod(decimal, radix)
            result.append(backend.to_int(modulo))

        return result[::-1] if result else [0]

    # =========================================================================
    # FRACTIONS
    # =========================================================================

    def _convert_fractions(self, digits: list) -> list:
        backend = self.backend
        values = self.source.get_values(digits)
        target = backend.init(self.target.radix)
        zero = backend.init(0)

        dividend = self._to_decimal(values)
        divisor = backend.pow(backend.init(self.source.radix), len(values))
        budget = self.fraction_digit_budget(len(values))
        result = []

        while len(result) <= budget and backend.cmp(dividend, zero) > 0:
            digit, dividend = backend.divmod(backend.mul(dividend, target), divisor)
            result.append(backend.to_int(digit))

        if len(result) > budget:
            result = round_fraction_digits(result, self.target.radix)

        return self.target.get_digits(result if result else [0])

    def fraction_digit_budget(self, count: int) -> int:
        """Количество цифр дробной части в target системе.

        Args:
            count: количество цифр дробной части в source системе

        Returns:
            precision, если precision > 0; иначе min d: target^d > source^count,
            увеличенное на |precision|
        """
        if self.precision > 0:
            return self.precision

        backend = self.backend
        target = backend.init(self.target.radix)
        max_fraction = backend.pow(backend.init(self.source.radix), count)
        target_fraction = target
        digits = 1

        while backend.cmp(target_fraction, max_fraction) <= 0:
            target_fraction = backend.mul(target_fraction, target)
            digits += 1

        return digits + abs(self.precision)
