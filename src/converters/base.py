"""AbstractConverter — общий контракт стратегий конвертации

Каждая стратегия конвертирует целую часть (convert_integer) и дробную часть
(convert_fractions) числа из source в target систему счисления, либо
отказывается (StrategyInapplicable).

Отказ проверяется заранее через capability-query:
- can_convert_integer(digits)
- can_convert_fractions(digits)

Dispatcher опрашивает стратегии в порядке приоритета и вызывает первую,
которая не отказалась. convert_* при неприменимости всё равно бросает
StrategyInapplicable, так что прямой вызов стратегии безопасен.

Порядок цифр: старшая цифра первой (порядок записи числа).
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from src.core.domain.errors import StrategyInapplicable
from src.core.domain.numeral_system import NumeralSystem


# Precision по умолчанию: точность исходного числа + 1 цифра
DEFAULT_PRECISION = -1


class AbstractConverter(ABC):
    """Базовая стратегия конвертации между двумя системами счисления."""

    name = "abstract"

    def __init__(self, source: NumeralSystem, target: NumeralSystem):
        """
        Args:
            source: система счисления входных чисел
            target: система счисления результата
        """
        self.source = source
        self.target = target
        self._precision = DEFAULT_PRECISION

    # =========================================================================
    # PRECISION
    # =========================================================================

    @property
    def precision(self) -> int:
        return self._precision

    def set_precision(self, precision: int) -> None:
        """Установка точности для неточной конвертации дробной части.

        - precision > 0: ровно precision цифр
        - precision == 0: не меньше точности исходного числа
        - precision < 0: точность исходного числа + |precision| цифр

        Стратегии с точной конвертацией дробей игнорируют precision.
        """
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise ValueError(f"precision must be an integer, got {precision!r}")
        self._precision = precision

    # =========================================================================
    # CAPABILITY QUERY
    # =========================================================================

    def can_convert_integer(self, digits: Sequence) -> bool:
        return self.decline_reason(digits, fractions=False) is None

    def can_convert_fractions(self, digits: Sequence) -> bool:
        return self.decline_reason(digits, fractions=True) is None

    def decline_reason(self, digits: Sequence, fractions: bool) -> Optional[str]:
        """Причина отказа стратегии или None, если стратегия применима.

        Args:
            digits: цифры числа (старшая первой)
            fractions: True для дробной части
        """
        return None

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def convert_integer(self, digits: Sequence) -> list:
        """Конвертация целой части.

        Raises:
            StrategyInapplicable: стратегия не может обработать число
            InvalidDigitError: цифра не принадлежит source системе
        """
        self._verify(digits, fractions=False)
        return self._convert_integer(list(digits))

    def convert_fractions(self, digits: Sequence) -> list:
        """Конвертация дробной части (цифры после разделителя).

        Raises:
            StrategyInapplicable: стратегия не может обработать число
            InvalidDigitError: цифра не принадлежит source системе
        """
        self._verify(digits, fractions=True)
        return self._convert_fractions(list(digits))

    def _verify(self, digits: Sequence, fractions: bool) -> None:
        reason = self.decline_reason(digits, fractions)
        if reason is not None:
            raise StrategyInapplicable(self.name, reason)

    @abstractmethod
    def _convert_integer(self, digits: list) -> list:
        ...

    @abstractmethod
    def _convert_fractions(self, digits: list) -> list:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r} -> {self.target!r})"
