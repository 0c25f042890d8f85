"""
Errors — иерархия исключений конвертации систем счисления

Все исключения библиотеки наследуются от BaseConversionError.

КЛАССИФИКАЦИЯ:
1. NumeralSystemConfigurationError — фатальная, при создании системы счисления
2. InvalidDigitError — фатальная для конкретного вызова, без повторов
3. StrategyInapplicable — восстанавливаемая, dispatcher переходит к следующей стратегии
4. ExhaustedStrategies — фатальная, ни одна стратегия не подошла (ошибка конфигурации)
"""


class BaseConversionError(Exception):
    """Базовое исключение для всех ошибок конвертации."""


class NumeralSystemConfigurationError(BaseConversionError, ValueError):
    """
    Невалидная система счисления.

    Возникает при radix < 2, дублирующихся цифрах или пропущенных значениях
    цифр (значения должны образовывать биекцию 0..radix-1).
    """


class InvalidDigitError(BaseConversionError, ValueError):
    """Цифра отсутствует в системе счисления (или значение вне [0, radix))."""

    def __init__(self, digit: object, message: str = "") -> None:
        self.digit = digit
        super().__init__(message or f"The digit {digit!r} does not exist")


class StringRepresentationError(BaseConversionError, ValueError):
    """Алфавит не допускает однозначной токенизации строк (string conflict)."""


class ConversionError(BaseConversionError, RuntimeError):
    """Базовая ошибка выполнения конвертации."""


class StrategyInapplicable(ConversionError):
    """
    Стратегия не может обработать данную комбинацию (source, target, number).

    Восстанавливаемая: перехватывается dispatcher'ом, который переходит
    к следующей стратегии цепочки.
    """

    def __init__(self, strategy: str, reason: str) -> None:
        self.strategy = strategy
        self.reason = reason
        super().__init__(f"{strategy} is not applicable: {reason}")


class ExhaustedStrategies(ConversionError):
    """Ни одна из сконфигурированных стратегий не выполнила конвертацию."""

    def __init__(self, part: str, attempted: list[str]) -> None:
        self.part = part
        self.attempted = attempted
        names = ", ".join(attempted) if attempted else "<none>"
        super().__init__(
            f"No conversion strategy could convert the {part} part "
            f"(attempted: {names})"
        )
