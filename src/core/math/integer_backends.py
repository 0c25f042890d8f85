"""
Integer Backends — подключаемые бэкенды целочисленной арифметики

DecimalConverter выполняет все вычисления через бэкенд, реализующий
протокол IntegerBackend (add / mul / pow / divmod / cmp над неотрицательными
целыми произвольной точности).

Бэкенды:
- NativeIntegerBackend: встроенный int Python (произвольная точность, быстрый)
- DecimalStringBackend: чистый движок над десятичными строками (bignum)

Выбор бэкендов выполняется один раз при импорте модуля (available_backends):
порядок — от ожидаемо более быстрого к более медленному.
"""

from typing import Any, Protocol, Union, runtime_checkable

from src.core.math import bignum


@runtime_checkable
class IntegerBackend(Protocol):
    """Протокол бэкенда целочисленной арифметики произвольной точности."""

    name: str

    def is_supported(self) -> bool:
        """Доступен ли бэкенд в текущем окружении."""
        ...

    def init(self, value: Union[int, str]) -> Any:
        """Создание числа бэкенда из int или десятичной строки."""
        ...

    def to_int(self, value: Any) -> int:
        """Преобразование (малого) числа бэкенда в int."""
        ...

    def to_str(self, value: Any) -> str:
        """Десятичная строка числа бэкенда."""
        ...

    def add(self, a: Any, b: Any) -> Any:
        ...

    def mul(self, a: Any, b: Any) -> Any:
        ...

    def pow(self, a: Any, exponent: int) -> Any:
        ...

    def divmod(self, a: Any, b: Any) -> tuple[Any, Any]:
        ...

    def cmp(self, a: Any, b: Any) -> int:
        ...


class NativeIntegerBackend:
    """Бэкенд на встроенном int (произвольная точность средствами языка)."""

    name = "native"

    def is_supported(self) -> bool:
        return True

    def init(self, value: Union[int, str]) -> int:
        return int(bignum.normalize(value))

    def to_int(self, value: int) -> int:
        return value

    def to_str(self, value: int) -> str:
        return str(value)

    def add(self, a: int, b: int) -> int:
        return a + b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def pow(self, a: int, exponent: int) -> int:
        return a ** exponent

    def divmod(self, a: int, b: int) -> tuple[int, int]:
        return divmod(a, b)

    def cmp(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def __repr__(self) -> str:
        return "NativeIntegerBackend()"


class DecimalStringBackend:
    """
    Бэкенд на чистом движке bignum.

    Числа — нормализованные десятичные строки; все операции делегируются
    src.core.math.bignum.
    """

    name = "decimal-string"

    def is_supported(self) -> bool:
        return True

    def init(self, value: Union[int, str]) -> str:
        return bignum.normalize(value)

    def to_int(self, value: str) -> int:
        return int(value)

    def to_str(self, value: str) -> str:
        return value

    def add(self, a: str, b: str) -> str:
        return bignum.add(a, b)

    def mul(self, a: str, b: str) -> str:
        return bignum.multiply(a, b)

    def pow(self, a: str, exponent: int) -> str:
        return bignum.power(a, exponent)

    def divmod(self, a: str, b: str) -> tuple[str, str]:
        return bignum.divide(a, b)

    def cmp(self, a: str, b: str) -> int:
        return bignum.compare(a, b)

    def __repr__(self) -> str:
        return "DecimalStringBackend()"


def available_backends() -> tuple[IntegerBackend, ...]:
    """
    Доступные бэкенды в порядке предпочтения.

    Returns:
        Кортеж бэкендов, для которых is_supported() == True
    """
    candidates: tuple[IntegerBackend, ...] = (
        NativeIntegerBackend(),
        DecimalStringBackend(),
    )
    return tuple(backend for backend in candidates if backend.is_supported())


# Выбор выполняется один раз при импорте
DEFAULT_BACKENDS: tuple[IntegerBackend, ...] = available_backends()
