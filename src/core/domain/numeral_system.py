"""
NumeralSystem — позиционная система счисления

Система счисления = radix (количество уникальных цифр) + упорядоченный список
цифр. Значение цифры — её индекс в списке. Цифры могут быть любыми hashable
значениями (символы, строки, байты, целые, opaque объекты).

Способы задания:
- int: radix, алфавит выбирается канонически (см. digits.default_alphabet)
- str / bytes: каждый символ (байт) — отдельная цифра
- Sequence: список цифр, индекс = значение
- Mapping: {значение: цифра}, ключи обязаны покрывать ровно 0..n-1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения цифр образуют точную биекцию 0..radix-1, radix >= 2
2. Текстовые формы цифр уникальны (0 и "0" — дубликаты, отклоняются сразу)
3. Регистронезависимый поиск только если алфавит не конфликтует при case-folding
4. Строковое представление чисел запрещено при string conflict (одна цифра —
   подстрока другой или есть opaque цифры)
5. Экземпляр неизменяем после создания
"""

import re
from collections.abc import Mapping, Sequence
from typing import Hashable, Optional, Union

from src.core.domain.digits import default_alphabet, digit_text
from src.core.domain.errors import (
    InvalidDigitError,
    NumeralSystemConfigurationError,
    StringRepresentationError,
)
from src.core.math.radix import find_common_root

NumberBaseSpec = Union[int, str, bytes, Sequence, Mapping]


class NumeralSystem:
    """
    Позиционная система счисления с произвольным алфавитом.

    Examples:
        >>> hexadecimal = NumeralSystem(16)
        >>> hexadecimal.get_value("f")
        15
        >>> NumeralSystem("01").get_digit(1)
        '1'
    """

    def __init__(self, number_base: NumberBaseSpec) -> None:
        """
        Args:
            number_base: radix (int), строка цифр, список цифр или
                отображение {значение: цифра}

        Raises:
            NumeralSystemConfigurationError: radix < 2, дубликаты цифр,
                пропущенные значения или неподдерживаемый тип
        """
        if isinstance(number_base, NumeralSystem):
            digits = list(number_base.digit_list)
        elif isinstance(number_base, bool):
            raise NumeralSystemConfigurationError("Unexpected number base type: bool")
        elif isinstance(number_base, int):
            digits = self._digits_from_radix(number_base)
        elif isinstance(number_base, str):
            digits = self._digits_from_string(number_base)
        elif isinstance(number_base, bytes):
            digits = self._digits_from_bytes(number_base)
        elif isinstance(number_base, Mapping):
            digits = self._digits_from_mapping(number_base)
        elif isinstance(number_base, Sequence):
            digits = list(number_base)
        else:
            raise NumeralSystemConfigurationError(
                f"Unexpected number base type: {type(number_base).__name__}"
            )

        self._digits: tuple[Hashable, ...] = tuple(digits)
        self._radix = len(self._digits)

        if self._radix < 2:
            raise NumeralSystemConfigurationError(
                f"Number base must have at least 2 digits, got {self._radix}"
            )

        self._value_map = self._build_value_map(self._digits)
        self._texts: list[Optional[str]] = [digit_text(d) for d in self._digits]
        self._text_map = self._build_text_map(self._texts)

        self._fixed_width = self._detect_fixed_width(self._texts)
        self._string_conflict = self._detect_string_conflict(self._texts)
        self._case_sensitive = self._detect_case_sensitivity(self._texts)

        self._folded_map: dict[str, int] = {}
        if not self._case_sensitive:
            self._folded_map = {
                text.lower(): value
                for value, text in enumerate(self._texts)
                if text is not None
            }

        self._splitter = self._build_splitter()

    # =========================================================================
    # ПОСТРОЕНИЕ АЛФАВИТА
    # =========================================================================

    @staticmethod
    def _digits_from_radix(radix: int) -> list[str]:
        if radix < 2:
            raise NumeralSystemConfigurationError(f"Radix must be at least 2, got {radix}")
        return default_alphabet(radix)

    @staticmethod
    def _digits_from_string(string: str) -> list[str]:
        if len(string) < 2:
            raise NumeralSystemConfigurationError(
                f"Number base needs at least 2 characters, got {string!r}"
            )
        if len(set(string)) != len(string):
            raise NumeralSystemConfigurationError(
                f"Duplicate characters in the number base {string!r}"
            )
        return list(string)

    @staticmethod
    def _digits_from_bytes(string: bytes) -> list[bytes]:
        if len(string) < 2:
            raise NumeralSystemConfigurationError(
                f"Number base needs at least 2 bytes, got {string!r}"
            )
        if len(set(string)) != len(string):
            raise NumeralSystemConfigurationError(
                f"Duplicate bytes in the number base {string!r}"
            )
        return [bytes([byte]) for byte in string]

    @staticmethod
    def _digits_from_mapping(mapping: Mapping) -> list:
        keys = set(mapping.keys())
        if keys != set(range(len(mapping))):
            raise NumeralSystemConfigurationError(
                "Invalid digit values in the number base: "
                f"expected exactly 0..{len(mapping) - 1}, got {sorted(keys, key=repr)}"
            )
        return [mapping[i] for i in range(len(mapping))]

    @staticmethod
    def _build_value_map(digits: tuple) -> dict:
        value_map = {}
        for value, digit in enumerate(digits):
            try:
                if digit in value_map:
                    raise NumeralSystemConfigurationError(
                        f"Duplicate digit {digit!r} in the number base"
                    )
                value_map[digit] = value
            except TypeError:
                raise NumeralSystemConfigurationError(
                    f"Digit {digit!r} is not hashable"
                ) from None
        return value_map

    @staticmethod
    def _build_text_map(texts: list[Optional[str]]) -> dict[str, int]:
        text_map: dict[str, int] = {}
        for value, text in enumerate(texts):
            if text is None:
                continue
            if text in text_map:
                raise NumeralSystemConfigurationError(
                    f"Ambiguous digits in the number base: {text!r} is used "
                    f"by values {text_map[text]} and {value}"
                )
            text_map[text] = value
        return text_map

    @staticmethod
    def _detect_fixed_width(texts: list[Optional[str]]) -> Optional[int]:
        if any(text is None for text in texts):
            return None
        lengths = {len(text) for text in texts}
        return lengths.pop() if len(lengths) == 1 else None

    def _detect_string_conflict(self, texts: list[Optional[str]]) -> bool:
        if any(text is None or text == "" for text in texts):
            return True
        if self._fixed_width is not None:
            # Одинаковая длина: подстрока возможна только при равенстве
            return False
        return _has_substring_pair(texts)

    def _detect_case_sensitivity(self, texts: list[Optional[str]]) -> bool:
        strings = [text for digit, text in zip(self._digits, texts) if isinstance(digit, str)]
        folded = [text.lower() for text in strings]

        if len(set(folded)) != len(folded):
            return True

        if not self._string_conflict and self._fixed_width is None:
            lowered = [text.lower() for text in texts if text is not None]
            return _has_substring_pair(lowered)

        return False

    def _build_splitter(self) -> Optional[re.Pattern]:
        if self._string_conflict or self._fixed_width is not None:
            return None

        alternatives = sorted(self._text_map, key=len, reverse=True)
        pattern = "|".join(re.escape(text) for text in alternatives) + "|.+"
        flags = re.DOTALL if self._case_sensitive else re.DOTALL | re.IGNORECASE
        return re.compile(pattern, flags)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def radix(self) -> int:
        """Основание системы счисления."""
        return self._radix

    @property
    def digit_list(self) -> tuple:
        """Цифры системы, индекс = значение."""
        return self._digits

    def is_case_sensitive(self) -> bool:
        return self._case_sensitive

    def has_string_conflict(self) -> bool:
        """True если числа этой системы нельзя однозначно записать строкой."""
        return self._string_conflict

    # =========================================================================
    # ЦИФРЫ <-> ЗНАЧЕНИЯ
    # =========================================================================

    def has_digit(self, digit: Hashable) -> bool:
        return self._find_value(digit) is not None

    def get_value(self, digit: Hashable) -> int:
        """
        Значение цифры.

        Поиск: точное совпадение → совпадение текстовой формы →
        регистронезависимое совпадение (только для case-insensitive систем).

        Raises:
            InvalidDigitError: Если цифра не принадлежит системе
        """
        value = self._find_value(digit)
        if value is None:
            raise InvalidDigitError(digit)
        return value

    def get_values(self, digits: Sequence) -> list[int]:
        return [self.get_value(digit) for digit in digits]

    def get_digit(self, value: int) -> Hashable:
        """
        Цифра, представляющая значение.

        Raises:
            InvalidDigitError: Если значение вне [0, radix)
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < self._radix:
            raise InvalidDigitError(
                value, f"The decimal value {value!r} does not exist in base {self._radix}"
            )
        return self._digits[value]

    def get_digits(self, values: Sequence[int]) -> list:
        return [self.get_digit(value) for value in values]

    def _find_value(self, digit: Hashable) -> Optional[int]:
        try:
            value = self._value_map.get(digit)
        except TypeError:
            return None

        if value is not None:
            return value

        text = digit_text(digit)
        if text is None:
            return None

        value = self._text_map.get(text)
        if value is None and not self._case_sensitive and isinstance(digit, str):
            value = self._folded_map.get(text.lower())

        return value

    def canonize_digits(self, digits: Sequence) -> list:
        """
        Замена цифр на собственные объекты цифр системы.

        Пустой список канонизируется в [нулевая цифра].

        Raises:
            InvalidDigitError: Если какая-то цифра не принадлежит системе
        """
        result = self.get_digits(self.get_values(digits))
        return result if result else [self._digits[0]]

    # =========================================================================
    # КОРНИ RADIX
    # =========================================================================

    def find_common_radix_root(self, other: "NumeralSystem") -> Optional[int]:
        """
        Наибольший общий целый корень radix двух систем.

        Returns:
            Наибольшее r >= 2, для которого оба radix — точные степени r,
            или None (например, для 5 и 20)
        """
        return find_common_root(self._radix, other.radix)

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def split_string(self, string: str) -> list:
        """
        Разбиение строки числа на цифры системы.

        Raises:
            StringRepresentationError: Если у системы string conflict
            InvalidDigitError: Если строка содержит чужие символы
        """
        if self._string_conflict:
            raise StringRepresentationError(
                f"Base {self._radix} digits cannot be represented as strings"
            )

        if string == "":
            tokens: list[str] = []
        elif self._fixed_width is not None:
            width = self._fixed_width
            tokens = [string[i:i + width] for i in range(0, len(string), width)]
        else:
            tokens = self._splitter.findall(string)

        return self.canonize_digits(tokens)

    def join_digits(self, digits: Sequence) -> str:
        """
        Запись цифр строкой (обратная операция к split_string).

        Raises:
            StringRepresentationError: Если у системы string conflict
        """
        if self._string_conflict:
            raise StringRepresentationError(
                f"Base {self._radix} digits cannot be represented as strings"
            )
        return "".join(self._texts[value] for value in self.get_values(digits))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumeralSystem):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __repr__(self) -> str:
        if self._radix <= 16 and self._fixed_width == 1:
            return f"NumeralSystem({''.join(self._texts)!r})"
        return f"NumeralSystem(radix={self._radix})"


def _has_substring_pair(texts: list[str]) -> bool:
    """True если одна из строк является подстрокой другой."""
    for a, needle in enumerate(texts):
        for b, haystack in enumerate(texts):
            if a != b and needle in haystack:
                return True
    return False
