"""Converters — стратегии конвертации между системами счисления.

Стратегии (в порядке приоритета по умолчанию):
- ReplaceConverter: замена блоков цифр через общий корень оснований (без арифметики)
- DecimalConverter[native]: через встроенный int произвольной точности
- DirectConverter: деление в столбик в нативных целых (только целые, с проверкой переполнения)
- DecimalConverter[decimal-string]: через чистый движок bignum
"""

from .base import AbstractConverter
from .decimal import DecimalConverter
from .direct import DirectConverter, DirectConverterConfig, can_overflow
from .replace import ConversionTable, ReplaceConverter

__all__ = [
    "AbstractConverter",
    "ConversionTable",
    "DecimalConverter",
    "DirectConverter",
    "DirectConverterConfig",
    "ReplaceConverter",
    "can_overflow",
]
