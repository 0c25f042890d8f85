"""Pipeline — разбор числа и dispatch по цепочке стратегий конвертации.

- BaseConverter: знак / целая часть / дробная часть → цепочка стратегий
- base_convert: однократная конвертация
- convert_request / convert_payload: выполнение запросов (pydantic / JSON)
"""

from .base_converter import (
    BaseConverter,
    BaseConverterConfig,
    ConversionTrace,
    base_convert,
    default_strategies,
)
from .requests import convert_payload, convert_request

__all__ = [
    "BaseConverter",
    "BaseConverterConfig",
    "ConversionTrace",
    "base_convert",
    "convert_payload",
    "convert_request",
    "default_strategies",
]
