"""Conversion requests — выполнение запросов на конвертацию

Запрос в виде dict (например, из JSON) проходит две ступени проверки:
1. JSON Schema контракт conversion_request (jsonschema)
2. Pydantic модель ConversionRequest

Результат возвращается как ConversionResult (соответствует контракту
conversion_result).
"""

from typing import Any, Dict

from src.core.contracts import validate_conversion_request
from src.core.domain.conversion_request import ConversionRequest, ConversionResult
from src.pipeline.base_converter import BaseConverter


def convert_request(request: ConversionRequest) -> ConversionResult:
    """Выполнение запроса на конвертацию.

    Raises:
        NumeralSystemConfigurationError: невалидная система счисления
        InvalidDigitError: число содержит чужую цифру
        ExhaustedStrategies: ни одна стратегия не подошла
    """
    converter = BaseConverter(request.source, request.target)
    converter.set_precision(request.precision)
    trace = converter.convert_traced(request.number)

    return ConversionResult(
        number=request.number,
        result=trace.result,
        integer_strategy=trace.integer_strategy,
        fraction_strategy=trace.fraction_strategy,
    )


def convert_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Выполнение запроса, заданного словарём.

    Raises:
        jsonschema.ValidationError: payload не соответствует контракту
        pydantic.ValidationError: payload не проходит валидацию модели
    """
    validate_conversion_request(payload)
    request = ConversionRequest.model_validate(payload)
    return convert_request(request).model_dump()
