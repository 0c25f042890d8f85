"""
Тесты для Pydantic моделей запроса/результата и выполнения запросов

Проверяет:
1. Валидацию ConversionRequest (radix, алфавиты, неизменяемость)
2. convert_request: результат и имена стратегий
3. convert_payload: JSON Schema → Pydantic → конвертация → контракт результата
"""

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.contracts import validate_conversion_result
from src.core.domain import ConversionRequest, ConversionResult
from src.core.domain.errors import InvalidDigitError
from src.pipeline import convert_payload, convert_request


class TestConversionRequestModel:
    """Тесты модели ConversionRequest"""

    def test_defaults(self) -> None:
        request = ConversionRequest(number="A09FF", source=16, target=2)
        assert request.precision == -1

    def test_number_base_kinds(self) -> None:
        request = ConversionRequest(number=["b", "a"], source=["a", "b"], target="01")
        assert request.source == ["a", "b"]
        assert request.target == "01"

    @pytest.mark.parametrize("number_base", [1, "a", "aa", ["x"], ["x", "x"]])
    def test_invalid_number_base(self, number_base) -> None:
        with pytest.raises(ValidationError):
            ConversionRequest(number="1", source=number_base, target=10)

    def test_frozen(self) -> None:
        request = ConversionRequest(number="1", source=10, target=2)
        with pytest.raises(ValidationError):
            request.precision = 5

    def test_result_requires_integer_strategy(self) -> None:
        with pytest.raises(ValidationError):
            ConversionResult(number="1", result="1", integer_strategy="")


class TestConvertRequest:
    """Тесты convert_request"""

    def test_integer(self) -> None:
        result = convert_request(ConversionRequest(number="A09FF", source=16, target=2))
        assert result.result == "10100000100111111111"
        assert result.integer_strategy == "replace"
        assert result.fraction_strategy is None

    def test_fraction_with_precision(self) -> None:
        request = ConversionRequest(number="-3.14", source=10, target=2, precision=9)
        result = convert_request(request)
        assert result.number == "-3.14"
        assert result.result == "-11.001001000"
        assert result.fraction_strategy == "decimal[native]"

    def test_digit_lists(self) -> None:
        request = ConversionRequest(number=["1", "1", "0"], source="01", target=["x", "y", "z"])
        assert convert_request(request).result == ["z", "x"]

    def test_invalid_digit_propagates(self) -> None:
        with pytest.raises(InvalidDigitError):
            convert_request(ConversionRequest(number="2", source=2, target=10))


class TestConvertPayload:
    """Тесты convert_payload"""

    def test_payload_roundtrip_matches_contract(self) -> None:
        payload = {"number": "3.14", "source": 10, "target": 2, "precision": 10}
        result = convert_payload(payload)

        assert result["result"] == "11.0010001111"
        validate_conversion_result(result)

    def test_schema_violation_rejected(self) -> None:
        with pytest.raises(SchemaValidationError):
            convert_payload({"number": "1", "source": 1, "target": 2})

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(SchemaValidationError, match="'target' is a required property"):
            convert_payload({"number": "1", "source": 10})
