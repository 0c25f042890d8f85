"""
ConversionRequest — модель запроса на конвертацию числа

Immutable Pydantic модели запроса и результата конвертации.
Соответствуют JSON Schema контрактам (contracts/schema/conversion_request.json,
contracts/schema/conversion_result.json).

Система счисления в запросе задаётся так же, как аргумент NumeralSystem:
- int: radix (>= 2)
- str: строка цифр (>= 2 уникальных символов)
- list[str]: список цифр (>= 2 уникальных цифр)
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

NumberBaseField = Union[int, str, list[str]]


class ConversionRequest(BaseModel):
    """
    Запрос на конвертацию числа.

    number — строка числа (со знаком и дробной частью) или список цифр.
    """

    number: Union[str, list[str]] = Field(..., description="Число для конвертации")
    source: NumberBaseField = Field(..., description="Система счисления числа")
    target: NumberBaseField = Field(..., description="Система счисления результата")
    precision: int = Field(default=-1, description="Точность дробной части")

    model_config = {"frozen": True}

    @field_validator("source", "target")
    @classmethod
    def validate_number_base(cls, v: NumberBaseField) -> NumberBaseField:
        """Базовая проверка системы счисления (полная — в NumeralSystem)"""
        if isinstance(v, int):
            if v < 2:
                raise ValueError(f"radix must be at least 2, got {v}")
        elif len(v) < 2:
            raise ValueError("number base must have at least 2 digits")
        elif len(set(v)) != len(v):
            raise ValueError("number base contains duplicate digits")
        return v


class ConversionResult(BaseModel):
    """Результат конвертации с диагностикой выбранных стратегий."""

    number: Union[str, list[str]] = Field(..., description="Исходное число")
    result: Union[str, list[str]] = Field(..., description="Сконвертированное число")
    integer_strategy: str = Field(..., min_length=1, description="Стратегия целой части")
    fraction_strategy: Optional[str] = Field(
        default=None, description="Стратегия дробной части (None если дроби нет)"
    )

    model_config = {"frozen": True}
