"""
Domain models and value objects.

Contains fundamental domain entities: NumeralSystem, digits, errors and
conversion request models.
"""

from src.core.domain.conversion_request import ConversionRequest, ConversionResult
from src.core.domain.digits import (
    BASE64_DIGITS,
    INTEGER_BASE_DIGITS,
    DigitKind,
    default_alphabet,
    digit_kind,
    digit_text,
)
from src.core.domain.errors import (
    BaseConversionError,
    ConversionError,
    ExhaustedStrategies,
    InvalidDigitError,
    NumeralSystemConfigurationError,
    StrategyInapplicable,
    StringRepresentationError,
)
from src.core.domain.numeral_system import NumberBaseSpec, NumeralSystem

__all__ = [
    # Digits module
    "INTEGER_BASE_DIGITS",
    "BASE64_DIGITS",
    "DigitKind",
    "digit_kind",
    "digit_text",
    "default_alphabet",
    # Errors
    "BaseConversionError",
    "NumeralSystemConfigurationError",
    "InvalidDigitError",
    "StringRepresentationError",
    "ConversionError",
    "StrategyInapplicable",
    "ExhaustedStrategies",
    # NumeralSystem
    "NumeralSystem",
    "NumberBaseSpec",
    # Request models
    "ConversionRequest",
    "ConversionResult",
]
