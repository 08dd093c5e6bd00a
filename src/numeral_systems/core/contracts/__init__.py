"""
Contract Validation Module

Модуль для валидации JSON документов с определениями систем счисления.
"""

from .validators import (
    ContractValidator,
    NumeralSystemsDocumentValidator,
    SchemaLoader,
    validate_numeral_systems_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumeralSystemsDocumentValidator",
    # Functions
    "validate_numeral_systems_document",
]
