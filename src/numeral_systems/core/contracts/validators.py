"""
JSON Schema Contract Validators

Модуль для валидации JSON документов с определениями систем счисления.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- numeral_systems.json (документ со списком именованных систем)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'numeral_systems')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class NumeralSystemsDocumentValidator(ContractValidator):
    """Валидатор для документа numeral_systems."""

    def __init__(self):
        super().__init__("numeral_systems")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeral_systems_document(data: Dict[str, Any]) -> None:
    """
    Валидация документа с определениями систем счисления.

    Args:
        data: Документ {"schema_version": "1", "systems": [...]}

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    NumeralSystemsDocumentValidator().validate(data)
