"""
NumeralSystemRegistry — Реестр именованных систем счисления

Реестр хранит NumeralSystem по имени и кэширует Converter для каждой системы.
Источники систем:
- встроенные алфавиты (core.domain.systems.BUILTIN_SYSTEMS)
- JSON документы, проверенные по схеме numeral_systems.json

Документ:
    {
        "schema_version": "1",
        "systems": [
            {"name": "base36", "digits": "0123456789abcdefghijklmnopqrstuvwxyz"}
        ]
    }
"""

import json
from collections.abc import Iterator, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from numeral_systems.core.contracts import validate_numeral_systems_document
from numeral_systems.core.domain.converter import Converter
from numeral_systems.core.domain.definition import NumeralSystem
from numeral_systems.core.domain.systems import BUILTIN_SYSTEMS
from numeral_systems.utils.logging import get_logger

logger = get_logger("registry")


class NumeralSystemRegistry:
    """
    Реестр систем счисления: имя → NumeralSystem, с ленивым кэшем Converter.
    """

    def __init__(self):
        self._systems: Dict[str, NumeralSystem] = {}
        self._converters: Dict[str, Converter] = {}
        self._frozen = False

    @classmethod
    def with_builtins(cls) -> "NumeralSystemRegistry":
        """Реестр с предопределёнными системами (binary, decimal, base64, ...)."""
        registry = cls()
        for name, digits in BUILTIN_SYSTEMS.items():
            registry.register(NumeralSystem(name=name, digits=digits))
        return registry

    def __contains__(self, name: object) -> bool:
        return name in self._systems

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[NumeralSystem]:
        return iter(self._systems.values())

    @property
    def frozen(self) -> bool:
        """True если реестр закрыт для регистрации."""
        return self._frozen

    def freeze(self) -> None:
        """Закрыть реестр для регистрации и загрузки документов."""
        self._frozen = True

    def _ensure_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("Numeral system registry is read-only")

    def names(self) -> list[str]:
        """Имена зарегистрированных систем в порядке регистрации."""
        return list(self._systems)

    def register(self, system: NumeralSystem, replace: bool = False) -> None:
        """
        Регистрация системы.

        Args:
            system: Система счисления
            replace: Разрешить замену системы с тем же именем

        Raises:
            ValueError: Если имя уже зарегистрировано и replace=False
            RuntimeError: Если реестр закрыт (freeze)
        """
        self._ensure_writable()

        if system.name in self._systems:
            if not replace:
                raise ValueError(f"Numeral system already registered: {system.name!r}")
            logger.warning(
                "Replacing numeral system %r (base %d -> %d)",
                system.name,
                self._systems[system.name].base,
                system.base,
            )

        self._systems[system.name] = system
        self._converters.pop(system.name, None)

    def get(self, name: str) -> NumeralSystem:
        """
        Система по имени.

        Raises:
            KeyError: Если система не зарегистрирована
        """
        try:
            return self._systems[name]
        except KeyError:
            raise KeyError(f"Unknown numeral system: {name!r}") from None

    def converter(self, name: str) -> Converter:
        """Converter для системы (строится один раз и кэшируется)."""
        converter = self._converters.get(name)
        if converter is None:
            converter = self.get(name).converter()
            self._converters[name] = converter
        return converter

    def encode(self, name: str, value: int) -> str:
        """Эквивалентно registry.converter(name).encode(value)."""
        return self.converter(name).encode(value)

    def decode(self, name: str, text: str | Sequence[str]) -> int:
        """Эквивалентно registry.converter(name).decode(text)."""
        return self.converter(name).decode(text)

    # -------------------------------------------------------------------------
    # Загрузка документов
    # -------------------------------------------------------------------------

    def load_document(self, data: Dict[str, Any]) -> list[NumeralSystem]:
        """
        Загрузка систем из JSON документа (уже разобранного в dict).

        Документ проверяется по JSON Schema, затем каждая запись — Pydantic
        моделью NumeralSystem. Системы с существующими именами заменяются.

        Returns:
            Список загруженных систем

        Raises:
            jsonschema.ValidationError: Если документ не соответствует схеме
            pydantic.ValidationError: Если алфавит недопустим
            RuntimeError: Если реестр закрыт (freeze)
        """
        self._ensure_writable()
        validate_numeral_systems_document(data)

        # Сначала строим все модели: документ загружается целиком или не загружается
        systems = [NumeralSystem(**entry) for entry in data["systems"]]
        for system in systems:
            self.register(system, replace=True)

        return systems

    def load_file(self, path: str | Path) -> list[NumeralSystem]:
        """
        Загрузка систем из JSON файла.

        Raises:
            FileNotFoundError: Если файл не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        systems = self.load_document(data)
        logger.info("Loaded %d numeral systems from %s", len(systems), path)
        return systems


@lru_cache
def default_registry() -> NumeralSystemRegistry:
    """
    Общий реестр со встроенными системами.

    Один экземпляр на процесс, закрыт для регистрации. Для собственных систем
    нужен отдельный реестр: NumeralSystemRegistry.with_builtins().
    """
    registry = NumeralSystemRegistry.with_builtins()
    registry.freeze()
    return registry
