"""
NumeralSystem — Модель именованной системы счисления

Immutable Pydantic модель: имя, алфавит и описание системы счисления.
Соответствует элементу "systems" в JSON документе
(core/contracts/schema/numeral_systems.json). Правила алфавита
(уникальность, одиночные символы) проверяются здесь, а не в JSON Schema.
"""

from pydantic import BaseModel, Field, field_validator

from numeral_systems.core.domain.alphabet import parse_alphabet
from numeral_systems.core.domain.converter import Converter
from numeral_systems.core.errors import InvalidAlphabet


class NumeralSystem(BaseModel):
    """
    Именованная система счисления.

    Immutable модель (frozen=True). Converter строится по запросу через converter().
    """

    name: str = Field(
        ...,
        min_length=1,
        pattern=r"^[a-z][a-z0-9_]*$",
        description="Имя системы в реестре (например, 'hexa_lower')",
    )
    digits: str = Field(..., min_length=1, description="Цифры в порядке возрастания")
    description: str = Field("", description="Человекочитаемое описание")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: str) -> str:
        """Проверка, что digits задаёт допустимый алфавит."""
        try:
            parse_alphabet(v)
        except InvalidAlphabet as e:
            raise ValueError(e.reason) from e
        return v

    @property
    def base(self) -> int:
        """Основание системы (число цифр)."""
        return len(parse_alphabet(self.digits))

    def converter(self) -> Converter:
        """Новый Converter для алфавита этой системы."""
        return Converter(self.digits)
