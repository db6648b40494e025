"""
LimbSnapshot — Модель сериализованного представления BigInt

Immutable Pydantic модель пары (sign, limbs) в strict режиме. Соответствует схеме
contracts/schema/big_integer.json.

Модель принимает только каноническое представление:
- каждый limb — беззнаковое 32-битное значение
- нет старших нулевых limbs (ноль — это [0])
- ноль не бывает отрицательным
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# Максимальное значение limb (2^32 - 1)
UINT32_MAX: Final[int] = 0xFFFFFFFF


class LimbSnapshot(BaseModel):
    """
    Снимок значения BigInt.

    Immutable модель (frozen=True): изменение значения создаёт новый снимок.
    """

    sign: bool = Field(..., description="True для отрицательных значений")
    limbs: list[int] = Field(
        ...,
        min_length=1,
        description="Магнитуда, little-endian 32-битные limbs (индекс 0 = младший)",
    )

    # strict: "yes", "5" и True не приводятся к bool/int
    model_config = {"frozen": True, "strict": True}

    @field_validator("limbs")
    @classmethod
    def validate_limb_range(cls, v: list[int]) -> list[int]:
        """Каждый limb в диапазоне [0, UINT32_MAX]."""
        for index, limb in enumerate(v):
            if limb < 0 or limb > UINT32_MAX:
                raise ValueError(f"limbs[{index}] = {limb} is not a 32-bit unsigned value")
        return v

    @model_validator(mode="after")
    def validate_canonical(self) -> "LimbSnapshot":
        """Каноническая форма: trimmed магнитуда, неотрицательный ноль."""
        if len(self.limbs) > 1 and self.limbs[-1] == 0:
            raise ValueError("limbs must not have a most-significant zero limb")
        if self.sign and self.limbs == [0]:
            raise ValueError("zero must not be negative")
        return self

    def is_zero(self) -> bool:
        """Снимок нуля."""
        return self.limbs == [0]
