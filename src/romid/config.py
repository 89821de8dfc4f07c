from __future__ import annotations

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field, field_validator

from .geo.address import DEFAULT_COUNTRY
from .identifiers.cnp import DEFAULT_MASK_CHAR

# Presentation settings only; nothing here changes what is valid.

# ---- Masking ----
class MaskConfig(BaseModel):
    char: str = DEFAULT_MASK_CHAR

    @field_validator("char")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("mask char must be a single character")
        return v

# ---- CNP output ----
class CnpConfig(BaseModel):
    reveal: bool = False  # print decoded birth date / sequence in verdicts

# ---- Address output ----
class AddressConfig(BaseModel):
    country: str = DEFAULT_COUNTRY

# ---- Root config ----
class RomidConfig(BaseModel):
    mask: MaskConfig = Field(default_factory=MaskConfig)
    cnp: CnpConfig = Field(default_factory=CnpConfig)
    address: AddressConfig = Field(default_factory=AddressConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> RomidConfig:
    if not path:
        return RomidConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return RomidConfig(**data)
