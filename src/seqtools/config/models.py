"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, seqtools.toml only contains
overrides, e.g.::

    [parse]
    element_type = "float"
    separator = ";"
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

ElementType = Literal["int", "float", "str"]


class ParseConfig(BaseModel):
    """[parse] section: how command-line sequences are read."""

    model_config = {"frozen": True}

    element_type: ElementType = "int"
    separator: str = ","
    strip: bool = True

    @field_validator("separator")
    @classmethod
    def _non_empty_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must not be empty")
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    no_color: bool = False
