"""Mapping layer - table mappers and row models."""

from __future__ import annotations

from table_mapper.mapping.identity import ModelRef, RowId, Target, as_target
from table_mapper.mapping.mapper import Mapper
from table_mapper.mapping.model import Model

__all__ = [
    "Mapper",
    "Model",
    "RowId",
    "ModelRef",
    "Target",
    "as_target",
]
