"""Row identity: a raw id or a reference to a Model.

Mapper operations that target one row accept either form; ``as_target``
turns whatever the caller passed into one of the two variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from table_mapper.mapping.model import Model


@dataclass(frozen=True)
class RowId:
    """A primary key value."""

    value: Any


@dataclass(frozen=True)
class ModelRef:
    """A Model whose ``id`` identifies the row."""

    model: Model

    @property
    def value(self) -> Any:
        return self.model.id


Target = Union[RowId, ModelRef]


def as_target(object_or_id: Any) -> Target:
    """Wrap a Model, raw id, or existing target as a Target."""
    if isinstance(object_or_id, (RowId, ModelRef)):
        return object_or_id
    if isinstance(object_or_id, Model):
        return ModelRef(object_or_id)
    return RowId(object_or_id)
