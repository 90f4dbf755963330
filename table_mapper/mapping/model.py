"""Row model base class.

A Model is a mutable field bag for one row. The fields it accepts are the
columns its Mapper discovered, ``id``, and any extra fields the subclass
registers; persistence is delegated to the Mapper.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from table_mapper.core.exceptions import InvalidFieldError, MapperMismatchError

if TYPE_CHECKING:
    from table_mapper.mapping.mapper import Mapper


class Model:
    """Base class for one row of a mapped table.

    Subclasses declare the Mapper class they belong to and, optionally,
    fields that are not table columns (computed or joined values). Extra
    fields are accepted by validation but never written by insert/update.

    Example::

        class User(Model):
            mapper_class = UserMapper
            extra_fields = ("display_name",)

    Args:
        mapper: Mapper instance that loads and saves this row.
        fields: Initial field values; validated like ``set_fields``.

    Raises:
        MapperMismatchError: If *mapper* is not a ``mapper_class`` instance.
    """

    mapper_class: ClassVar[type[Mapper[Any]] | None] = None
    extra_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, mapper: Mapper[Any], fields: Mapping[str, Any] | None = None) -> None:
        cls = type(self)
        if cls.mapper_class is None:
            raise TypeError(f"{cls.__name__} must declare mapper_class")
        if not isinstance(mapper, cls.mapper_class):
            raise MapperMismatchError(
                cls.__name__, cls.mapper_class.__name__, type(mapper).__name__
            )
        self._mapper = mapper
        self._fields: dict[str, Any] = {}
        self._subclass_fields: list[str] = list(cls.extra_fields)
        if fields:
            self.set_fields(fields)

    @property
    def mapper(self) -> Mapper[Any]:
        return self._mapper

    # --- field access ---

    def known_fields(self) -> list[str]:
        """Table fields, ``id`` and registered extra fields."""
        return [*self._mapper.table_fields(), "id", *self._subclass_fields]

    def is_field(self, name: str) -> bool:
        return name in self.known_fields()

    def add_field(self, name: str) -> None:
        """Register a field that is not a table column."""
        if name not in self._subclass_fields:
            self._subclass_fields.append(name)

    def get(self, name: str) -> Any:
        """Current value of *name*, or None if unset or not a field."""
        return self._fields.get(name)

    def set(self, name: str, value: Any) -> Any:
        """Set one field and return the value.

        Raises:
            InvalidFieldError: If *name* is not a known field.
        """
        if not self.is_field(name):
            raise InvalidFieldError(type(self).__name__, [name])
        self._fields[name] = value
        return value

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    @property
    def id(self) -> Any:
        return self._fields.get("id")

    @id.setter
    def id(self, value: Any) -> None:
        self._fields["id"] = value

    def is_new(self) -> bool:
        """True until the row has been inserted."""
        return self.id is None or self.id == ""

    # --- bulk access ---

    def set_fields(self, fields: Mapping[str, Any]) -> None:
        """Replace all fields with *fields*.

        Nothing changes unless every key is a known field.

        Raises:
            InvalidFieldError: Listing the unknown keys.
        """
        known = self.known_fields()
        invalid = [name for name in fields if name not in known]
        if invalid:
            raise InvalidFieldError(type(self).__name__, invalid)
        self._fields = dict(fields)

    def to_array(self) -> dict[str, Any]:
        return dict(self._fields)

    def to_string(self) -> str:
        lines = [type(self).__name__]
        lines.extend(f"{name} : {value}" for name, value in self._fields.items())
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"

    # --- persistence ---

    def save(self) -> Model:
        return self._mapper.save(self)

    def save_fields(self, fields: Mapping[str, Any]) -> Model:
        """Overwrite the given fields in place, then save.

        Unknown keys and ``id`` are skipped.
        """
        known = self.known_fields()
        for name, value in fields.items():
            if name in known and name != "id":
                self._fields[name] = value
        return self.save()

    def delete(self) -> int:
        return self._mapper.delete(self)
