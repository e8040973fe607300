"""Update mask derivation for partially populated resources.

An update operation only touches the fields named in its mask, so the mask has
to match the fields populated on the resource exactly. ``PartialResource``
records every assignment made through it and ``all_set_fields_of`` turns that
record into a ``FieldMask``. Identity fields (``resource_name``) address the
resource and are never part of the mask.
"""

from __future__ import annotations

from typing import Any, Iterable

from google.protobuf.field_mask_pb2 import FieldMask

IDENTITY_FIELDS = frozenset({"resource_name"})


class PartialResource:
    def __init__(self, message: Any, *, identity_fields: Iterable[str] = IDENTITY_FIELDS) -> None:
        self._message = message
        self._identity_fields = frozenset(identity_fields)
        self._assigned: list[str] = []

    @property
    def message(self) -> Any:
        return self._message

    def assign(self, name: str, value: Any) -> "PartialResource":
        if isinstance(value, (list, tuple)):
            # raw protobuf repeated fields reject direct assignment
            field = getattr(self._message, name)
            del field[:]
            field.extend(value)
        else:
            setattr(self._message, name, value)
        if name not in self._identity_fields and name not in self._assigned:
            self._assigned.append(name)
        return self

    def set_fields(self) -> tuple[str, ...]:
        return tuple(self._assigned)


def all_set_fields_of(resource: PartialResource) -> FieldMask:
    return FieldMask(paths=list(resource.set_fields()))
