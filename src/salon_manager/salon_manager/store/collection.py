from __future__ import annotations

import dataclasses
from typing import Callable, Generic, Iterator, Optional, Sequence, Type, TypeVar

from ..core.enums import CollectionName
from ..core.exceptions import ValidationError
from .ids import IdGenerator

T = TypeVar("T")

ChangeHook = Callable[[CollectionName, Sequence[T]], None]


class Collection(Generic[T]):
    """Insertion-ordered id -> record mapping for one record type.

    Every successful mutation calls ``on_change`` with the full record
    sequence (write-through, no batching). Records are frozen dataclasses;
    updates replace the instance in place, keeping its position.
    """

    def __init__(
        self,
        name: CollectionName,
        model: Type[T],
        records: Sequence[T],
        *,
        on_change: ChangeHook,
        ids: IdGenerator,
    ):
        self._name = name
        self._model = model
        self._records: dict[str, T] = {r.id: r for r in records}
        self._on_change = on_change
        self._ids = ids
        self._fields = {f.name for f in dataclasses.fields(model)}

    @property
    def name(self) -> CollectionName:
        return self._name

    @property
    def model(self) -> Type[T]:
        return self._model

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def all(self) -> list[T]:
        """Snapshot of the records in insertion order."""
        return list(self._records.values())

    def get(self, record_id: str) -> Optional[T]:
        return self._records.get(record_id)

    def add(self, **fields) -> T:
        self._check_fields(fields)
        try:
            record = self._model(id=self._ids.next_id(self._records), **fields)
        except TypeError as e:
            raise ValidationError(f"Datos incompletos para {self._name.value}: {e}") from e

        self._records[record.id] = record
        self._changed()
        return record

    def update(self, record_id: str, **changes) -> Optional[T]:
        """Merge ``changes`` into the record; None (and no write) when absent."""

        self._check_fields(changes)
        current = self._records.get(record_id)
        if current is None:
            return None

        updated = dataclasses.replace(current, **changes)
        self._records[record_id] = updated
        self._changed()
        return updated

    def update_all(self, **changes) -> list[T]:
        """Apply the same change to every record with a single write."""

        self._check_fields(changes)
        for record_id, record in list(self._records.items()):
            self._records[record_id] = dataclasses.replace(record, **changes)
        self._changed()
        return self.all()

    def _check_fields(self, fields: dict) -> None:
        if "id" in fields:
            raise ValidationError("El id de un registro no se puede asignar ni modificar")
        unknown = set(fields) - self._fields
        if unknown:
            raise ValidationError(f"Campos desconocidos: {', '.join(sorted(unknown))}")

    def _changed(self) -> None:
        self._on_change(self._name, self.all())
