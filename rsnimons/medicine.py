"""Medicines and the list of medicines known to the hospital."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CAPACITY = 100


@dataclass
class Medicine:
    """A medicine; id 0 marks an unused slot."""

    medicine_id: int = 0
    name: str = ""


class MedicineList:
    """List of medicines with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[Medicine] = []

    def append(self, item: Medicine) -> None:
        """Add ``item`` after the last used slot."""
        if len(self._items) >= self.capacity:
            raise OverflowError("medicine list is full")
        self._items.append(item)

    def put_by_id(self, item: Medicine) -> None:
        """Place ``item`` at the slot numbered by its id."""
        slot = item.medicine_id
        if not 0 <= slot < self.capacity:
            raise IndexError(f"medicine id {slot} out of range")
        while len(self._items) <= slot:
            self._items.append(Medicine())
        self._items[slot] = item

    def sort(self) -> None:
        """Order the medicines by id, keeping equal ids in place."""
        self._items.sort(key=lambda item: item.medicine_id)

    def index_of(self, medicine_id: int) -> int | None:
        """Binary-search a list sorted by id; None when the id is absent."""
        ids = [item.medicine_id for item in self._items]
        position = bisect_left(ids, medicine_id)
        if position < len(ids) and ids[position] == medicine_id:
            return position
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Medicine]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Medicine:
        return self._items[index]

    def render(self) -> str:
        """One ``id name`` line per medicine in use."""
        return "\n".join(
            f"{item.medicine_id} {item.name}"
            for item in self._items
            if item.medicine_id != 0
        )

    def write(self, folder: str | Path) -> Path:
        """Write ``obat.csv`` into ``folder`` and return its path."""
        path = Path(folder) / "obat.csv"
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write("obat_id;nama_obat\n")
            for item in self._items:
                handle.write(f"{item.medicine_id};{item.name}\n")
        return path