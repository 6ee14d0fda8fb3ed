"""Patient belongings: an inventory and a stomach of medicine ids."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

INVENTORY_CAP = 20
PERUT_CAP = 20
DEFAULT_CAPACITY = 100


def _padded(values: list[int], cap: int, name: str) -> list[int]:
    if len(values) > cap:
        raise ValueError(f"{name} holds at most {cap} items")
    return list(values) + [0] * (cap - len(values))


@dataclass
class PatientBelonging:
    """Medicine ids a patient holds and has swallowed; 0 marks an empty slot."""

    patient_id: int = 0
    inventory: list[int] = field(default_factory=list)
    perut: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.inventory = _padded(self.inventory, INVENTORY_CAP, "inventory")
        self.perut = _padded(self.perut, PERUT_CAP, "perut")


class BelongingList:
    """List of patient belongings with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[PatientBelonging] = []

    def append(self, item: PatientBelonging) -> None:
        """Add ``item`` after the last used slot."""
        if len(self._items) >= self.capacity:
            raise OverflowError("belonging list is full")
        self._items.append(item)

    def put_by_id(self, item: PatientBelonging) -> None:
        """Place ``item`` at the slot numbered by its patient id."""
        slot = item.patient_id
        if not 0 <= slot < self.capacity:
            raise IndexError(f"patient id {slot} out of range")
        while len(self._items) <= slot:
            self._items.append(PatientBelonging())
        self._items[slot] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PatientBelonging]:
        return iter(self._items)

    def __getitem__(self, index: int) -> PatientBelonging:
        return self._items[index]

    def render(self) -> str:
        """Describe every slot that belongs to a patient."""
        lines: list[str] = []
        for item in self._items:
            if item.patient_id == 0:
                continue
            lines += [
                f"Pasien id: {item.patient_id}",
                "Inventory (dalam id):",
                "".join(f"{value} " for value in item.inventory),
                "Perut (dalam id):",
                "".join(f"{value} " for value in item.perut),
            ]
        return "\n".join(lines)