"""Which medicine cures which disease, and in what order it is taken."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

MAX_MAP_SIZE = 100
MAX_OBAT_PER_PENYAKIT = 10

HEADER = "obat_id;penyakit_id;urutan_minum"


@dataclass
class PrescriptionEntry:
    """Medicines for one disease, keyed by the order they are taken in."""

    disease_id: int = 0
    medicines: dict[int, int] = field(default_factory=dict)

    def _sorted(self) -> list[tuple[int, int]]:
        return sorted(self.medicines.items())


def _check_order(order: int) -> None:
    if not 0 <= order < MAX_OBAT_PER_PENYAKIT:
        raise IndexError(f"order {order} out of range")


class PrescriptionMap:
    """Map from disease id to its prescription; ``size`` is one past the
    largest disease id stored."""

    def __init__(self) -> None:
        self.size = 0
        self._entries: dict[int, PrescriptionEntry] = {}

    @staticmethod
    def _check_disease(disease_id: int) -> None:
        if not 0 <= disease_id < MAX_MAP_SIZE:
            raise IndexError(f"disease id {disease_id} out of range")

    def _grow(self, disease_id: int) -> None:
        self.size = max(self.size, disease_id + 1)

    def insert(self, medicine_id: int, disease_id: int, order: int) -> None:
        """Record that ``medicine_id`` is taken ``order``-th for the disease."""
        self._check_disease(disease_id)
        _check_order(order)
        entry = self._entries.setdefault(disease_id, PrescriptionEntry(disease_id))
        entry.disease_id = disease_id
        entry.medicines[order] = medicine_id
        self._grow(disease_id)

    def put_entry(self, entry: PrescriptionEntry) -> None:
        """Replace the prescription stored under ``entry.disease_id``."""
        self._check_disease(entry.disease_id)
        for order in entry.medicines:
            _check_order(order)
        self._entries[entry.disease_id] = entry
        self._grow(entry.disease_id)

    def medicine_at(self, disease_id: int, order: int) -> int:
        """Medicine id taken ``order``-th for the disease; 0 when there is none."""
        entry = self._entries.get(disease_id)
        if entry is None:
            return 0
        return entry.medicines.get(order, 0)

    def __iter__(self) -> Iterator[PrescriptionEntry]:
        """Yield the prescriptions in use, by disease id."""
        for disease_id in range(self.size):
            entry = self._entries.get(disease_id)
            if entry is not None and entry.disease_id:
                yield entry

    def render(self) -> str:
        """List every disease with its medicines in order."""
        lines: list[str] = []
        for entry in self:
            lines.append(f"PenyakitId: {entry.disease_id}")
            lines += [
                f"\t{order}. ObatId: {medicine_id}"
                for order, medicine_id in entry._sorted()
                if medicine_id
            ]
        return "\n".join(lines)

    def write(self, folder: str | Path) -> Path:
        """Write ``obat_penyakit.csv`` into ``folder`` and return its path."""
        path = Path(folder) / "obat_penyakit.csv"
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(HEADER + "\n")
            for entry in self:
                for order, medicine_id in entry._sorted():
                    if order:
                        handle.write(f"{medicine_id};{entry.disease_id};{order}\n")
        return path