"""Diseases, their diagnostic ranges, and the list of known diseases."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import astuple, dataclass
from pathlib import Path

DEFAULT_CAPACITY = 100

# One letter per field of a ``penyakit.csv`` record, in column order.
RECORD_FORMAT = "isffiiiiiiffiiffiiiiii"

HEADER = (
    "id;nama_penyakit;suhu_tubuh_min;suhu_tubuh_max;"
    "tekanan_darah_sistolik_min;tekanan_darah_sistolik_max;"
    "tekanan_darah_diastolik_min;tekanan_darah_diastolik_max;"
    "detak_jantung_min;detak_jantung_max;"
    "saturasi_oksigen_min;saturasi_oksigen_max;"
    "kadar_gula_darah_min;kadar_gula_darah_max;"
    "berat_badan_min;berat_badan_max;"
    "tinggi_badan_min;tinggi_badan_max;"
    "kadar_kolesterol_min;kadar_kolesterol_max;"
    "trombosit_min;trombosit_max"
)


@dataclass
class Disease:
    """A disease with the vital-sign ranges that identify it; id 0 is unused."""

    disease_id: int = 0
    name: str = ""
    temperature_min: float = 0.0
    temperature_max: float = 0.0
    systolic_min: int = 0
    systolic_max: int = 0
    diastolic_min: int = 0
    diastolic_max: int = 0
    heart_rate_min: int = 0
    heart_rate_max: int = 0
    oxygen_saturation_min: float = 0.0
    oxygen_saturation_max: float = 0.0
    blood_sugar_min: int = 0
    blood_sugar_max: int = 0
    weight_min: float = 0.0
    weight_max: float = 0.0
    height_min: int = 0
    height_max: int = 0
    cholesterol_min: int = 0
    cholesterol_max: int = 0
    platelets_min: int = 0
    platelets_max: int = 0

    def _formatted(self) -> list[str]:
        out = []
        for kind, value in zip(RECORD_FORMAT, astuple(self)):
            if kind == "f":
                out.append(f"{value:.6f}")
            elif kind == "i":
                out.append(f"{int(value)}")
            else:
                out.append(str(value))
        return out


class DiseaseList:
    """List of diseases with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[Disease] = []

    def append(self, item: Disease) -> None:
        """Add ``item`` after the last used slot."""
        if len(self._items) >= self.capacity:
            raise OverflowError("disease list is full")
        self._items.append(item)

    def put_by_id(self, item: Disease) -> None:
        """Place ``item`` at the slot numbered by its id."""
        slot = item.disease_id
        if not 0 <= slot < self.capacity:
            raise IndexError(f"disease id {slot} out of range")
        while len(self._items) <= slot:
            self._items.append(Disease())
        self._items[slot] = item

    def sort(self) -> None:
        """Order the diseases by id, keeping equal ids in place."""
        self._items.sort(key=lambda item: item.disease_id)

    def index_of(self, disease_id: int) -> int | None:
        """Binary-search a list sorted by id; None when the id is absent."""
        ids = [item.disease_id for item in self._items]
        position = bisect_left(ids, disease_id)
        if position < len(ids) and ids[position] == disease_id:
            return position
        return None

    def id_by_name(self, name: str) -> int | None:
        """Return the id of the first disease in use called ``name``."""
        return next(
            (
                item.disease_id
                for item in self._items
                if item.disease_id and item.name == name
            ),
            None,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Disease]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Disease:
        return self._items[index]

    def render(self) -> str:
        """One comma-separated line per disease in use."""
        return "\n".join(
            ", ".join(item._formatted())
            for item in self._items
            if item.disease_id != 0
        )

    def write(self, folder: str | Path) -> Path:
        """Write ``penyakit.csv`` into ``folder`` and return its path."""
        path = Path(folder) / "penyakit.csv"
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(HEADER + "\n")
            for item in self._items:
                handle.write(";".join(item._formatted()) + "\n")
        return path