"""Hospital configuration: floor plan, patient inventories and stomachs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from rsnimons.containers import Stack
from rsnimons.matrix import FloorPlan, Matrix

MAX_PASIEN = 1000
MAX_OBAT = 10


def _new_inventory() -> Matrix:
    return Matrix(MAX_PASIEN, MAX_OBAT)


def _new_stomachs() -> list[Stack]:
    return [Stack() for _ in range(MAX_PASIEN)]


@dataclass
class Config:
    """Everything ``config.txt`` holds about the running hospital.

    ``medicine_owners`` and ``stomach_count`` are the stored counts of
    patients holding medicine and of patients with a non-empty stomach.
    """

    floor_plan: FloorPlan = field(default_factory=FloorPlan)
    room_capacity: int = 0
    queue_capacity: int = 0
    medicine_owners: int = 0
    inventory: Matrix = field(default_factory=_new_inventory)
    stomach_count: int = 0
    stomachs: list[Stack] = field(default_factory=_new_stomachs)

    def _inventory_row(self, row: int, width: int) -> Iterator[int]:
        for col in range(width):
            value = self.inventory.get(row, col)
            if value == 0:
                return
            yield value

    def _owners(self) -> Iterator[int]:
        for row in range(self.inventory.rows):
            if self.inventory.get(row, 0) != 0:
                yield row

    def _full_stomachs(self) -> Iterator[tuple[int, Stack]]:
        for patient_id, stomach in enumerate(self.stomachs):
            if not stomach.is_empty():
                yield patient_id, stomach

    def render(self) -> str:
        """Describe the whole configuration for a human reader."""
        plan = self.floor_plan
        lines = [
            f"Ukuran denah {plan.rows}x{plan.cols}",
            f"Kapasitas ruang: {self.room_capacity}; "
            f"Kapasitas antrian: {self.queue_capacity}",
        ]
        for row in range(plan.rows):
            for col in range(plan.cols):
                room = plan.room(row, col)
                if room.doctor_id == 0:
                    continue
                lines += [
                    f"Ruangan {room.code}",
                    f"\tID Dokter: {room.doctor_id}",
                    f"\tAntrian (ID Pasien): {room.queue.render()}",
                ]
            lines.append("")
        lines += [f"Jumlah pemilik obat: {self.medicine_owners}", "Inventory Pasien"]
        for patient_id in self._owners():
            items = "".join(
                f"{value} "
                for value in self._inventory_row(patient_id, self.inventory.cols)
            )
            lines += [f"Pasien ID: {patient_id}", f"\tInventory: {items}"]
        lines.append(f"Jumlah perut pasien terisi: {self.stomach_count}")
        lines += [
            f"Perut pasien {patient_id}: {stomach.render()}"
            for patient_id, stomach in self._full_stomachs()
        ]
        return "\n".join(lines)

    def write(self, folder: str | Path) -> Path:
        """Write ``config.txt`` into ``folder`` and return its path."""
        plan = self.floor_plan
        lines = [
            f"{plan.rows} {plan.cols}",
            f"{self.room_capacity} {self.queue_capacity}",
        ]
        for room in plan.rooms():
            if room.doctor_id == 0:
                lines.append("0")
            elif room.queue.is_empty():
                lines.append(f"{room.doctor_id} 0")
            else:
                lines.append(
                    f"{room.doctor_id}" + "".join(f" {p}" for p in room.queue)
                )
        lines.append(f"{self.medicine_owners}")
        for patient_id in self._owners():
            values = self._inventory_row(patient_id, self.inventory.max_cols)
            lines.append(f"{patient_id}" + "".join(f" {v}" for v in values))
        lines.append(f"{self.stomach_count}")
        for patient_id, stomach in self._full_stomachs():
            bottom_first = reversed(list(stomach))
            lines.append(f"{patient_id}" + "".join(f" {v}" for v in bottom_first))
        path = Path(folder) / "config.txt"
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write("\n".join(lines) + "\n")
        return path