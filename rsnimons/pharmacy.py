"""Patients taking their medicine and throwing it back up."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from rsnimons.config import Config
from rsnimons.display import Color, ascii_ded, colored
from rsnimons.prescriptions import MAX_OBAT_PER_PENYAKIT
from rsnimons.storage import Hospital
from rsnimons.user import DEFAULT_LIVES

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Session:
    """Who is logged in.

    ``state`` is 0 when nobody is logged in, 1 for a manager, 2 for a doctor
    and 3 for a patient; ``user_id`` is -1 when nobody is logged in.
    """

    state: int = 0
    user_id: int = -1

    def logout(self) -> None:
        """Forget the logged-in user."""
        self.state = 0
        self.user_id = -1


def _medicine_name(hospital: Hospital, medicine_id: int) -> str:
    position = hospital.medicines.index_of(medicine_id)
    if position is None:
        return str(medicine_id)
    return hospital.medicines[position].name


def _inventory_row(config: Config, patient_id: int) -> list[int]:
    return [
        config.inventory.get(patient_id, col) for col in range(MAX_OBAT_PER_PENYAKIT)
    ]


def _store_row(config: Config, patient_id: int, row: list[int]) -> None:
    for col, value in enumerate(row):
        if config.inventory.get(patient_id, col) != value:
            config.inventory.set(patient_id, col, value)


def _read_choice(answer: str) -> int | None:
    match = _LEADING_INT.match(answer)
    return int(match.group(1)) if match else None


def _hearts(lives: int) -> str:
    return "\u2764\uFE0F " * lives + "\U0001F90D" * (DEFAULT_LIVES - lives)


def _remove_from_queues(hospital: Hospital, patient_id: int) -> None:
    for room in hospital.config.floor_plan.rooms():
        if room.queue.peek() == patient_id:
            room.queue.dequeue()
            return


def _die(hospital: Hospital, session: Session, patient_id: int, user_index: int) -> None:
    config = hospital.config
    _remove_from_queues(hospital, patient_id)
    hospital.users.delete(user_index)
    _store_row(config, patient_id, [0] * MAX_OBAT_PER_PENYAKIT)
    config.medicine_owners -= 1
    stomach = config.stomachs[patient_id]
    while not stomach.is_empty():
        stomach.pop()
    config.stomach_count -= 1
    print(ascii_ded(), end="")
    print(
        f"{Color.MAGENTA.value}Mohon maaf, karena kamu telah meminum obat yang salah "
        "sebanyak tiga kali, rumah sakit enggan untuk memberimu penawar."
    )
    print(f"{Color.MAGENTA.value}Kamu dinyatakan ded. \U0001F480")
    print(Color.RESET.value, end="")
    session.logout()


def minum_obat(
    hospital: Hospital,
    session: Session,
    read_line: Callable[[str], str] = input,
) -> int | None:
    """Let the logged-in patient pick a medicine from the inventory and drink it.

    A medicine taken out of its prescribed order costs a life; losing the last
    one removes the patient from the hospital and logs the session out.
    Returns the id of the medicine drunk, or None when nothing was drunk.
    """
    config = hospital.config
    patient_id = session.user_id
    if config.inventory.is_row_empty(patient_id):
        print(colored("Kamu tidak memiliki obat!", Color.RED))
        return None

    user_index = hospital.users.index_of_id(patient_id)
    if user_index is None:
        raise LookupError(f"no user with id {patient_id}")
    user = hospital.users[user_index]

    row = _inventory_row(config, patient_id)
    available = [medicine_id for medicine_id in row if medicine_id != 0]
    print(f"{Color.YELLOW.value}============ DAFTAR OBAT ============")
    for number, medicine_id in enumerate(available, start=1):
        print(f"{number}. {_medicine_name(hospital, medicine_id)}")

    choice = _read_choice(read_line("Pilih obat untuk diminum: "))
    if choice is None or not 1 <= choice <= len(available):
        print(colored("Pilihan nomor tidak tersedia!", Color.RED))
        return None

    chosen = available[choice - 1]
    stomach = config.stomachs[patient_id]
    if stomach.is_empty():
        config.stomach_count += 1
    print(
        f"GLEKGLEKGLEK... {_medicine_name(hospital, chosen)} berhasil diminum!!!"
        f"{Color.RESET.value}"
    )
    stomach.push(chosen)

    del row[row.index(chosen)]
    row.append(0)
    _store_row(config, patient_id, row)

    disease_id = hospital.diseases.id_by_name(user.disease_history)
    expected = (
        0
        if disease_id is None
        else hospital.prescriptions.medicine_at(disease_id, len(stomach))
    )
    if stomach.peek() != expected:
        user.lives -= 1
        print(
            f"{Color.RED.value}Kamu salah minum obat! Nyawamu berkurang menjadi "
            f"{user.lives}!{_hearts(user.lives)}"
        )
        print(colored("Segera kontak dokter untuk minum penawar!", Color.RED))

    if user.lives <= 0:
        _die(hospital, session, patient_id, user_index)
        return chosen

    if config.inventory.get(patient_id, 0) == 0:
        config.medicine_owners -= 1
    return chosen


def minum_penawar(hospital: Hospital, patient_id: int) -> int | None:
    """Bring the last medicine swallowed back into the patient's inventory.

    Returns the id of that medicine, or None when the stomach is empty.
    """
    config = hospital.config
    stomach = config.stomachs[patient_id]
    if stomach.is_empty():
        print(colored("Perut kosong!! Belum ada obat yang dimakan.", Color.RED))
        return None

    medicine_id = stomach.pop()
    print(
        colored(
            f"Uwekkk!!! {_medicine_name(hospital, medicine_id)} keluar dan "
            "kembali ke inventory.",
            Color.YELLOW,
        )
    )
    if config.inventory.get(patient_id, 0) == 0:
        config.medicine_owners += 1
    row = _inventory_row(config, patient_id)
    if 0 in row:
        row[row.index(0)] = medicine_id
        _store_row(config, patient_id, row)
    if stomach.is_empty():
        config.stomach_count -= 1
    return medicine_id