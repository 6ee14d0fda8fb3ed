"""Loading the hospital from a data folder and saving it back."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from rsnimons import disease as disease_module
from rsnimons import user as user_module
from rsnimons.config import Config
from rsnimons.disease import Disease, DiseaseList
from rsnimons.display import Color, colored
from rsnimons.medicine import Medicine, MedicineList
from rsnimons.parsing import parse_config_fields, parse_fields
from rsnimons.prescriptions import PrescriptionMap
from rsnimons.user import User, UserList

DATA_ROOT = Path("../data")
MAX_FOLDER_NAME = 255

_DATA_FILES = (
    "obat.csv",
    "penyakit.csv",
    "obat_penyakit.csv",
    "user.csv",
    "config.txt",
)


@dataclass
class Hospital:
    """All the data the hospital keeps in one data folder."""

    users: UserList = field(default_factory=UserList)
    medicines: MedicineList = field(default_factory=MedicineList)
    diseases: DiseaseList = field(default_factory=DiseaseList)
    prescriptions: PrescriptionMap = field(default_factory=PrescriptionMap)
    config: Config = field(default_factory=Config)


def _records(handle: IO[str]) -> Iterator[str]:
    """Yield the lines of a CSV file after its header line."""
    next(handle, None)
    yield from handle


def _take(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None:
        raise ValueError("config.txt ended early")
    return line


def _int(text: str) -> int:
    return int(parse_config_fields(text, "i")[0])


def _head_and_tokens(line: str) -> tuple[int, list[str]]:
    """First field of a config line and the space-separated tokens after it."""
    body = line.split("\n", 1)[0].split("\0", 1)[0]
    return _int(line), body.split()[1:]


def _read_config(handle: IO[str], config: Config) -> None:
    lines = iter(handle)
    plan = config.floor_plan
    plan.rows, plan.cols = (int(v) for v in parse_config_fields(_take(lines), "ii"))
    config.room_capacity, config.queue_capacity = (
        int(v) for v in parse_config_fields(_take(lines), "ii")
    )
    for row in range(plan.rows):
        for col in range(plan.cols):
            room = plan.room(row, col)
            room.doctor_id, tokens = _head_and_tokens(_take(lines))
            for token in tokens:
                if token.startswith("0"):
                    break
                room.queue.enqueue(_int(token))

    config.medicine_owners = _int(_take(lines))
    for _ in range(config.medicine_owners):
        patient_id, tokens = _head_and_tokens(_take(lines))
        for col, token in enumerate(tokens):
            config.inventory.set(patient_id, col, _int(token))

    config.stomach_count = _int(_take(lines))
    for _ in range(config.stomach_count):
        patient_id, tokens = _head_and_tokens(_take(lines))
        if not 0 <= patient_id < len(config.stomachs):
            raise IndexError(f"patient id {patient_id} out of range")
        for token in tokens:
            config.stomachs[patient_id].push(_int(token))


def _place_users(users: UserList, config: Config) -> None:
    """Record in each user the room they are in or queued for."""
    for user in users:
        user.room = ""
        user.queue_room = ""
    for room in config.floor_plan.rooms():
        doctor_index = users.index_of_id(room.doctor_id)
        if doctor_index is None:
            continue
        users[doctor_index].room = room.code
        for count, patient_id in enumerate(room.queue):
            patient_index = users.index_of_id(patient_id)
            if patient_index is None:
                continue
            if count < config.room_capacity:
                users[patient_index].room = room.code
            else:
                users[patient_index].queue_room = room.code


def load_hospital(folder: str | Path) -> Hospital:
    """Read every data file in ``folder`` into a new :class:`Hospital`.

    Raises FileNotFoundError when one of the files is missing and
    ValueError when ``config.txt`` is shorter than its counts say.
    """
    folder = Path(folder)
    hospital = Hospital()
    with ExitStack() as stack:
        handles = {
            name: stack.enter_context((folder / name).open(encoding="utf-8"))
            for name in _DATA_FILES
        }

        for line in _records(handles["user.csv"]):
            hospital.users.append(
                User(*parse_fields(line, user_module.RECORD_FORMAT))
            )
        hospital.users.sort()

        for line in _records(handles["obat.csv"]):
            medicine_id, name = parse_fields(line, "is")
            hospital.medicines.append(Medicine(int(medicine_id), str(name)))
        hospital.medicines.sort()

        for line in _records(handles["penyakit.csv"]):
            hospital.diseases.append(
                Disease(*parse_fields(line, disease_module.RECORD_FORMAT))
            )
        hospital.diseases.sort()

        for line in _records(handles["obat_penyakit.csv"]):
            medicine_id, disease_id, order = (
                int(v) for v in parse_fields(line, "iii")
            )
            hospital.prescriptions.insert(medicine_id, disease_id, order)

        _read_config(handles["config.txt"], hospital.config)

    _place_users(hospital.users, hospital.config)
    return hospital


def write_hospital(hospital: Hospital, folder: str | Path) -> Path:
    """Write every data file of ``hospital`` into an existing ``folder``."""
    folder = Path(folder)
    hospital.users.write(folder)
    hospital.medicines.write(folder)
    hospital.diseases.write(folder)
    hospital.prescriptions.write(folder)
    hospital.config.write(folder)
    return folder


def is_valid_folder_name(name: str | None) -> bool:
    """True for a non-empty name of at most 255 bytes without a '/'."""
    if not name:
        return False
    if len(name.encode("utf-8")) > MAX_FOLDER_NAME:
        return False
    return "/" not in name


def folder_exists(path: str | Path) -> bool:
    """True when ``path`` names an existing directory."""
    return Path(path).is_dir()


def save(
    hospital: Hospital,
    data_root: str | Path = DATA_ROOT,
    read_line: Callable[[str], str] = input,
) -> Path:
    """Ask for a folder name until a valid one is given, then save there.

    The folder is created under ``data_root`` when it does not exist yet.
    Returns the folder the data was written to.
    """
    while True:
        answer = read_line(f"{Color.GREEN.value}Masukkan nama folder: ")
        print(Color.RESET.value, end="")
        name = answer.split("\n", 1)[0]
        if is_valid_folder_name(name):
            break
        print(colored("Maaf! Nama folder tidak valid di Linux!", Color.RED))

    folder = Path(data_root) / name
    if not folder_exists(folder):
        folder.mkdir()
    write_hospital(hospital, folder)
    print(colored(f"Data berhasil disimpan di {folder}", Color.BLUE))
    return folder