"""Users of the hospital and the list that holds them."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_CAPACITY = 100
DEFAULT_LIVES = 3

# One letter per field of a ``user.csv`` record, in column order.
RECORD_FORMAT = "issssfiiififiiiii"

HEADER = (
    "id;username;password;role;riwayat_penyakit;suhu_tubuh;"
    "tekanan_darah_sistolik;tekanan_darah_diastolik;detak_jantung;"
    "saturasi_oksigen;kadar_gula_darah;berat_badan;tinggi_badan;"
    "kadar_kolesterol;trombosit;nyawa;aura"
)


@dataclass
class User:
    """A manager, doctor or patient; id 0 marks an unused slot.

    ``room`` and ``queue_room`` name the room the user is in or is queued
    for, and are not stored in ``user.csv``.
    """

    user_id: int = 0
    username: str = ""
    password: str = ""
    role: str = ""
    disease_history: str = ""
    temperature: float = 0.0
    systolic: int = 0
    diastolic: int = 0
    heart_rate: int = 0
    oxygen_saturation: float = 0.0
    blood_sugar: int = 0
    weight: float = 0.0
    height: int = 0
    cholesterol: int = 0
    platelets: int = 0
    lives: int = DEFAULT_LIVES
    aura: int = 0
    room: str = ""
    queue_room: str = ""

    @property
    def is_patient(self) -> bool:
        return self.role == "pasien"

    def _vitals(self) -> list[str]:
        return [
            f"{self.temperature:.6f}",
            f"{self.systolic}",
            f"{self.diastolic}",
            f"{self.heart_rate}",
            f"{self.oxygen_saturation:.6f}",
            f"{self.blood_sugar}",
            f"{self.weight:.6f}",
            f"{self.height}",
            f"{self.cholesterol}",
            f"{self.platelets}",
            f"{self.lives}",
        ]

    def render(self) -> str:
        """Comma-separated description; patients also show their medical data."""
        text = f"{self.user_id},{self.username},{self.password},{self.role}"
        if self.is_patient:
            text += "," + ",".join([self.disease_history, *self._vitals()])
        return text

    def reset_medical(self) -> None:
        """Clear the diagnosis and vital signs and restore full lives."""
        self.disease_history = ""
        self.temperature = 0.0
        self.systolic = 0
        self.diastolic = 0
        self.heart_rate = 0
        self.oxygen_saturation = 0.0
        self.blood_sugar = 0
        self.weight = 0.0
        self.height = 0
        self.cholesterol = 0
        self.platelets = 0
        self.lives = DEFAULT_LIVES

    def _record(self) -> str:
        text = ";".join(
            [
                f"{self.user_id}",
                self.username,
                self.password,
                self.role,
                self.disease_history,
            ]
        )
        if self.temperature != 0:
            return text + ";" + ";".join(self._vitals()) + ";"
        if self.is_patient:
            text += ";" * 11 + f"{self.lives};"
        else:
            text += ";" * 12
        if self.role == "dokter":
            text += f"{self.aura}"
        return text


class UserList:
    """List of users with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[User] = []

    def append(self, user: User) -> None:
        """Add ``user`` after the last used slot."""
        if len(self._items) >= self.capacity:
            raise OverflowError("user list is full")
        self._items.append(user)

    def put_by_id(self, user: User) -> None:
        """Place ``user`` at the slot numbered by its id."""
        slot = user.user_id
        if not 0 <= slot < self.capacity:
            raise IndexError(f"user id {slot} out of range")
        while len(self._items) <= slot:
            self._items.append(User())
        self._items[slot] = user

    def sort(self) -> None:
        """Order the users by id, keeping equal ids in place."""
        self._items.sort(key=lambda user: user.user_id)

    def index_of_id(self, user_id: int) -> int | None:
        """Binary-search a list sorted by id; None when the id is absent."""
        ids = [user.user_id for user in self._items]
        position = bisect_left(ids, user_id)
        if position < len(ids) and ids[position] == user_id:
            return position
        return None

    def index_of_username(self, username: str) -> int | None:
        """Position of the first user called ``username``, or None."""
        return next(
            (
                position
                for position, user in enumerate(self._items)
                if user.username == username
            ),
            None,
        )

    def username_of(self, user_id: int) -> str:
        """Username of the user with ``user_id``, or ``-`` when unknown."""
        position = self.index_of_id(user_id)
        if position is None:
            return "-"
        return self._items[position].username

    def delete(self, index: int) -> User:
        """Remove the user at ``index``; later users move up."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items.pop(index)

    def pop_last(self) -> User:
        """Remove and return the last user."""
        if not self._items:
            raise IndexError("user list is empty")
        return self._items.pop()

    def copy(self) -> UserList:
        """Return an independent list with the same capacity and users."""
        other = UserList(self.capacity)
        other._items = [replace(user) for user in self._items]
        return other

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[User]:
        return iter(self._items)

    def __getitem__(self, index: int) -> User:
        return self._items[index]

    def render(self) -> str:
        """One line per user in use."""
        return "\n".join(
            user.render() for user in self._items if user.user_id != 0
        )

    def write(self, folder: str | Path) -> Path:
        """Write ``user.csv`` into ``folder`` and return its path."""
        path = Path(folder) / "user.csv"
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(HEADER + "\n")
            for user in self._items:
                handle.write(user._record() + "\n")
        return path