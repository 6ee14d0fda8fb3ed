"""Small string-keyed map and string set with fixed capacities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_MAP_SIZE = 100
DEFAULT_SET_CAPACITY = 100


class StringMap:
    """Ordered string-to-string map holding at most ``capacity`` entries.

    Keys are not required to be unique; lookups return the earliest entry.
    """

    def __init__(self, capacity: int = MAX_MAP_SIZE) -> None:
        self.capacity = capacity
        self._pairs: list[tuple[str, str]] = []

    def add(self, key: str, value: str) -> None:
        """Append a ``key``/``value`` entry."""
        if self.is_full():
            raise OverflowError("map is full")
        self._pairs.append((key, value))

    def get(self, key: str) -> str | None:
        """Return the value of the first entry with ``key``, or None."""
        return next((value for k, value in self._pairs if k == key), None)

    def remove(self, key: str) -> None:
        """Remove the first entry with ``key``; later entries move up."""
        for position, (k, _) in enumerate(self._pairs):
            if k == key:
                del self._pairs[position]
                return
        raise KeyError(key)

    def is_empty(self) -> bool:
        return not self._pairs

    def is_full(self) -> bool:
        return len(self._pairs) >= self.capacity

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._pairs)

    def render(self) -> str:
        """Return the map as a text table."""
        if self.is_empty():
            return "Maaf, map saat ini sedang kosong."
        rule = "-" * 33
        lines = [
            "Berikut adalah isi dari current map.",
            rule,
            f" {'Key':<20} | {'Value':<20} ",
            rule,
            *(f" {key:<20} | {value:<20} " for key, value in self._pairs),
            rule,
            f"Total entri: {len(self._pairs)}",
        ]
        return "\n".join(lines)


class StringSet:
    """Insertion-ordered set of strings with a fixed capacity."""

    def __init__(
        self, capacity: int = DEFAULT_SET_CAPACITY, items: Iterable[str] = ()
    ) -> None:
        self.capacity = capacity
        self._items: list[str] = []
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        """Insert ``item`` unless present or the set is full; report success."""
        if item in self._items or len(self._items) >= self.capacity:
            return False
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def index_of(self, item: str) -> int:
        """Return the insertion position of ``item``."""
        try:
            return self._items.index(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the set") from None

    def remove(self, item: str) -> None:
        """Remove ``item`` if it is present."""
        if item in self._items:
            self._items.remove(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)