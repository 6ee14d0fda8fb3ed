"""Leaving the program, optionally saving the data first."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rsnimons.display import Color, colored, logo
from rsnimons.storage import DATA_ROOT, Hospital, save


def exit_program(
    hospital: Hospital,
    data_root: str | Path = DATA_ROOT,
    read_line: Callable[[str], str] = input,
) -> Path | None:
    """Ask whether to save, save if wanted, and say goodbye.

    Asks again until the answer is exactly ``y`` or ``n``. Returns the folder
    the data was saved to, or None when the user chose not to save.
    """
    while True:
        answer = read_line(
            f"{Color.GREEN.value}Apakah Anda mau melakukan penyimpanan file "
            "yang sudah diubah? (y/n) "
        )
        print(Color.RESET.value, end="")
        answer = answer.split("\n", 1)[0]
        if answer in ("y", "n"):
            break
        print(
            colored(
                "Input tidak valid! Masukkan hanya satu karakter: 'y' atau 'n'.\n",
                Color.RED,
            )
        )

    saved: Path | None = None
    if answer == "y":
        print(colored("Data akan disimpan.", Color.BLUE))
        saved = save(hospital, data_root, read_line)
    else:
        print(colored("Data tidak disimpan.", Color.BLUE))
    print(logo(), end="")
    print(colored("THANK YOU FOR USING OUR SERVICE !!!", Color.BLUE))
    return saved