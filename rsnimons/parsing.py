"""Field parsing for the data files and ASCII lower-casing."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterator
from itertools import chain, repeat
from typing import Union

Field = Union[int, float, str]

_CSV_SEPARATORS = re.compile(r"[,;]")
_CONFIG_SEPARATORS = re.compile(r"[,; ]")
_LINE_END = re.compile(r"[\n\0]")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_single(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    value = float(match.group(1))
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _convert(fields: Iterator[str], fmt: str) -> list[Field]:
    values: list[Field] = []
    padded = chain(fields, repeat(""))
    for kind, text in zip(fmt, padded):
        if kind == "i":
            values.append(_to_int(text))
        elif kind == "f":
            values.append(_to_single(text))
        elif kind == "c":
            values.append(text[:1])
        elif kind == "s":
            values.append(text)
    return values


def _body(line: str) -> str:
    return _LINE_END.split(line, maxsplit=1)[0]


def parse_fields(line: str, fmt: str) -> list[Field]:
    """Split a data-file line on ',' or ';' and convert each field.

    ``fmt`` holds one letter per field: ``i`` integer, ``f`` single-precision
    float, ``c`` first character, ``s`` string; any other letter consumes a
    field without producing a value. Carriage returns are dropped, the line
    ends at a newline, and missing fields read as empty.
    """
    body = _body(line).replace("\r", "")
    return _convert(iter(_CSV_SEPARATORS.split(body)), fmt)


def parse_config_fields(line: str, fmt: str) -> list[Field]:
    """Like :func:`parse_fields`, but spaces also separate fields."""
    return _convert(iter(_CONFIG_SEPARATORS.split(_body(line))), fmt)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters A-Z, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)