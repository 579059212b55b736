"""Raw binary files of double-precision samples."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path
from typing import Iterable

_SAMPLE = struct.Struct("<d")


def write_samples(path: str | PathLike, values: Iterable[float]) -> None:
    """Write the values as consecutive little-endian 64-bit floats."""
    data = list(values)
    Path(path).write_bytes(struct.pack(f"<{len(data)}d", *data))


def read_samples(path: str | PathLike) -> list[float]:
    """Read a file written by write_samples."""
    raw = Path(path).read_bytes()
    if len(raw) % _SAMPLE.size:
        raise ValueError(f"file size {len(raw)} is not a multiple of {_SAMPLE.size}")
    return [value for (value,) in _SAMPLE.iter_unpack(raw)]