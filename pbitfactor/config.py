"""Reading and archiving the simulation's name,value configuration file."""

from __future__ import annotations

import os
from pathlib import Path


def _iter_lines(path: str | os.PathLike[str]):
    with open(path, encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line.rstrip("\n")


def read_config(path: str | os.PathLike[str]) -> list[tuple[str, str]]:
    """Return the (name, value) pairs of a configuration file.

    Empty lines and lines starting with '#' are skipped.  Each remaining line
    is split on commas; the first field is the name, the second the value
    (empty when missing) and any further fields are ignored.
    """
    entries: list[tuple[str, str]] = []
    for line in _iter_lines(path):
        if not line or line.startswith("#"):
            continue
        fields = line.split(",")
        name = fields[0]
        value = fields[1] if len(fields) > 1 else ""
        entries.append((name, value))
    return entries


def copy_config(path: str | os.PathLike[str], dir_name: str | os.PathLike[str]) -> Path:
    """Copy the configuration file to ``<dir_name>/info.csv`` and return that path."""
    target = Path(dir_name) / "info.csv"
    with open(target, "w", encoding="utf-8", newline="") as out:
        for line in _iter_lines(path):
            out.write(line + "\n")
    return target