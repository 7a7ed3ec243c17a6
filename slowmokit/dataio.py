"""Reading numeric tables from CSV files."""

from __future__ import annotations

import os


def read_csv(path: str | os.PathLike[str]) -> list[list[int]]:
    """Read an integer CSV file, skipping its header line.

    Each following line becomes a list of integers. A field that is not
    an integer raises ``ValueError``.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    return [[int(token) for token in line.split(",")] for line in lines[1:]]