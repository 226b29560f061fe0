"""Symbols CSV format.

One header row, then one row per declaration::

    "src/foo.c:12","foo(int)",

The third column, ``new_display_name``, is left empty for a later renaming
step to fill in. Fields are quoted but never escaped, so a display name
containing ``"`` produces a row that does not round-trip.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

from .declarations import Declaration

HEADER = "filename_line,display_name,new_display_name"


@dataclass(frozen=True, kw_only=True)
class SymbolEntry:
    filename_line: str
    display_name: str
    new_display_name: str = ""

    @property
    def source_path(self) -> str:
        return self.filename_line.rpartition(":")[0]

    @property
    def line(self) -> int:
        return int(self.filename_line.rpartition(":")[2])


def format_declaration(decl: Declaration) -> str:
    return f'"{decl.filename_line}","{decl.display_name}",'


def write_symbols_csv(out: TextIO, declarations: Iterable[Declaration]) -> int:
    out.write(HEADER + "\n")
    rows = 0
    for decl in declarations:
        out.write(format_declaration(decl) + "\n")
        rows += 1
    return rows


def read_symbols_csv(path: str | Path) -> list[SymbolEntry]:
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        missing = {"filename_line", "display_name"} - set(reader.fieldnames or ())
        if missing:
            raise ValueError(f"{path}: missing columns {sorted(missing)}")
        return [
            SymbolEntry(
                filename_line=row["filename_line"],
                display_name=row["display_name"],
                new_display_name=(row.get("new_display_name") or "").strip(),
            )
            for row in reader
        ]


def group_symbols_by_file(entries: Iterable[SymbolEntry]) -> dict[str, list[SymbolEntry]]:
    groups: dict[str, list[SymbolEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.source_path, []).append(entry)
    return groups
