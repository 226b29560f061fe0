"""List top-level C/C++ declarations with libclang."""

from .declarations import (
    Declaration,
    enumerate_declarations,
    parse_translation_unit,
    top_level_declarations,
)
from .errors import LibclangNotFoundError, ListSymbolsError, ParseError, UsageError
from .symbols_csv import (
    HEADER,
    SymbolEntry,
    group_symbols_by_file,
    read_symbols_csv,
    write_symbols_csv,
)

__all__ = [
    "Declaration",
    "HEADER",
    "LibclangNotFoundError",
    "ListSymbolsError",
    "ParseError",
    "SymbolEntry",
    "UsageError",
    "enumerate_declarations",
    "group_symbols_by_file",
    "parse_translation_unit",
    "read_symbols_csv",
    "top_level_declarations",
    "write_symbols_csv",
]
