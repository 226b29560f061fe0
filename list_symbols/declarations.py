"""Top-level declaration enumeration.

A translation unit is parsed once with libclang and only the direct children
of its root cursor are inspected. Anything whose expansion location lies in a
system header is dropped; everything else becomes a :class:`Declaration`.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import clang.cindex

from .errors import ParseError

logger = logging.getLogger(__name__)

# No precompiled preamble, no detailed preprocessing record.
PARSE_OPTIONS = 0


@dataclass(frozen=True, kw_only=True)
class Declaration:
    source_path: str
    line: int
    display_name: str

    @property
    def filename_line(self) -> str:
        return f"{self.source_path}:{self.line}"


@contextmanager
def parse_translation_unit(
    path: str | os.PathLike, args: Sequence[str] = ()
) -> Iterator[clang.cindex.TranslationUnit]:
    """Parse ``path`` and yield the translation unit.

    Raises :class:`ParseError` when libclang produces no translation unit.
    Source with compile errors still parses; its diagnostics are only logged.
    The index and translation unit are not disposed explicitly: the bindings
    free their libclang handles when the objects are garbage-collected, which
    happens once the caller drops the unit and every cursor taken from it.
    """
    filename = os.fspath(path)
    index = clang.cindex.Index.create()
    logger.debug("parsing %s with args %r", filename, list(args))
    try:
        tu = index.parse(filename, args=list(args), options=PARSE_OPTIONS)
    except clang.cindex.TranslationUnitLoadError as exc:
        raise ParseError(filename) from exc
    logger.debug("%s: %d diagnostics", filename, len(tu.diagnostics))
    yield tu


def is_in_system_header(cursor: clang.cindex.Cursor) -> bool:
    return cursor.location.is_in_system_header


def to_declaration(cursor: clang.cindex.Cursor) -> Declaration:
    # cursor.location resolves file and line through the expansion location.
    location = cursor.location
    source_file = location.file
    return Declaration(
        source_path=source_file.name if source_file is not None else "",
        line=location.line,
        display_name=cursor.displayname,
    )


def top_level_declarations(root: clang.cindex.Cursor) -> Iterator[Declaration]:
    """Yield a declaration for each direct child of ``root`` in user code."""
    children: Iterable[clang.cindex.Cursor] = root.get_children()
    for cursor in children:
        if is_in_system_header(cursor):
            continue
        yield to_declaration(cursor)


def enumerate_declarations(
    path: str | os.PathLike, args: Sequence[str] = ()
) -> Iterator[Declaration]:
    with parse_translation_unit(path, args) as tu:
        yield from top_level_declarations(tu.cursor)
