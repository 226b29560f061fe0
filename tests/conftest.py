"""Shared fixtures for list-symbols tests."""

import clang.cindex
import pytest


@pytest.fixture
def libclang():
    """Skip tests that need a loadable libclang shared library."""
    try:
        clang.cindex.Index.create()
    except clang.cindex.LibclangError as exc:
        pytest.skip(f"libclang unavailable: {exc}")
    return clang.cindex


@pytest.fixture
def write_source(tmp_path):
    def write(name: str, text: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return write
