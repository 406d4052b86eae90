"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import zipfile
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, Iterable[str]], Path]:
    """Factory creating a directory tree under tmp_path.

    Names ending with "/" become empty directories, everything else a
    small file (parents created as needed).
    """

    def _make(root_name: str, names: Iterable[str]) -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            target = root / name
            if name.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(b"payload")
        return root

    return _make


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[[str, Iterable[str]], Path]:
    """Factory creating a zip archive under tmp_path.

    Member names are stored verbatim, so "a/" produces an explicit
    directory member the way jar tools write them.
    """

    def _make(archive_name: str, members: Iterable[str]) -> Path:
        archive = tmp_path / archive_name
        archive.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive, "w") as zf:
            for member in members:
                zf.writestr(member, b"" if member.endswith("/") else b"payload")
        return archive

    return _make
