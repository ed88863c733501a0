"""Shared test fixtures."""

from __future__ import annotations

import io
import tarfile
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

BUILD_PKG_INFO = """\
Metadata-Version: 2.1
Name: build
Version: 0.4.0
Summary: A simple, correct PEP517 package builder
Home-page: UNKNOWN
Author: Filipe Laíns
Author-email: Filipe Laíns <lains@archlinux.org>
License: MIT
Project-URL: homepage, https://github.com/pypa/build
Project-URL: changelog, https://pypa-build.readthedocs.io/en/stable/changelog.html
Platform: UNKNOWN
Classifier: License :: OSI Approved :: MIT License
Classifier: Programming Language :: Python :: 3
Requires-Python: >=3.6
Description-Content-Type: text/markdown
Provides-Extra: docs
Requires-Dist: packaging (>=19.0)
Requires-Dist: pep517 (>=0.9.1)
Requires-Dist: sphinx (~=3.0) ; extra == 'docs'

# build

A simple, correct PEP517 package builder.
"""

Entries = dict[str, str | bytes]


def _as_bytes(content: str | bytes) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else content


@pytest.fixture
def build_pkg_info() -> str:
    return BUILD_PKG_INFO


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[[str, Entries], Path]:
    """Helper to write a zip archive with the given entries, in order."""
    def _make(filename: str, entries: Entries) -> Path:
        path = tmp_path / filename
        with zipfile.ZipFile(path, "w") as zf:
            for name, content in entries.items():
                zf.writestr(name, _as_bytes(content))
        return path
    return _make


@pytest.fixture
def make_tar(tmp_path: Path) -> Callable[..., Path]:
    """Helper to write a tar archive; entries ending with '/' become directories."""
    def _make(filename: str, entries: Entries, compression: str = "") -> Path:
        path = tmp_path / filename
        with tarfile.open(path, f"w:{compression}") as tar:
            for name, content in entries.items():
                info = tarfile.TarInfo(name.rstrip("/"))
                if name.endswith("/"):
                    info.type = tarfile.DIRTYPE
                    tar.addfile(info)
                    continue
                data = _as_bytes(content)
                info.size = len(data)
                tar.addfile(info, io.BytesIO(data))
        return path
    return _make
