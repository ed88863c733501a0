"""Zip and tar archive readers exposing entry listing and single-entry reads."""

from __future__ import annotations

import tarfile
import zipfile
from pathlib import Path
from typing import Protocol

from pkgmeta.archive.formats import Codec, Container, ContainerFormat


class ArchiveReader(Protocol):
    def names(self) -> list[str]: ...

    def read(self, name: str) -> bytes: ...

    def close(self) -> None: ...

    def __enter__(self) -> ArchiveReader: ...

    def __exit__(self, *exc_info: object) -> None: ...


class ZipArchiveReader:
    """Random-access reader over a zip file."""

    def __init__(self, path: Path) -> None:
        self._zip = zipfile.ZipFile(path)

    def names(self) -> list[str]:
        return self._zip.namelist()

    def read(self, name: str) -> bytes:
        return self._zip.read(name)

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> ZipArchiveReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TarArchiveReader:
    """Reader over a (possibly compressed) tar stream.

    Tar members can only be discovered by walking the stream, so
    ``names()`` makes one full pass and remembers the member headers.
    ``read()`` then resolves content from those headers.
    """

    def __init__(self, path: Path, codec: Codec = Codec.NONE) -> None:
        self._tar = tarfile.open(path, f"r:{codec.tar_compression}")
        self._members: dict[str, tarfile.TarInfo] | None = None

    def _scan(self) -> dict[str, tarfile.TarInfo]:
        if self._members is None:
            members: dict[str, tarfile.TarInfo] = {}
            for member in self._tar:
                if member.isfile():
                    # first occurrence wins for duplicated names
                    members.setdefault(member.name, member)
            self._members = members
        return self._members

    def names(self) -> list[str]:
        return list(self._scan())

    def read(self, name: str) -> bytes:
        member = self._scan().get(name)
        if member is None:
            raise KeyError(f"no such entry in tar archive: {name}")
        fileobj = self._tar.extractfile(member)
        if fileobj is None:
            raise KeyError(f"tar entry is not a regular file: {name}")
        with fileobj:
            return fileobj.read()

    def close(self) -> None:
        self._tar.close()

    def __enter__(self) -> TarArchiveReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_archive(path: Path, container_format: ContainerFormat) -> ArchiveReader:
    """Open ``path`` with the reader matching its container format."""
    if container_format.container is Container.ZIP:
        return ZipArchiveReader(path)
    return TarArchiveReader(path, container_format.codec)
