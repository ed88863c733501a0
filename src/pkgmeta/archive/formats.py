"""Distribution type and container format classification by file name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePath

from pkgmeta.errors import UnknownDistributionType


class DistributionType(StrEnum):
    SDIST = "sdist"
    EGG = "bdist_egg"
    WHEEL = "bdist_wheel"


class Container(StrEnum):
    ZIP = "zip"
    TAR = "tar"


class Codec(StrEnum):
    NONE = "none"
    GZIP = "gzip"
    BZIP2 = "bzip2"
    XZ = "xz"

    @property
    def tar_compression(self) -> str:
        """Compression suffix understood by ``tarfile.open`` modes."""
        return _TAR_COMPRESSION[self]


_TAR_COMPRESSION = {
    Codec.NONE: "",
    Codec.GZIP: "gz",
    Codec.BZIP2: "bz2",
    Codec.XZ: "xz",
}


@dataclass(frozen=True)
class ContainerFormat:
    container: Container
    codec: Codec = Codec.NONE

    @classmethod
    def zip(cls) -> ContainerFormat:
        return cls(Container.ZIP)

    @classmethod
    def tar(cls, codec: Codec = Codec.NONE) -> ContainerFormat:
        return cls(Container.TAR, codec)

    def __str__(self) -> str:
        if self.container is Container.TAR and self.codec is not Codec.NONE:
            return f"tar+{self.codec}"
        return str(self.container)


# Source distribution suffixes always available
_SDIST_FORMATS: dict[str, ContainerFormat] = {
    "zip": ContainerFormat.zip(),
    "gz": ContainerFormat.tar(Codec.GZIP),
    "tgz": ContainerFormat.tar(Codec.GZIP),
}

# Legacy sdist suffixes, only accepted with deprecated formats enabled
_DEPRECATED_SDIST_FORMATS: dict[str, ContainerFormat] = {
    "tar": ContainerFormat.tar(),
    "bz2": ContainerFormat.tar(Codec.BZIP2),
    "tbz": ContainerFormat.tar(Codec.BZIP2),
    "lz": ContainerFormat.tar(Codec.XZ),
    "lzma": ContainerFormat.tar(Codec.XZ),
    "tlz": ContainerFormat.tar(Codec.XZ),
    "txz": ContainerFormat.tar(Codec.XZ),
    "xz": ContainerFormat.tar(Codec.XZ),
}

_BDIST_FORMATS: dict[str, DistributionType] = {
    "egg": DistributionType.EGG,
    "whl": DistributionType.WHEEL,
}


def file_extension(filename: str) -> str | None:
    """Return the text after the last dot of the final path segment.

    Dot-files (``.gz``) and names ending with a dot have no extension.
    """
    suffix = PurePath(filename).suffix
    if not suffix:
        return None
    return suffix[1:]


def sdist_formats(deprecated_formats: bool = True) -> dict[str, ContainerFormat]:
    """Map each accepted sdist extension to its container format."""
    formats = dict(_SDIST_FORMATS)
    if deprecated_formats:
        formats.update(_DEPRECATED_SDIST_FORMATS)
    return formats


def enabled_extensions(deprecated_formats: bool = True) -> frozenset[str]:
    """All extensions ``classify`` accepts under the given feature setting."""
    return frozenset(sdist_formats(deprecated_formats)) | frozenset(_BDIST_FORMATS)


def classify(
    filename: str, *, deprecated_formats: bool = True,
) -> tuple[DistributionType, ContainerFormat]:
    """Classify a distribution file by its final extension.

    Compound suffixes such as ``.tar.gz`` are recognised by the final
    extension alone. Extensions of disabled formats are rejected the same
    way as unknown ones.
    """
    ext = file_extension(filename)
    if ext is None:
        raise UnknownDistributionType(filename)

    sdist_format = sdist_formats(deprecated_formats).get(ext)
    if sdist_format is not None:
        return DistributionType.SDIST, sdist_format

    dist_type = _BDIST_FORMATS.get(ext)
    if dist_type is None:
        raise UnknownDistributionType(filename)
    return dist_type, ContainerFormat.zip()
