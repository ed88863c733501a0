"""Distribution resolution: classify, open, locate and parse in one call."""

from __future__ import annotations

import logging
import lzma
import os
import tarfile
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path

from pkgmeta.archive.formats import DistributionType, classify
from pkgmeta.archive.locator import locate_metadata
from pkgmeta.archive.readers import open_archive
from pkgmeta.archive.tags import extract_tag
from pkgmeta.config import PkgMetaConfig
from pkgmeta.errors import ArchiveError
from pkgmeta.metadata.parser import parse_metadata
from pkgmeta.metadata.record import Metadata

logger = logging.getLogger("pkgmeta.distribution")

# Errors raised by the file system, archive readers and decompressors
TRANSPORT_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    tarfile.TarError,
    zlib.error,
    lzma.LZMAError,
)


@dataclass(frozen=True)
class Distribution:
    kind: DistributionType
    tag: str
    metadata: Metadata
    filename: str

    @property
    def python_version(self) -> str:
        """Supported Python tag; always ``source`` for sdists."""
        return self.tag

    @classmethod
    def from_path(
        cls, path: str | os.PathLike[str], config: PkgMetaConfig | None = None,
    ) -> Distribution:
        return read_distribution(path, config)


def _read_metadata_entry(path: Path, config: PkgMetaConfig) -> tuple[DistributionType, bytes]:
    dist_type, container_format = classify(
        path.name, deprecated_formats=config.deprecated_formats,
    )
    logger.debug(f"{path.name}: {dist_type} in {container_format} container")

    try:
        with open_archive(path, container_format) as archive:
            entry = locate_metadata(archive.names(), dist_type)
            try:
                return dist_type, archive.read(entry)
            except (NotImplementedError, RuntimeError) as e:
                # zipfile: unsupported compression method or encrypted entry
                raise ArchiveError(str(path), f"cannot read {entry}: {e}") from e
    except TRANSPORT_ERRORS as e:
        raise ArchiveError(str(path), str(e) or type(e).__name__) from e


def read_distribution(
    path: str | os.PathLike[str], config: PkgMetaConfig | None = None,
) -> Distribution:
    """Open a distribution file and return its parsed metadata.

    Raises ``UnknownDistributionType``, ``MetadataNotFound``,
    ``MultipleMetadataFiles``, ``FieldNotFound`` or ``ArchiveError``.
    """
    config = config or PkgMetaConfig()
    path = Path(path)

    dist_type, content = _read_metadata_entry(path, config)
    metadata = parse_metadata(content)
    tag = extract_tag(path.name, dist_type)

    logger.info(f"Read {metadata.name} {metadata.version} from {path.name} ({dist_type}, {tag})")
    return Distribution(
        kind=dist_type,
        tag=tag,
        metadata=metadata,
        filename=path.name,
    )


def read_metadata_file(path: str | os.PathLike[str]) -> Metadata:
    """Parse a bare PKG-INFO or METADATA file."""
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ArchiveError(str(path), str(e)) from e
    return parse_metadata(content)
