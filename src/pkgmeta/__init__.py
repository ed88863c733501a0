"""pkgmeta: read Python package metadata from sdists, eggs and wheels."""

from pkgmeta.archive.formats import DistributionType
from pkgmeta.distribution import Distribution, read_distribution, read_metadata_file
from pkgmeta.errors import (
    ArchiveError,
    FieldNotFound,
    MetadataNotFound,
    MultipleMetadataFiles,
    PkgMetaError,
    UnknownDistributionType,
)
from pkgmeta.metadata import Metadata, parse_metadata

__version__ = "0.6.3"

__all__ = [
    "ArchiveError",
    "Distribution",
    "DistributionType",
    "FieldNotFound",
    "Metadata",
    "MetadataNotFound",
    "MultipleMetadataFiles",
    "PkgMetaError",
    "UnknownDistributionType",
    "parse_metadata",
    "read_distribution",
    "read_metadata_file",
]
