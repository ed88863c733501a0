"""Distribution archive classification, reading and metadata lookup."""

from pkgmeta.archive.formats import Codec, ContainerFormat, DistributionType, classify
from pkgmeta.archive.locator import locate_metadata, metadata_suffix
from pkgmeta.archive.readers import open_archive
from pkgmeta.archive.tags import extract_tag

__all__ = [
    "Codec",
    "ContainerFormat",
    "DistributionType",
    "classify",
    "extract_tag",
    "locate_metadata",
    "metadata_suffix",
    "open_archive",
]
