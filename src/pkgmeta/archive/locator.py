"""Locate the metadata entry inside a distribution archive."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath

from pkgmeta.archive.formats import DistributionType
from pkgmeta.errors import MetadataNotFound, MultipleMetadataFiles

logger = logging.getLogger("pkgmeta.locator")

_METADATA_SUFFIXES = {
    DistributionType.SDIST: "PKG-INFO",
    DistributionType.EGG: "EGG-INFO/PKG-INFO",
    DistributionType.WHEEL: ".dist-info/METADATA",
}

EGG_INFO_SUFFIX = ".egg-info/PKG-INFO"


def metadata_suffix(dist_type: DistributionType) -> str:
    """Return the entry-name suffix that marks the metadata file."""
    return _METADATA_SUFFIXES[dist_type]


def _is_top_level(name: str) -> bool:
    return len(PurePosixPath(name).parts) == 2


def locate_metadata(names: Iterable[str], dist_type: DistributionType) -> str:
    """Pick the single metadata entry among archive entry names.

    Matches are entries ending with the suffix for ``dist_type``, kept in
    listing order. Resolution rules:

    1. no match raises ``MetadataNotFound``
    2. a single match is returned
    3. two matches with at least one ``.egg-info/PKG-INFO`` return the
       first of the two (sdists built by setuptools ship both a top-level
       PKG-INFO and an egg-info copy)
    4. otherwise the only match sitting one directory deep is returned

    Anything else raises ``MultipleMetadataFiles`` with every match.
    """
    suffix = metadata_suffix(dist_type)
    matches = [name for name in names if name.endswith(suffix)]

    if not matches:
        raise MetadataNotFound(suffix)

    if len(matches) == 1:
        logger.debug(f"Found metadata entry {matches[0]}")
        return matches[0]

    if len(matches) == 2 and any(m.endswith(EGG_INFO_SUFFIX) for m in matches):
        logger.debug(f"Picked {matches[0]} out of egg-info pair {matches}")
        return matches[0]

    top_level = [m for m in matches if _is_top_level(m)]
    if len(top_level) == 1:
        logger.debug(f"Picked top-level {top_level[0]} out of {len(matches)} candidates")
        return top_level[0]

    raise MultipleMetadataFiles(matches)
