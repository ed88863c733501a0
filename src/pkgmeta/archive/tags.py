"""Python compatibility tag extraction from distribution file names."""

from __future__ import annotations

from pathlib import PurePath

from pkgmeta.archive.formats import DistributionType

SOURCE_TAG = "source"
ANY_TAG = "any"

# name-version-pytag
_EGG_PARTS = 3
# name-version-pytag-abitag-platformtag
_WHEEL_PARTS = 5


def extract_tag(filename: str, dist_type: DistributionType) -> str:
    """Return the Python tag declared by a distribution's file name.

    Sdists are always ``"source"``. For eggs and wheels the tag is the third
    hyphen-separated field of the file stem, or ``"any"`` when the stem
    does not have the expected number of fields. Name and version fields
    are not checked against the package metadata.
    """
    if dist_type is DistributionType.SDIST:
        return SOURCE_TAG

    parts = PurePath(filename).stem.split("-")
    expected = _EGG_PARTS if dist_type is DistributionType.EGG else _WHEEL_PARTS
    if len(parts) != expected:
        return ANY_TAG
    return parts[2]
