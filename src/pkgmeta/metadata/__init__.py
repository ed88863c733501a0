"""Core metadata records and their parser."""

from pkgmeta.metadata.parser import parse_metadata
from pkgmeta.metadata.record import Metadata

__all__ = ["Metadata", "parse_metadata"]
