"""Exceptions raised while resolving and parsing distribution metadata."""

from __future__ import annotations


class PkgMetaError(Exception):
    """Base class for all pkgmeta errors."""


class UnknownDistributionType(PkgMetaError):
    """Raised when a file name does not map to a supported distribution type."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"unknown distribution type: {filename}")


class MetadataNotFound(PkgMetaError):
    """Raised when an archive holds no entry ending with the metadata suffix."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(f"metadata file not found (expected an entry ending with {suffix!r})")


class MultipleMetadataFiles(PkgMetaError):
    """Raised when several metadata entries match and none can be preferred."""

    def __init__(self, candidates: list[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(f"found multiple metadata files: {self.candidates!r}")


class FieldNotFound(PkgMetaError):
    """Raised when a required metadata header is missing."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"metadata field {field} not found")


class ArchiveError(PkgMetaError):
    """Raised when a distribution file cannot be opened or read.

    The underlying I/O, zip, tar or decompression error is chained as
    ``__cause__``.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read {path}: {reason}")
