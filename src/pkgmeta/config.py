"""Global configuration for pkgmeta."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class PkgMetaConfig:
    # Plain tar, bzip2 and xz/lzma compressed sdists
    deprecated_formats: bool = True

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> PkgMetaConfig:
        """Load config from environment variables."""
        deprecated_formats = os.environ.get("PKGMETA_DEPRECATED_FORMATS", "").lower() not in _FALSY
        log_level = os.environ.get("PKGMETA_LOG_LEVEL", "").upper()
        if log_level not in logging.getLevelNamesMapping():
            log_level = cls.log_level
        return cls(
            deprecated_formats=deprecated_formats,
            log_level=log_level,
        )
