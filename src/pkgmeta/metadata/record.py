"""Core metadata record of a Python distribution."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class Metadata:
    """Parsed PKG-INFO / METADATA contents.

    Single-valued optional fields are ``None`` when the header is absent or
    set to ``UNKNOWN``. Multi-valued fields keep header occurrence order,
    duplicates included.
    """

    metadata_version: str
    name: str
    version: str
    platforms: tuple[str, ...] = ()
    supported_platforms: tuple[str, ...] = ()
    summary: str | None = None
    description: str | None = None
    keywords: str | None = None
    home_page: str | None = None
    download_url: str | None = None
    author: str | None = None
    author_email: str | None = None
    license: str | None = None
    license_expression: str | None = None
    license_files: tuple[str, ...] = ()
    classifiers: tuple[str, ...] = ()
    requires_dist: tuple[str, ...] = ()
    provides_dist: tuple[str, ...] = ()
    obsoletes_dist: tuple[str, ...] = ()
    maintainer: str | None = None
    maintainer_email: str | None = None
    requires_python: str | None = None
    requires_external: tuple[str, ...] = ()
    project_urls: tuple[str, ...] = ()
    provides_extras: tuple[str, ...] = ()
    description_content_type: str | None = None
    dynamic: tuple[str, ...] = ()

    @classmethod
    def from_bytes(cls, data: bytes) -> Metadata:
        from pkgmeta.metadata.parser import parse_metadata

        return parse_metadata(data)

    @classmethod
    def from_str(cls, text: str) -> Metadata:
        from pkgmeta.metadata.parser import parse_metadata

        return parse_metadata(text)

    def to_dict(self) -> dict[str, str | list[str] | None]:
        """Return a JSON-serialisable dict, sequences as lists."""
        data = asdict(self)
        for f in fields(self):
            if isinstance(data[f.name], tuple):
                data[f.name] = list(data[f.name])
        return data

    def project_url_map(self) -> dict[str, str]:
        """Map ``Project-URL`` labels to URLs.

        Entries are ``label, url``; an entry without a comma is keyed by
        its own value.
        """
        urls: dict[str, str] = {}
        for entry in self.project_urls:
            label, sep, url = entry.partition(",")
            if sep:
                urls[label.strip()] = url.strip()
            else:
                urls[entry.strip()] = entry.strip()
        return urls
