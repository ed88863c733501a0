"""Parse PKG-INFO / METADATA blobs into ``Metadata`` records.

The blob is an RFC 822 style header block, optionally followed by a blank
line and a free-text body holding the long description. Header splitting
and name lookup are left to the standard library ``email`` parser; this
module handles transport decoding, RFC 2047 encoded-words, the ``UNKNOWN``
placeholder and the description fallback.
"""

from __future__ import annotations

import re
from email import policy
from email.errors import HeaderParseError
from email.header import decode_header
from email.message import Message
from email.parser import Parser

from pkgmeta.errors import FieldNotFound
from pkgmeta.metadata.record import Metadata

# Placeholder written by old packaging tools for fields left empty
UNKNOWN = "UNKNOWN"

REQUIRED_FIELDS = ("Metadata-Version", "Name", "Version")

_FOLD_RE = re.compile(r"\n[ \t]*")
# distutils indents continuation lines by 8 spaces, setuptools by 7 and a pipe
_DESCRIPTION_INDENT_RE = re.compile(r"^(?: {8}| {7}\|)")

_SINGLE_FIELDS = {
    "summary": "Summary",
    "keywords": "Keywords",
    "home_page": "Home-page",
    "download_url": "Download-URL",
    "author": "Author",
    "author_email": "Author-email",
    "license": "License",
    "license_expression": "License-Expression",
    "maintainer": "Maintainer",
    "maintainer_email": "Maintainer-email",
    "requires_python": "Requires-Python",
    "description_content_type": "Description-Content-Type",
}

_MULTI_FIELDS = {
    "platforms": "Platform",
    "supported_platforms": "Supported-Platform",
    "classifiers": "Classifier",
    "requires_dist": "Requires-Dist",
    "provides_dist": "Provides-Dist",
    "obsoletes_dist": "Obsoletes-Dist",
    "requires_external": "Requires-External",
    "project_urls": "Project-URL",
    "provides_extras": "Provides-Extra",
    "license_files": "License-File",
    "dynamic": "Dynamic",
}


def _decode_content(content: bytes | str) -> str:
    """Decode raw metadata bytes, UTF-8 first with a Latin-1 fallback."""
    if isinstance(content, str):
        text = content
    else:
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError:
            text = content.decode("latin-1")
    return text.removeprefix("\ufeff").replace("\r\n", "\n")


def _unfold(name: str, value: str) -> str:
    if "\n" not in value:
        return value.rstrip()
    if name.lower() == "description":
        first, *rest = value.split("\n")
        lines = [first] + [_DESCRIPTION_INDENT_RE.sub("", line, count=1) for line in rest]
        return "\n".join(lines).rstrip()
    return _FOLD_RE.sub(" ", value).rstrip()


def decode_words(value: str) -> str:
    """Decode RFC 2047 encoded-words in a header value.

    Values without encoded-words (plain ASCII or raw UTF-8) are returned
    unchanged, and so are values whose encoded-words cannot be decoded.
    """
    if "=?" not in value:
        return value
    try:
        chunks = decode_header(value)
    except HeaderParseError:
        return value
    words = []
    for chunk, charset in chunks:
        if isinstance(chunk, str):
            words.append(chunk)
            continue
        # unencoded text comes back as raw-unicode-escape bytes
        try:
            words.append(chunk.decode(charset or "raw-unicode-escape"))
        except (UnicodeDecodeError, LookupError):
            return value
    return "".join(words)


class _Headers:
    """First/all value lookups over a parsed message with sentinel filtering."""

    def __init__(self, msg: Message) -> None:
        self._msg = msg

    def _decoded(self, name: str) -> list[str]:
        values = self._msg.get_all(name) or []
        return [decode_words(_unfold(name, str(v))) for v in values]

    def first(self, name: str) -> str | None:
        values = self._decoded(name)
        if not values or values[0] == UNKNOWN:
            return None
        return values[0]

    def all(self, name: str) -> tuple[str, ...]:
        return tuple(v for v in self._decoded(name) if v != UNKNOWN)

    def required(self, name: str) -> str:
        value = self.first(name)
        if value is None:
            raise FieldNotFound(name)
        return value


def parse_metadata(content: bytes | str) -> Metadata:
    """Parse a metadata blob into a ``Metadata`` record.

    Raises ``FieldNotFound`` for the first missing field out of
    Metadata-Version, Name and Version. A non-blank body takes precedence
    over the ``Description`` header unless it is just ``UNKNOWN``.
    """
    msg = Parser(policy=policy.compat32).parsestr(_decode_content(content))
    headers = _Headers(msg)

    metadata_version, name, version = (headers.required(f) for f in REQUIRED_FIELDS)

    body = msg.get_payload()
    if isinstance(body, str) and body.strip() and body.strip() != UNKNOWN:
        description = body
    else:
        description = headers.first("Description")

    return Metadata(
        metadata_version=metadata_version,
        name=name,
        version=version,
        description=description,
        **{attr: headers.first(header) for attr, header in _SINGLE_FIELDS.items()},
        **{attr: headers.all(header) for attr, header in _MULTI_FIELDS.items()},
    )
