"""Manifest model and parser.

The manifest is the tool's ``manifest.xml``. Only ``<Id>`` and ``<Version>``
are required; they may sit anywhere in the document and the first occurrence
wins. Everything else is read through for display and never validated.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace

from xrel.core.result import Err, Ok, Result
from xrel.release.errors import (
    InvalidIdentifier,
    MalformedDocument,
    ManifestError,
    MissingField,
)

ID_FIELD = "Id"
VERSION_FIELD = "Version"


@dataclass(frozen=True, slots=True)
class Manifest:
    identifier: str
    version: str
    name: str | None = None
    author: str | None = None
    description: str | None = None
    api_version: str | None = None
    schema_version: str | None = None

    def with_version(self, version: str) -> Manifest:
        return replace(self, version=version)


def is_safe_identifier(identifier: str) -> bool:
    """True if ``identifier`` can be used as a file name inside the release directory."""
    if identifier in (".", ".."):
        return False
    return not any(sep in identifier for sep in ("/", "\\", "\0"))


def _first_text(root: ET.Element, tag: str) -> str | None:
    for element in root.iter(tag):
        text = (element.text or "").strip()
        return text or None
    return None


def parse_manifest(text: str) -> Result[Manifest, ManifestError]:
    """Parse manifest text into a ``Manifest``.

    Returns ``Err(MalformedDocument)`` if the text is not well-formed XML and
    ``Err(MissingField)`` if ``Id`` or ``Version`` is absent or blank. An ``Id``
    containing a path separator, or equal to ``.`` or ``..``, is rejected with
    ``Err(InvalidIdentifier)`` since it becomes the archive file name.
    """
    try:
        # Bytes so that an encoding declaration or BOM is honoured by expat.
        root = ET.fromstring(text.encode("utf-8"))
    except ET.ParseError as e:
        return Err(MalformedDocument(str(e)))

    identifier = _first_text(root, ID_FIELD)
    if identifier is None:
        return Err(MissingField(ID_FIELD))
    if not is_safe_identifier(identifier):
        return Err(InvalidIdentifier(identifier))

    version = _first_text(root, VERSION_FIELD)
    if version is None:
        return Err(MissingField(VERSION_FIELD))

    return Ok(
        Manifest(
            identifier=identifier,
            version=version,
            name=_first_text(root, "Name"),
            author=_first_text(root, "Author"),
            description=_first_text(root, "Description"),
            api_version=_first_text(root, "ApiVersion") or _first_text(root, "Api"),
            schema_version=_first_text(root, "SchemaVersion"),
        )
    )
