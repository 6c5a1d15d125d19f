"""In-place version rewrite of the manifest text.

Only the first ``<Version>old</Version>`` run of characters is replaced; the
rest of the file (comments, attribute order, whitespace, line endings) stays
byte-for-byte identical. Re-serializing the parsed tree would not guarantee
that.
"""

from __future__ import annotations

from xrel.core.result import Err, Ok, Result
from xrel.release.errors import PatchMismatch
from xrel.release.manifest import VERSION_FIELD


def version_markup(version: str) -> str:
    return f"<{VERSION_FIELD}>{version}</{VERSION_FIELD}>"


def patch_manifest(text: str, old_version: str, new_version: str) -> Result[str, PatchMismatch]:
    """Replace the first literal version element in ``text``.

    Returns ``Err(PatchMismatch)`` when the element is not present verbatim,
    e.g. ``<Version> 1.0 </Version>``, rather than leaving a stale manifest.
    """
    old = version_markup(old_version)
    if old not in text:
        return Err(PatchMismatch(old_version))
    return Ok(text.replace(old, version_markup(new_version), 1))
