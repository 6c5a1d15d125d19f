"""Version parsing and the release bump.

Manifest versions are loosely semver: ``2`` and ``1.4`` are accepted and
zero-padded to three components before parsing. A release bumps the minor
component. The patch component is reset to 0 only for plain versions; with a
pre-release or build suffix it is kept as is (``1.2.3-beta`` -> ``1.3.3-beta``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from xrel.core.result import Err, Ok, Result
from xrel.release.errors import InvalidVersion

_NUM = r"0|[1-9]\d*"
_IDENT = r"[0-9A-Za-z-]+"
_STRICT_RE = re.compile(
    rf"^(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<pre>{_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+(?P<build>{_IDENT}(?:\.{_IDENT})*))?$"
)
_SUFFIX_RE = re.compile(r"[-+]")


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    pre: str | None = None
    build: str | None = None

    def render(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += f"-{self.pre}"
        if self.build:
            text += f"+{self.build}"
        return text

    def bump_minor(self) -> SemVer:
        has_suffix = bool(self.pre or self.build)
        return SemVer(
            self.major,
            self.minor + 1,
            self.patch if has_suffix else 0,
            self.pre,
            self.build,
        )

    def __str__(self) -> str:
        return self.render()


def _parse_strict(text: str) -> SemVer | None:
    m = _STRICT_RE.match(text)
    if m is None:
        return None
    return SemVer(
        int(m.group("major")),
        int(m.group("minor")),
        int(m.group("patch")),
        m.group("pre"),
        m.group("build"),
    )


def normalize_version(text: str) -> str:
    """Zero-pad a 1- or 2-component version to three components.

    The ``-pre``/``+build`` suffix is reattached unchanged. Trailing empty
    components (``"1.2."``) are dropped first. Anything else is returned as
    given and left for the strict parser to reject.
    """
    m = _SUFFIX_RE.search(text)
    core, suffix = (text[: m.start()], text[m.start() :]) if m else (text, "")

    parts = core.split(".")
    while parts and parts[-1] == "":
        parts.pop()
    if not parts or len(parts) >= 3:
        return text

    parts += ["0"] * (3 - len(parts))
    return ".".join(parts) + suffix


def parse_version(text: str) -> SemVer | None:
    """Parse ``text`` strictly, falling back to the zero-padded form."""
    return _parse_strict(text) or _parse_strict(normalize_version(text))


def bump_version(text: str) -> Result[str, InvalidVersion]:
    """Return the next release version for ``text``.

    >>> bump_version("0.9")
    Ok('0.10.0')
    """
    version = parse_version(text)
    if version is None:
        return Err(InvalidVersion(text))
    return Ok(version.bump_minor().render())
