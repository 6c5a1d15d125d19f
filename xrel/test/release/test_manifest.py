from __future__ import annotations

import pytest

from xrel.core.result import Err, Ok
from xrel.release.errors import InvalidIdentifier, MalformedDocument, MissingField
from xrel.release.manifest import Manifest, parse_manifest

MANIFEST = """<?xml version="1.0" encoding="UTF-8"?>
<RenoiseScriptingTool doc_version="0">
  <!-- tool metadata -->
  <ApiVersion>6</ApiVersion>
  <Id>com.example.MyTool</Id>
  <Version>1.4</Version>
  <Author>Jane Doe</Author>
  <Name>My Tool</Name>
  <Category>Pattern Editor</Category>
  <Description>Does things.</Description>
</RenoiseScriptingTool>
"""


def test_parse_manifest_reads_fields() -> None:
    result = parse_manifest(MANIFEST)

    assert result == Ok(
        Manifest(
            identifier="com.example.MyTool",
            version="1.4",
            name="My Tool",
            author="Jane Doe",
            description="Does things.",
            api_version="6",
        )
    )


def test_parse_manifest_minimal() -> None:
    result = parse_manifest("<Tool><Id>MyTool</Id><Version>0.9</Version></Tool>")
    assert result == Ok(Manifest(identifier="MyTool", version="0.9"))


def test_parse_manifest_nested_fields() -> None:
    text = "<Tool><Meta><Id>Nested</Id></Meta><Info><Version>2</Version></Info></Tool>"
    result = parse_manifest(text)
    assert isinstance(result, Ok)
    assert (result.value.identifier, result.value.version) == ("Nested", "2")


def test_parse_manifest_first_occurrence_wins() -> None:
    text = "<Tool><Id>A</Id><Id>B</Id><Version>1</Version><Version>9</Version></Tool>"
    result = parse_manifest(text)
    assert isinstance(result, Ok)
    assert (result.value.identifier, result.value.version) == ("A", "1")


def test_parse_manifest_strips_whitespace() -> None:
    result = parse_manifest("<Tool><Id>\n  MyTool\n</Id><Version> 1.0 </Version></Tool>")
    assert isinstance(result, Ok)
    assert result.value.identifier == "MyTool"
    assert result.value.version == "1.0"


def test_parse_manifest_missing_id() -> None:
    assert parse_manifest("<Tool><Version>1.0</Version></Tool>") == Err(MissingField("Id"))


def test_parse_manifest_blank_version() -> None:
    assert parse_manifest("<Tool><Id>X</Id><Version>  </Version></Tool>") == Err(
        MissingField("Version")
    )


def test_parse_manifest_empty_element_counts_as_missing() -> None:
    assert parse_manifest("<Tool><Id/><Version>1</Version></Tool>") == Err(MissingField("Id"))


def test_parse_manifest_malformed() -> None:
    result = parse_manifest("<Tool><Id>X</Id><Version>1</Tool>")
    assert isinstance(result, Err)
    assert isinstance(result.error, MalformedDocument)
    assert "not well-formed" in result.error.message


def test_parse_manifest_empty_text_is_malformed() -> None:
    result = parse_manifest("")
    assert isinstance(result, Err)
    assert isinstance(result.error, MalformedDocument)


def test_parse_manifest_with_bom() -> None:
    result = parse_manifest("\ufeff<Tool><Id>X</Id><Version>1</Version></Tool>")
    assert isinstance(result, Ok)


def test_with_version_keeps_metadata() -> None:
    manifest = Manifest(identifier="X", version="1", name="Name")
    assert manifest.with_version("1.1.0") == Manifest(identifier="X", version="1.1.0", name="Name")


@pytest.mark.parametrize("identifier", ["../../elsewhere/x", "a/b", "a\\b", ".", ".."])
def test_parse_manifest_rejects_path_like_id(identifier: str) -> None:
    text = f"<Tool><Id>{identifier}</Id><Version>1</Version></Tool>"

    result = parse_manifest(text)

    assert result == Err(InvalidIdentifier(identifier))
    assert "Id" in result.error.message


def test_parse_manifest_accepts_dotted_id() -> None:
    result = parse_manifest("<Tool><Id>com.example.My Tool</Id><Version>1</Version></Tool>")
    assert isinstance(result, Ok)
