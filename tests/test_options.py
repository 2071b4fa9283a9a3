from __future__ import annotations

from pathlib import Path

import pytest

from svcxml.builder import DEFAULT_XML_COMMENT, ConfigXmlBuilder
from svcxml.options import BuilderOptions, OptionsError, load_options, parse_options


def test_empty_preset_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    preset = load_options(path)
    assert preset.options == BuilderOptions()
    assert preset.tags == {}
    assert preset.delayed_auto_start is False


def test_yaml_preset(tmp_path: Path) -> None:
    path = tmp_path / "svc.yaml"
    path.write_text(
        "id: svc1\n"
        "name: Svc One\n"
        "executable: '%JAVA_HOME%\\bin\\java.exe'\n"
        "print_xml_version: false\n"
        "tags:\n"
        "  logmode: rotate\n"
        "  arguments: -jar app.jar\n"
        "delayed_auto_start: true\n",
        encoding="utf-8",
    )
    preset = load_options(path)
    assert preset.options.id == "svc1"
    assert preset.options.name == "Svc One"
    assert preset.options.description is None
    assert preset.options.executable == "%JAVA_HOME%\\bin\\java.exe"
    assert preset.options.print_xml_version is False
    assert list(preset.tags.items()) == [("logmode", "rotate"), ("arguments", "-jar app.jar")]
    assert preset.delayed_auto_start is True


def test_markdown_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "fixture.md"
    path.write_text("---\nid: from-md\nxml_comment: null\n---\n\n# Notes\n", encoding="utf-8")
    preset = load_options(path)
    assert preset.options.id == "from-md"
    assert preset.options.xml_comment is None


def test_comment_tri_state() -> None:
    assert parse_options({}).options.xml_comment == ""
    assert parse_options({"xml_comment": None}).options.xml_comment is None
    assert parse_options({"xml_comment": "hi"}).options.xml_comment == "hi"

    assert ConfigXmlBuilder.create(parse_options({}).options).xml_comment == DEFAULT_XML_COMMENT
    assert ConfigXmlBuilder.create(parse_options({"xml_comment": None}).options).xml_comment is None


def test_scalar_values_are_stringified() -> None:
    assert parse_options({"id": 42}).options.id == "42"


@pytest.mark.parametrize(
    "data, message",
    [
        ([1, 2], "mapping"),
        ({"print_xml_version": "yes"}, "print_xml_version"),
        ({"tags": ["a"]}, "tags"),
        ({"delayed_auto_start": 1}, "delayed_auto_start"),
        ({"name": {"nested": True}}, "name"),
    ],
)
def test_invalid_presets(data: object, message: str) -> None:
    with pytest.raises(OptionsError, match=message):
        parse_options(data)  # type: ignore[arg-type]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="does not exist"):
        load_options(tmp_path / "nope.yaml")


def test_unclosed_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "bad.md"
    path.write_text("---\nid: x\n", encoding="utf-8")
    with pytest.raises(OptionsError, match="closing"):
        load_options(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("id: [unterminated\n", encoding="utf-8")
    with pytest.raises(OptionsError, match="not valid YAML"):
        load_options(path)


def test_yaml_file_with_document_marker(tmp_path: Path) -> None:
    path = tmp_path / "svc.yaml"
    path.write_text("---\nid: svc1\nxml_comment: null\n", encoding="utf-8")
    preset = load_options(path)
    assert preset.options.id == "svc1"
    assert preset.options.xml_comment is None


def test_multi_document_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "two.yaml"
    path.write_text("---\nid: first\n---\nid: second\n", encoding="utf-8")
    with pytest.raises(OptionsError, match="not valid YAML"):
        load_options(path)


def test_markdown_without_frontmatter_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "notes.markdown"
    path.write_text("# Just notes\n", encoding="utf-8")
    assert load_options(path).options == BuilderOptions()
