"""
options.py

Responsibility: Builder options and the YAML preset loader.

A preset is either a plain YAML file or a markdown file (`.md`) with YAML frontmatter.
Keys left out of a preset keep the builder defaults; `xml_comment: null`
explicitly turns the comment line off.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_OPTION_KEYS = ("id", "name", "description", "executable")
_MARKDOWN_SUFFIXES = {".md", ".markdown"}


class OptionsError(ValueError):
    pass


@dataclass(frozen=True)
class BuilderOptions:
    """
    Options accepted by `ConfigXmlBuilder.create`.

    `xml_comment` is a tri-state: `""` (the default) selects the canned comment,
    `None` renders no comment, any other string is rendered verbatim.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    executable: str | None = None
    print_xml_version: bool = True
    xml_comment: str | None = ""


@dataclass(frozen=True)
class Preset:
    """Parsed preset: builder options plus entries the CLI adds on top."""

    options: BuilderOptions = field(default_factory=BuilderOptions)
    tags: dict[str, str] = field(default_factory=dict)
    delayed_auto_start: bool = False


def _split_frontmatter(text: str) -> str:
    """Return the YAML frontmatter of a markdown document, or the whole text if there is none."""
    if not text.startswith("---\n"):
        return text
    end = text.find("\n---\n", 4)
    if end == -1:
        raise OptionsError("YAML frontmatter starts with '---' but no closing '---' was found.")
    return text[4:end]


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise OptionsError(f"`{key}` must be a scalar value.")
    return str(value)


def parse_options(data: dict[str, Any]) -> Preset:
    """Validate an in-memory preset mapping."""
    if not isinstance(data, dict):
        raise OptionsError("Preset must be an object/mapping at the top level.")

    if "xml_comment" in data:
        xml_comment = _optional_str(data, "xml_comment")
    else:
        xml_comment = ""

    print_raw = data.get("print_xml_version", True)
    if not isinstance(print_raw, bool):
        raise OptionsError("`print_xml_version` must be a boolean.")

    tags_raw = data.get("tags") or {}
    if not isinstance(tags_raw, dict):
        raise OptionsError("`tags` must be an object/mapping when provided.")
    # Keep file order: tags render in the order they are declared.
    tags = {str(k): "" if v is None else str(v) for k, v in tags_raw.items()}

    delayed_raw = data.get("delayed_auto_start", False)
    if not isinstance(delayed_raw, bool):
        raise OptionsError("`delayed_auto_start` must be a boolean.")

    options = BuilderOptions(
        **{key: _optional_str(data, key) for key in _OPTION_KEYS},
        print_xml_version=print_raw,
        xml_comment=xml_comment,
    )
    return Preset(options=options, tags=tags, delayed_auto_start=delayed_raw)


def load_options(path: str | Path) -> Preset:
    """Load a preset from a YAML file (or markdown with YAML frontmatter)."""
    preset_path = Path(path)
    if not preset_path.exists():
        raise OptionsError(f"Preset file does not exist: {preset_path}")
    text = preset_path.read_text(encoding="utf-8")

    try:
        # In plain YAML, a leading `---` is the document-start marker.
        if preset_path.suffix.lower() in _MARKDOWN_SUFFIXES:
            text = _split_frontmatter(text)
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise OptionsError(f"Preset is not valid YAML: {preset_path}") from e
    return parse_options(data if data is not None else {})
