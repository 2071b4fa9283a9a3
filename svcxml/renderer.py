"""
renderer.py

Responsibility: Deterministically render a service configuration document.

Rules:
- Output is a pure function of the values passed in (no clock, no environment).
- Values are inserted exactly as given: no escaping, no reformatting.
- Newlines are always `\\n`.

This module intentionally does NOT know about the builder API, YAML presets, or CLI parsing.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined, Template

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Raw fragments and extension blocks are trusted text; autoescape must stay off.
_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)

_DOCUMENT = _env.from_string(
    """{% if print_xml_version %}{{ declaration }}
{% endif %}{% if xml_comment is not none %}<!--{{ xml_comment }}-->
{% endif %}<service>
  <id>{{ id }}</id>
  <name>{{ name }}</name>
  <description>{{ description }}</description>
  <executable>{{ executable }}</executable>
{% for entry in config_entries %}
  {{ entry }}
{% endfor %}
{% if extension_xmls %}
  <extensions>
{% for xml in extension_xmls %}{{ xml }}{% endfor %}
  </extensions>
{% endif %}
</service>
"""
)

_EXTENSION = _env.from_string(
    """    <extension enabled="{{ enabled }}" className="{{ class_name }}" id="{{ extension_id }}">
{% for name, value in settings %}
      <{{ name }}>{{ value }}</{{ name }}>
{% endfor %}
    </extension>
"""
)


class RenderError(RuntimeError):
    pass


def _render(template: Template, what: str, context: dict[str, Any]) -> str:
    try:
        return template.render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering {what}") from e


def render_document(
    *,
    id: str,
    name: str,
    description: str,
    executable: str,
    print_xml_version: bool,
    xml_comment: str | None,
    config_entries: list[str],
    extension_xmls: list[str],
) -> str:
    """
    Assemble the full document: declaration, comment, identity elements,
    raw entries, then the `<extensions>` container when there is anything to put in it.
    """
    return _render(
        _DOCUMENT,
        "service document",
        {
            "declaration": XML_DECLARATION,
            "print_xml_version": print_xml_version,
            "xml_comment": xml_comment,
            "id": id,
            "name": name,
            "description": description,
            "executable": executable,
            "config_entries": config_entries,
            "extension_xmls": extension_xmls,
        },
    )


def render_extension(
    *,
    class_name: str,
    extension_id: str,
    enabled: bool,
    settings: list[tuple[str, object]],
) -> str:
    """Render one `<extension>` block; `settings` become child elements in the given order."""
    return _render(
        _EXTENSION,
        f"extension block {extension_id!r}",
        {
            "class_name": class_name,
            "extension_id": extension_id,
            "enabled": enabled,
            "settings": settings,
        },
    )
