"""
descriptor.py

Responsibility: Read a service configuration document back into a typed descriptor.

This is a contract reader: it extracts the fields the builder writes (identity,
delayed start, downloads, extension blocks) so round trips can be asserted.
It does not apply the runtime's defaults or validate executable paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.etree.ElementTree import Element, ParseError

from defusedxml import ElementTree as SafeET

from svcxml.model import AuthType, Download


class DescriptorError(ValueError):
    pass


@dataclass(frozen=True)
class ExtensionConfig:
    id: str
    class_name: str
    enabled: bool
    settings: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceDescriptor:
    id: str
    name: str
    description: str
    executable: str
    delayed_auto_start: bool = False
    downloads: list[Download] = field(default_factory=list)
    extensions: list[ExtensionConfig] = field(default_factory=list)


def _parse_bool(raw: str | None, *, default: bool = False) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise DescriptorError(f"Not a boolean: {raw!r}")


def _required_text(root: Element, tag: str) -> str:
    node = root.find(tag)
    if node is None:
        raise DescriptorError(f"<{tag}> is missing in service configuration.")
    return node.text or ""


def _parse_download(node: Element) -> Download:
    try:
        source = node.attrib["from"]
        destination = node.attrib["to"]
    except KeyError as e:
        raise DescriptorError(f"<download> requires the {e.args[0]!r} attribute.") from e

    auth_raw = node.get("auth")
    try:
        auth = AuthType.parse(auth_raw) if auth_raw is not None else AuthType.NONE
    except ValueError as e:
        raise DescriptorError(str(e)) from e

    return Download(
        source=source,
        destination=destination,
        fail_on_error=_parse_bool(node.get("failOnError")),
        auth=auth,
        username=node.get("user"),
        password=node.get("password"),
        unsecure_auth=_parse_bool(node.get("unsecureAuth")),
    )


def _parse_extension(node: Element) -> ExtensionConfig:
    ext_id = node.get("id")
    class_name = node.get("className")
    if not ext_id or not class_name:
        raise DescriptorError("<extension> requires both 'id' and 'className' attributes.")
    return ExtensionConfig(
        id=ext_id,
        class_name=class_name,
        enabled=_parse_bool(node.get("enabled"), default=True),
        settings={child.tag: (child.text or "") for child in node},
    )


def parse_service_descriptor(xml: str) -> ServiceDescriptor:
    """
    Parse a rendered document into a `ServiceDescriptor`.

    Raises `DescriptorError` for malformed XML, a root other than `<service>`,
    missing identity elements, or unreadable attribute values.
    """
    try:
        root = SafeET.fromstring(xml)
    except ParseError as e:
        raise DescriptorError(f"Service configuration is not well-formed XML: {e}") from e

    if root.tag != "service":
        raise DescriptorError(f"Expected <service> root element, found <{root.tag}>.")

    delayed = root.find("delayedAutoStart")
    extensions_node = root.find("extensions")

    return ServiceDescriptor(
        id=_required_text(root, "id"),
        name=_required_text(root, "name"),
        description=_required_text(root, "description"),
        executable=_required_text(root, "executable"),
        delayed_auto_start=_parse_bool(delayed.text if delayed is not None else None),
        downloads=[_parse_download(node) for node in root.findall("download")],
        extensions=[_parse_extension(node) for node in extensions_node.findall("extension")]
        if extensions_node is not None
        else [],
    )
