"""
builder.py

Responsibility: Fluent builder for service configuration documents used as test fixtures.

The builder accepts anything: malformed fragments, duplicate ids and unescaped values
are passed through so tests can probe how the descriptor parser reacts to them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from svcxml.descriptor import parse_service_descriptor
from svcxml.diagnostics import DiagnosticsSink, LoggingSink
from svcxml.model import AuthType, Download, RunawayProcessKiller, type_reference
from svcxml.options import BuilderOptions
from svcxml.renderer import render_document, render_extension

logger = logging.getLogger(__name__)

DEFAULT_ID = "myapp"
DEFAULT_NAME = "MyApp Service"
DEFAULT_DESCRIPTION = "MyApp Service (powered by WinSW)"
DEFAULT_EXECUTABLE = "%BASE%\\myExecutable.exe"
DEFAULT_XML_COMMENT = "Just a sample configuration file generated by the test suite"
DEFAULT_EXTENSION_ID = "killRunawayProcess"


class ConfigXmlBuilder:
    def __init__(
        self,
        *,
        id: str,
        name: str,
        description: str,
        executable: str,
        print_xml_version: bool,
        xml_comment: str | None,
        sink: DiagnosticsSink,
        parser: Callable[[str], Any],
    ) -> None:
        self.id = id
        self.name = name
        self.description = description
        self.executable = executable
        self.print_xml_version = print_xml_version
        self.xml_comment = xml_comment
        self.extension_xmls: list[str] = []
        self._config_entries: list[str] = []
        self._sink = sink
        self._parser = parser

    @classmethod
    def create(
        cls,
        options: BuilderOptions | None = None,
        *,
        sink: DiagnosticsSink | None = None,
        parser: Callable[[str], Any] | None = None,
    ) -> ConfigXmlBuilder:
        """
        Create a builder with defaults filled in for every option left unset.

        `sink` receives the document when rendering with `dump_config=True`
        (defaults to a `LoggingSink`). `parser` turns a document into a descriptor
        for `to_service_descriptor` (defaults to `parse_service_descriptor`).
        """
        opts = options if options is not None else BuilderOptions()
        return cls(
            id=opts.id if opts.id is not None else DEFAULT_ID,
            name=opts.name if opts.name is not None else DEFAULT_NAME,
            description=opts.description if opts.description is not None else DEFAULT_DESCRIPTION,
            executable=opts.executable if opts.executable is not None else DEFAULT_EXECUTABLE,
            print_xml_version=opts.print_xml_version,
            xml_comment=DEFAULT_XML_COMMENT if opts.xml_comment == "" else opts.xml_comment,
            sink=sink if sink is not None else LoggingSink(),
            parser=parser if parser is not None else parse_service_descriptor,
        )

    @property
    def config_entries(self) -> list[str]:
        return list(self._config_entries)

    def to_xml_string(self, dump_config: bool = False) -> str:
        """
        Render the document. With `dump_config=True` the sink also receives
        `Produced config:` followed by the document; the return value is the same.
        """
        res = render_document(
            id=self.id,
            name=self.name,
            description=self.description,
            executable=self.executable,
            print_xml_version=self.print_xml_version,
            xml_comment=self.xml_comment,
            config_entries=self._config_entries,
            extension_xmls=self.extension_xmls,
        )
        if dump_config:
            self._sink.write_line("Produced config:")
            self._sink.write_line(res)
        return res

    def to_service_descriptor(self, dump_config: bool = False) -> Any:
        """Render and parse. Parser errors reach the caller exactly as raised."""
        xml = self.to_xml_string(dump_config)
        logger.debug("Parsing generated configuration for service %r", self.id)
        return self._parser(xml)

    def with_raw_entry(self, entry: str) -> ConfigXmlBuilder:
        """Append `entry` verbatim inside `<service>`. Nothing checks that it is well-formed."""
        self._config_entries.append(entry)
        return self

    def with_tag(self, tag_name: str, value: str) -> ConfigXmlBuilder:
        """Shorthand for `<tag_name>value</tag_name>`; `value` is not escaped."""
        return self.with_raw_entry(f"<{tag_name}>{value}</{tag_name}>")

    def with_runaway_process_killer(
        self,
        ext: RunawayProcessKiller,
        extension_id: str = DEFAULT_EXTENSION_ID,
        enabled: bool = True,
    ) -> ConfigXmlBuilder:
        """Add a runaway-process-killer `<extension>` block (`stopTimeout` in milliseconds)."""
        self.extension_xmls.append(
            render_extension(
                class_name=type_reference(type(ext)),
                extension_id=extension_id,
                enabled=enabled,
                settings=[
                    ("pidfile", ext.pidfile),
                    ("stopTimeout", ext.stop_timeout_ms),
                    ("checkWinSWEnvironmentVariable", ext.check_winsw_environment_variable),
                ],
            )
        )
        return self

    def with_download(self, download: Download) -> ConfigXmlBuilder:
        """
        Add a self-closing `<download>` entry. `from`, `to` and `failOnError` are always set.

        Unless auth is `None`: `auth` is added, and `unsecureAuth="true"` when the flag is set.
        Only `Basic` auth writes `user` and `password`, each one only when it is not `None`.
        """
        xml = [f'<download from="{download.source}" to="{download.destination}" failOnError="{download.fail_on_error}"']

        # Authentication
        if download.auth is not AuthType.NONE:
            xml.append(f' auth="{download.auth.value}"')
            if download.auth is AuthType.BASIC:
                if download.username is not None:
                    xml.append(f' user="{download.username}"')
                if download.password is not None:
                    xml.append(f' password="{download.password}"')

            if download.unsecure_auth:
                xml.append(' unsecureAuth="true"')

        xml.append("/>")
        return self.with_raw_entry("".join(xml))

    def with_delayed_auto_start(self) -> ConfigXmlBuilder:
        """Add `<delayedAutoStart>true</delayedAutoStart>`."""
        return self.with_raw_entry("<delayedAutoStart>true</delayedAutoStart>")
