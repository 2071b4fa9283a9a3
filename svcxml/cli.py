"""
cli.py

Responsibility: CLI entrypoint for rendering fixture documents.

High-level flow (single command `render`):
1) Load a YAML preset -> `Preset`
2) Apply CLI overrides and extra entries to a `ConfigXmlBuilder`
3) Render the document to stdout or a file
4) (Optional) Parse it back with the descriptor reader as a sanity check
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from svcxml.builder import ConfigXmlBuilder
from svcxml.descriptor import DescriptorError
from svcxml.options import OptionsError, load_options

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _split_tag(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise CLIError(f"--tag expects NAME=VALUE, got: {raw!r}")
    return name.strip(), value


def render_cmd(args: argparse.Namespace) -> int:
    try:
        preset = load_options(args.preset_path)
    except OptionsError as e:
        raise CLIError(str(e)) from e

    options = preset.options
    if args.no_xml_version:
        options = dataclasses.replace(options, print_xml_version=False)

    builder = ConfigXmlBuilder.create(options)
    for name, value in preset.tags.items():
        builder.with_tag(name, value)
    for raw in args.tag or []:
        builder.with_tag(*_split_tag(raw))
    for fragment in args.raw or []:
        builder.with_raw_entry(fragment)
    if preset.delayed_auto_start or args.delayed_auto_start:
        builder.with_delayed_auto_start()

    xml = builder.to_xml_string(dump_config=bool(args.verbose))

    if args.check:
        try:
            descriptor = builder.to_service_descriptor()
        except DescriptorError as e:
            raise CLIError(f"Rendered document does not parse: {e}") from e
        logger.info("Rendered document parses as service %r", descriptor.id)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(xml, encoding="utf-8", newline="\n")
    else:
        sys.stdout.write(xml)

    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="svcxml", description="Render service configuration XML fixtures")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="Render a service configuration document from a YAML preset")
    r.add_argument("preset_path", help="Path to the YAML preset (or markdown with YAML frontmatter)")
    r.add_argument("--tag", action="append", metavar="NAME=VALUE", help="Add <NAME>VALUE</NAME> (repeatable)")
    r.add_argument("--raw", action="append", metavar="FRAGMENT", help="Add a raw XML fragment verbatim (repeatable)")
    r.add_argument("--delayed-auto-start", action="store_true", help="Add <delayedAutoStart>true</delayedAutoStart>")
    r.add_argument("--no-xml-version", action="store_true", help="Omit the <?xml ...?> declaration")
    r.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout")
    r.add_argument("--check", action="store_true", help="Fail if the rendered document does not parse")
    r.add_argument("--verbose", "-v", action="store_true", help="Log the produced config to stderr")

    r.set_defaults(func=render_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args))
    except CLIError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
