"""
svcxml package

Builds service configuration XML documents for tests.

Key responsibilities are split across modules:
- `builder.py`: the fluent `ConfigXmlBuilder`
- `renderer.py`: deterministic document rendering (Jinja2 templates)
- `model.py`: download and extension settings serialized by the builder
- `options.py`: builder options and YAML presets
- `descriptor.py`: contract reader turning a document back into a descriptor
- `cli.py`: `svcxml render` entrypoint
"""

from __future__ import annotations

from svcxml.builder import ConfigXmlBuilder
from svcxml.model import AuthType, Download, RunawayProcessKiller
from svcxml.options import BuilderOptions

__all__ = [
    "AuthType",
    "BuilderOptions",
    "ConfigXmlBuilder",
    "Download",
    "RunawayProcessKiller",
    "__version__",
]

__version__ = "0.1.0"
