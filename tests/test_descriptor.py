from __future__ import annotations

import pytest

from svcxml.descriptor import DescriptorError, parse_service_descriptor
from svcxml.model import AuthType


def test_minimal_document() -> None:
    d = parse_service_descriptor(
        "<service><id>x</id><name>X</name><description>D</description><executable>x.exe</executable></service>"
    )
    assert (d.id, d.name, d.description, d.executable) == ("x", "X", "D", "x.exe")
    assert d.delayed_auto_start is False
    assert d.downloads == []
    assert d.extensions == []


def test_auth_is_case_insensitive() -> None:
    d = parse_service_descriptor(
        "<service><id>x</id><name/><description/><executable/>"
        '<download from="a" to="b" auth="sspi" unsecureAuth="TRUE"/></service>'
    )
    (download,) = d.downloads
    assert download.auth is AuthType.SSPI
    assert download.unsecure_auth is True
    assert d.name == ""


@pytest.mark.parametrize(
    "xml, message",
    [
        ("<service><id>x</id>", "not well-formed"),
        ("<config><id>x</id></config>", "root element"),
        ("<service><id>x</id><name/><description/></service>", "executable"),
        (
            "<service><id>x</id><name/><description/><executable/><download to='b'/></service>",
            "'from'",
        ),
        (
            "<service><id>x</id><name/><description/><executable/><download from='a' to='b' auth='kerberos'/></service>",
            "Unknown auth type",
        ),
        (
            "<service><id>x</id><name/><description/><executable/><delayedAutoStart>maybe</delayedAutoStart></service>",
            "Not a boolean",
        ),
        (
            "<service><id>x</id><name/><description/><executable/><extensions><extension id='e'/></extensions></service>",
            "className",
        ),
    ],
)
def test_errors(xml: str, message: str) -> None:
    with pytest.raises(DescriptorError, match=message):
        parse_service_descriptor(xml)
