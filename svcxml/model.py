"""
model.py

Responsibility: Data contracts serialized by the builder.

These mirror the shapes the service runtime consumes (download directives and the
runaway-process-killer extension settings). They carry values only; nothing here
performs downloads or touches processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class AuthType(Enum):
    """Authentication mode of a download directive, rendered by its value."""

    NONE = "None"
    SSPI = "Sspi"
    BASIC = "Basic"

    @classmethod
    def parse(cls, raw: str) -> AuthType:
        """Case-insensitive lookup, as the service parser accepts `basic` and `Basic` alike."""
        for member in cls:
            if member.value.lower() == raw.strip().lower():
                return member
        raise ValueError(f"Unknown auth type: {raw!r}")


@dataclass(frozen=True)
class Download:
    source: str
    destination: str
    fail_on_error: bool = False
    auth: AuthType = AuthType.NONE
    username: str | None = None
    password: str | None = None
    unsecure_auth: bool = False


@dataclass(frozen=True)
class RunawayProcessKiller:
    """Settings of the extension that kills a process left over from a previous run."""

    pidfile: str
    stop_timeout: timedelta = timedelta(seconds=5)
    check_winsw_environment_variable: bool = True

    @property
    def stop_timeout_ms(self) -> int | float:
        ms = self.stop_timeout / timedelta(milliseconds=1)
        return int(ms) if ms == int(ms) else ms


def type_reference(cls: type) -> str:
    """Fully qualified name used in the `className` attribute of an extension block."""
    return f"{cls.__module__}.{cls.__qualname__}"
