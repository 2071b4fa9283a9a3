from __future__ import annotations

import pytest


class CapturingSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()
