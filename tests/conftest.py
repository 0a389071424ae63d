"""Shared fixtures: a fake osascript transport so no test ever talks to Things 3."""
from typing import List, Optional, Sequence, Union

import pytest

from thangs.things_api.apple_script_client import ThingsBridge

Reply = Union[str, BaseException]


class FakeTransport:
    """Replays canned replies and records every script it is handed.

    The process probe (the System Events script) is answered separately so
    ``replies`` only has to cover the real Things 3 scripts.
    """

    def __init__(self, replies: Sequence[Reply] = (), running: bool = True):
        self.replies: List[Reply] = list(replies)
        self.running = running
        self.scripts: List[str] = []
        self.probes = 0

    def __call__(self, script: str) -> str:
        if 'tell application "System Events"' in script:
            self.probes += 1
            return "true" if self.running else "false"
        self.scripts.append(script)
        if not self.replies:
            raise AssertionError(f"Unexpected script:\n{script}")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def make_bridge():
    def _make(*replies: Reply, running: bool = True, transport: Optional[FakeTransport] = None):
        transport = transport or FakeTransport(replies, running=running)
        return ThingsBridge(transport=transport, process_name="Things3"), transport

    return _make
