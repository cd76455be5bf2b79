"""Shared fixtures: a scripted stand-in for the backend client."""

import asyncio
import threading
from typing import Any, Callable, Dict, List, Optional

import pytest

from shared.resources import ResourceKind


class FakeDataServiceClient:
    """
    Returns scripted outcomes per resource kind.

    An outcome is a list of documents, an exception to raise, or a callable
    taking the 1-based call number for that kind and returning either.
    When `gate` is set every call blocks until the gate opens.
    """

    base_address = "http://localhost:5500"

    def __init__(self, outcomes: Optional[Dict[ResourceKind, Any]] = None, gate: Optional[threading.Event] = None):
        self.outcomes = outcomes or {}
        self.gate = gate
        self.calls: List[ResourceKind] = []
        self.closed = False
        self._lock = threading.Lock()

    def list_resource(self, kind: ResourceKind):
        with self._lock:
            self.calls.append(kind)
            call_number = self.calls.count(kind)

        outcome = self.outcomes.get(kind, [])
        if callable(outcome):
            outcome = outcome(call_number)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


async def wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached before timeout")
        await asyncio.sleep(0.01)


@pytest.fixture
def fake_client() -> FakeDataServiceClient:
    return FakeDataServiceClient()
