"""Test configuration and fixtures."""

import io
import threading
from typing import Dict, List, Tuple

import pytest
from rich.console import Console

from kube_scanner.k8s.client import ClusterCLI


class FakeLauncher:
    """Process launcher that records calls instead of running anything."""

    def __init__(
        self,
        success: bool = True,
        output: str = "mock output",
        results: Dict[str, Tuple[bool, str]] = None,
    ):
        self.success = success
        self.output = output
        self.results = results or {}
        self.calls: List[Tuple[str, List[str]]] = []
        self._lock = threading.Lock()

    def __call__(self, program: str, args: List[str]) -> Tuple[bool, str]:
        with self._lock:
            self.calls.append((program, list(args)))

        # args look like ["get", <kind>, "-n", <namespace>, "-o", "wide"]
        kind = args[1] if len(args) > 1 else ""
        return self.results.get(kind, (self.success, self.output))


@pytest.fixture
def fake_launcher():
    """Launcher returning a fixed successful result."""
    return FakeLauncher()


@pytest.fixture
def failing_launcher():
    """Launcher returning a fixed failure."""
    return FakeLauncher(success=False, output="command failed")


@pytest.fixture
def console_buffer():
    """Buffer capturing console output."""
    return io.StringIO()


@pytest.fixture
def console(console_buffer):
    """Plain console writing into the buffer."""
    return Console(file=console_buffer, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def fake_client(fake_launcher):
    """Cluster CLI backed by the fake launcher."""
    return ClusterCLI(binary="oc", launcher=fake_launcher)


@pytest.fixture
def make_launcher():
    """Factory for custom fake launchers."""
    return FakeLauncher
