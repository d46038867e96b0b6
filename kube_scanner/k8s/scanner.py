"""Namespace resource scanners."""

from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console

from ..utils.logger import get_logger
from .client import ClusterCLI

logger = get_logger(__name__)


class ScanError(Exception):
    """Raised when the cluster CLI fails for a resource kind."""

    def __init__(self, binary: str, reason: str, resource_type: Optional[str] = None):
        self.binary = binary
        self.reason = reason
        self.resource_type = resource_type
        super().__init__(f"error running {binary}: {reason}")


class Scanner(ABC):
    """Base class for resource scanners."""

    def __init__(
        self,
        namespace: str,
        client: Optional[ClusterCLI] = None,
        console: Optional[Console] = None,
    ):
        self._namespace = namespace
        self.client = client or ClusterCLI()
        self.console = console or Console()

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    @abstractmethod
    def kind(self) -> str:
        """Resource kind passed to `get`."""

    def build_args(self) -> List[str]:
        """Arguments handed to the cluster CLI."""
        return ["get", self.kind, "-n", self.namespace, "-o", "wide"]

    def scan(self) -> str:
        """Run one inspection, print the captured output and return it."""
        logger.debug(f"Scanning {self.kind} in {self.namespace}")

        success, output = self.client.execute(self.build_args())
        if not success:
            raise ScanError(self.client.binary, output, resource_type=self.kind)

        # Output is relayed verbatim, only terminated if the CLI left the line open
        self.console.print(
            output,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
            end="" if output.endswith("\n") else "\n",
        )
        return output

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r})"


class PodScanner(Scanner):
    """Lists pods in a namespace."""

    kind = "pods"


class DeploymentScanner(Scanner):
    """Lists deployments in a namespace."""

    kind = "deployments"
