"""Concurrent scan orchestration."""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from ..k8s.client import ClusterCLI
from ..k8s.scanner import ScanError, Scanner
from ..model.scan import ScanOutcome, ScanRequest, ScanSummary
from ..utils.logger import get_logger
from .registry import DEFAULT_REGISTRY, ScannerRegistry
from .suggest import suggest_closest

logger = get_logger(__name__)


class ScanOrchestrator:
    """Resolves requested resource types and scans them in parallel."""

    def __init__(
        self,
        registry: Optional[ScannerRegistry] = None,
        client: Optional[ClusterCLI] = None,
        console: Optional[Console] = None,
    ):
        self.registry = registry or DEFAULT_REGISTRY
        self.client = client or ClusterCLI()
        self.console = console or Console()

    def dispatch(
        self, namespace: str, resource_types: Sequence[str]
    ) -> Tuple[List[Tuple[ScanRequest, Scanner]], List[str]]:
        """Build a scanner per known type and report the unknown ones."""
        scanners = []
        unknown = []

        for resource_type in resource_types:
            request = ScanRequest(namespace=namespace, resource_type=resource_type)
            factory = self.registry.resolve(request.resource_type)

            if factory is None:
                unknown.append(resource_type)
                self._report_unknown(resource_type)
                continue

            scanner = factory(request.namespace, client=self.client, console=self.console)
            scanners.append((request, scanner))

        return scanners, unknown

    def run(self, namespace: str, resource_types: Sequence[str]) -> ScanSummary:
        """Scan every requested type concurrently and wait for all of them."""
        scanners, unknown = self.dispatch(namespace, resource_types)

        self.console.print("⏳ Waiting for scans to complete...")
        outcomes = self._scan_all(namespace, scanners)
        self.console.print("✅ All scans completed.")

        return ScanSummary(namespace=namespace, outcomes=outcomes, unknown_types=unknown)

    def _scan_all(
        self, namespace: str, scanners: List[Tuple[ScanRequest, Scanner]]
    ) -> List[ScanOutcome]:
        """Run one task per scanner and block until all have finished."""
        if not scanners:
            return []

        logger.debug(f"Launching {len(scanners)} scans in {namespace}")

        # One worker per task
        with ThreadPoolExecutor(max_workers=len(scanners)) as executor:
            futures = [
                executor.submit(self._scan_one, request, scanner) for request, scanner in scanners
            ]
            wait(futures)

        return [future.result() for future in futures]

    def _scan_one(self, request: ScanRequest, scanner: Scanner) -> ScanOutcome:
        """Run one scanner and turn its result into an outcome."""
        self.console.print(
            f"🔍 Scanning {escape(request.resource_type)} "
            f"in namespace '{escape(request.namespace)}'..."
        )

        try:
            scanner.scan()
        except ScanError as e:
            logger.debug(f"Scan of {request.resource_type} failed: {e.reason}")
            return self._failed(request, str(e))
        except Exception as e:
            # A raising launcher fails only its own task
            logger.debug(f"Scan of {request.resource_type} raised", exc_info=True)
            return self._failed(request, f"error running {self.client.binary}: {e}")

        return ScanOutcome(
            resource_type=request.resource_type,
            namespace=request.namespace,
            success=True,
        )

    def _failed(self, request: ScanRequest, message: str) -> ScanOutcome:
        self.console.print(
            f"[red]❌ Error scanning {escape(request.resource_type)}:[/red] {escape(message)}"
        )
        return ScanOutcome(
            resource_type=request.resource_type,
            namespace=request.namespace,
            success=False,
            message=message,
        )

    def _report_unknown(self, resource_type: str) -> None:
        suggestion = suggest_closest(resource_type, self.registry.names())
        if suggestion:
            self.console.print(
                f"[yellow]Unknown resource type: {escape(resource_type)}[/yellow]\n"
                f"Did you mean: [cyan]{suggestion}[/cyan] ?"
            )
        else:
            self.console.print(f"[yellow]Unknown resource type: {escape(resource_type)}[/yellow]")
