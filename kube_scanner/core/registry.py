"""Resource type registry."""

from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from ..k8s.scanner import DeploymentScanner, PodScanner, Scanner

# Scanner classes double as factories: factory(namespace, client=..., console=...)
ScannerFactory = Callable[..., Scanner]


class ScannerRegistry:
    """Immutable mapping from resource type name to scanner factory."""

    def __init__(self, entries: Optional[Mapping[str, ScannerFactory]] = None):
        self._entries: Mapping[str, ScannerFactory] = MappingProxyType(dict(entries or {}))

    def resolve(self, resource_type: str) -> Optional[ScannerFactory]:
        """Return the factory for an exact, case-sensitive name, or None."""
        return self._entries.get(resource_type)

    def names(self) -> List[str]:
        """Supported resource type names, sorted."""
        return sorted(self._entries)

    def with_entry(self, resource_type: str, factory: ScannerFactory) -> "ScannerRegistry":
        """Return a new registry with one more entry."""
        if resource_type in self._entries:
            raise ValueError(f"Resource type already registered: {resource_type}")

        entries: Dict[str, ScannerFactory] = dict(self._entries)
        entries[resource_type] = factory
        return ScannerRegistry(entries)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_REGISTRY = ScannerRegistry(
    {
        "pods": PodScanner,
        "deployments": DeploymentScanner,
    }
)
