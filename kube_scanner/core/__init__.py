"""Core business logic."""

from .orchestrator import ScanOrchestrator
from .registry import DEFAULT_REGISTRY, ScannerRegistry
from .suggest import levenshtein_distance, suggest_closest

__all__ = [
    "ScanOrchestrator",
    "ScannerRegistry",
    "DEFAULT_REGISTRY",
    "levenshtein_distance",
    "suggest_closest",
]
