"""Scan request and result models."""

from typing import List

from pydantic import BaseModel


class ScanRequest(BaseModel):
    """A single resource type requested for a namespace."""

    namespace: str
    resource_type: str


class ScanOutcome(BaseModel):
    """Result of one concurrent scan."""

    resource_type: str
    namespace: str
    success: bool
    message: str = ""


class ScanSummary(BaseModel):
    """Aggregate of a scan run."""

    namespace: str
    outcomes: List[ScanOutcome] = []
    unknown_types: List[str] = []

    @property
    def succeeded(self) -> List[ScanOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> List[ScanOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def all_succeeded(self) -> bool:
        """True when every requested type resolved and scanned cleanly."""
        return not self.failed and not self.unknown_types
