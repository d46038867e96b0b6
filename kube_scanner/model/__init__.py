"""Data models for kube-scanner."""

from .scan import ScanOutcome, ScanRequest, ScanSummary

__all__ = ["ScanRequest", "ScanOutcome", "ScanSummary"]
