"""Cluster CLI interaction module."""

from .client import ClusterCLI, ProcessLauncher, run_process
from .scanner import DeploymentScanner, PodScanner, ScanError, Scanner

__all__ = [
    "ClusterCLI",
    "ProcessLauncher",
    "run_process",
    "Scanner",
    "ScanError",
    "PodScanner",
    "DeploymentScanner",
]
