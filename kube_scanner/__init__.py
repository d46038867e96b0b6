"""Concurrent namespace resource inspection through the cluster CLI."""

__version__ = "0.1.0"
