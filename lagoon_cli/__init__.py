"""Lagoon CLI - environment discovery and site aliases for Lagoon projects."""

__version__ = "1.0.0"
