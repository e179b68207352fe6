"""Ports layer - Abstract interfaces (Protocols) for the package."""

from .graph import GraphPort

__all__ = ["GraphPort"]
