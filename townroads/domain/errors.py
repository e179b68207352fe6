"""Typed domain errors for the town/road graph.

All errors inherit from TownGraphError and can optionally wrap a root
cause exception for debugging. They describe contract violations by the
caller, so nothing in the package retries or recovers from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TownGraphError(Exception):
    """Base error for the town graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NullInputError(TownGraphError):
    """A required town argument was None.

    Attributes:
        argument: Name of the missing argument
    """

    argument: str = ""


@dataclass
class InvalidEndpointError(TownGraphError):
    """A referenced town is not a member of the graph.

    Attributes:
        town_name: Name of the offending town, empty when it was None
    """

    town_name: str = ""


@dataclass
class PathNotFoundError(TownGraphError):
    """The destination cannot be reached from the source.

    Attributes:
        source: Name of the source town
        destination: Name of the destination town
    """

    source: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(TownGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
