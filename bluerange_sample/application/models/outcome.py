"""
Run outcome - Application Layer

Every CLI run ends in exactly one of these states. The entry point matches
on the variant to choose what to log and which exit code to return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(slots=True, frozen=True)
class Success:
    """The requested operation completed."""


@dataclass(slots=True, frozen=True)
class ApiFailure:
    """A remote call failed with an HTTP error status."""

    status: int
    body: str = ""
    error: Optional[BaseException] = None


@dataclass(slots=True, frozen=True)
class LocalFailure:
    """Anything else went wrong: validation, parsing, transport."""

    message: str
    error: Optional[BaseException] = None


RunOutcome = Union[Success, ApiFailure, LocalFailure]
