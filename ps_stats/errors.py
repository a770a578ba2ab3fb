"""Error types raised by the probe."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ProbeError(Exception):
    """Base class for failures reported to the user with a non-zero exit."""


class UsageError(ProbeError):
    """Raised when an option value is unusable after argument parsing."""


class TargetNotFoundError(ProbeError):
    """Raised when the parent PID cannot be resolved to a live process."""


class CacheParseError(ProbeError):
    """Raised when an existing cache file is not a valid stats record."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str) -> None:
        where = f"{path}: " if path else ""
        super().__init__(f"Malformed cache file {where}{reason}")
        self.path = path
        self.reason = reason


__all__ = ["ProbeError", "UsageError", "TargetNotFoundError", "CacheParseError"]
