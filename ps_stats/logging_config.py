"""Logging setup for the probe.

Everything goes to stderr: stdout is reserved for the value the poller
parses.
"""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"
_HANDLER_ATTR = "_ps_stats_handler"


def setup_logging(verbose: bool = False) -> logging.Logger:
    root = logging.getLogger("ps_stats")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            return root
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.propagate = False
    return root
