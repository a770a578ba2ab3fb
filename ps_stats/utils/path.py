import os
import sys
from pathlib import Path
from typing import Optional, Sequence

MODULE_STEMS = ("__main__", "main")


def to_abs_path(p: Optional[str | os.PathLike]) -> Optional[Path]:
    """Convert p to an absolute path.
    Sequence:
      1) Absolute: expanduser+resolve
      2) Relative to CWD
    """
    if not p:
        return None
    pp = Path(p).expanduser()
    if pp.is_absolute():
        return pp.resolve()
    return (Path.cwd() / pp).resolve()


def program_name(argv: Optional[Sequence[str]] = None, fallback: str = "ps-stats") -> str:
    """Name of the running probe, as the cache file name is derived from it."""
    argv = sys.argv if argv is None else argv
    if not argv or not argv[0]:
        return fallback
    stem = Path(argv[0]).stem
    if not stem or stem in MODULE_STEMS:
        return fallback
    return stem


def default_cache_path(prog: str, suffix: str, base: Optional[Path] = None) -> Path:
    base = Path.cwd() if base is None else base
    return (base / f"{prog}{suffix}").resolve()
