from __future__ import annotations
import argparse, logging, re, sys
from typing import Optional, Sequence

from .cache import CacheLifecycle
from .collectors import SnapshotProvider, collect
from .config import APP_NAME, OUTPUT_FORMATS, CFG, init_cfg_from_args
from .errors import ProbeError
from .logging_config import setup_logging
from .models import RECORD_FIELDS, StatsRecord
from .output import render
from .utils.path import program_name

logger = logging.getLogger(__name__)


def build_parser(prog: str = APP_NAME) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=prog,
        description='Process crash monitor: counts parent restarts and child crashes between polls')
    ap.add_argument('-k', '--key', type=str, default=None, choices=RECORD_FIELDS, metavar='KEY',
                    help=f'print only this field of the stats record ({", ".join(RECORD_FIELDS)})')
    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument('-f', '--pidfile', type=str, default=None, help='parent process PID file')
    target.add_argument('-p', '--pid', type=int, default=None, help='parent process PID')
    target.add_argument('-s', '--systemd', type=str, default=None, help='systemd unit name (service.name)')
    target.add_argument('-g', '--grep', type=str, default=None, help='regex matched against process command lines')
    ap.add_argument('-c', '--cache', type=str, default=None,
                    help='cache file path (default ./<program>-cache.yml)')
    ap.add_argument('-o', '--format', choices=OUTPUT_FORMATS, default=None,
                    help='output format for the whole record (default json)')
    ap.add_argument('-v', '--verbose', action='store_true', help='debug logging on stderr')
    return ap


def parse_args(argv: Optional[Sequence[str]] = None, prog: str = APP_NAME):
    ap = build_parser(prog)
    args = ap.parse_args(argv)
    if args.grep is not None:
        try:
            re.compile(args.grep)
        except re.error as exc:
            ap.error(f"argument -g/--grep: invalid regular expression {args.grep!r}: {exc}")
    return args


def run(cfg: CFG, provider: Optional[SnapshotProvider] = None,
        lifecycle: Optional[CacheLifecycle] = None) -> StatsRecord:
    snapshot = provider.provide() if provider is not None else collect(cfg)
    lifecycle = lifecycle or CacheLifecycle(ttl=cfg.ttl)
    return lifecycle.refresh(cfg.cache_path, snapshot)


def main(argv: Optional[Sequence[str]] = None) -> int:
    prog = program_name(fallback=APP_NAME)
    args = parse_args(argv, prog)
    cfg = init_cfg_from_args(args, prog=prog)
    setup_logging(cfg.verbose)
    logger.debug("target %s=%s, cache %s", cfg.method, cfg.method_value, cfg.cache_path)

    try:
        record = run(cfg)
        print(render(record, cfg.key, cfg.output_format))
    except ProbeError as exc:
        logger.debug("probe failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
