import argparse
import logging
import sys
from typing import Optional

from . import __version__
from . import timecalc
from .clock import CountdownConfig, run
from .config import debug_enabled, get_count_up, get_log_path, load_config
from .terminal import TerminalError

log = logging.getLogger(__name__)


def _headless_snapshot(config: CountdownConfig) -> str:
    direction = "up" if config.count_up else "down"
    return (
        f"target: {timecalc.format_clock(config.target_seconds)} "
        f"({config.target_seconds}s, counting {direction})"
    )


def _configure_logging() -> None:
    path = get_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return
    logging.basicConfig(
        filename=str(path),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    epilog = "Controls: q or Ctrl+C quit, p pause, c continue."
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Full-screen terminal countdown clock",
        epilog=epilog,
    )
    parser.add_argument(
        "duration",
        help='time to count, e.g. "1h30m10s", "90", "17:45" or "5:45 pm"',
    )
    parser.add_argument("--up", action="store_true", default=None, help="count up from zero instead of down")
    parser.add_argument("--headless", action="store_true", help="print the parsed target and exit")
    parser.add_argument("--debug", action="store_true", help="write a debug log next to the config file")
    parser.add_argument("--version", action="version", version=f"countdown {__version__}")
    return parser


def parse_args(argv=None, parser: Optional[argparse.ArgumentParser] = None):
    if parser is None:
        parser = build_parser()
    return parser.parse_args(argv)


def main(argv=None) -> int:
    parser = build_parser()
    args = parse_args(argv, parser)
    config = load_config()

    if args.debug or debug_enabled(config):
        _configure_logging()

    try:
        target = timecalc.parse_target(args.duration)
    except timecalc.ParseError as exc:
        parser.error(str(exc))

    count_up = args.up if args.up is not None else bool(get_count_up(config))
    settings = CountdownConfig(target_seconds=target, count_up=count_up)
    log.debug("starting with %s", settings)

    if args.headless:
        print(_headless_snapshot(settings))
        return 0

    try:
        run(settings)
    except TerminalError as exc:
        log.debug("terminal failure: %s", exc)
        print(f"countdown: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
