"""
CLI entry point for the nctrace command.

    nctrace decode PROGRAM.nc
    nctrace trace PROGRAM.nc [-o trace.csv|trace.npy] [--start X,Y,Z] [--seed-first-line]
"""

import argparse
import logging
import sys
from pathlib import Path

from nctrace import config
from nctrace.config import TRACE
from nctrace.export import format_program, save_trace_npy, write_trace_csv
from nctrace.program.parser import parse_file
from nctrace.program.positions import AxisState, PositionTracker
from nctrace.utils.errors import NCDecodeError

logger = logging.getLogger(__name__)


def _parse_start(raw: str) -> AxisState:
    """Parse ``X,Y,Z``; an empty field leaves that axis unknown."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected X,Y,Z, got {raw!r}")
    try:
        x, y, z = (float(p) if p else None for p in parts)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid start position {raw!r}: {e}") from e
    return AxisState(x, y, z)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nctrace", description="NC/G-code decoder and position tracer")
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only log errors')
    parser.add_argument('--log-level', choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set specific log level')
    parser.add_argument('--encoding', default=config.DEFAULT_ENCODING, help='Program file encoding')

    sub = parser.add_subparsers(dest='command', required=True)

    decode = sub.add_parser('decode', help='Print the decoded program')
    decode.add_argument('program', type=Path, help='G-code program file')

    trace = sub.add_parser('trace', help='Write the carried-forward X/Y/Z trace')
    trace.add_argument('program', type=Path, help='G-code program file')
    trace.add_argument('-o', '--output', type=Path,
                       help='Output file (.npy for a NumPy array, CSV otherwise; default: stdout)')
    seed = trace.add_mutually_exclusive_group()
    seed.add_argument('--start', type=_parse_start, metavar='X,Y,Z',
                      help='Known start position; leave a field empty for an unknown axis')
    seed.add_argument('--seed-first-line', action='store_true',
                      help="Start from the first line's own axis values")
    trace.add_argument('--delimiter', default=config.CSV_DELIMITER, help='CSV field delimiter')
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == 'TRACE':
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    return getattr(logging, config.LOG_LEVEL_DEFAULT)


def _run_trace(args: argparse.Namespace, program) -> None:
    if args.start is not None:
        tracker = PositionTracker(seed=args.start)
    elif args.seed_first_line:
        tracker = PositionTracker.seeded_from_first_line(program)
    else:
        tracker = PositionTracker()
    rows = tracker.track(program)

    if args.output is None:
        write_trace_csv(rows, sys.stdout, delimiter=args.delimiter)
    elif args.output.suffix.lower() == '.npy':
        save_trace_npy(rows, args.output)
    else:
        with args.output.open('w', newline='', encoding='utf-8') as f:
            write_trace_csv(rows, f, delimiter=args.delimiter)
        logger.info(f"Wrote {len(rows)} trace rows to {args.output}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_log_level(args),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    try:
        program = parse_file(args.program, encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {args.program}: {e}")
        return 1
    except NCDecodeError as e:
        logger.error(f"Failed to decode {args.program}: {e}")
        return 1

    try:
        if args.command == 'decode':
            sys.stdout.write(format_program(program))
        else:
            _run_trace(args, program)
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1
    return 0


def main_entry():
    """Entry point for the nctrace command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
