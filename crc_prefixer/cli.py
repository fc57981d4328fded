"""
Command line front end: prints the CRC register prefix for hex messages.

Each message is a hex string whose last two bytes are the big-endian CRC-16
of the preceding bytes. Messages come from the command line or, when none is
given (or "-" is), one per line from stdin.
"""
import argparse
import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from crc_prefixer.algorithm.prefix_solver import PrefixSolver
from crc_prefixer.common.exceptions import CrcPrefixerException
from crc_prefixer.config import LOG_LEVELS, PrefixerConfig
from crc_prefixer.logging_config import setup_logging
from crc_prefixer.message.hex_message import analyze_hex_message

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='crc-prefixer',
        description='Find the CRC-16 (poly 0x1021) register prefix that makes '
                    'a message body produce its trailing checksum.')
    p.add_argument('messages', nargs='*', metavar='hexmessage', help=
                   'message as hex digits, checksum in the last two bytes; '
                   'use "-" or omit to read one message per line from stdin')
    p.add_argument('-q', '--quiet', action='store_true', help=
                   'output only the prefix value')
    p.add_argument('-v', '--verbose', action='store_true', help=
                   'enable debug logging')
    p.add_argument('--log-level', type=str.upper, choices=sorted(LOG_LEVELS), help=
                   'logging level (default: $CRC_PREFIXER_LOG_LEVEL or WARNING)')
    p.add_argument('--basis', choices=PrefixSolver.BASIS_METHODS, help=
                   'how the per-length basis is built')
    return p


def _read_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line.strip()
        if line:
            yield line


def _iter_messages(messages: List[str], stdin: TextIO) -> Iterator[str]:
    if not messages:
        yield from _read_lines(stdin)
        return
    for message in messages:
        if message == '-':
            yield from _read_lines(stdin)
        else:
            yield message


def process_messages(messages: Iterable[str], solver: PrefixSolver, out: TextIO,
                     quiet: bool = False) -> int:
    """Prints a prefix line per message; returns the number of failures."""
    failures = 0
    for text in messages:
        try:
            result = analyze_hex_message(text, solver)
        except CrcPrefixerException as e:
            logger.warning("Skipping message %r: %s", text, e)
            failures += 1
            continue
        if quiet:
            print(f"{result.prefix:04x}", file=out)
        else:
            print(f"prefix = {result.formatted()}", file=out)
    return failures


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    log_level = 'DEBUG' if args.verbose else args.log_level
    config = PrefixerConfig.from_env().with_overrides(log_level=log_level, basis_method=args.basis)
    setup_logging(config)
    logger.debug("Using %s", config)

    failures = process_messages(_iter_messages(args.messages, stdin), config.create_solver(),
                                stdout, quiet=args.quiet)
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
