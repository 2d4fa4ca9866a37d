from __future__ import annotations

import argparse
import logging
import sys
import time

from collections.abc import Sequence
from typing import Optional

from . import benchmark
from .core.config import Alphabet, PasswordConfig
from .core.password_generator import PasswordGenerator
from .output import format_preview, write_password
from .settings import DEFAULT_LENGTH, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stderr so stdout only carries results."""
    level = getattr(logging, LOG_LEVEL, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='passgen',
        description='Password Generator (console)',
    )
    parser.add_argument(
        '--length',
        default=str(DEFAULT_LENGTH),
        metavar='N',
        help=f'password length (default {DEFAULT_LENGTH})',
    )
    parser.add_argument(
        '--alphabets',
        default='latin',
        metavar='LIST',
        help='comma-separated alphabets: latin,cyrillic (default latin)',
    )
    parser.add_argument('--upper', action='store_true', help='use uppercase letters')
    parser.add_argument(
        '--lower',
        action='store_true',
        help='use lowercase letters (implied when --upper is not given)',
    )
    parser.add_argument('--digits', action='store_true', help='use digits 0-9')
    parser.add_argument('--special', action='store_true', help='use special characters')
    parser.add_argument(
        '--required-digits',
        '--requiredDigits',
        dest='required_digits',
        default='',
        metavar='DIGITS',
        help='digits that must appear in the password (needs --digits)',
    )
    parser.add_argument('--out', metavar='PATH', help='write the password to a file')
    parser.add_argument(
        '--benchmark',
        action='store_true',
        help='measure generation time for preset profiles',
    )
    return parser


def parse_alphabets(value: Optional[str]) -> set[Alphabet]:
    """
    Parse a comma-separated list of alphabet names.

    A blank value selects Latin.

    Raises:
        ValueError: If a name is not a known alphabet.
    """
    if value is None or not value.strip():
        return {Alphabet.LATIN}

    alphabets = set()
    for part in value.split(','):
        name = part.strip().upper()
        try:
            alphabets.add(Alphabet[name])
        except KeyError:
            msg = f'Unknown alphabet: {part}'
            raise ValueError(msg) from None

    return alphabets


def parse_length(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        msg = f'Invalid number for --length: {value}'
        raise ValueError(msg) from None


def parse_config(args: argparse.Namespace) -> PasswordConfig:
    """Create a validated config from parsed command-line options."""
    lower = args.lower or not args.upper

    return PasswordConfig.of(
        length=parse_length(args.length),
        alphabets=parse_alphabets(args.alphabets),
        upper=args.upper,
        lower=lower,
        digits=args.digits,
        special=args.special,
        required_digits=args.required_digits,
    )


def action_benchmark(generator: PasswordGenerator) -> None:
    """Run the benchmark and print the timing table."""
    logger.info('Benchmark started')
    print(benchmark.run(generator))
    logger.info('Benchmark finished')


def action_generate(generator: PasswordGenerator, args: argparse.Namespace) -> None:
    """Generate one password and print it or save it to --out."""
    config = parse_config(args)

    start = time.perf_counter()
    password = generator.generate(config)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    logger.info(
        'Generated password length=%d, time_ms=%.3f',
        config.length,
        elapsed_ms,
    )

    if args.out:
        path = write_password(args.out, password)
        print(f'Saved to: {path}')
    else:
        print(format_preview(password))

    print(f'Time (ms): {elapsed_ms:.3f}')


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    generator = PasswordGenerator()

    try:
        if args.benchmark:
            action_benchmark(generator)
        else:
            action_generate(generator, args)
    except (ValueError, OSError) as exc:
        logger.error('Error: %s', exc, exc_info=True)
        print(f'Error: {exc}')
        print('Use --help')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
