"""Command-line interface for the Fortuna generator."""

import argparse
import logging
import sys
import time

import tracerite

from fortuna.ciphers import cipher
from fortuna.crypto import generate_seed_material
from fortuna.errors import GeneratorError
from fortuna.generator import Generator
from fortuna.io import open_fd, write_all
from fortuna.stats import RunResult, stopwatch
from fortuna.utils import parse_seed, parse_size

tracerite.load()

__all__ = ["main"]

DEFAULT_ALG = "AES"

# Bytes requested from the generator per write
CHUNK_SIZE = 1 << 16


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fortuna",
        description="Generate pseudo-random bytes with the Fortuna generator",
    )
    parser.add_argument(
        "-s",
        "--seed",
        help="Integer seed for reproducible output (default: OS entropy)",
        type=str,
    )
    parser.add_argument(
        "-l",
        "--len",
        help="Length to generate (e.g. 1k, 100mi; default: unlimited)",
        type=str,
        default=None,
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)", type=str)
    parser.add_argument(
        "-a",
        "--alg",
        help=f"Block cipher (default: {DEFAULT_ALG})",
        type=str,
        default=None,
    )
    parser.add_argument(
        "--dry",
        action="store_true",
        help="Dry run: generate but skip writes (for benchmarking)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode: suppress all output except errors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose mode: debug logging and timing statistics",
    )
    return parser


def prepare_generator(args) -> tuple[Generator, int | None]:
    """Construct and seed the generator, returning it with the seed used."""
    gen = Generator(cipher(args.alg or DEFAULT_ALG))
    seed = parse_seed(args.seed)
    if seed is None:
        gen.reseed(generate_seed_material())
    else:
        gen.seed(seed)
    return gen, seed


def generate(gen: Generator, fd: int, total_bytes: int | None, dry: bool = False) -> RunResult:
    """Write total_bytes (or forever when None) of generator output to fd."""
    start_time = time.perf_counter()
    result = RunResult(written=0, elapsed=0.0, action="generated" if dry else "wrote")
    timer = stopwatch()
    try:
        while total_bytes is None or result.written < total_bytes:
            size = CHUNK_SIZE
            if total_bytes is not None:
                size = min(size, total_bytes - result.written)
            next(timer)
            chunk = gen.pseudo_random_data(size)
            result.crypto_time += next(timer)
            if not dry:
                write_all(fd, chunk)
                result.write_time += next(timer)
            result.written += size
    except KeyboardInterrupt:
        result.interrupted = True
    finally:
        result.elapsed = time.perf_counter() - start_time
    return result


def _main(argv=None):
    """Internal main function that may raise exceptions."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Normalize "-" output to None (stdout)
    if args.output == "-":
        args.output = None

    total_bytes = parse_size(args.len)  # None if not specified, 0 if -l0
    gen, seed = prepare_generator(args)

    with open_fd(args.output, dry=args.dry) as fd:
        result = generate(gen, fd, total_bytes, dry=args.dry)
    result.seed = seed

    if not args.quiet:
        result.print_summary(verbose=int(args.verbose))
    if result.interrupted:
        raise KeyboardInterrupt


def main(argv=None):
    """Main entry point for the CLI with exception handling."""
    try:
        _main(argv)
    except (KeyboardInterrupt, BrokenPipeError):
        sys.exit(1)
    except (ValueError, GeneratorError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
