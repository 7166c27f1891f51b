"""Command-line interface: run the HBV model on parameter and forcing files."""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys

from .io import read_forcing, read_parameters, write_results
from .metrics import get_metric, list_metrics
from .run import simulate
from .validation import ConfigurationError

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        msg = f"must be a non-negative integer, got {n}"
        raise argparse.ArgumentTypeError(msg)
    return n


def cmd_run(args: argparse.Namespace) -> int:
    try:
        params = read_parameters(args.parameters)
        forcing = read_forcing(args.forcing)
    except (OSError, ValueError) as e:
        logger.error("Could not read input files: %s", e)
        return 1

    try:
        output = simulate(params, forcing)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if args.output:
        write_results(output, args.output)
        logger.info("Results written to %s", args.output)

    if args.objective:
        if forcing.discharge is None:
            logger.error("Forcing file has no observed discharge to evaluate against")
            return 1
        if args.warmup >= len(output):
            logger.error("Warmup of %d steps leaves nothing to evaluate", args.warmup)
            return 1
        observed = forcing.discharge[args.warmup :]
        simulated = output.streamflow[args.warmup :]
        for name in args.objective:
            func = get_metric(name)
            print(f"{name}: {func(observed, simulated):.4f}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pyhbv",
        description="HBV conceptual rainfall-runoff model",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command")

    pr = sub.add_parser(
        "run",
        help="Simulate discharge for one parameter set",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    pr.add_argument("parameters", help="Path to parameter JSON (keys TT, CFMAX, ..., MAXBAS)")
    pr.add_argument(
        "forcing",
        help="Path to forcing CSV (columns: date, precipitation, temperature, discharge, potential ET)",
    )
    pr.add_argument("-o", "--output", default=None, help="Write results CSV to this path")
    pr.add_argument(
        "--objective",
        action="append",
        choices=list_metrics(),
        default=None,
        help="Goodness-of-fit metric to report against observed discharge (repeatable)",
    )
    pr.add_argument(
        "--warmup",
        type=_non_negative_int,
        default=0,
        help="Number of leading timesteps excluded from goodness-of-fit metrics",
    )
    pr.set_defaults(func=cmd_run)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.version:
        try:
            ver = importlib.metadata.version("pyhbv")
        except importlib.metadata.PackageNotFoundError:
            ver = "unknown"
        print(ver)
        return 0
    if args.command is None:
        parser.print_help()
        return 2
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
