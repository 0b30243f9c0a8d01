"""``fair-range`` command: run a long-running frequency experiment.

Samples a range many times and prints how often each value came up, then a
chi-squared uniformity check. Comparing ``--method modulo`` with the default
``--method rejection`` shows the modulo bias and its removal::

    fair-range --method modulo --trials 100000      # 1 and 2 twice as common
    fair-range --trials 100000                      # flat
    fair-range --min 0 --max 99 --width 8 --explain
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from fair_range.analysis import chi_squared_uniformity, modulo_distribution
from fair_range.config import FairRangeConfig
from fair_range.entropy import EntropySourceRegistry
from fair_range.exceptions import ConfigValidationError, FairRangeError
from fair_range.generator import FairRange
from fair_range.sampling import RejectionPlan, SamplerRegistry, range_size

logger = logging.getLogger("fair_range")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-range",
        description="Sample an inclusive integer range and report outcome frequencies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Settings not given on the command line come from FAIR_RANGE_* environment
variables or a .env file.

Examples:
  %(prog)s                                   # 10,000 fair die rolls
  %(prog)s --method modulo                   # the biased 3-bit die
  %(prog)s --source device --device /dev/hwrng
  %(prog)s --source mock_uniform --seed 7    # reproducible run
""",
    )
    parser.add_argument("--min", dest="low", type=int, default=1, help="Inclusive lower bound (default: 1).")
    parser.add_argument("--max", dest="high", type=int, default=6, help="Inclusive upper bound (default: 6).")
    parser.add_argument(
        "--trials", type=int, default=10_000,
        help="Number of samples to draw (default: 10000).",
    )
    parser.add_argument(
        "--method", choices=SamplerRegistry.list_registered(), default=None,
        help="Sampling method (default: rejection).",
    )
    parser.add_argument(
        "--width", type=int, default=None,
        help="Fixed bits per raw draw (default: smallest width covering the range).",
    )
    parser.add_argument(
        "--source", choices=EntropySourceRegistry.list_available(), default=None,
        help="Random bit source (default: system).",
    )
    parser.add_argument("--device", default=None, help="Entropy device for --source device.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --source mock_uniform.")
    parser.add_argument(
        "--explain", action="store_true",
        help="Print the rejection plan and the exact modulo distribution.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def _config_from_args(args: argparse.Namespace) -> FairRangeConfig:
    kwargs: dict[str, Any] = {}
    if args.method is not None:
        kwargs["sampling_method"] = args.method
    if args.width is not None:
        kwargs["source_width"] = args.width
    if args.source is not None:
        kwargs["entropy_source_type"] = args.source
    if args.device is not None:
        kwargs["device_path"] = args.device
    if args.seed is not None:
        kwargs["mock_seed"] = args.seed
    try:
        return FairRangeConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid setting: {exc}") from exc


def _explain(low: int, high: int, width: int | None) -> None:
    plan = RejectionPlan.build(range_size(low, high), width)
    print(
        f"Range size: {plan.range_size}, width: {plan.width} bits, "
        f"limit: {plan.limit}, rejected raw values: {plan.rejected_values}"
    )
    print(
        f"Acceptance probability: {float(plan.acceptance_probability):.6f}, "
        f"expected draws: {float(plan.expected_draws):.6f}"
    )
    for offset, probability in modulo_distribution(plan.range_size, plan.width).items():
        print(f"Modulo P({low + offset}) = {probability} ({float(probability) * 100:.4f}%)")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.trials < 0:
        parser.error("--trials must be >= 0")
    if args.width is not None and args.width < 0:
        parser.error("--width must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args)
        if args.explain:
            _explain(args.low, args.high, config.source_width or None)
        with FairRange(config) as rng:
            frequency = rng.frequency(args.low, args.high, args.trials)
    except FairRangeError as exc:
        logger.error("%s", exc)
        return 1

    for value, appearances in frequency.items():
        percentage = 100.0 * appearances / args.trials if args.trials else 0.0
        print(f"Value: {value}, frequency: {appearances}, percentage: {percentage:.2f}%")

    if len(frequency) > 1 and args.trials > 0:
        fit = chi_squared_uniformity(frequency)
        verdict = "consistent with uniform" if fit.is_uniform() else "NOT uniform"
        print(
            f"Chi-squared: {fit.statistic:.4f} (dof={fit.degrees_of_freedom}), "
            f"p-value: {fit.p_value:.6f}, {verdict} at alpha=0.01"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
