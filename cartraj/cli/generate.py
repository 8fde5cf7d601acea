"""
CLI entry point for the cartraj-generate command.

Builds one trajectory and writes a line per sample to stdout. Logging goes to
stderr so the sample stream stays machine readable.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, TextIO

from cartraj import config
from cartraj.config import (
    DEFAULT_SAMPLE_PERIOD_S,
    DEMO_P_FINAL,
    DEMO_P_INITIAL,
    DEMO_PHI_FINAL,
    DEMO_PHI_INITIAL,
    DEMO_T_FINAL_S,
    DEMO_T_INITIAL_S,
    LOG_LEVEL_DEFAULT,
    TRACE,
)
from cartraj.trajectory import TrajectoryAssembler, TrajectorySample
from cartraj.utils.errors import TrajectoryError

logger = logging.getLogger("cartraj.cli.generate")

CSV_HEADER = (
    "k,t,"
    "x,y,z,phi1,phi2,phi3,"
    "dx,dy,dz,dphi1,dphi2,dphi3,"
    "ddx,ddy,ddz,ddphi1,ddphi2,ddphi3"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cartraj-generate",
        description="Generate a sampled end-effector trajectory between two poses",
    )
    vec = dict(nargs=3, type=float, metavar=("A", "B", "C"))
    parser.add_argument("--p-initial", default=list(DEMO_P_INITIAL), help="Initial position x y z", **vec)
    parser.add_argument("--p-final", default=list(DEMO_P_FINAL), help="Final position x y z", **vec)
    parser.add_argument("--phi-initial", default=list(DEMO_PHI_INITIAL), help="Initial angle vector", **vec)
    parser.add_argument("--phi-final", default=list(DEMO_PHI_FINAL), help="Final angle vector", **vec)
    parser.add_argument("--center", default=None, help="Arc center x y z (straight line if omitted)", **vec)
    parser.add_argument(
        "--frenet",
        action="store_true",
        help="Derive end orientations from the arc's Frenet frames (requires --center)",
    )
    parser.add_argument("--ti", type=float, default=DEMO_T_INITIAL_S, help="Start time (s)")
    parser.add_argument("--tf", type=float, default=DEMO_T_FINAL_S, help="End time (s)")
    parser.add_argument("--ts", type=float, default=DEFAULT_SAMPLE_PERIOD_S, help="Sample period (s)")
    parser.add_argument("--format", choices=["csv", "json"], default="csv", help="Output format")

    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return TRACE if args.log_level == "TRACE" else getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    return getattr(logging, LOG_LEVEL_DEFAULT)


def _row(sample: TrajectorySample) -> list[float]:
    return [*sample.position.tolist(), *sample.velocity.tolist(), *sample.acceleration.tolist()]


def write_samples(assembler: TrajectoryAssembler, fmt: str, out: TextIO) -> int:
    """Write every sample of `assembler` to `out`; returns the number written."""
    if fmt == "csv":
        out.write(CSV_HEADER + "\n")
    count = 0
    for sample in assembler.iter_samples():
        if fmt == "json":
            record = {
                "k": sample.index,
                "t": sample.time,
                "position": sample.position.tolist(),
                "velocity": sample.velocity.tolist(),
                "acceleration": sample.acceleration.tolist(),
            }
            out.write(json.dumps(record) + "\n")
        else:
            values = [sample.index, sample.time, *_row(sample)]
            out.write(",".join(repr(v) if isinstance(v, float) else str(v) for v in values) + "\n")
        count += 1
    return count


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    """Main entry point for the generator."""
    parser = build_parser()
    args = parser.parse_args(argv)
    out = sys.stdout if out is None else out

    log_level = _log_level(args)
    if log_level <= TRACE:
        config.TRACE_ENABLED = True
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if args.frenet and args.center is None:
        parser.error("--frenet requires --center")

    try:
        if args.frenet:
            assembler = TrajectoryAssembler.from_frenet(
                args.p_initial, args.p_final, args.center, args.ti, args.tf, args.ts
            )
        else:
            assembler = TrajectoryAssembler(
                args.p_initial,
                args.p_final,
                args.phi_initial,
                args.phi_final,
                args.ti,
                args.tf,
                args.ts,
                center=args.center,
            )
    except TrajectoryError as e:
        logger.error(f"Failed to generate trajectory: {e}")
        return 1

    written = write_samples(assembler, args.format, out)
    logger.info(f"Wrote {written} samples")
    return 0


def main_entry():
    """Entry point for the cartraj-generate command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
