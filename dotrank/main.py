import argparse
import contextlib
import logging
import sys

import numpy as np

from .errors import DotRankError
from .graph import MAX_NODES
from .markov import markov_chain
from .monitor import RunProfile
from .parser import parse_dot_file
from .ranking import format_ranking
from .stats import compute_stats, format_stats
from .surfer import random_surfer

DEFAULT_TELEPORT_PERCENT = 10

logger = logging.getLogger("dotrank")


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _digits(value):
    # plain decimal digits only: no sign, whitespace or underscores
    if value.isascii() and value.isdigit():
        return int(value)
    return -1


def _steps(value):
    n = _digits(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid number of steps N: '{value}'. N must be a non-negative integer.")
    return n


def _percent(value):
    p = _digits(value)
    if not 0 <= p <= 100:
        raise argparse.ArgumentTypeError(f"invalid percentage P: '{value}'. P must be between 0 and 100.")
    return p


def _capacity(value):
    c = _digits(value)
    if c < 0:
        raise argparse.ArgumentTypeError(f"invalid capacity: '{value}'. Use 0 for unbounded.")
    return c


def build_parser():
    parser = ArgumentParser(
        prog="dotrank",
        description="Perform pagerank computations for a given file in the DOT format",
    )
    parser.add_argument("-s", dest="stats", action="store_true", help="Compute and print the statistics of the graph")
    parser.add_argument("-r", dest="surfer_steps", metavar="N", type=_steps, help="Simulate N steps of the random surfer and output the result")
    parser.add_argument("-m", dest="markov_steps", metavar="N", type=_steps, help="Simulate N steps of the Markov chain and output the result")
    parser.add_argument(
        "-p",
        dest="percent",
        metavar="P",
        type=_percent,
        default=DEFAULT_TELEPORT_PERCENT,
        help=f"Set the teleportation parameter p to P%%. (Default: P = {DEFAULT_TELEPORT_PERCENT})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random surfer")
    parser.add_argument("--capacity", type=_capacity, default=MAX_NODES, help=f"Maximum number of nodes, 0 for unbounded (Default: {MAX_NODES})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug messages to stderr")
    parser.add_argument("--profile", action="store_true", help="Report elapsed time and peak memory to stderr")
    parser.add_argument("filename", metavar="FILENAME", help="Input file in the DOT format")
    return parser


def run(args, out=None):
    out = out or sys.stdout
    teleport_prob = args.percent / 100.0
    graph = parse_dot_file(args.filename, capacity=args.capacity or None)
    logger.info("Loaded %r", graph)

    blocks = []
    if args.stats:
        blocks.append(format_stats(compute_stats(graph)))

    if args.surfer_steps is not None:
        header = f"Random Surfer Results (N={args.surfer_steps}, p={teleport_prob:.2f}):"
        if graph.node_count == 0:
            blocks.append(f"{header}\n(No nodes in graph)")
        elif args.surfer_steps == 0:
            blocks.append(f"{header}\n(No simulation steps performed)")
        else:
            logger.info("Running Random Surfer Simulation (N=%d, p=%.2f)", args.surfer_steps, teleport_prob)
            rng = np.random.default_rng(args.seed)
            ranks = random_surfer(graph, args.surfer_steps, teleport_prob, rng=rng)
            blocks.append(f"{header}\n{format_ranking(ranks)}")

    if args.markov_steps is not None:
        header = f"Markov Chain Results (N={args.markov_steps}, p={teleport_prob:.2f}):"
        if graph.node_count == 0:
            blocks.append(f"{header}\n(No nodes in graph)")
        else:
            logger.info("Running Markov Chain Simulation (N=%d, p=%.2f)", args.markov_steps, teleport_prob)
            ranks = markov_chain(graph, args.markov_steps, teleport_prob)
            blocks.append(f"{header}\n{format_ranking(ranks)}")

    if blocks:
        print("\n\n".join(blocks), file=out)


def main(argv=None):
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    profile = RunProfile() if args.profile else None
    try:
        with profile or contextlib.nullcontext():
            run(args)
    except (DotRankError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if profile is not None:
        for line in profile.report():
            print(line, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
