from dataclasses import dataclass

import numpy as np

from .errors import InvalidArgument


@dataclass(frozen=True)
class RankEntry:
    node_id: str
    score: float


def rank_by_identifier(entries):
    """Order entries by node identifier only; scores never influence the order."""
    return sorted(entries, key=lambda e: e.node_id)


def build_ranking(graph, scores):
    if len(scores) != graph.node_count:
        raise ValueError(f"Expected {graph.node_count} scores, got {len(scores)}")
    return rank_by_identifier(RankEntry(node.node_id, float(score)) for node, score in zip(graph.nodes, scores))


def format_ranking(entries) -> str:
    return "\n".join(f"- {e.node_id}: {e.score:.6f}" for e in entries)


def check_simulation_args(steps, teleport_prob):
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)) or steps < 0:
        raise InvalidArgument(f"Number of steps must be a non-negative integer, got {steps!r}")
    if not 0.0 <= teleport_prob <= 1.0:
        raise InvalidArgument(f"Teleport probability must lie in [0, 1], got {teleport_prob!r}")
