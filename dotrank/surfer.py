import logging

import numpy as np

from .ranking import build_ranking, check_simulation_args

logger = logging.getLogger(__name__)

CHUNK_SIZE = 100000


def teleport_percent(teleport_prob) -> int:
    # truncated to whole percent; the epsilon keeps 0.29 at 29 despite float error
    return int(teleport_prob * 100 + 1e-9)


def visit_counts(graph, steps, teleport_prob, rng=None) -> np.ndarray:
    """
    随机冲浪者：走 steps 步，统计每步落脚节点的访问次数。

    Each step teleports with probability ``teleport_prob`` (or always, from a
    dangling node) to a uniformly chosen node, otherwise follows a uniformly
    chosen out-edge. The starting node is not counted.
    """
    check_simulation_args(steps, teleport_prob)
    n = graph.node_count
    counts = np.zeros(n, dtype=np.int64)
    if n == 0 or steps == 0:
        return counts
    if rng is None:
        rng = np.random.default_rng()

    neighbors = [graph.out_neighbors(i) for i in range(n)]
    threshold = teleport_percent(teleport_prob)
    current = int(rng.integers(n))

    # 分块预取随机数，避免 steps 很大时一次性分配
    done = 0
    while done < steps:
        m = min(CHUNK_SIZE, steps - done)
        decide = rng.integers(100, size=m)
        jump = rng.integers(n, size=m)
        pick = rng.random(m)
        for k in range(m):
            succ = neighbors[current]
            if decide[k] < threshold or not succ:
                current = int(jump[k])
            else:
                current = succ[int(pick[k] * len(succ))]
            counts[current] += 1
        done += m
    return counts


def random_surfer(graph, steps, teleport_prob, rng=None):
    counts = visit_counts(graph, steps, teleport_prob, rng=rng)
    if graph.node_count == 0 or steps == 0:
        return []
    logger.info("Random surfer finished %d steps over %d nodes (p=%.2f)", steps, graph.node_count, teleport_prob)
    return build_ranking(graph, counts / steps)
