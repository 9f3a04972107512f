import logging

import numpy as np

from .ranking import build_ranking, check_simulation_args

logger = logging.getLogger(__name__)


def power_iteration(graph, steps, teleport_prob, callback=None) -> np.ndarray:
    """
    带传送的幂迭代，固定迭代 steps 次，不提前停止。

    Starting from the uniform vector, each iteration moves ``1 - p`` of every
    non-dangling node's mass along its out-edges, spreads the remaining ``p``
    share uniformly, and spreads the whole mass of dangling nodes uniformly.
    ``callback(iteration, pr)`` is invoked after every iteration.
    """
    check_simulation_args(steps, teleport_prob)
    n = graph.node_count
    if n == 0:
        return np.zeros(0)

    M = graph.transition_matrix()
    dangling = graph.out_degrees() == 0
    follow = 1.0 - teleport_prob

    pr = np.full(n, 1.0 / n)
    delta = 0.0
    for it in range(steps):
        dead_mass = pr[dangling].sum()
        live_mass = pr[~dangling].sum()
        pr_new = follow * (M @ pr)
        pr_new += (teleport_prob * live_mass + dead_mass) / n
        delta = np.abs(pr_new - pr).sum()
        pr = pr_new
        if callback is not None:
            callback(it + 1, pr)

    if steps:
        logger.debug("Markov chain: %d iterations, last delta=%.2e, sum=%.12f", steps, delta, pr.sum())
    return pr


def markov_chain(graph, steps, teleport_prob):
    pr = power_iteration(graph, steps, teleport_prob)
    if graph.node_count == 0:
        return []
    return build_ranking(graph, pr)
