"""
Influence ranking by power iteration (PageRank-style).

The iteration runs a fixed number of rounds without a convergence check.
Dangling nodes (out-degree 0) pass no mass onward and their share is not
redistributed, so ranks sum to less than 1 whenever such nodes exist.
"""

import logging
from typing import List

from src.network.model import GraphModel

logger = logging.getLogger(__name__)

DAMPING = 0.85
ITERATIONS = 20


def propagate_rank(
    model: GraphModel,
    damping: float = DAMPING,
    iterations: int = ITERATIONS,
) -> GraphModel:
    """
    Compute rank scores and store them on the nodes.

    Out-degrees must already be populated (see ``compute_degrees``).

    Args:
        model: Graph to update in place
        damping: Probability of following an outgoing edge
        iterations: Number of propagation rounds

    Returns:
        GraphModel: The same model, for chaining
    """
    nodes = model.nodes
    n = len(nodes)
    if n == 0:
        return model

    edges = model.edge_indices()
    out_degree = [node.out_degree for node in nodes]
    base = (1 - damping) / n

    ranks: List[float] = [1.0 / n] * n
    for _ in range(iterations):
        new_ranks = [base] * n
        for s, t in edges:
            if out_degree[s] > 0:
                new_ranks[t] += damping * ranks[s] / out_degree[s]
        ranks = new_ranks

    for node, score in zip(nodes, ranks):
        node.rank = score

    dangling = sum(1 for d in out_degree if d == 0)
    if dangling:
        logger.debug(f"{dangling} dangling nodes, rank mass sums to {sum(ranks):.4f}")
    return model
