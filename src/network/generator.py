"""
Synthetic scale-free sample graphs by preferential attachment.

Growth starts from a complete seed graph on five nodes; every further node
attaches two edges to existing nodes chosen with probability proportional to
their degree plus one.
"""

import logging
from typing import List, Optional

import numpy as np

from src.network.model import Edge, GraphModel, build_graph

logger = logging.getLogger(__name__)

SEED_NODES = 5
EDGES_PER_NODE = 2
MAX_ATTEMPTS = 1000
NODE_PREFIX = "User_"


class GeneratorStallError(RuntimeError):
    """Raised when a growth step cannot place its edges within the retry budget."""


def _node_id(i: int) -> str:
    return f"{NODE_PREFIX}{i}"


def _pick(weights: List[int], draw: float) -> int:
    cumulative = 0
    for j, w in enumerate(weights):
        cumulative += w
        if cumulative >= draw:
            return j
    return len(weights) - 1


def generate_sample_graph(
    n: int = 60,
    rng: Optional[np.random.Generator] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> GraphModel:
    """
    Generate a preferential-attachment sample graph.

    Args:
        n: Total number of nodes, at least the five seed nodes
        rng: Random generator for the weighted draws; an unseeded generator is
            created when omitted
        max_attempts: Maximum number of draws allowed for a single new node

    Returns:
        GraphModel: The generated graph with metric fields at initial values

    Raises:
        ValueError: If ``n`` is smaller than the seed graph
        GeneratorStallError: If a node cannot find distinct targets in time
    """
    if n < SEED_NODES:
        raise ValueError(f"n must be at least {SEED_NODES}, got {n}")
    if rng is None:
        rng = np.random.default_rng()

    edges: List[Edge] = []
    degrees = [0] * n

    for i in range(SEED_NODES):
        for j in range(i + 1, SEED_NODES):
            edges.append((_node_id(i), _node_id(j)))
            degrees[i] += 1
            degrees[j] += 1

    for i in range(SEED_NODES, n):
        # Weights are fixed for the whole step, as if rescanned from the edge list.
        weights = [d + 1 for d in degrees[:i]]
        total = sum(weights)

        chosen: List[int] = []
        attempts = 0
        while len(chosen) < EDGES_PER_NODE:
            if attempts >= max_attempts:
                raise GeneratorStallError(
                    f"Node {_node_id(i)} placed {len(chosen)} of {EDGES_PER_NODE} edges "
                    f"after {attempts} draws"
                )
            attempts += 1
            target = _pick(weights, rng.random() * total)
            if target in chosen:
                continue
            chosen.append(target)
            edges.append((_node_id(i), _node_id(target)))

        for target in chosen:
            degrees[i] += 1
            degrees[target] += 1

    logger.info(f"Generated sample graph: |V|={n:,}, |E|={len(edges):,}")
    return build_graph(edges)
