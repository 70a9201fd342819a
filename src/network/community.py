"""
Community detection by asynchronous label propagation.

Nodes are visited in a freshly shuffled order each round and adopt the most
frequent label among their neighbours. Labels are read from and written to a
single store, so a node visited later in a round already sees the labels
adopted earlier in that same round.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from src.network.model import GraphModel

logger = logging.getLogger(__name__)

ROUNDS = 5


def _adjacency(model: GraphModel) -> List[List[int]]:
    # Edge order is preserved; a self-loop lists the node as its own neighbour twice.
    adjacency: List[List[int]] = [[] for _ in range(len(model))]
    for s, t in model.edge_indices():
        adjacency[s].append(t)
        adjacency[t].append(s)
    return adjacency


def _most_frequent(candidates: List[int], current: int) -> int:
    frequency: Dict[int, int] = {}
    best_label = current
    max_freq = 0
    for label in candidates:
        frequency[label] = frequency.get(label, 0) + 1
        if frequency[label] > max_freq:
            max_freq = frequency[label]
            best_label = label
    return best_label


def detect_communities(
    model: GraphModel,
    rng: Optional[np.random.Generator] = None,
    rounds: int = ROUNDS,
) -> GraphModel:
    """
    Assign a community id to every node.

    Args:
        model: Graph to update in place
        rng: Random generator used to shuffle the visiting order; an unseeded
            generator is created when omitted
        rounds: Number of propagation rounds

    Returns:
        GraphModel: The same model, with ``community`` numbered 0..k-1 in
        order of first appearance
    """
    if rng is None:
        rng = np.random.default_rng()

    nodes = model.nodes
    adjacency = _adjacency(model)
    labels = list(range(len(nodes)))

    for _ in range(rounds):
        order = list(range(len(nodes)))
        rng.shuffle(order)
        for i in order:
            if not adjacency[i]:
                continue
            labels[i] = _most_frequent([labels[j] for j in adjacency[i]], labels[i])

    ids: Dict[int, int] = {}
    for node, label in zip(nodes, labels):
        if label not in ids:
            ids[label] = len(ids)
        node.community = ids[label]

    logger.debug(f"Label propagation settled on {len(ids)} communities")
    return model
