"""
Graph-level summary statistics.

``modularity_proxy`` is the number of communities divided by the number of
nodes. It is a rough heuristic and not Newman modularity; every record that
carries it also carries ``MODULARITY_NOTE``.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from src.network.model import GraphModel, Node

DIAMETER_PLACEHOLDER = "N/A (not computed)"
MODULARITY_NOTE = "approximation: community count / node count, not true modularity"


@dataclass(frozen=True)
class NetworkMetrics:
    node_count: int
    edge_count: int
    density: float
    avg_degree: float
    community_count: int
    modularity_proxy: float
    diameter: str = DIAMETER_PLACEHOLDER

    def to_record(self) -> Dict[str, Any]:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "density": self.density,
            "avg_degree": self.avg_degree,
            "community_count": self.community_count,
            "modularity_proxy": self.modularity_proxy,
            "modularity_note": MODULARITY_NOTE,
            "diameter": self.diameter,
        }


def aggregate_metrics(model: GraphModel) -> NetworkMetrics:
    """
    Summarize a fully analyzed graph.

    Density uses the directed capacity N*(N-1) and the average degree is
    E/N, not the mean of the per-node degrees. Both are 0 for graphs with at
    most one node.
    """
    n = len(model)
    e = len(model.edges)
    community_count = len({node.community for node in model.nodes})

    if n <= 1:
        density = 0.0
        avg_degree = 0.0
    else:
        density = e / (n * (n - 1))
        avg_degree = e / n

    return NetworkMetrics(
        node_count=n,
        edge_count=e,
        density=density,
        avg_degree=avg_degree,
        community_count=community_count,
        modularity_proxy=community_count / n if n else 0.0,
    )


def top_nodes_by_rank(model: GraphModel, k: int = 5) -> List[Node]:
    """Return the ``k`` highest-ranked nodes; ties keep construction order."""
    return sorted(model.nodes, key=lambda node: node.rank, reverse=True)[:k]


def degree_distribution(model: GraphModel) -> List[Tuple[int, int]]:
    """Return (degree, node count) pairs sorted by degree."""
    counts = Counter(node.degree for node in model.nodes)
    return sorted(counts.items())
