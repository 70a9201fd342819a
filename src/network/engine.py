"""
End-to-end analysis of a graph load.

One load (sample generation or edge list ingestion) produces a GraphModel,
after which degrees, rank, communities and summary metrics are computed in
that order. Rank needs the out-degrees, so the order is fixed.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from src.ingestion import clean_edge_rows
from src.network.centrality import compute_degrees
from src.network.community import detect_communities
from src.network.generator import generate_sample_graph
from src.network.metrics import NetworkMetrics, aggregate_metrics
from src.network.model import GraphModel, build_graph
from src.network.rank import propagate_rank

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    model: GraphModel
    metrics: NetworkMetrics


def analyze(model: GraphModel, rng: Optional[np.random.Generator] = None) -> AnalysisResult:
    """
    Run the full analysis over a freshly built model.

    Args:
        model: Graph to analyze; its derived fields are overwritten
        rng: Random generator for community detection

    Returns:
        AnalysisResult: The analyzed model and its summary metrics
    """
    logger.info(f"Analyzing graph: |V|={len(model):,}, |E|={len(model.edges):,}")
    compute_degrees(model)
    propagate_rank(model)
    detect_communities(model, rng=rng)
    metrics = aggregate_metrics(model)
    logger.info(
        f"Density {metrics.density:.4f}, avg degree {metrics.avg_degree:.2f}, "
        f"{metrics.community_count} communities"
    )
    return AnalysisResult(model=model, metrics=metrics)


class AnalysisSession:
    """
    Holds the result of the most recent load.

    A new result replaces the current one only once it has been fully
    computed; if a load fails the previous result stays in place.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._current: Optional[AnalysisResult] = None

    @property
    def current(self) -> Optional[AnalysisResult]:
        return self._current

    def load_sample(self, n: int = 60) -> AnalysisResult:
        model = generate_sample_graph(n, rng=self.rng)
        return self._publish(analyze(model, rng=self.rng))

    def load_edges(self, rows: Iterable[Sequence[Optional[object]]]) -> AnalysisResult:
        model = build_graph(clean_edge_rows(rows))
        return self._publish(analyze(model, rng=self.rng))

    def neighborhood(self, node_id: str) -> GraphModel:
        """Read-only ego network of a node in the current result."""
        if self._current is None:
            raise LookupError("No graph has been loaded")
        return self._current.model.neighborhood(node_id)

    def _publish(self, result: AnalysisResult) -> AnalysisResult:
        self._current = result
        return result
