"""
Network analytics engine for TwitterNet Analyst.

This module builds a graph model from a directed edge list and computes:
- Degree centrality (degree, in-degree, out-degree)
- Influence rank by fixed-round power iteration
- Communities by asynchronous label propagation
- Graph-level summary metrics
It can also synthesize scale-free sample graphs by preferential attachment.
"""

from .centrality import compute_degrees
from .community import detect_communities
from .engine import AnalysisResult, AnalysisSession, analyze
from .generator import GeneratorStallError, generate_sample_graph
from .metrics import NetworkMetrics, aggregate_metrics, degree_distribution, top_nodes_by_rank
from .model import GraphModel, Node, build_graph, to_networkx
from .rank import propagate_rank


__all__ = [
    "AnalysisResult",
    "AnalysisSession",
    "GeneratorStallError",
    "GraphModel",
    "NetworkMetrics",
    "Node",
    "aggregate_metrics",
    "analyze",
    "build_graph",
    "compute_degrees",
    "degree_distribution",
    "detect_communities",
    "generate_sample_graph",
    "propagate_rank",
    "to_networkx",
    "top_nodes_by_rank",
]
