"""
Graph model for the network analytics engine.

The node set is derived solely from the edge list: every endpoint seen while
building is inserted into an ordered node map, and edges are kept exactly as
given (multi-edges and self-loops included).
"""

import copy
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

import networkx as nx

logger = logging.getLogger(__name__)

Edge = Tuple[str, str]


@dataclass
class Node:
    """A graph vertex together with the metrics computed for it."""

    id: str
    degree: int = 0
    in_degree: int = 0
    out_degree: int = 0
    rank: float = 0.0
    community: int = 0

    def to_record(self) -> Dict[str, object]:
        return asdict(self)


class GraphModel:
    """
    Deduplicated node set plus the raw directed edge list.

    Nodes keep their construction order (first appearance in the edge list),
    which the community detector relies on for its initial labels and for
    numbering the final communities.
    """

    def __init__(self, nodes: Optional[List[Node]] = None, edges: Optional[List[Edge]] = None):
        self._nodes: Dict[str, Node] = {}
        for n in nodes or []:
            self._nodes[n.id] = n
        self.edges: List[Edge] = list(edges or [])

        # Every node must be an edge endpoint and every endpoint a node
        endpoints = {node_id for edge in self.edges for node_id in edge}
        isolated = set(self._nodes) - endpoints
        if isolated:
            raise ValueError(f"Nodes without an incident edge: {sorted(isolated)}")
        unknown = endpoints - set(self._nodes)
        if unknown:
            raise ValueError(f"Edges reference unknown nodes: {sorted(unknown)}")

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def node(self, node_id: str) -> Node:
        return self._nodes[node_id]

    def add_edge(self, source: str, target: str) -> None:
        if not source or not target:
            raise ValueError(f"Edge endpoints must be non-empty ids, got ({source!r}, {target!r})")
        for node_id in (source, target):
            if node_id not in self._nodes:
                self._nodes[node_id] = Node(id=node_id)
        self.edges.append((source, target))

    def index_of(self) -> Dict[str, int]:
        """Map each node id to its position in construction order."""
        return {node_id: i for i, node_id in enumerate(self._nodes)}

    def edge_indices(self) -> List[Tuple[int, int]]:
        """
        Resolve every edge to a pair of node positions.

        Computations call this once up front so that id lookups never leak
        into their inner loops.
        """
        index = self.index_of()
        return [(index[s], index[t]) for s, t in self.edges]

    def neighbors(self, node_id: str) -> Set[str]:
        """Undirected neighbours of a node (edges in either direction)."""
        if node_id not in self._nodes:
            raise KeyError(node_id)
        found = set()
        for s, t in self.edges:
            if s == node_id:
                found.add(t)
            if t == node_id:
                found.add(s)
        return found

    def neighborhood(self, node_id: str) -> "GraphModel":
        """
        Build the local neighbourhood (ego network) of a node.

        Args:
            node_id: Id of the focal node

        Returns:
            GraphModel: A detached projection holding copies of the focal node
            and its neighbours plus every edge between them. Metrics on the
            copies are those of the full graph; the model itself is unchanged.

        Raises:
            KeyError: If the node does not exist
        """
        keep = self.neighbors(node_id)
        keep.add(node_id)
        nodes = [copy.copy(n) for n in self._nodes.values() if n.id in keep]
        edges = [(s, t) for s, t in self.edges if s in keep and t in keep]
        return GraphModel(nodes=nodes, edges=edges)


def build_graph(edges: Iterable[Edge]) -> GraphModel:
    """
    Normalize a raw edge list into a GraphModel.

    Args:
        edges: Sequence of (source_id, target_id) pairs; rows with missing
            endpoints must have been filtered beforehand

    Returns:
        GraphModel: Model with all metric fields at their initial values

    Raises:
        ValueError: If an edge has a missing or empty endpoint
    """
    model = GraphModel()
    for source, target in edges:
        model.add_edge(source, target)
    logger.debug(f"Built graph: |V|={len(model):,}, |E|={len(model.edges):,}")
    return model


def to_networkx(model: GraphModel) -> nx.MultiDiGraph:
    """Convert a model to a NetworkX multigraph carrying the node metrics."""
    G = nx.MultiDiGraph()
    for n in model.nodes:
        attrs = {k: v for k, v in n.to_record().items() if k != "id"}
        G.add_node(n.id, **attrs)
    G.add_edges_from(model.edges)
    return G
