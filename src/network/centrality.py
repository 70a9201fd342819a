"""Degree centrality for the graph model."""

from src.network.model import GraphModel


def compute_degrees(model: GraphModel) -> GraphModel:
    """
    Recompute degree, in-degree and out-degree for every node.

    A self-loop counts once as outgoing and once as incoming, so it adds two
    to the node's total degree.

    Args:
        model: Graph to update in place

    Returns:
        GraphModel: The same model, for chaining
    """
    nodes = model.nodes
    for n in nodes:
        n.degree = 0
        n.in_degree = 0
        n.out_degree = 0

    for s, t in model.edge_indices():
        source, target = nodes[s], nodes[t]
        source.out_degree += 1
        source.degree += 1
        target.in_degree += 1
        target.degree += 1

    return model
