"""
Static visualizations of analysis results.

This module renders the analyzed network and its degree distribution to
image files. Interactive exploration is left to the front end.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx

from src.network.metrics import degree_distribution, top_nodes_by_rank
from src.network.model import GraphModel, to_networkx

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def plot_network(
    model: GraphModel,
    output_file: Path,
    node_limit: int = 200,
    layout: str = "spring",
    seed: Optional[int] = None,
    figsize: Tuple[int, int] = (10, 8),
    dpi: int = 150
) -> Path:
    """
    Draw the network with node size by rank and colour by community.

    Args:
        model: Analyzed graph
        output_file: Path to save the visualization
        node_limit: Maximum number of nodes to include; the highest-ranked
            nodes are kept when the graph is larger
        layout: Graph layout algorithm ('spring', 'kamada_kawai', 'circular')
        seed: Seed for the spring layout
        figsize: Figure size
        dpi: Output DPI

    Returns:
        Path: Path to the saved visualization
    """
    logger.info("Creating network visualization")
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    G = to_networkx(model)
    if G.number_of_nodes() > node_limit:
        logger.info(f"Selecting top {node_limit} nodes from graph with {G.number_of_nodes()} nodes")
        G = G.subgraph([n.id for n in top_nodes_by_rank(model, node_limit)])

    node_sizes = [G.nodes[node]["rank"] * 10000 for node in G.nodes()]
    node_colors = [G.nodes[node]["community"] for node in G.nodes()]

    plt.figure(figsize=figsize)

    if layout == "kamada_kawai" and G.number_of_nodes() > 1:
        pos = nx.kamada_kawai_layout(G)
    elif layout == "circular":
        pos = nx.circular_layout(G)
    else:
        pos = nx.spring_layout(G, k=0.3, iterations=50, seed=seed)

    nx.draw_networkx_nodes(
        G, pos, node_size=node_sizes, node_color=node_colors, cmap=plt.cm.tab20, alpha=0.8
    )
    nx.draw_networkx_edges(G, pos, width=0.5, alpha=0.3, arrows=True, arrowsize=5)

    plt.axis("off")
    plt.tight_layout()
    plt.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info(f"Saved network visualization to {output_file}")
    return output_file


def plot_degree_distribution(
    model: GraphModel,
    output_file: Path,
    figsize: Tuple[int, int] = (10, 6),
    dpi: int = 150
) -> Path:
    """Bar chart of how many nodes have each degree."""
    logger.info("Creating degree distribution chart")
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    distribution = degree_distribution(model)
    degrees = [d for d, _ in distribution]
    counts = [c for _, c in distribution]

    plt.figure(figsize=figsize)
    plt.bar(degrees, counts, alpha=0.75, color="steelblue")
    plt.xlabel("Degree")
    plt.ylabel("Count")
    plt.title("Degree Distribution")
    plt.grid(alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info(f"Saved degree distribution chart to {output_file}")
    return output_file
