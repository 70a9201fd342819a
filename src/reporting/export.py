"""
Export of analysis results.

Node and edge tables follow the public output contract: node records carry
only ids and computed metrics, edge records only the two endpoint ids.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

import polars as pl

from src.network.metrics import NetworkMetrics
from src.network.model import GraphModel

logger = logging.getLogger(__name__)

TOOL_NAME = "TwitterNet Analyst"

NODE_SCHEMA = {
    "id": pl.Utf8,
    "degree": pl.Int64,
    "in_degree": pl.Int64,
    "out_degree": pl.Int64,
    "rank": pl.Float64,
    "community": pl.Int64,
}
EDGE_SCHEMA = {"source": pl.Utf8, "target": pl.Utf8}


def nodes_frame(model: GraphModel) -> pl.DataFrame:
    """Node metrics as a DataFrame, one row per node in construction order."""
    return pl.DataFrame([n.to_record() for n in model.nodes], schema=NODE_SCHEMA)


def edges_frame(model: GraphModel) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "source": [s for s, _ in model.edges],
            "target": [t for _, t in model.edges],
        },
        schema=EDGE_SCHEMA,
    )


def export_nodes_csv(model: GraphModel, output_file: Path) -> Path:
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    nodes_frame(model).write_csv(output_file)
    logger.info(f"Saved {len(model):,} node records to {output_file}")
    return output_file


def export_edges_csv(model: GraphModel, output_file: Path) -> Path:
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    edges_frame(model).write_csv(output_file)
    logger.info(f"Saved {len(model.edges):,} edge records to {output_file}")
    return output_file


def export_nodes_parquet(model: GraphModel, output_file: Path) -> Path:
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    nodes_frame(model).write_parquet(output_file)
    logger.info(f"Saved node metrics to {output_file}")
    return output_file


def export_graph_json(model: GraphModel, metrics: NetworkMetrics, output_file: Path) -> Path:
    """
    Export the graph in node-link JSON format.

    Args:
        model: Analyzed graph
        metrics: Summary metrics, stored under ``meta``
        output_file: Path to save the JSON output

    Returns:
        Path: Path to the saved JSON file
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "meta": {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "tool": TOOL_NAME,
            "metrics": metrics.to_record(),
        },
        "nodes": [n.to_record() for n in model.nodes],
        "links": [{"source": s, "target": t} for s, t in model.edges],
    }

    with open(output_file, "w") as f:
        json.dump(data, f, indent=2)

    logger.info(f"Exported graph with {len(data['nodes'])} nodes and {len(data['links'])} edges")
    logger.info(f"Saved to {output_file}")
    return output_file


def export_results(model: GraphModel, metrics: NetworkMetrics, output_dir: Path) -> Dict[str, Path]:
    """
    Write every export format into one directory.

    Returns:
        Dict[str, Path]: Paths keyed by export kind
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    return {
        "nodes_csv": export_nodes_csv(model, output_dir / "network_metrics.csv"),
        "edges_csv": export_edges_csv(model, output_dir / "edge_list.csv"),
        "nodes_parquet": export_nodes_parquet(model, output_dir / "network_metrics.parquet"),
        "graph_json": export_graph_json(model, metrics, output_dir / "network_graph.json"),
    }
