"""
Pipeline node function definitions for network analytics.
"""

import logging
from pathlib import Path
from typing import Dict, Any

import numpy as np
from kedro.pipeline import Pipeline, node

from src import settings
from src.ingestion import read_edge_list
from src.network import (
    AnalysisResult,
    GraphModel,
    analyze,
    build_graph,
    generate_sample_graph,
)
from src.reporting.export import export_results
from src.reporting.narrative import build_narrative_payload, generate_narrative
from src.reporting.visualization import plot_degree_distribution, plot_network


logger = logging.getLogger(__name__)

# Independent random streams spawned from the configured seed
GENERATOR_STREAM = 0
COMMUNITY_STREAM = 1


def _rng(params: Dict[str, Any], stream: int) -> np.random.Generator:
    """Generator for one pipeline stage, derived from ``params["seed"]``."""
    children = np.random.SeedSequence(params.get("seed")).spawn(2)
    return np.random.default_rng(children[stream])


def load_graph_node(params: Dict[str, Any]) -> GraphModel:
    """
    Node function for loading the graph to analyze.

    Reads ``edge_file`` when one is configured, otherwise generates a
    preferential-attachment sample of ``sample_size`` nodes.

    Args:
        params: Pipeline parameters

    Returns:
        GraphModel: The freshly built graph
    """
    edge_file = params.get("edge_file")
    if edge_file:
        return build_graph(read_edge_list(Path(edge_file)))

    sample_size = params.get("sample_size", settings.DEFAULT_SAMPLE_SIZE)
    rng = _rng(params, GENERATOR_STREAM)
    return generate_sample_graph(sample_size, rng=rng)


def analyze_graph_node(model: GraphModel, params: Dict[str, Any]) -> AnalysisResult:
    """
    Node function for computing degrees, rank, communities and metrics.

    Args:
        model: Graph produced by ``load_graph_node``
        params: Pipeline parameters

    Returns:
        AnalysisResult: Analyzed model and summary metrics
    """
    rng = _rng(params, COMMUNITY_STREAM)
    return analyze(model, rng=rng)


def export_results_node(analysis: AnalysisResult, params: Dict[str, Any]) -> Dict[str, Path]:
    """
    Node function for writing the export files.

    Args:
        analysis: Analysis result
        params: Pipeline parameters

    Returns:
        Dict[str, Path]: Dictionary of paths to export files
    """
    output_dir = Path(params.get("output_dir", settings.DEFAULT_OUTPUT_DIR))
    return export_results(analysis.model, analysis.metrics, output_dir)


def narrative_report_node(analysis: AnalysisResult, params: Dict[str, Any]) -> Dict[str, Path]:
    """
    Node function for writing the narrative analyst report.

    Args:
        analysis: Analysis result
        params: Pipeline parameters

    Returns:
        Dict[str, Path]: Path to the markdown report under "report", empty
        when the report is disabled
    """
    if not params.get("narrative_enabled", True):
        logger.info("Narrative report disabled")
        return {}

    output_dir = Path(params.get("output_dir", settings.DEFAULT_OUTPUT_DIR))
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / "analysis_report.md"

    payload = build_narrative_payload(
        analysis.model,
        analysis.metrics,
        top_k=params.get("top_k", settings.DEFAULT_TOP_K),
    )
    output_file.write_text(generate_narrative(payload))
    logger.info(f"Saved narrative report to {output_file}")
    return {"report": output_file}


def create_visualizations_node(analysis: AnalysisResult, params: Dict[str, Any]) -> Dict[str, Path]:
    """
    Node function for creating static visualizations.

    Args:
        analysis: Analysis result
        params: Pipeline parameters

    Returns:
        Dict[str, Path]: Dictionary of paths to visualization files
    """
    output_dir = Path(params.get("visuals_dir", settings.DEFAULT_VISUALS_DIR))
    output_dir.mkdir(parents=True, exist_ok=True)

    network_viz = plot_network(
        analysis.model,
        output_file=output_dir / "network_graph.png",
        node_limit=params.get("node_limit", 200),
        seed=params.get("seed"),
    )
    degree_viz = plot_degree_distribution(
        analysis.model,
        output_file=output_dir / "degree_distribution.png",
    )

    return {
        "network_viz": network_viz,
        "degree_viz": degree_viz,
    }


def create_pipeline(**kwargs) -> Pipeline:
    """Create the network analytics pipeline."""
    return Pipeline(
        [
            node(
                load_graph_node,
                inputs="params:network",
                outputs="network_graph",
                name="load_graph",
            ),
            node(
                analyze_graph_node,
                inputs=["network_graph", "params:network"],
                outputs="network_analysis",
                name="analyze_graph",
            ),
            node(
                export_results_node,
                inputs=["network_analysis", "params:network"],
                outputs="network_exports",
                name="export_results",
            ),
            node(
                narrative_report_node,
                inputs=["network_analysis", "params:network"],
                outputs="network_report",
                name="narrative_report",
            ),
            node(
                create_visualizations_node,
                inputs=["network_analysis", "params:network"],
                outputs="network_visualizations",
                name="create_network_visualizations",
            ),
        ]
    )
