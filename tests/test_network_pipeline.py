"""
Tests for the network analytics pipeline nodes.
"""
from unittest.mock import patch

import pytest
from kedro.io import DataCatalog, MemoryDataset
from kedro.runner import SequentialRunner

from src.pipeline.network import create_pipeline
from src.pipeline.network.nodes import (
    COMMUNITY_STREAM,
    GENERATOR_STREAM,
    _rng,
    analyze_graph_node,
    create_visualizations_node,
    export_results_node,
    load_graph_node,
    narrative_report_node,
)
from src.pipeline_registry import register_pipelines


@pytest.fixture
def params(tmp_path):
    """Sample parameters for pipeline nodes."""
    return {
        "sample_size": 25,
        "seed": 3,
        "top_k": 3,
        "node_limit": 50,
        "narrative_enabled": False,
        "output_dir": str(tmp_path / "network"),
        "visuals_dir": str(tmp_path / "visuals"),
    }


def test_pipeline_structure():
    pipeline = create_pipeline()
    names = {n.name for n in pipeline.nodes}

    assert names == {
        "load_graph",
        "analyze_graph",
        "export_results",
        "narrative_report",
        "create_network_visualizations",
    }


def test_registered_pipelines():
    pipelines = register_pipelines()
    assert set(pipelines) == {"__default__", "network"}


def test_load_graph_node_generates_sample(params):
    model = load_graph_node(params)
    assert len(model) == 25


def test_load_graph_node_seed_is_reproducible(params):
    assert load_graph_node(params).edges == load_graph_node(params).edges


def test_load_graph_node_reads_edge_file(params, edge_csv):
    model = load_graph_node({**params, "edge_file": str(edge_csv)})
    assert [n.id for n in model.nodes] == ["alice", "bob", "carol"]


def test_analyze_and_export_nodes(params):
    analysis = analyze_graph_node(load_graph_node(params), params)
    paths = export_results_node(analysis, params)

    assert analysis.metrics.node_count == 25
    assert all(p.exists() for p in paths.values())


def test_narrative_node_disabled(params):
    analysis = analyze_graph_node(load_graph_node(params), params)
    assert narrative_report_node(analysis, params) == {}


def test_narrative_node_writes_report(params):
    analysis = analyze_graph_node(load_graph_node(params), params)

    with patch("src.pipeline.network.nodes.generate_narrative", return_value="## Report") as gen:
        paths = narrative_report_node(analysis, {**params, "narrative_enabled": True})

    assert paths["report"].read_text() == "## Report"
    assert len(gen.call_args[0][0]["top_nodes"]) == 3


def test_visualizations_node(params):
    analysis = analyze_graph_node(load_graph_node(params), params)
    paths = create_visualizations_node(analysis, params)

    assert set(paths) == {"network_viz", "degree_viz"}
    assert all(p.exists() for p in paths.values())


def test_pipeline_runs_end_to_end(params):
    catalog = DataCatalog({"params:network": MemoryDataset(params)})
    outputs = SequentialRunner().run(create_pipeline(), catalog)

    assert outputs["network_report"] == {}
    assert outputs["network_exports"]["graph_json"].exists()
    assert outputs["network_visualizations"]["network_viz"].exists()


def test_stage_rngs_are_independent_streams(params):
    sample = _rng(params, GENERATOR_STREAM).random(8)
    community = _rng(params, COMMUNITY_STREAM).random(8)

    assert list(sample) == list(_rng(params, GENERATOR_STREAM).random(8))
    assert list(sample) != list(community)


def test_analyze_graph_node_seed_is_reproducible(params):
    first = analyze_graph_node(load_graph_node(params), params)
    second = analyze_graph_node(load_graph_node(params), params)

    assert [n.community for n in first.model.nodes] == [n.community for n in second.model.nodes]


def test_empty_edge_file_gives_empty_metrics(params, tmp_path):
    edge_file = tmp_path / "empty.csv"
    edge_file.write_text("")

    analysis = analyze_graph_node(load_graph_node({**params, "edge_file": str(edge_file)}), params)

    assert analysis.metrics.node_count == 0
    assert analysis.metrics.density == 0
    assert analysis.metrics.avg_degree == 0
