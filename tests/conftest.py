"""
Pytest configuration file for the network analytics project.

This file contains shared fixtures and configuration for the test suite.
"""
import numpy as np
import pytest

from src.network import build_graph


@pytest.fixture
def rng():
    """A seeded random generator so runs are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def triangle_edges():
    return [("A", "B"), ("B", "C"), ("C", "A")]


@pytest.fixture
def triangle(triangle_edges):
    return build_graph(triangle_edges)


@pytest.fixture
def two_cliques_edges():
    """
    Two directed 4-cliques joined by a single bridge edge.

    Label propagation should separate them into two communities.
    """
    edges = []
    for group in (["a1", "a2", "a3", "a4"], ["b1", "b2", "b3", "b4"]):
        for i, u in enumerate(group):
            for v in group[i + 1:]:
                edges.append((u, v))
    edges.append(("a1", "b1"))
    return edges


@pytest.fixture
def edge_csv(tmp_path):
    """Small CSV edge list with a couple of malformed rows."""
    path = tmp_path / "edges.csv"
    path.write_text(
        "source,target\n"
        "alice,bob\n"
        " bob , carol \n"
        "carol,\n"
        ",dave\n"
        "carol,alice\n"
    )
    return path
