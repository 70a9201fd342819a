#!/usr/bin/env python
"""
Run the network analytics pipeline for TwitterNet Analyst.

This script loads an edge list (or generates a preferential-attachment
sample graph), computes degree centrality, rank, communities and summary
metrics, then writes export files, a narrative report and static plots.

Example:
    $ python run_network_pipeline.py
    $ python run_network_pipeline.py --edge-file data/raw/followers.csv
    $ python run_network_pipeline.py --sample-size 200 --seed 42 --no-narrative
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

import yaml
from kedro.io import DataCatalog, MemoryDataset
from kedro.runner import SequentialRunner

from src import settings
from src.pipeline_registry import register_pipelines

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_parameters() -> dict:
    """Read the ``network`` block from conf/base/parameters.yml, if present."""
    params_file = project_root / settings.CONF_SOURCE / "base" / "parameters.yml"
    if not params_file.exists():
        return {}
    with open(params_file) as f:
        return (yaml.safe_load(f) or {}).get("network", {}) or {}


def run_pipeline(edge_file=None, sample_size=None, seed=None, output_dir=None, narrative=True):
    """
    Run the network pipeline with optional parameter overrides.

    Args:
        edge_file: CSV edge list to analyze instead of a sample graph
        sample_size: Number of nodes in the generated sample graph
        seed: Seed for sample generation and community detection
        output_dir: Directory for export files and the report
        narrative: Whether to request the narrative report
    """
    params = load_parameters()
    if edge_file is not None:
        params["edge_file"] = str(edge_file)
    if sample_size is not None:
        params["sample_size"] = sample_size
    if seed is not None:
        params["seed"] = seed
    if output_dir is not None:
        params["output_dir"] = str(output_dir)
    if not narrative:
        params["narrative_enabled"] = False

    catalog = DataCatalog({"params:network": MemoryDataset(params)})
    pipeline = register_pipelines()["network"]

    logger.info("Running network pipeline")
    outputs = SequentialRunner().run(pipeline, catalog)

    for name, paths in outputs.items():
        for kind, path in paths.items():
            logger.info(f"{name}.{kind}: {path}")

    logger.info("Network analytics pipeline completed successfully")
    return outputs


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the network analytics pipeline for TwitterNet Analyst"
    )

    parser.add_argument(
        "--edge-file",
        type=Path,
        help="CSV edge list with a source,target header"
    )

    parser.add_argument(
        "--sample-size",
        type=int,
        help="Number of nodes in the generated sample graph"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible runs"
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for export files and the narrative report"
    )

    parser.add_argument(
        "--no-narrative",
        action="store_false",
        dest="narrative",
        help="Skip the narrative report"
    )

    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    run_pipeline(
        edge_file=args.edge_file,
        sample_size=args.sample_size,
        seed=args.seed,
        output_dir=args.output_dir,
        narrative=args.narrative
    )
