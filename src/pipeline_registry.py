"""Project pipelines."""

from typing import Dict

from kedro.pipeline import Pipeline
from src.pipeline.network import create_pipeline as create_network_pipeline


def register_pipelines() -> Dict[str, Pipeline]:
    """Register the project's pipelines."""
    network_pipeline = create_network_pipeline()

    return {
        "__default__": network_pipeline,
        "network": network_pipeline,
    }
