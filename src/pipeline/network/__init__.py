"""
Network analytics pipeline for TwitterNet Analyst.
"""

from .nodes import create_pipeline


__all__ = ["create_pipeline"]
