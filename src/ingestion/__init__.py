"""
Edge list ingestion for the network analytics pipeline.
"""

from .edge_list import clean_edge_rows, read_edge_list


__all__ = ["clean_edge_rows", "read_edge_list"]
