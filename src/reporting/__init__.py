"""
Reporting collaborators for the network analytics pipeline.

This module turns analysis results into:
- Export files (CSV, Parquet, node-link JSON)
- A narrative analyst report
- Static visualizations
"""
