"""Setup script for the TwitterNet Analyst project."""

from setuptools import find_namespace_packages, setup

setup(
    name="twitternet-analyst",
    version="0.1.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=[
        "polars>=0.20.0",
        "numpy>=1.24.0",
        "networkx>=3.0",
        "kedro>=0.19.0,<1.0",
        "matplotlib>=3.7.0",
        "httpx>=0.25.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.0.265",
        ],
    },
    python_requires=">=3.10",
    description="In-memory follower network analytics: centrality, rank, communities and sample graphs",
)
