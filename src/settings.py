"""Project settings."""

import os
from pathlib import Path

# This is the location of the project configuration directory
CONF_SOURCE = "conf"

# The location of the project root directory.
PROJECT_ROOT = Path(__file__).parents[1]  # Going up from src to the project root

# Pipeline defaults, overridden by the ``network`` parameters block
DEFAULT_OUTPUT_DIR = Path("data/network")
DEFAULT_VISUALS_DIR = Path("visuals")
DEFAULT_SAMPLE_SIZE = 60
DEFAULT_TOP_K = 5

# Narrative report collaborator (OpenAI-compatible chat completions endpoint)
NARRATIVE_API_BASE_URL = os.getenv("NARRATIVE_API_BASE_URL", "http://localhost:11434/v1")
NARRATIVE_MODEL = os.getenv("NARRATIVE_MODEL", "gpt-4o-mini")
NARRATIVE_API_KEY = os.getenv("NARRATIVE_API_KEY")
NARRATIVE_TIMEOUT = float(os.getenv("NARRATIVE_TIMEOUT", "60"))
