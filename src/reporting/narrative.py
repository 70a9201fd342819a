"""
Narrative report generation.

Turns the computed metrics into an analyst-style text report through an
OpenAI-compatible chat completions endpoint. Generation is best effort:
any failure is logged and replaced by a fixed fallback message, so the
analysis pipeline never fails because of it.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from src import settings
from src.network.metrics import MODULARITY_NOTE, NetworkMetrics, top_nodes_by_rank
from src.network.model import GraphModel

logger = logging.getLogger(__name__)

FALLBACK_NARRATIVE = "Unable to generate AI analysis at this time. Please check your API key."
EMPTY_NARRATIVE = "Analysis generation failed."

SYSTEM_PROMPT = "You are a senior data analyst specializing in social network analysis."


def build_narrative_payload(
    model: GraphModel,
    metrics: NetworkMetrics,
    top_k: int = 5,
) -> Dict[str, Any]:
    """Collect the figures the report is written from."""
    return {
        "node_count": metrics.node_count,
        "edge_count": metrics.edge_count,
        "density": metrics.density,
        "avg_degree": metrics.avg_degree,
        "community_count": metrics.community_count,
        "top_nodes": [{"id": n.id, "rank": n.rank} for n in top_nodes_by_rank(model, top_k)],
    }


def build_prompt(payload: Dict[str, Any]) -> str:
    influencers = ", ".join(
        f"{n['id']} (rank: {n['rank']:.3f})" for n in payload["top_nodes"]
    ) or "none"

    return f"""I have performed a network analysis on a follower dataset.

Here are the computed metrics:
- Total Nodes: {payload['node_count']}
- Total Edges: {payload['edge_count']}
- Graph Density: {payload['density']:.4f}
- Average Degree: {payload['avg_degree']:.2f}
- Detected Communities: {payload['community_count']} ({MODULARITY_NOTE})

Top Influencers (by rank):
{influencers}

Please provide a concise but professional analysis report (approx 200 words) covering:
1. **Network Structure**: Is it dense or sparse? What does this imply about information flow?
2. **Key Players**: Who are the opinion leaders?
3. **Community Insight**: Interpretation of the community count.

Format the output with Markdown headers. Use data analyst terminology."""


class NarrativeClient:
    """Minimal client for an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or settings.NARRATIVE_API_BASE_URL).rstrip("/")
        self.model = model or settings.NARRATIVE_MODEL
        api_key = api_key or settings.NARRATIVE_API_KEY

        headers = {}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self.client = httpx.Client(
            timeout=timeout or settings.NARRATIVE_TIMEOUT,
            headers=headers,
            transport=transport,
        )

    def generate(self, prompt: str) -> str:
        response = self.client.post(
            f"{self.base_url}/chat/completions",
            json={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            },
        )
        response.raise_for_status()
        data = response.json()
        return data["choices"][0]["message"]["content"] or ""

    def close(self) -> None:
        self.client.close()


def generate_narrative(payload: Dict[str, Any], client: Optional[NarrativeClient] = None) -> str:
    """
    Generate the narrative report, never raising.

    Args:
        payload: Output of ``build_narrative_payload``
        client: Client to use; one is built from settings when omitted

    Returns:
        str: Generated text, ``EMPTY_NARRATIVE`` for an empty answer or
        ``FALLBACK_NARRATIVE`` when generation fails
    """
    owns_client = client is None
    try:
        if client is None:
            client = NarrativeClient()
        text = client.generate(build_prompt(payload))
        return text.strip() or EMPTY_NARRATIVE
    except Exception as e:
        logger.error(f"Narrative generation failed: {e}")
        return FALLBACK_NARRATIVE
    finally:
        if owns_client and client is not None:
            client.close()
