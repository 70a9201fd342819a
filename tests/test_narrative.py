"""
Tests for the narrative report collaborator.
"""
import json

import httpx
import pytest

from src.network import analyze, build_graph
from src.reporting.narrative import (
    EMPTY_NARRATIVE,
    FALLBACK_NARRATIVE,
    NarrativeClient,
    build_narrative_payload,
    build_prompt,
    generate_narrative,
)


@pytest.fixture
def payload(rng):
    result = analyze(build_graph([("A", "B"), ("B", "C"), ("C", "A"), ("D", "A")]), rng=rng)
    return build_narrative_payload(result.model, result.metrics, top_k=2)


def make_client(handler, **kwargs):
    return NarrativeClient(
        base_url="http://llm.test/v1",
        model="test-model",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def completion(content):
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def test_payload_contents(payload):
    assert payload["node_count"] == 4
    assert payload["edge_count"] == 4
    assert len(payload["top_nodes"]) == 2
    assert payload["top_nodes"][0]["id"] == "A"
    assert set(payload["top_nodes"][0]) == {"id", "rank"}


def test_prompt_mentions_metrics(payload):
    prompt = build_prompt(payload)

    assert "Total Nodes: 4" in prompt
    assert "Total Edges: 4" in prompt
    assert "A (rank:" in prompt
    assert "approximation" in prompt


def test_generate_narrative_success(payload):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return completion("## Network Structure\nSparse.")

    text = generate_narrative(payload, client=make_client(handler, api_key="secret"))

    assert text.startswith("## Network Structure")
    assert seen["url"] == "http://llm.test/v1/chat/completions"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["model"] == "test-model"
    assert seen["body"]["messages"][-1]["role"] == "user"


def test_empty_answer(payload):
    text = generate_narrative(payload, client=make_client(lambda request: completion("  ")))
    assert text == EMPTY_NARRATIVE


def test_http_error_falls_back(payload):
    client = make_client(lambda request: httpx.Response(401, json={"error": "unauthorized"}))
    assert generate_narrative(payload, client=client) == FALLBACK_NARRATIVE


def test_malformed_response_falls_back(payload):
    client = make_client(lambda request: httpx.Response(200, json={"unexpected": True}))
    assert generate_narrative(payload, client=client) == FALLBACK_NARRATIVE


def test_transport_failure_falls_back(payload):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert generate_narrative(payload, client=make_client(handler)) == FALLBACK_NARRATIVE
