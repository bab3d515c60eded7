"""Tests for the reasoning HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from reasoner.api import reasoning_routes
from reasoner.errors import SynthesisError
from reasoner.main import app
from reasoner.schemas import Filmography, IssueOperationProposal
from reasoner.services.reasoning import ReasoningEngine

from fakes import ScriptedChatModel, make_step


@pytest.fixture
def client():
    return TestClient(app)


def _use_llm(monkeypatch, llm) -> list:
    profiles = []

    def create_engine(profile):
        profiles.append(profile)
        return ReasoningEngine(llm, profile)

    monkeypatch.setattr(reasoning_routes, "create_engine", create_engine)
    return profiles


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_filmography(client, monkeypatch) -> None:
    film = Filmography(actor_overview="Jane Doe", career_highlights=["Best Actress 2011"])
    _use_llm(monkeypatch, ScriptedChatModel(steps=[make_step(1, done=True)], output=film))

    response = client.get("/api/v1/reasoning/filmography")

    assert response.status_code == 200
    body = response.json()
    assert body["output"]["actor_overview"] == "Jane Doe"
    assert body["termination_reason"] == "done"
    assert body["iterations"] == 1
    assert body["accepted_steps"] == 1
    assert body["trace"].startswith("Step: ")


def test_issue_operation(client, monkeypatch) -> None:
    proposal = IssueOperationProposal(
        issue_id="PRJ-7", operation="comment", details="build failed", rationale="Error report from CI"
    )
    profiles = _use_llm(monkeypatch, ScriptedChatModel(steps=[make_step(1, done=True)], output=proposal))

    response = client.post(
        "/api/v1/reasoning/issue-operation",
        json={"issue_id": "PRJ-7", "request": "comment: build failed"}
    )

    assert response.status_code == 200
    output = response.json()["output"]
    assert output == {
        "issue_id": "PRJ-7",
        "operation": "comment",
        "details": "build failed",
        "rationale": "Error report from CI",
    }
    # A proposal never reports an execution outcome
    assert "success" not in output
    assert profiles[0].name == "issue_operation"
    assert "PRJ-7" in profiles[0].task


def test_issue_operation_validates_request(client) -> None:
    response = client.post("/api/v1/reasoning/issue-operation", json={"issue_id": "", "request": "close"})

    assert response.status_code == 422


def test_run_returns_text_and_review(client, monkeypatch) -> None:
    llm = ScriptedChatModel(steps=[make_step(1, confidence=0.9)], texts=["needs more sources", "final answer"])
    _use_llm(monkeypatch, llm)

    response = client.post("/api/v1/reasoning/run", json={"task": "Summarize", "goal": "One paragraph"})

    assert response.status_code == 200
    body = response.json()
    assert body["output"] == "final answer"
    assert body["termination_reason"] == "confident"
    assert "Review: needs more sources" in body["trace"]


def test_synthesis_failure_maps_to_bad_gateway(client, monkeypatch) -> None:
    llm = ScriptedChatModel(steps=[make_step(1, done=True)], output=SynthesisError("no artifact"))
    _use_llm(monkeypatch, llm)

    response = client.get("/api/v1/reasoning/filmography")

    assert response.status_code == 502
    assert "Reasoning session failed" in response.json()["detail"]
