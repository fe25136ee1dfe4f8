"""
Pytest fixtures for the risk worksheet. Every test gets its own project state.
"""

from __future__ import annotations

import pytest

PANEL_SIZE = 10


@pytest.fixture
def store():
    """Fresh project state backed by the packaged catalogs."""
    from risk_worksheet.components.project.state import ProjectStore

    return ProjectStore()


@pytest.fixture
def client(store):
    """FastAPI TestClient whose routes all share the ``store`` fixture."""
    from fastapi.testclient import TestClient

    from risk_worksheet.components.project.state import get_project_store
    from risk_worksheet.main import app

    app.dependency_overrides[get_project_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def panel(value: float) -> list[float]:
    """Ten identical expert estimates."""
    return [value] * PANEL_SIZE


@pytest.fixture
def analyze(client):
    """POST an analysis for risk_id with uniform probability and loss panels."""

    def _analyze(risk_id: str, probability: float, loss: float, weights=None):
        body = {
            "risk_id": risk_id,
            "expert_probabilities": panel(probability),
            "expert_losses": panel(loss),
        }
        if weights is not None:
            body["expert_weights"] = weights
        return client.post("/api/v1/analysis/analyze-risk", json=body)

    return _analyze
