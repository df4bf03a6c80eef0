"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from pmcreator.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _plan(client, **payload):
    response = client.post("/pm/plan", json=payload)
    assert response.status_code == 200
    return response.json()


class TestPlanEndpoint:
    def test_motor_plan_with_severe_context(self, client):
        body = _plan(
            client,
            asset={"name": "TOP COAT OVEN FRESH AIR", "criticality": "B", "environment": {"high_temperature": True}},
            components=[{"type": "Motor", "qty": "abc"}],
        )
        assert body["severe"] is True
        assert body["components_considered"] == 1
        assert [(t["method"], t["frequency"], t["role"]) for t in body["tasks"]] == [
            ("Visual", "Daily", "Technician"),
            ("Measurement", "Weekly", "Team Lead"),
        ]

    def test_asset_type_defaults_filter_components(self, client):
        body = _plan(client, asset={"assetType": "Paint Robot"}, components=[{"type": "Motor"}])
        assert "Motors" not in body["enabled_subsystems"]
        assert body["tasks"] == []

    def test_unknown_asset_type_uses_fallback(self, client):
        body = _plan(client, asset={"assetType": "Unknown line"}, components=[{"type": "Motor"}])
        assert len(body["tasks"]) == 2

    def test_explicit_subsystems(self, client):
        body = _plan(
            client,
            enabledSubsystems=["Control"],
            components=[{"type": "Motor"}, {"type": "PLC"}, {"type": "I/O Module"}],
        )
        assert {t["component_type"] for t in body["tasks"]} == {"PLC", "I/O Module"}

    @pytest.mark.parametrize("qty", ["Infinity", "inf", "NaN"])
    def test_non_finite_quantity_falls_back(self, client, qty):
        body = _plan(client, components=[{"type": "Motor", "qty": qty}])
        assert len(body["tasks"]) == 2

    def test_closed_loop_false_string_adds_no_feedback_task(self, client):
        body = _plan(
            client,
            enabledSubsystems=["Drives / Motion"],
            components=[{"type": "VFD", "attributes": {"closed_loop": "false"}}],
        )
        assert len(body["tasks"]) == 2

    def test_closed_loop_true_string_adds_feedback_task(self, client):
        body = _plan(
            client,
            enabledSubsystems=["Drives / Motion"],
            components=[{"type": "VFD", "attributes": {"closed_loop": "true"}}],
        )
        assert len(body["tasks"]) == 3

    def test_unknown_component_type_is_rejected(self, client):
        response = client.post("/pm/plan", json={"components": [{"type": "Flux Capacitor"}]})
        assert response.status_code == 422

    def test_same_request_same_answer(self, client):
        payload = {"components": [{"type": "Bearing"}, {"type": "Photo Eye"}, {"type": "VFD"}]}
        assert _plan(client, **payload) == _plan(client, **payload)


class TestCatalogEndpoints:
    def test_catalog_lists_supported_types(self, client):
        body = client.get("/pm/catalog").json()
        assert "Motor" in body
        assert "Gas Burner" not in body

    def test_catalog_entry(self, client):
        body = client.get("/pm/catalog/Motor").json()
        assert body["component_type"] == "Motor"
        assert len(body["templates"]) == 2

    def test_catalog_entry_without_rules(self, client):
        body = client.get("/pm/catalog/Gas Burner").json()
        assert "error" in body

    def test_asset_types(self, client):
        body = client.get("/pm/asset-types").json()
        assert set(body) == {"Oven / Air House", "PT/ED Pump", "Paint Robot", "OPF / IPF", "Trolley"}
        assert "Motors" in body["Trolley"]["subsystems"]


class TestServiceEndpoints:
    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["supported_component_types"] == 13

    def test_metrics_after_plan(self, client):
        _plan(client, components=[{"type": "Motor"}])
        body = client.get("/metrics").text
        assert "pm_plans_generated_total" in body
        assert "pm_tasks_emitted_total" in body
