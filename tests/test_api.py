from __future__ import annotations

import pytest


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_defaults_apply_default_industry(client):
    resp = client.get("/roi/defaults")
    assert resp.status_code == 200
    data = resp.json()
    assert data["industry"] == "plumbing"
    assert data["avg_lead_value"] == 450
    assert data["conversion_rate"] == 18
    assert data["days_open"] == "weekdays"


def test_compute(client, default_inputs):
    resp = client.post("/roi/compute", json=default_inputs.model_dump())
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_monthly_calls"] == 140
    assert data["net_benefit"] == pytest.approx(2322.6)
    assert data["roi_percent"] == pytest.approx(223.7, abs=0.05)


def test_compute_with_partial_body_uses_defaults(client):
    resp = client.post("/roi/compute", json={"days_open": "alldays"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["days_per_month"] == 30
    assert data["total_monthly_calls"] == 5 * 30 + 30


def test_compute_accepts_negative_values(client, default_inputs):
    body = default_inputs.model_dump() | {"total_human_cost": -500}
    resp = client.post("/roi/compute", json=body)
    assert resp.status_code == 200
    assert resp.json()["payback_period_months"] == 0


def test_compute_rejects_non_numeric(client, default_inputs):
    body = default_inputs.model_dump() | {"business_hour_calls": "many"}
    resp = client.post("/roi/compute", json=body)
    assert resp.status_code == 422


def test_report(client, default_inputs):
    resp = client.post("/roi/report", json=default_inputs.model_dump())
    assert resp.status_code == 200
    data = resp.json()
    assert data["chart"][0]["name"] == "Monthly"
    assert data["chart"][0]["total_ai_cost"] == pytest.approx(1038.333, abs=1e-3)
    assert data["summary"]["payback_label"] == "5.4 months"
    assert [i["kind"] for i in data["insights"]][0] == "missed_calls"


def test_presets_list(client):
    resp = client.get("/roi/presets")
    assert resp.status_code == 200
    assert len(resp.json()) == 11


def test_preset_lookup(client):
    resp = client.get("/roi/presets/hvac")
    assert resp.status_code == 200
    assert resp.json() == {
        "industry": "hvac",
        "label": "HVAC",
        "avg_lead_value": 600,
        "conversion_rate": 15,
    }


def test_preset_lookup_unknown(client):
    resp = client.get("/roi/presets/bakery")
    assert resp.status_code == 404


def test_preset_apply(client, default_inputs):
    resp = client.post("/roi/presets/flooring/apply", json=default_inputs.model_dump())
    assert resp.status_code == 200
    data = resp.json()
    assert data["industry"] == "flooring"
    assert data["avg_lead_value"] == 900
    assert data["conversion_rate"] == 15


def test_preset_apply_unknown_keeps_values(client, default_inputs):
    resp = client.post("/roi/presets/bakery/apply", json=default_inputs.model_dump())
    assert resp.status_code == 200
    data = resp.json()
    assert data["industry"] == "bakery"
    assert data["avg_lead_value"] == 450
    assert data["conversion_rate"] == 18


@pytest.mark.parametrize(
    "field", ["business_hour_calls", "after_hour_calls", "missed_business_hour_calls"]
)
def test_compute_rejects_out_of_range_call_counts(client, default_inputs, field):
    body = default_inputs.model_dump() | {field: 10**400}
    resp = client.post("/roi/compute", json=body)
    assert resp.status_code == 422


def test_report_error_body_has_no_traceback(client, default_inputs, monkeypatch):
    from app.routers import roi as roi_router

    def _boom(_inputs):
        raise RuntimeError("report failed")

    monkeypatch.setattr(roi_router, "build_report", _boom)
    resp = client.post("/roi/report", json=default_inputs.model_dump())
    assert resp.status_code == 500
    assert resp.json() == {"detail": "report failed"}
