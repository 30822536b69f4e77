"""
Tests for config, stats, control, session and telemetry endpoints.
"""
from datetime import timedelta

import pytest
from meshnode.core.utils import utcnow
from meshnode.models import HealthSnapshot, Metric, NodeConfig, SessionStatus

GB = 2 ** 30


def test_root_health(client):
    """Test liveness endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_get_config_creates_default(client):
    """Test the first config read creates defaults."""
    response = client.get("/api/config")

    assert response.status_code == 200
    body = response.json()
    assert body["nodeId"].startswith("node_")
    assert body["maxMbps"] == 10
    assert body["maxDailyGb"] == 20
    assert body["httpsOnly"] is True
    assert body["sandboxMode"] == "strict"
    assert body["schedules"] == []
    assert body["regionAllow"] == []

    # Same row on the next read
    assert client.get("/api/config").json()["nodeId"] == body["nodeId"]


def test_update_config(client):
    """Test partial config update keeps untouched fields."""
    response = client.put(
        "/api/config",
        json={
            "maxMbps": 25,
            "regionAllow": ["US-East", "EU-West"],
            "schedules": [{"days": ["Mon", "Wed"], "start": "09:00", "end": "17:00"}]
        }
    )

    assert response.status_code == 200
    body = response.json()
    assert body["maxMbps"] == 25
    assert body["maxDailyGb"] == 20
    assert body["regionAllow"] == ["US-East", "EU-West"]
    assert body["schedules"][0]["start"] == "09:00"

    assert client.get("/api/config").json()["maxMbps"] == 25


@pytest.mark.parametrize("payload", [
    {"maxMbps": 0},
    {"maxMbps": 101},
    {"sandboxMode": "anything"},
    {"schedules": [{"days": ["Mon"], "start": "9am", "end": "17:00"}]},
])
def test_update_config_invalid(client, payload):
    """Test invalid config updates return 400 with a message."""
    response = client.put("/api/config", json=payload)

    assert response.status_code == 400
    assert "message" in response.json()


def test_control_changes_state_and_logs(client):
    """Test daemon control actions and their log entries."""
    paused = client.post("/api/control/pause")
    assert paused.status_code == 200
    assert paused.json() == {"success": True, "newState": "paused"}
    assert client.get("/api/stats").json()["status"] == "paused"

    started = client.post("/api/control/start")
    assert started.json()["newState"] == "running"

    logs = client.get("/api/logs").json()
    assert [entry["message"] for entry in logs] == [
        "User requested daemon start",
        "User requested daemon pause",
    ]
    assert logs[0]["level"] == "info"
    assert logs[0]["category"] == "system"


def test_control_unknown_action(client):
    """Test an unknown control action is rejected without changing state."""
    response = client.post("/api/control/reboot")

    assert response.status_code == 400
    assert response.json() == {"success": False, "newState": "running"}


def test_logs_limit(client):
    """Test the logs limit parameter."""
    for action in ("pause", "start", "stop"):
        client.post(f"/api/control/{action}")

    response = client.get("/api/logs", params={"limit": 2})
    assert len(response.json()) == 2


def test_list_sessions_newest_first(client, make_session):
    """Test sessions are listed newest first."""
    now = utcnow()
    make_session(session_id="sess_old", started_at=now - timedelta(hours=2))
    make_session(session_id="sess_new", started_at=now, status=SessionStatus.PROBING)

    response = client.get("/api/sessions")

    assert response.status_code == 200
    body = response.json()
    assert [s["id"] for s in body] == ["sess_new", "sess_old"]
    assert body[0]["status"] == "probing"
    assert body[0]["resolvedAt"] is None


def test_metrics_returned_oldest_first(client, db):
    """Test metrics are limited to the most recent and ordered for charting."""
    now = utcnow()
    for minutes in range(5):
        db.add(Metric(timestamp=now - timedelta(minutes=minutes), ingress_rate=float(minutes)))
    db.commit()

    response = client.get("/api/metrics", params={"limit": 3})

    assert response.status_code == 200
    assert [m["ingressRate"] for m in response.json()] == [2.0, 1.0, 0.0]


def test_health_default_and_latest(client, db):
    """Test health falls back to defaults, then reports the newest snapshot."""
    default = client.get("/api/health").json()
    assert default["coordinatorReachable"] is True
    assert default["alerts"] == []

    db.add(HealthSnapshot(
        coordinator_reachable=False,
        alerts=[{"level": "warning", "message": "High error rate detected", "timestamp": "2026-01-01T00:00:00Z"}]
    ))
    db.commit()

    latest = client.get("/api/health").json()
    assert latest["coordinatorReachable"] is False
    assert latest["alerts"][0]["message"] == "High error rate detected"


def test_stats_after_settlement(client, make_session):
    """Test stats reflect today's settlements for the configured node."""
    client.put("/api/config", json={"nodeId": "node_home"})
    make_session(session_id="sess_s1", node_id="node_home", bytes_ingress=GB, bytes_egress=GB)
    make_session(session_id="sess_s2", node_id="node_other", bytes_ingress=2 * GB)
    client.post("/api/settlement", json={"sessionId": "sess_s1"})
    client.post("/api/settlement", json={"sessionId": "sess_s2"})

    response = client.get("/api/stats")

    assert response.status_code == 200
    stats = response.json()
    assert stats["status"] == "running"
    assert stats["earningsToday"] == 0.0005
    assert stats["totalDataToday"] == 4.0
    assert stats["reputationScore"] == 100.0
    assert stats["uptimeSeconds"] >= 0
    assert stats["health"]["internalProxyHealthy"] is True


def test_stats_before_configuration_is_read_only(client, db, make_session):
    """Test stats on an unconfigured node report defaults without creating config."""
    make_session(session_id="sess_fresh", node_id="node_elsewhere", bytes_ingress=GB)
    client.post("/api/settlement", json={"sessionId": "sess_fresh"})

    response = client.get("/api/stats")

    assert response.status_code == 200
    stats = response.json()
    assert stats["earningsToday"] == 0.0
    assert stats["reputationScore"] == 100.0
    assert stats["totalDataToday"] == 1.0
    assert db.query(NodeConfig).count() == 0
