"""
Tests for configuration, logging and seeding services.
"""
from unittest.mock import MagicMock

import pytest
from meshnode.core.config import Settings
from meshnode.db.init_db import seed_database
from meshnode.db.upsert import insert_ignore
from meshnode.models import MeshSession, Node, NodeConfig, SessionStatus
from meshnode.services import config_service
from meshnode.services.log_service import add_log, get_logs


def test_seed_database_once(db):
    """Test seeding only runs against an empty database."""
    assert seed_database(db) is True
    assert seed_database(db) is False

    config = db.query(NodeConfig).one()
    assert config.max_mbps == 25
    assert config.max_daily_gb == 50
    assert config.region_allow == ["US-East", "EU-West"]
    assert config.schedules[0]["days"] == ["Mon", "Wed", "Fri"]

    assert [entry.message for entry in get_logs(db)] == [
        "Connected to coordinator hub-01",
        "Daemon started successfully v1.0.4",
    ]

    sessions = {s.id: s for s in db.query(MeshSession).all()}
    assert set(sessions) == {"sess_1", "sess_2"}
    assert sessions["sess_1"].status == SessionStatus.ACTIVE
    assert sessions["sess_2"].buyer_id == "buyer_beta"
    assert sessions["sess_1"].node_id == config.node_id
    assert sessions["sess_1"].resolved_at is None


def test_configured_node_id_is_used(db, monkeypatch):
    """Test NODE_ID from settings names the node on first config read."""
    monkeypatch.setattr(config_service.settings, "NODE_ID", "node_fixed")

    config = config_service.get_or_create_config(db)

    assert config.node_id == "node_fixed"


def test_update_config_creates_row(db):
    """Test a partial update on an unconfigured node creates the row first."""
    config = config_service.update_config({"max_daily_gb": 50, "https_only": False}, db)

    assert config.max_daily_gb == 50
    assert config.https_only is False
    assert config.max_mbps == 10


def test_add_log_rejects_unknown_level(db):
    """Test log levels are validated."""
    with pytest.raises(ValueError):
        add_log("debug", "system", "noise", db)


def test_get_logs_newest_first(db):
    """Test log ordering and limit."""
    for i in range(3):
        add_log("info", "network", f"entry {i}", db)

    assert [entry.message for entry in get_logs(db, limit=2)] == ["entry 2", "entry 1"]


def test_cors_origins_from_string():
    """Test comma-separated CORS origins are split."""
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test,")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_insert_ignore_rejects_unknown_dialect():
    """Test insert-or-ignore refuses dialects it has no conflict clause for."""
    db = MagicMock()
    db.get_bind.return_value.dialect.name = "oracle"

    with pytest.raises(ValueError):
        insert_ignore(db, Node, node_id="node_x")
    db.execute.assert_not_called()


def test_insert_ignore_reports_inserted_rows(db):
    """Test insert-or-ignore inserts once and then skips the duplicate."""
    assert insert_ignore(db, Node, node_id="node_dup", reputation=100.0, total_earnings_credits=0.0) == 1
    assert insert_ignore(db, Node, node_id="node_dup", reputation=10.0, total_earnings_credits=0.0) == 0
    db.commit()

    assert db.query(Node).filter(Node.node_id == "node_dup").one().reputation == 100.0
