"""
Database initialization script.
"""
from sqlalchemy.orm import Session
from meshnode.db.session import SessionLocal, init_db
from meshnode.models.session import MeshSession, SessionStatus
from meshnode.services.config_service import get_config, get_or_create_config, update_config
from meshnode.services.log_service import add_log


def seed_database(db: Session) -> bool:
    """Populate an empty database with a starter configuration, log lines and sample sessions."""
    if get_config(db):
        return False

    config = get_or_create_config(db)
    update_config({
        "max_mbps": 25,
        "max_daily_gb": 50,
        "region_allow": ["US-East", "EU-West"],
        "schedules": [{"days": ["Mon", "Wed", "Fri"], "start": "09:00", "end": "17:00"}],
    }, db)

    add_log("info", "system", "Daemon started successfully v1.0.4", db)
    add_log("info", "network", "Connected to coordinator hub-01", db)

    db.add_all([
        MeshSession(
            id="sess_1",
            buyer_id="buyer_alpha",
            node_id=config.node_id,
            status=SessionStatus.ACTIVE,
            bytes_ingress=1024 * 50,
            bytes_egress=1024 * 40,
            latency_p95=45,
        ),
        MeshSession(
            id="sess_2",
            buyer_id="buyer_beta",
            node_id=config.node_id,
            status=SessionStatus.PROBING,
            bytes_ingress=1024,
            bytes_egress=512,
            latency_p95=120,
        ),
    ])
    db.commit()
    return True


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        if seed_database(db):
            print("Seeded starter configuration and sample sessions")
    finally:
        db.close()
    print("Database initialized successfully!")
