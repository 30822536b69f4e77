"""
Dashboard statistics aggregation.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from datetime import datetime
from meshnode.core.utils import utcnow, start_of_day
from meshnode.models.health import HealthSnapshot
from meshnode.models.node import Node, DEFAULT_REPUTATION
from meshnode.models.payout import Payout, PayoutStatus
from meshnode.models.session import MeshSession
from meshnode.services.config_service import get_config
from meshnode.services.control_service import daemon_state
from meshnode.services.settlement_service import BYTES_PER_GB

PROCESS_STARTED_AT = utcnow()


def default_health() -> Dict[str, Any]:
    """Health reported before any snapshot has been recorded."""
    return {
        "id": 0,
        "timestamp": utcnow(),
        "coordinator_reachable": True,
        "internal_proxy_healthy": True,
        "probe_executor_healthy": True,
        "policy_violation_detected": False,
        "auto_recovery_active": False,
        "alerts": [],
    }


def get_latest_health(db: Session) -> Optional[HealthSnapshot]:
    """Most recent health snapshot, if any."""
    return db.query(HealthSnapshot).order_by(
        HealthSnapshot.timestamp.desc(), HealthSnapshot.id.desc()
    ).first()


def get_dashboard_stats(db: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Aggregate headline numbers for the overview page.

    Earnings are today's completed payouts for the configured node; data
    volume counts both directions of sessions started today.
    """
    now = now or utcnow()
    today = start_of_day(now)
    config = get_config(db)
    earnings_today = 0.0
    reputation = DEFAULT_REPUTATION

    # An unconfigured node has no payouts of its own yet
    if config:
        earnings_today = db.query(func.coalesce(func.sum(Payout.amount_credits), 0.0)).filter(
            Payout.node_id == config.node_id,
            Payout.status == PayoutStatus.COMPLETED,
            Payout.completed_at >= today
        ).scalar()

        node = db.query(Node).filter(Node.node_id == config.node_id).first()
        if node:
            reputation = node.reputation

    bytes_today = db.query(
        func.coalesce(func.sum(MeshSession.bytes_ingress + MeshSession.bytes_egress), 0.0)
    ).filter(MeshSession.started_at >= today).scalar()

    health = get_latest_health(db)

    return {
        "status": daemon_state.status,
        "earnings_today": float(earnings_today),
        "total_data_today": float(bytes_today) / BYTES_PER_GB,
        "reputation_score": reputation,
        "uptime_seconds": max(0, int((now - PROCESS_STARTED_AT).total_seconds())),
        "health": health if health else default_health(),
    }
