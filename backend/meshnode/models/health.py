"""
Health snapshot model.
"""
from sqlalchemy import Column, Boolean, DateTime, JSON
from meshnode.db.base import BaseModel
from meshnode.core.utils import utcnow


class HealthSnapshot(BaseModel):
    """Component health flags and active alerts at a point in time."""
    __tablename__ = "health"

    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
    coordinator_reachable = Column(Boolean, default=True, nullable=False)
    internal_proxy_healthy = Column(Boolean, default=True, nullable=False)
    probe_executor_healthy = Column(Boolean, default=True, nullable=False)
    policy_violation_detected = Column(Boolean, default=False, nullable=False)
    auto_recovery_active = Column(Boolean, default=False, nullable=False)
    alerts = Column(JSON, default=list, nullable=False)  # [{"level", "message", "timestamp"}]
