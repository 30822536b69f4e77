"""
Metric model for throughput and resource snapshots.
"""
from sqlalchemy import Column, Float, Integer, DateTime
from meshnode.db.base import BaseModel
from meshnode.core.utils import utcnow


class Metric(BaseModel):
    """Point-in-time snapshot plotted on the dashboard graphs."""
    __tablename__ = "metrics"

    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
    ingress_rate = Column(Float, default=0.0, nullable=False)  # Mbps
    egress_rate = Column(Float, default=0.0, nullable=False)  # Mbps
    active_sessions = Column(Integer, default=0, nullable=False)
    cpu_usage = Column(Float, default=0.0, nullable=False)
    memory_usage = Column(Integer, default=0, nullable=False)  # MB
    error_rate_pct = Column(Float, default=0.0, nullable=False)
    probe_pass_rate_pct = Column(Float, default=100.0, nullable=False)
    latency_p95 = Column(Integer, default=0, nullable=False)  # ms
