"""
Node configuration model for operator-tunable limits.
"""
from sqlalchemy import Column, String, Integer, Boolean, JSON
from meshnode.db.base import BaseModel


class NodeConfig(BaseModel):
    """Single-row configuration for the node this backend operates."""
    __tablename__ = "node_config"

    node_id = Column(String(64), nullable=False)
    max_mbps = Column(Integer, default=10, nullable=False)
    max_daily_gb = Column(Integer, default=20, nullable=False)
    https_only = Column(Boolean, default=True, nullable=False)
    sandbox_mode = Column(String(16), default="strict", nullable=False)  # strict, moderate, open
    schedules = Column(JSON, default=list, nullable=False)  # [{"days": [...], "start": "09:00", "end": "17:00"}]
    region_allow = Column(JSON, default=list, nullable=False)
