"""
Activity log model for the operator log viewer.
"""
from sqlalchemy import Column, String, Text, DateTime
from meshnode.db.base import BaseModel
from meshnode.core.utils import utcnow


class ActivityLog(BaseModel):
    """Operator-visible log entry."""
    __tablename__ = "activity_logs"

    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
    level = Column(String(8), nullable=False)  # info, warn, error
    category = Column(String(16), nullable=False)  # system, network, policy
    message = Column(Text, nullable=False)
