"""
Session model for buyer-to-node data transfer relationships.
"""
from sqlalchemy import Column, String, Float, Integer, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from meshnode.db.base import BaseModel
from meshnode.core.utils import utcnow
import enum


class SessionStatus(str, enum.Enum):
    """Session status enumeration."""
    ACTIVE = "active"
    IDLE = "idle"
    PROBING = "probing"
    CLOSED = "closed"
    QUARANTINE = "quarantine"


class MeshSession(BaseModel):
    """One buyer-to-node connection, billed exactly once."""
    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)  # UUID assigned by the coordinator
    buyer_id = Column(String(64), nullable=False, index=True)
    node_id = Column(String(64), nullable=True, index=True)
    status = Column(SQLEnum(SessionStatus), default=SessionStatus.ACTIVE, nullable=False)
    bytes_ingress = Column(Float, default=0.0, nullable=False)
    bytes_egress = Column(Float, default=0.0, nullable=False)
    error_rate = Column(Float, default=0.0, nullable=False)  # Fraction of failed requests, 0.0-1.0
    latency_p95 = Column(Integer, default=0, nullable=False)  # ms
    started_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    ended_at = Column(DateTime, nullable=True)
    resolved_at = Column(DateTime, nullable=True)  # Set once, when the session is settled

    # Relationships
    payout = relationship("Payout", back_populates="session", uselist=False)
