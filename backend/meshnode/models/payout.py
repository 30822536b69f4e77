"""
Payout model: the immutable settlement record for one session.
"""
from sqlalchemy import Column, String, Float, Boolean, DateTime, ForeignKey, Enum as SQLEnum, event, inspect
from sqlalchemy.orm import relationship, object_session
from meshnode.db.base import BaseModel
import enum


class PayoutStatus(str, enum.Enum):
    """Payout status enumeration."""
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class PayoutImmutableError(Exception):
    """Raised when a completed payout is about to be modified."""


class Payout(BaseModel):
    """Settlement record paying a node for one session."""
    __tablename__ = "payouts"

    node_id = Column(String(64), ForeignKey("nodes.node_id"), nullable=False, index=True)
    session_id = Column(String(64), ForeignKey("sessions.id"), nullable=False, unique=True)
    amount_credits = Column(Float, nullable=False)
    status = Column(SQLEnum(PayoutStatus), default=PayoutStatus.PENDING, nullable=False)
    base_rate = Column(Float, nullable=False)
    qos_penalty_applied = Column(Boolean, default=False, nullable=False)
    reputation_weight = Column(Float, nullable=False)
    completed_at = Column(DateTime, nullable=True)

    # Relationships
    node = relationship("Node", back_populates="payouts")
    session = relationship("MeshSession", back_populates="payout")


@event.listens_for(Payout, "before_update")
def _reject_completed_payout_changes(mapper, connection, target):
    if not object_session(target).is_modified(target, include_collections=False):
        return
    history = inspect(target).attrs.status.history
    previous = history.deleted[0] if history.deleted else target.status
    if previous == PayoutStatus.COMPLETED:
        raise PayoutImmutableError(f"Payout {target.id} is completed and cannot be modified")


@event.listens_for(Payout, "before_delete")
def _reject_completed_payout_delete(mapper, connection, target):
    if target.status == PayoutStatus.COMPLETED:
        raise PayoutImmutableError(f"Payout {target.id} is completed and cannot be deleted")
