"""
Node model holding a serving peer's reputation and running earnings.
"""
from sqlalchemy import Column, String, Float
from sqlalchemy.orm import relationship
from meshnode.db.base import BaseModel

DEFAULT_REPUTATION = 100.0


class Node(BaseModel):
    """Bandwidth-sharing node with reputation score and cumulative earnings."""
    __tablename__ = "nodes"

    node_id = Column(String(64), unique=True, nullable=False, index=True)
    reputation = Column(Float, default=DEFAULT_REPUTATION, nullable=False)  # 0-100
    total_earnings_credits = Column(Float, default=0.0, nullable=False)

    # Relationships
    payouts = relationship("Payout", back_populates="node")
