"""
Pydantic schemas for settlement and Payout entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from meshnode.models.payout import PayoutStatus
from meshnode.schemas.base import CamelModel


class SettlementRequest(CamelModel):
    """Schema for a settlement request."""
    session_id: str = Field(min_length=1)
    node_id: Optional[str] = None  # Defaults to the node recorded on the session
    base_rate: Optional[float] = Field(default=None, ge=0)  # Credits per GB override


class PayoutResponse(CamelModel):
    """Schema for payout response."""
    id: int
    node_id: str
    session_id: str
    amount_credits: float
    status: PayoutStatus
    base_rate: float
    qos_penalty_applied: bool
    reputation_weight: float
    created_at: datetime
    completed_at: Optional[datetime] = None


class SettlementResponse(CamelModel):
    """Schema for a successful settlement."""
    success: bool = True
    payout: PayoutResponse
