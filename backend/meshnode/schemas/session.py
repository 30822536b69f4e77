"""
Pydantic schemas for Session entity.
"""
from typing import Optional
from datetime import datetime
from meshnode.models.session import SessionStatus
from meshnode.schemas.base import CamelModel


class SessionResponse(CamelModel):
    """Schema for session response."""
    id: str
    buyer_id: str
    node_id: Optional[str] = None
    status: SessionStatus
    bytes_ingress: float
    bytes_egress: float
    error_rate: float
    latency_p95: int
    started_at: datetime
    ended_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
