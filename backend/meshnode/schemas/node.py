"""
Pydantic schemas for Node entity.
"""
from datetime import datetime
from meshnode.schemas.base import CamelModel


class NodeResponse(CamelModel):
    """Schema for node response."""
    node_id: str
    reputation: float
    total_earnings_credits: float
    created_at: datetime
    updated_at: datetime
