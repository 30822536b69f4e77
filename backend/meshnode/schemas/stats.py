"""
Pydantic schemas for dashboard stats and daemon control.
"""
from typing import Literal
from meshnode.schemas.base import CamelModel
from meshnode.schemas.telemetry import HealthResponse

DaemonStatus = Literal["running", "paused", "stopped"]


class DashboardStats(CamelModel):
    """Schema for overview statistics."""
    status: DaemonStatus
    earnings_today: float
    total_data_today: float  # GB
    reputation_score: float
    uptime_seconds: int
    health: HealthResponse


class ControlResponse(CamelModel):
    """Schema for daemon control response."""
    success: bool
    new_state: str
