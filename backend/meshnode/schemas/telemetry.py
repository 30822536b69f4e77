"""
Pydantic schemas for metrics, health and activity logs.
"""
from typing import List, Literal
from datetime import datetime
from meshnode.schemas.base import CamelModel


class MetricResponse(CamelModel):
    """Schema for a metric snapshot."""
    id: int
    timestamp: datetime
    ingress_rate: float
    egress_rate: float
    active_sessions: int
    cpu_usage: float
    memory_usage: int
    error_rate_pct: float
    probe_pass_rate_pct: float
    latency_p95: int


class Alert(CamelModel):
    """Schema for a health alert."""
    level: Literal["error", "warning", "info"]
    message: str
    timestamp: str


class HealthResponse(CamelModel):
    """Schema for health status response."""
    id: int
    timestamp: datetime
    coordinator_reachable: bool
    internal_proxy_healthy: bool
    probe_executor_healthy: bool
    policy_violation_detected: bool
    auto_recovery_active: bool
    alerts: List[Alert] = []


class LogResponse(CamelModel):
    """Schema for activity log entry."""
    id: int
    timestamp: datetime
    level: str
    category: str
    message: str
