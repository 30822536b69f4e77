"""
Pydantic schemas for node configuration.
"""
from pydantic import Field
from typing import List, Literal, Optional
from datetime import datetime
from meshnode.schemas.base import CamelModel

SandboxMode = Literal["strict", "moderate", "open"]


class Schedule(CamelModel):
    """Weekly sharing window."""
    days: List[str]
    start: str = Field(pattern=r"^\d{2}:\d{2}$")
    end: str = Field(pattern=r"^\d{2}:\d{2}$")


class ConfigResponse(CamelModel):
    """Schema for configuration response."""
    id: int
    node_id: str
    max_mbps: int
    max_daily_gb: int
    https_only: bool
    sandbox_mode: str
    schedules: List[Schedule] = []
    region_allow: List[str] = []
    updated_at: datetime


class ConfigUpdate(CamelModel):
    """Schema for partial configuration update."""
    node_id: Optional[str] = Field(default=None, min_length=1)
    max_mbps: Optional[int] = Field(default=None, ge=1, le=100)
    max_daily_gb: Optional[int] = Field(default=None, ge=1)
    https_only: Optional[bool] = None
    sandbox_mode: Optional[SandboxMode] = None
    schedules: Optional[List[Schedule]] = None
    region_allow: Optional[List[str]] = None
