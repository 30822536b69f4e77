"""
Metrics, health and activity log routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from meshnode.core.config import settings
from meshnode.db.session import get_db
from meshnode.models.metric import Metric
from meshnode.schemas.telemetry import MetricResponse, HealthResponse, LogResponse
from meshnode.services.log_service import get_logs
from meshnode.services.stats_service import get_latest_health, default_health

router = APIRouter(tags=["telemetry"])


@router.get("/metrics", response_model=List[MetricResponse])
async def list_metrics(
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """Most recent metric snapshots, oldest first for charting."""
    metrics = db.query(Metric).order_by(
        Metric.timestamp.desc(), Metric.id.desc()
    ).limit(limit or settings.METRICS_DEFAULT_LIMIT).all()
    return list(reversed(metrics))


@router.get("/health", response_model=HealthResponse)
async def get_health(db: Session = Depends(get_db)):
    """Latest health snapshot, or an all-healthy default."""
    return get_latest_health(db) or default_health()


@router.get("/logs", response_model=List[LogResponse])
async def list_logs(
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """Most recent activity log entries, newest first."""
    return get_logs(db, limit=limit or settings.LOGS_DEFAULT_LIMIT)
