"""
Activity log service for the operator log viewer.
"""
from sqlalchemy.orm import Session
from typing import List
from meshnode.models.activity_log import ActivityLog

LOG_LEVELS = ("info", "warn", "error")
LOG_CATEGORIES = ("system", "network", "policy")


def add_log(level: str, category: str, message: str, db: Session) -> ActivityLog:
    """Record an activity log entry."""
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    if category not in LOG_CATEGORIES:
        raise ValueError(f"Invalid log category: {category}")

    entry = ActivityLog(level=level, category=category, message=message)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def get_logs(db: Session, limit: int = 100) -> List[ActivityLog]:
    """Newest log entries first."""
    return db.query(ActivityLog).order_by(
        ActivityLog.timestamp.desc(), ActivityLog.id.desc()
    ).limit(limit).all()
