"""
Utility functions for the application.
"""
from typing import Any, Dict
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what the database stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def start_of_day(moment: datetime) -> datetime:
    """Midnight of the day containing ``moment``."""
    return datetime.combine(moment.date(), datetime.min.time())


def format_failure(message: str, **details: Any) -> Dict[str, Any]:
    """Format a failed operation response."""
    response = {"success": False, "message": message}
    response.update(details)
    return response
