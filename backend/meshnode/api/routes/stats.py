"""
Dashboard stats and daemon control routes.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from meshnode.db.session import get_db
from meshnode.schemas.stats import DashboardStats, ControlResponse
from meshnode.services.control_service import daemon_state
from meshnode.services.log_service import add_log
from meshnode.services.stats_service import get_dashboard_stats

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(db: Session = Depends(get_db)):
    """Overview statistics for the dashboard."""
    return get_dashboard_stats(db)


@router.post("/control/{action}", response_model=ControlResponse)
async def control_daemon(
    action: str,
    db: Session = Depends(get_db)
):
    """Start, pause or stop the daemon."""
    try:
        new_state = daemon_state.apply(action)
    except ValueError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "newState": daemon_state.status}
        )

    add_log("info", "system", f"User requested daemon {action}", db)
    return ControlResponse(success=True, new_state=new_state)
