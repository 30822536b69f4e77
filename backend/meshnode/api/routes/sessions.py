"""
Session listing routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from meshnode.db.session import get_db
from meshnode.models.session import MeshSession
from meshnode.schemas.session import SessionResponse

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionResponse])
async def list_sessions(db: Session = Depends(get_db)):
    """List sessions, most recently started first."""
    return db.query(MeshSession).order_by(MeshSession.started_at.desc()).all()
