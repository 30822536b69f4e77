"""
Settlement and payout routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import List, Optional
from meshnode.core.utils import format_failure
from meshnode.db.session import get_db
from meshnode.models.node import Node
from meshnode.models.payout import Payout
from meshnode.schemas.node import NodeResponse
from meshnode.schemas.settlement import SettlementRequest, SettlementResponse, PayoutResponse
from meshnode.services.settlement_service import (
    settle_session,
    SessionNotFoundError,
    AlreadySettledError,
    MissingNodeError,
    PersistenceFailure,
)

router = APIRouter(tags=["settlement"])


@router.post("/settlement", response_model=SettlementResponse)
async def create_settlement(
    request: SettlementRequest,
    db: Session = Depends(get_db)
):
    """Settle a session and pay the node that served it."""
    try:
        payout = settle_session(
            request.session_id,
            db,
            node_id=request.node_id,
            base_rate=request.base_rate
        )
    except SessionNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=format_failure("Session not found")
        )
    except AlreadySettledError:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=format_failure("Session already settled")
        )
    except MissingNodeError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_failure("Session has no node; provide nodeId")
        )
    except PersistenceFailure:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_failure("Settlement could not be recorded; retry the request")
        )

    return SettlementResponse(payout=PayoutResponse.model_validate(payout))


@router.get("/payouts", response_model=List[PayoutResponse])
async def list_payouts(
    node_id: Optional[str] = Query(default=None, alias="nodeId"),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """List payouts, newest first."""
    query = db.query(Payout)
    if node_id:
        query = query.filter(Payout.node_id == node_id)
    return query.order_by(Payout.created_at.desc(), Payout.id.desc()).limit(limit).all()


@router.get("/nodes/{node_id}", response_model=NodeResponse)
async def get_node(
    node_id: str,
    db: Session = Depends(get_db)
):
    """Get a node's reputation and cumulative earnings."""
    node = db.query(Node).filter(Node.node_id == node_id).first()
    if not node:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Node not found"
        )
    return node
