"""
Node configuration routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from meshnode.db.session import get_db
from meshnode.schemas.config import ConfigResponse, ConfigUpdate
from meshnode.services.config_service import get_or_create_config, update_config

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=ConfigResponse)
async def get_configuration(db: Session = Depends(get_db)):
    """Get the node configuration."""
    return get_or_create_config(db)


@router.put("", response_model=ConfigResponse)
async def update_configuration(
    updates: ConfigUpdate,
    db: Session = Depends(get_db)
):
    """Partially update the node configuration."""
    return update_config(updates.model_dump(exclude_unset=True, exclude_none=True), db)
