"""
Node configuration service.
"""
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging
import secrets
from meshnode.core.config import settings
from meshnode.core.utils import utcnow
from meshnode.models.config import NodeConfig

logger = logging.getLogger(__name__)


def generate_node_id() -> str:
    """Generate a node identifier for a freshly initialized node."""
    return f"node_{secrets.token_hex(4)}"


def get_config(db: Session) -> NodeConfig:
    """Return the configuration row, or None when the node was never configured."""
    return db.query(NodeConfig).order_by(NodeConfig.id).first()


def get_or_create_config(db: Session) -> NodeConfig:
    """
    Return the node configuration, creating the default row on first use.
    The node id comes from NODE_ID when set, otherwise it is generated.
    """
    config = get_config(db)
    if config:
        return config

    config = NodeConfig(
        node_id=settings.NODE_ID or generate_node_id(),
        schedules=[],
        region_allow=[],
    )
    db.add(config)
    db.commit()
    db.refresh(config)
    logger.info(f"Created default configuration for node {config.node_id}")
    return config


def update_config(updates: Dict[str, Any], db: Session) -> NodeConfig:
    """Apply a partial configuration update."""
    config = get_or_create_config(db)

    for field, value in updates.items():
        setattr(config, field, value)
    config.updated_at = utcnow()

    db.commit()
    db.refresh(config)
    logger.info(f"Updated configuration fields: {', '.join(sorted(updates)) or 'none'}")
    return config
