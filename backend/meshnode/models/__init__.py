"""Models package - Import all models for SQLAlchemy registration."""
from meshnode.models.session import MeshSession, SessionStatus
from meshnode.models.node import Node
from meshnode.models.payout import Payout, PayoutStatus, PayoutImmutableError
from meshnode.models.config import NodeConfig
from meshnode.models.metric import Metric
from meshnode.models.health import HealthSnapshot
from meshnode.models.activity_log import ActivityLog

__all__ = [
    "MeshSession",
    "SessionStatus",
    "Node",
    "Payout",
    "PayoutStatus",
    "PayoutImmutableError",
    "NodeConfig",
    "Metric",
    "HealthSnapshot",
    "ActivityLog",
]
