"""
Settlement service: computes a node's payout for a completed session and
applies it exactly once.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging
from meshnode.core.config import settings
from meshnode.core.utils import utcnow
from meshnode.db.upsert import insert_ignore
from meshnode.models.session import MeshSession, SessionStatus
from meshnode.models.node import Node, DEFAULT_REPUTATION
from meshnode.models.payout import Payout, PayoutStatus, PayoutImmutableError

logger = logging.getLogger(__name__)

BYTES_PER_GB = 2 ** 30
BASE_RATE_CREDITS_PER_GB = 0.0005
QOS_ERROR_RATE_THRESHOLD = 0.05  # Errors above 5% of requests
QOS_PENALTY_MULTIPLIER = 0.8


class SettlementError(Exception):
    """Base class for settlement failures."""


class SessionNotFoundError(SettlementError):
    """The referenced session does not exist."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")


class AlreadySettledError(SettlementError):
    """The session already has a payout."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} is already settled")


class MissingNodeError(SettlementError):
    """No node was given and the session does not name one."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} has no node to pay")


class PersistenceFailure(SettlementError):
    """The settlement transaction could not be written."""


class PayoutQuote:
    """Result of the payout computation, before anything is persisted."""
    def __init__(
        self,
        gb_transferred: float,
        base_rate: float,
        qos_penalty_applied: bool,
        amount_before_weight: float,
        reputation_weight: float,
        amount_credits: float,
    ):
        self.gb_transferred = gb_transferred
        self.base_rate = base_rate
        self.qos_penalty_applied = qos_penalty_applied
        self.amount_before_weight = amount_before_weight
        self.reputation_weight = reputation_weight
        self.amount_credits = amount_credits


def calculate_payout_amount(
    bytes_ingress: float,
    bytes_egress: float,
    error_rate: float,
    reputation: float,
    base_rate: float = BASE_RATE_CREDITS_PER_GB,
) -> PayoutQuote:
    """
    Compute the payout for one session.

    Billing follows the dominant traffic direction, so the larger of ingress
    and egress is used rather than their sum. A single QoS penalty tier
    applies when the error rate exceeds 5%. Reputation (0-100) scales the
    result linearly and is used as given.
    """
    gb_transferred = max(bytes_ingress or 0.0, bytes_egress or 0.0) / BYTES_PER_GB
    amount = gb_transferred * base_rate

    qos_penalty_applied = (error_rate or 0.0) > QOS_ERROR_RATE_THRESHOLD
    if qos_penalty_applied:
        amount *= QOS_PENALTY_MULTIPLIER

    reputation_weight = reputation / 100.0
    return PayoutQuote(
        gb_transferred=gb_transferred,
        base_rate=base_rate,
        qos_penalty_applied=qos_penalty_applied,
        amount_before_weight=amount,
        reputation_weight=reputation_weight,
        amount_credits=amount * reputation_weight,
    )


def get_or_create_node(node_id: str, db: Session) -> Node:
    """
    Load a node, creating it with default reputation on first reference.
    Does not commit; runs inside the caller's transaction.
    """
    created = insert_ignore(
        db,
        Node,
        node_id=node_id,
        reputation=DEFAULT_REPUTATION,
        total_earnings_credits=0.0,
    )
    if created:
        logger.info(f"Registered new node {node_id} with reputation {DEFAULT_REPUTATION}")
    return db.query(Node).filter(Node.node_id == node_id).one()


def settle_session(
    session_id: str,
    db: Session,
    node_id: Optional[str] = None,
    base_rate: Optional[float] = None,
) -> Payout:
    """
    Settle a session and pay the node that served it.

    The payout insert, the session close and the node credit are committed
    as one transaction. The session is claimed with a compare-and-set on
    resolved_at, so concurrent calls for the same session produce exactly
    one payout; the losers fail with AlreadySettledError.
    """
    try:
        session = db.query(MeshSession).filter(MeshSession.id == session_id).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Settlement of session {session_id} failed: could not load the session: {e}", exc_info=True)
        raise PersistenceFailure(f"Could not load session {session_id}") from e

    if not session:
        logger.warning(f"Settlement rejected: session {session_id} not found")
        raise SessionNotFoundError(session_id)

    if session.resolved_at is not None:
        logger.warning(f"Settlement rejected: session {session_id} already settled at {session.resolved_at}")
        raise AlreadySettledError(session_id)

    node_id = node_id or session.node_id
    if not node_id:
        raise MissingNodeError(session_id)

    if base_rate is None:
        base_rate = settings.SETTLEMENT_BASE_RATE

    now = utcnow()
    try:
        node = get_or_create_node(node_id, db)
        quote = calculate_payout_amount(
            session.bytes_ingress,
            session.bytes_egress,
            session.error_rate,
            node.reputation,
            base_rate,
        )

        claimed = db.query(MeshSession).filter(
            MeshSession.id == session_id,
            MeshSession.resolved_at.is_(None)
        ).update(
            {MeshSession.status: SessionStatus.CLOSED, MeshSession.resolved_at: now},
            synchronize_session=False
        )
        if claimed != 1:
            db.rollback()
            logger.warning(f"Settlement rejected: session {session_id} was settled concurrently")
            raise AlreadySettledError(session_id)

        payout = Payout(
            node_id=node_id,
            session_id=session_id,
            amount_credits=quote.amount_credits,
            status=PayoutStatus.COMPLETED,
            base_rate=quote.base_rate,
            qos_penalty_applied=quote.qos_penalty_applied,
            reputation_weight=quote.reputation_weight,
            completed_at=now,
        )
        db.add(payout)

        # Increment in SQL so concurrent settlements for the same node serialize
        db.query(Node).filter(Node.node_id == node_id).update(
            {Node.total_earnings_credits: Node.total_earnings_credits + quote.amount_credits},
            synchronize_session=False
        )

        db.commit()
    except (SQLAlchemyError, PayoutImmutableError) as e:
        db.rollback()
        logger.error(f"Settlement of session {session_id} failed and was rolled back: {e}", exc_info=True)
        raise PersistenceFailure(f"Could not persist settlement for session {session_id}") from e

    logger.info(
        f"Settled session {session_id} for node {node_id}: {quote.amount_credits:.10f} credits "
        f"({quote.gb_transferred:.6f} GB, penalty={quote.qos_penalty_applied}, weight={quote.reputation_weight})"
    )

    try:
        db.refresh(payout)
    except SQLAlchemyError as e:
        logger.error(f"Settlement of session {session_id} was committed but the payout could not be reloaded: {e}", exc_info=True)
        raise PersistenceFailure(f"Settlement for session {session_id} was recorded but could not be read back") from e
    return payout
