"""
Shared fixtures: an isolated in-memory database and an API client bound to it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from meshnode.db.session import get_db, init_db
from meshnode.main import app
from meshnode.models import MeshSession, Node, SessionStatus
from meshnode.services.control_service import daemon_state

GB = 2 ** 30


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_daemon_state():
    yield
    daemon_state.apply("start")


@pytest.fixture
def make_session(db):
    """Insert a closed, unsettled session."""
    def _make(
        session_id="sess_1",
        node_id="node_a",
        bytes_ingress=GB,
        bytes_egress=0,
        error_rate=0.0,
        status=SessionStatus.CLOSED,
        **fields
    ):
        session = MeshSession(
            id=session_id,
            buyer_id=fields.pop("buyer_id", "buyer_alpha"),
            node_id=node_id,
            status=status,
            bytes_ingress=bytes_ingress,
            bytes_egress=bytes_egress,
            error_rate=error_rate,
            **fields
        )
        db.add(session)
        db.commit()
        return session
    return _make


@pytest.fixture
def make_node(db):
    def _make(node_id="node_a", reputation=100.0, total_earnings_credits=0.0):
        node = Node(
            node_id=node_id,
            reputation=reputation,
            total_earnings_credits=total_earnings_credits
        )
        db.add(node)
        db.commit()
        return node
    return _make
