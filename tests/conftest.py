import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import build_engine, get_db, init_db
from app.main import app
from app.models import Driver, Vehicle, Engineer


def _session_factory(bind):
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same tables.
    eng = build_engine("sqlite://", poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = _session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def seeded(db):
    """Two drivers (A, B), one vehicle (V) and three engineers."""
    a, b = Driver(name="Driver A"), Driver(name="Driver B")
    v = Vehicle(plate="06 ABC 123")
    e1 = Engineer(name="Ali Yıldız", branch="Çevre")
    e2 = Engineer(name="Mehmet Koç", branch="İnşaat")
    e3 = Engineer(name="Ayşe Güneş", branch="Ziraat")
    db.add_all([a, b, v, e1, e2, e3])
    db.commit()
    return {"A": a, "B": b, "V": v, "engineers": [e1, e2, e3]}


def _client_for(bind):
    factory = _session_factory(bind)

    def override_get_db():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(engine):
    yield _client_for(engine)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """Client whose store has no tables, so every query fails."""
    eng = build_engine("sqlite://", poolclass=StaticPool)
    yield _client_for(eng)
    app.dependency_overrides.clear()
    eng.dispose()
