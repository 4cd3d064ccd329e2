from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.config import settings
import logging

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ─── Engine ────────────────────────────────────────────────────────────────────
def build_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the given URL.
    SQLite connections are shared across FastAPI's worker threads, so the
    same-thread check is disabled and foreign keys are switched on per connection.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args

    eng = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


# ─── Session Factory ───────────────────────────────────────────────────────────
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,      # Avoid DetachedInstanceError after commit
)


# ─── Base Model ────────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.
    All models in app/models/ should inherit from this class.
    """
    pass


# ─── Dependency Injection ──────────────────────────────────────────────────────
def get_db():
    """
    FastAPI dependency that provides a database session per request.
    Automatically closes session after request completes.

    Usage:
        @router.get("/missions")
        def list_missions(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ─── Schema ────────────────────────────────────────────────────────────────────
def init_db(bind: Engine = engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    import app.models  # noqa: F401 — registers models on Base.metadata

    Base.metadata.create_all(bind=bind)


# ─── Health Check ──────────────────────────────────────────────────────────────
def check_db_connection(bind: Engine = engine) -> bool:
    """Verify database is reachable. Used at startup."""
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
