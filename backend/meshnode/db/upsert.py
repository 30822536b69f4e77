"""
Dialect-aware insert-or-ignore for atomic get-or-create.
"""
from sqlalchemy import insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session


def insert_ignore(db: Session, model, **values) -> int:
    """
    Insert a row unless it collides with an existing unique key.

    Runs inside the caller's transaction. Returns the number of rows actually
    inserted (0 when the row already existed).
    """
    dialect = db.get_bind().dialect.name

    if dialect == "sqlite":
        stmt = sqlite_insert(model).values(**values).on_conflict_do_nothing()
    elif dialect == "postgresql":
        stmt = pg_insert(model).values(**values).on_conflict_do_nothing()
    elif dialect in ("mysql", "mariadb"):
        stmt = insert(model).values(**values).prefix_with("IGNORE")
    else:
        raise ValueError(f"insert_ignore does not support the '{dialect}' dialect")

    result = db.execute(stmt)
    return result.rowcount
