# storefront/data/upsert.py
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

#INSERT ... ON CONFLICT exists only in the dialect specific insert constructs
_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def dialect_insert(db: Session, model):
    name = db.get_bind().dialect.name
    insert = _INSERTS.get(name)
    if insert is None:
        raise RuntimeError(f"Upsert is not supported for dialect {name}")
    return insert(model)
