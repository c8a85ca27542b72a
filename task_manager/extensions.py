from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event

db = SQLAlchemy()
cors = CORS()


def _lower(value):
    return value.lower() if isinstance(value, str) else value


def use_unicode_lower(engine):
    """Replace SQLite's ASCII-only lower() with str.lower on every new connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def register_lower(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _lower)
