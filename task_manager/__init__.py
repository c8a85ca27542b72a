"""
Task manager API: a Flask app over a SQLAlchemy task store.
"""

import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError

from task_manager.config import Config
from task_manager.extensions import cors, db, use_unicode_lower
from task_manager.repository import SqlAlchemyTaskStore
from task_manager.routes import tasks_bp
from task_manager.services import TaskService

logger = logging.getLogger(__name__)


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(config or Config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    cors.init_app(app, resources={r"/tasks*": {"origins": app.config["CORS_ORIGINS"]}})
    app.register_blueprint(tasks_bp)

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(e):
        db.session.rollback()
        logger.error(f"Database error: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    store = SqlAlchemyTaskStore(db.session)
    with app.app_context():
        use_unicode_lower(db.engine)
        db.create_all()
        logger.info(f"Task store ready db={app.config['SQLALCHEMY_DATABASE_URI']} total={store.count()}")

    app.extensions["task_service"] = TaskService(store)
    return app
