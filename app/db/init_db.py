"""
Database initialization.

Creates all tables and the default admin account.
"""

from app.core.config import Settings, settings
from app.core.log import logger
from app.db.session import Database
from app.services.auth_service import AuthService


def init_db(database: Database, config: Settings = settings) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Creates the default admin user if it is missing
    """
    logger.info("Creating database tables...")
    database.create_all()
    logger.info("Tables created successfully")

    with database.session() as session:
        AuthService(session, config).ensure_default_admin()

    logger.info("Database initialization complete")


if __name__ == "__main__":
    db = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        init_db(db)
    finally:
        db.dispose()
