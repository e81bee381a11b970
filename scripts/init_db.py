"""
Database initialization script.

Creates the tables and the default admin account without starting
the server.  Use ``alembic upgrade head`` instead for managed
migrations.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings
from app.core.log import configure_logging
from app.db.init_db import init_db
from app.db.session import Database

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    print("=" * 50)
    print("Portfolio Database Initialization")
    print("=" * 50)
    print()

    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        init_db(database)
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print(f"Admin login: {settings.ADMIN_EMAIL}")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)

    finally:
        database.dispose()
