"""
Quick check that the configured MongoDB is reachable

Run: python scripts/check_db.py
"""

import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables before settings are read
load_dotenv()

from usersvc.core.config import settings
from usersvc.db.mongo import MongoConnection
import logging

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def check_connection() -> bool:
    """Ping MongoDB and count stored users"""
    connection = MongoConnection(
        settings.MONGO_URL,
        settings.MONGODB_DB_NAME,
        users_collection=settings.MONGODB_USERS_COLLECTION,
        server_selection_timeout_ms=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )

    try:
        logger.info(f"Connecting to MongoDB database '{connection.database.name}'...")
        if not await connection.connect():
            logger.error("MongoDB is not reachable")
            return False

        users = connection.users_collection()
        count = await users.count_documents({})
        logger.info(f"Collection '{users.name}': {count} users")
        return True

    finally:
        connection.close()


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(check_connection()) else 1)
