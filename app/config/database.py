"""
Database configuration and connection management for MongoDB
"""
from contextlib import asynccontextmanager
from motor.motor_asyncio import AsyncIOMotorClient
import logging
from app.config.settings import settings

logger = logging.getLogger(__name__)

class DatabaseConfig:
    """MongoDB database configuration"""

    def __init__(self, mongo_uri: str, database_name: str, timeout_ms: int = 5000):
        self.MONGO_URI = mongo_uri
        self.DATABASE_NAME = database_name
        self.TIMEOUT_MS = timeout_ms

    @asynccontextmanager
    async def connection(self):
        """Fresh client for one unit of work, closed on exit"""
        client = AsyncIOMotorClient(self.MONGO_URI, serverSelectionTimeoutMS=self.TIMEOUT_MS)
        try:
            yield client[self.DATABASE_NAME]
        finally:
            client.close()

    async def ping(self) -> bool:
        """Check MongoDB is reachable; never raises"""
        try:
            async with self.connection() as database:
                await database.command("ping")
        except Exception:
            logger.exception("❌ MongoDB ping failed for %s", self.DATABASE_NAME)
            return False
        logger.info("✅ MongoDB reachable: %s", self.DATABASE_NAME)
        return True

# Global database instance
db_config = DatabaseConfig(settings.MONGO_URI, settings.DATABASE_NAME, settings.MONGO_TIMEOUT_MS)

# Collection names
class Collections:
    # Booking intake
    WEDDING_STYLING_CONSULTATIONS = "user_wedding_styling_consultations"
    PHOTOSHOOT_STYLING_REQUESTS = "User_photshootstylingmanagementconsultations"
    PERSONALIZED_STYLING_CONSULTATIONS = "User_stylingconsultations"
    MAKEUP_TRAINING_CONSULTATIONS = "user_makeup_styling_training_consultations"
    SOFT_SKILLS_COACHING_REQUESTS = "user_soft_skills_coaching_requests"
    CORPORATE_STYLING_REQUESTS = "corporate_styling_requests"

    # Accounts
    USERS = "users"
    NOTIFICATIONS = "notifications"
