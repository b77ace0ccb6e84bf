import logging
from motor.motor_asyncio import AsyncIOMotorClient

logger = logging.getLogger(__name__)

DATABASE_NAME = "restaurant"
ORDERS_COLLECTION = "orders"
RESERVATIONS_COLLECTION = "reservations"
SERVER_SELECTION_TIMEOUT_MS = 5000


class MongoDatabase:
    """
    Owns the single MongoDB client for the process.
    Repositories borrow the collection handles; nothing else opens connections.
    """

    def __init__(self, uri: str, client=None):
        # The client connects lazily, connect() forces the first round trip
        self.client = client or AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
        )
        self.db = self.client[DATABASE_NAME]
        self.orders = self.db[ORDERS_COLLECTION]
        self.reservations = self.db[RESERVATIONS_COLLECTION]

    async def connect(self):
        """Ping the server. Any driver error propagates to the caller."""
        await self.client.admin.command("ping")
        logger.info("✅ MongoDB connected successfully")
