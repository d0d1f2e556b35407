# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields
from ...domain.exceptions import StorageError

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class MongoConnection:
    """
    Owned handle to a MongoDB client and database.
    
    Created once by the application lifespan (or a CLI command), handed to
    the DI container and closed on shutdown. Nothing else opens clients.
    """
    
    def __init__(self, client: AsyncIOMotorClient, database_name: str) -> None:
        self.client = client
        self.database: AsyncIOMotorDatabase = client[database_name]
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        """
        Create a connection from application settings
        
        Motor connects lazily, so this does not touch the network.
        """
        client = AsyncIOMotorClient(
            settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        return cls(client, settings.mongo_database_name)
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]
    
    async def ensure_indexes(self) -> None:
        """
        Create the users indexes
        
        The unique email index backs up the duplicate-email check in
        CreateUserUseCase, which is a separate read before the insert.
        """
        collection = self.get_user_collection()
        try:
            await collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
            await collection.create_index([(UserFields.CREATED_AT, DESCENDING)])
        except PyMongoError as e:
            raise StorageError(f"Failed to create user indexes: {e}", operation="ensure_indexes") from e
        logger.info("User collection indexes ensured")
    
    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB connection closed")
