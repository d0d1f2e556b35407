# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, NotFoundError, StorageError
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def create(self, user: User) -> User:
        """
        Insert a new user document
        
        Args:
            user: User domain model to persist
            
        Returns:
            User domain model read back from the collection
        """
        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError as e:
            raise self._duplicate_key_error(e, user, "create") from e
        except PyMongoError as e:
            raise self._storage_error("create", e) from e
        
        if new_document is None:
            raise StorageError("User was created but could not be retrieved", operation="create")
        return self._document_to_user(new_document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        
        return await self._find_one({UserFields.MONGO_ID: user_id}, "find_by_id")
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        return await self._find_one({UserFields.EMAIL: email}, "find_by_email")
    
    async def find_all(self) -> List[User]:
        """Find all users ordered by creation time, newest first"""
        try:
            cursor = self.user_collection.find({}).sort(UserFields.CREATED_AT, DESCENDING)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise self._storage_error("find_all", e) from e
    
    async def update(self, user: User) -> User:
        """
        Replace email and name of an existing user
        
        Args:
            user: User domain model carrying the new values
            
        Returns:
            Updated User domain model
        """
        try:
            updated_document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: user.id},
                {"$set": {
                    UserFields.EMAIL: user.email,
                    UserFields.NAME: user.name,
                    UserFields.UPDATED_AT: utc_now(),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._duplicate_key_error(e, user, "update") from e
        except PyMongoError as e:
            raise self._storage_error("update", e) from e
        
        if updated_document is None:
            raise NotFoundError(f"User with ID {user.id} not found")
        return self._document_to_user(updated_document)
    
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID, returning whether a document was removed"""
        if not user_id:
            return False
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: user_id})
        except PyMongoError as e:
            raise self._storage_error("delete", e) from e
        return result.deleted_count > 0
    
    async def delete_all(self) -> int:
        """Delete every user document in one call, returning how many were removed"""
        try:
            result = await self.user_collection.delete_many({})
        except PyMongoError as e:
            raise self._storage_error("delete_all", e) from e
        return result.deleted_count
    
    async def exists_by_email(self, email: str) -> bool:
        """Check for a user with this email without loading the document"""
        if not email:
            return False
        
        try:
            document = await self.user_collection.find_one(
                {UserFields.EMAIL: email},
                projection={UserFields.MONGO_ID: 1},
            )
        except PyMongoError as e:
            raise self._storage_error("exists_by_email", e) from e
        return document is not None
    
    async def _find_one(self, query: Dict[str, Any], operation: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise self._storage_error(operation, e) from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    def _duplicate_key_error(self, error: DuplicateKeyError, user: User, operation: str) -> Exception:
        """Map a unique index violation to ConflictError (email) or StorageError (ID)"""
        key_pattern = (error.details or {}).get("keyPattern") or {}
        if UserFields.EMAIL in key_pattern:
            logger.warning(f"Duplicate email rejected by unique index for user {user.id}")
            return ConflictError("User with this email already exists")
        return self._storage_error(operation, error)
    
    def _storage_error(self, operation: str, error: Exception) -> StorageError:
        logger.error(f"MongoDB {operation} failed: {error}")
        return StorageError(f"Error during user {operation}: {str(error)}", operation=operation)
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StorageError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            name=document.get(UserFields.NAME, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.MONGO_ID: user.id,
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }
