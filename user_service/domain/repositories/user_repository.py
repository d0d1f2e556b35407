from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.
    
    Every method may raise StorageError when the backend is unavailable.
    """
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Persist a new user
        
        Raises:
            ConflictError: If the email is already taken
        """
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users, newest first"""
        pass
    
    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Replace email and name of the stored user with the same ID
        
        Raises:
            NotFoundError: If no user has this ID
            ConflictError: If the new email is already taken
        """
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID. Returns False if there was nothing to delete"""
        pass
    
    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists"""
        pass
