# Standard library imports
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import ConflictError, NotFoundError, StorageError
from ...utils.datetime_utils import utc_now


class InMemoryUserRepository(UserRepository):
    """
    Process-local implementation of UserRepository.
    
    Used when STORAGE_BACKEND=memory and in tests. Enforces the same
    uniqueness rules as the MongoDB indexes: one user per ID and per email.
    """
    
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
    
    async def create(self, user: User) -> User:
        if user.id in self._users:
            raise StorageError(f"User with ID {user.id} already exists", operation="create")
        if self._find_by_email(user.email) is not None:
            raise ConflictError("User with this email already exists")
        self._users[user.id] = user
        return user
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)
    
    async def find_by_email(self, email: str) -> Optional[User]:
        return self._find_by_email(email)
    
    async def find_all(self) -> List[User]:
        return sorted(self._users.values(), key=lambda user: user.created_at, reverse=True)
    
    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise NotFoundError(f"User with ID {user.id} not found")
        owner = self._find_by_email(user.email)
        if owner is not None and owner.id != user.id:
            raise ConflictError("User with this email already exists")
        
        stored = self._users[user.id]
        updated = replace(stored, email=user.email, name=user.name, updated_at=utc_now())
        self._users[user.id] = updated
        return updated
    
    async def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None
    
    async def delete_all(self) -> int:
        removed = len(self._users)
        self._users.clear()
        return removed
    
    async def exists_by_email(self, email: str) -> bool:
        return self._find_by_email(email) is not None
    
    def count(self) -> int:
        return len(self._users)
    
    def _find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None
