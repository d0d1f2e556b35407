from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the UserRepository implementation selected by STORAGE_BACKEND.
        
        Raises:
            ValueError: If the backend is unknown or MongoDB was selected
                without a connection
        """
        backend = container.settings.storage_backend
        
        if backend == "memory":
            container.register_singleton(UserRepository, InMemoryUserRepository())
            return
        
        if backend != "mongo":
            raise ValueError(f"Unknown storage backend: {backend}")
        
        if not container.is_registered("user_collection"):
            raise ValueError("MongoDB storage backend selected but no connection was provided")
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
