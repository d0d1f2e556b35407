from .mongo_connection import MongoConnection
from .mongo_user_repository import MongoUserRepository
from .in_memory_user_repository import InMemoryUserRepository

__all__ = [
    "MongoConnection",
    "MongoUserRepository",
    "InMemoryUserRepository",
]
