from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for DB handles"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the MongoDB connection and the users collection.
        Nothing is registered for the in-memory backend.
        """
        connection = container.connection
        if connection is None:
            return
        
        container.register_singleton("mongo_connection", connection)
        container.register_singleton("user_collection", connection.get_user_collection())
