# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)
from ..core.config import Settings
from ..infrastructure.db.mongo_connection import MongoConnection


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UserProvider) - depend on repositories
    
    The container does not own the MongoDB connection: whoever opened it
    (the application lifespan or a CLI command) closes it.
    """
    
    def __init__(self, settings: Settings, connection: Optional[MongoConnection] = None) -> None:
        super().__init__()
        self.settings = settings
        self.connection = connection
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UserProvider.register(self)
