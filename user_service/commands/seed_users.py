"""
Seed Users Command

Populates the users collection with sample users for development and
testing. Existing users are removed first unless --keep-existing is given;
emails that are already taken are skipped.
"""

# Standard library imports
import asyncio
import logging
from typing import Dict, List, Optional, Tuple, Union

# External package imports
import click
from dotenv import load_dotenv

# Local application imports
from ..application.use_cases.user.create_user import generate_user_id
from ..core.config import get_settings
from ..core.logging_config import configure_logging
from ..di.container import DIContainer
from ..domain.exceptions import ConflictError, UserServiceError
from ..domain.models.user import User
from ..domain.repositories.user_repository import UserRepository
from ..infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from ..infrastructure.db.mongo_connection import MongoConnection
from ..infrastructure.db.mongo_user_repository import MongoUserRepository

_LOG = logging.getLogger(__name__)

# Backends that support a bulk delete
SeedableUserRepository = Union[MongoUserRepository, InMemoryUserRepository]


SAMPLE_USERS: List[Dict[str, str]] = [
    {"email": "john.doe@example.com", "name": "John Doe"},
    {"email": "jane.smith@example.com", "name": "Jane Smith"},
    {"email": "bob.wilson@example.com", "name": "Bob Wilson"},
    {"email": "alice.johnson@example.com", "name": "Alice Johnson"},
    {"email": "charlie.brown@example.com", "name": "Charlie Brown"},
    {"email": "diana.prince@example.com", "name": "Diana Prince"},
    {"email": "bruce.wayne@example.com", "name": "Bruce Wayne"},
    {"email": "clark.kent@example.com", "name": "Clark Kent"},
]


async def clear_users(user_repository: SeedableUserRepository) -> int:
    """
    Delete every stored user, returning how many were removed.
    
    Uses the backend bulk delete so stored documents are never mapped
    back to User entities.
    """
    return await user_repository.delete_all()


async def seed_users(
    user_repository: SeedableUserRepository,
    users: List[Dict[str, str]],
    keep_existing: bool = False,
) -> Tuple[int, int]:
    """
    Insert sample users through the repository.
    
    Returns:
        (removed, created) counts
    """
    removed = 0 if keep_existing else await clear_users(user_repository)
    
    created = 0
    for data in users:
        if await user_repository.exists_by_email(data["email"]):
            _LOG.info(f"Skipping {data['email']}: already exists")
            continue
        try:
            await user_repository.create(
                User(id=generate_user_id(), email=data["email"], name=data["name"])
            )
        except ConflictError:
            _LOG.info(f"Skipping {data['email']}: already exists")
            continue
        created += 1
    
    return removed, created


async def _run(keep_existing: bool) -> Tuple[int, int]:
    settings = get_settings()
    connection: Optional[MongoConnection] = None
    if settings.storage_backend == "mongo":
        connection = MongoConnection.from_settings(settings)
    
    try:
        if connection is not None:
            await connection.ensure_indexes()
        container = DIContainer(settings, connection=connection)
        return await seed_users(container.get(UserRepository), SAMPLE_USERS, keep_existing)
    finally:
        if connection is not None:
            connection.close()


@click.command()
@click.option('--keep-existing', is_flag=True, help='Do not delete existing users before seeding')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def seed(keep_existing, verbose):
    """Seed the database with sample users."""
    load_dotenv()
    configure_logging("DEBUG" if verbose else None)
    
    click.echo("🌱 Starting database seeding...")
    try:
        removed, created = asyncio.run(_run(keep_existing))
    except UserServiceError as e:
        click.echo(f"❌ Error during seeding: {e}", err=True)
        raise SystemExit(1)
    
    if not keep_existing:
        click.echo(f"🗑️  Cleared {removed} existing users")
    click.echo(f"✅ Created {created} of {len(SAMPLE_USERS)} sample users")


if __name__ == "__main__":
    seed()
