# Standard library imports
import logging
import secrets
import string
import time

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError
from ...dto.user_dto import CreateUserRequest, UserResponse

logger = logging.getLogger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


def generate_user_id() -> str:
    """
    Generate a user ID of the form user_<epoch-millis>_<9 base36 chars>.
    
    Uniqueness is probabilistic only; the users collection primary key
    rejects the rare collision.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"user_{millis}_{suffix}"


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: User creation request with email and name
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ConflictError: If user with email already exists
            ValidationError: If email or name break the User rules
            StorageError: If the repository fails
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User with this email already exists")
        
        # Create domain user entity (validates all fields)
        new_user = User(
            id=generate_user_id(),
            email=request.email,
            name=request.name,
        )
        
        # Save user
        created_user = await self.user_repository.create(new_user)
        
        logger.info(f"Created user {created_user.id}")
        
        # Return DTO
        return UserResponse(
            id=created_user.id,
            email=created_user.email,
            name=created_user.name,
            created_at=created_user.created_at,
            updated_at=created_user.updated_at,
        )
