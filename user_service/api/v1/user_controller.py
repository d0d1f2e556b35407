# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.user_dto import CreateUserRequest, UserResponse
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...di.container import DIContainer
from ...domain.exceptions import ConflictError, StorageError, ValidationError, get_user_message
from .dependencies import get_container

logger = logging.getLogger(__name__)


router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid input data"},
        status.HTTP_409_CONFLICT: {"description": "User with this email already exists"},
    },
)
async def create_user(
    request: CreateUserRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: User creation request with email and name
        container: DI container (from dependency)
        
    Returns:
        UserResponse with created user information
    """
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        user = await create_user_use_case.execute(request)
        return user
    except ConflictError as exception:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=exception.user_message
        )
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except StorageError as exception:
        logger.error(f"Failed to create user: {exception}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=get_user_message(exception)
        )
