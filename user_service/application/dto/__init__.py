from .user_dto import CreateUserRequest, UserResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
]
