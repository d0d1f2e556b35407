from .create_user import CreateUserUseCase, generate_user_id

__all__ = ["CreateUserUseCase", "generate_user_id"]
