# External package imports
from fastapi import HTTPException, Request, status

# Local application imports
from ...di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the DI container built by the application lifespan
    
    Raises:
        HTTPException: If the application has not finished starting up
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is starting up"
        )
    return container
