from fastapi import Request

from experience_board.db.store import ExperienceStore


def get_store(request: Request) -> ExperienceStore:
    """
    Dependency for FastAPI route injection.
    The store is created once at startup and kept on app.state.
    Usage:
        @router.get("/experiences")
        def list_experiences(store: ExperienceStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
