from tasker.presentation.api.routers.auth import router as auth_router
from tasker.presentation.api.routers.tasks import router as tasks_router

__all__ = [
    "auth_router",
    "tasks_router",
]
