from tasklist.web.routers.lists import router as lists_router
from tasklist.web.routers.tasks import router as tasks_router
from tasklist.web.routers.users import router as users_router

__all__ = [
    "lists_router",
    "tasks_router",
    "users_router",
]
