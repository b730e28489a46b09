"""API routers."""

from lectureqa.routers.ask import router as ask_router
from lectureqa.routers.catalog import router as catalog_router
from lectureqa.routers.questions import router as questions_router
from lectureqa.routers.teacher import router as teacher_router
from lectureqa.routers.users import router as users_router

__all__ = [
    "ask_router",
    "catalog_router",
    "questions_router",
    "teacher_router",
    "users_router",
]
