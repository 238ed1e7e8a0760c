from fastapi import APIRouter
from . import movies

api_router = APIRouter()

api_router.include_router(movies.router)

__all__ = ["api_router"]
