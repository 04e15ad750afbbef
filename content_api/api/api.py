from fastapi import APIRouter

from content_api.api.routers import posts_router

router = APIRouter()
router.include_router(posts_router.router, tags=["posts"])
