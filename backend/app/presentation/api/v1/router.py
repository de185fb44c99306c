"""V1 API router — mounts every endpoint router under ``/api/v1``."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.music_genres import router as music_genres_router
from app.presentation.api.v1.endpoints.groups import router as groups_router
from app.presentation.api.v1.endpoints.records import router as records_router
from app.presentation.api.v1.endpoints.users import router as users_router
from app.presentation.api.v1.endpoints.carts import router as carts_router
from app.presentation.api.v1.endpoints.orders import router as orders_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(music_genres_router)
router.include_router(groups_router)
router.include_router(records_router)
router.include_router(users_router)
router.include_router(carts_router)
router.include_router(orders_router)
