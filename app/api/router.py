from fastapi import APIRouter
from api.routes.landing import router as landing_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(landing_router)
api_router.include_router(system_router)
