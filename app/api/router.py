from fastapi import APIRouter
from api.routes.system import router as system_router
from packages.texterify.routes import router as tools_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(tools_router)
