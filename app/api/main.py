from fastapi import APIRouter

from .endpoints.certificate import router as certificate_router
from .endpoints.health import router as health_router
from .endpoints.profiles import router as profiles_router
from .endpoints.questions import router as questions_router
from .endpoints.sessions import router as sessions_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "AI Sense Check API is running"}


api_router.include_router(health_router)
api_router.include_router(profiles_router)
api_router.include_router(questions_router)
api_router.include_router(sessions_router)
api_router.include_router(certificate_router)
