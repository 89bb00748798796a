from fastapi import APIRouter

from impactmap.api.routes import dashboard, goals, health, solutions

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(solutions.router, prefix="/solutions", tags=["solutions"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
