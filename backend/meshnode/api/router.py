"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from meshnode.api.routes import settlement, sessions, telemetry, config, stats

api_router = APIRouter()

# Include all route modules
api_router.include_router(settlement.router)
api_router.include_router(sessions.router)
api_router.include_router(telemetry.router)
api_router.include_router(config.router)
api_router.include_router(stats.router)
