"""API v1 router configuration."""

from fastapi import APIRouter

from ondoctor.api.v1.endpoints import (
    ai,
    alarms,
    appointments,
    catalog,
    doctors,
    health,
)

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(doctors.router, prefix="/doctors", tags=["Doctors"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(alarms.router, prefix="/alarms", tags=["Medicine Alarms"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI"])
