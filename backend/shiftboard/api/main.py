from fastapi import APIRouter

from shiftboard.api.routes import login, organizations, shifts, utils

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(login.router)
api_router.include_router(organizations.router)
api_router.include_router(shifts.router)
