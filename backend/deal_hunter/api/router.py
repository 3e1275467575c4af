"""API router -- aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from deal_hunter.api import deals, health, vendors

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(deals.router, prefix="/deals", tags=["deals"])
api_router.include_router(vendors.router, prefix="/vendors", tags=["vendors"])
