from fastapi import APIRouter

from sharkfinn.api.endpoints import (
    activity_blocks,
    children,
    health,
    rewards,
    sessions,
    social_stories,
    visual_schedules,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(children.router, prefix="/children", tags=["Children"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["Sessions"])
api_router.include_router(
    activity_blocks.router, prefix="/activity-blocks", tags=["Activity Blocks"]
)
api_router.include_router(
    social_stories.router, prefix="/social-stories", tags=["Social Stories"]
)
api_router.include_router(
    visual_schedules.router, prefix="/visual-schedules", tags=["Visual Schedules"]
)
api_router.include_router(rewards.router, prefix="/rewards", tags=["Rewards"])
