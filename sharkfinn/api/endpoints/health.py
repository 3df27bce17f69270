from fastapi import APIRouter

from sharkfinn.schemas.health import HealthCheck
from sharkfinn.utils.deps import Repos

router = APIRouter()


@router.get("", response_model=HealthCheck, response_model_exclude_none=True)
async def health_check(repositories: Repos) -> HealthCheck:
    """
    Liveness check. In live mode this round-trips to the database and
    reports the server time; a failed round-trip surfaces as a 500.
    """
    payload = await repositories.health.check()
    return HealthCheck(**payload)
