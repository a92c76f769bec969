"""Health check endpoint."""

import time
from fastapi import APIRouter, Depends

from socialnet.models.responses import HealthResponse
from socialnet.validators import ValidationFacade, get_validation_facade

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(facade: ValidationFacade = Depends(get_validation_facade)):
    """Liveness plus a sanity check that the rule table was loaded."""
    registry = facade.registry
    status = "healthy" if registry.frozen and registry.rule_count > 0 else "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        registered_rules=registry.rule_count,
    )
