"""Endpoint answering free-text nutrition questions."""

import logging

from anyio import to_thread
from fastapi import APIRouter, Depends, HTTPException, status

from nutritrack.infrastructure.nutrition_client import (
    NutritionLookupError,
    NutritionRateLimitError,
    NutritionService,
)
from nutritrack.interfaces.api.dependencies import get_nutrition_service
from nutritrack.interfaces.api.routes_helpers import bad_request
from nutritrack.interfaces.api.schemas import NutritionFactsRead, NutritionQuery

router = APIRouter(prefix="/api", tags=["nutrition"])
logger = logging.getLogger(__name__)


@router.post("/nutrition", response_model=NutritionFactsRead)
async def lookup_nutrition(
    payload: NutritionQuery,
    service: NutritionService = Depends(get_nutrition_service),
) -> NutritionFactsRead:
    try:
        facts = await to_thread.run_sync(service.lookup, payload.query)
    except ValueError as exc:
        raise bad_request(exc) from exc
    except NutritionRateLimitError as exc:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(exc)
        ) from exc
    except NutritionLookupError as exc:
        logger.warning("Nutrition lookup failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return NutritionFactsRead.model_validate(facts, from_attributes=True)
